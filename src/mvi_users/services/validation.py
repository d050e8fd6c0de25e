"""Form field validation."""

import re

EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9+._%\-]{1,256}"
    r"@"
    r"[a-zA-Z0-9][a-zA-Z0-9\-]{0,64}"
    r"(\.[a-zA-Z0-9][a-zA-Z0-9\-]{0,25})+"
)


def is_name_invalid(name: str) -> bool:
    """Return True when the name is empty or whitespace only."""
    return not name.strip()


def is_email_invalid(email: str) -> bool:
    """Return True when the email is blank or not shaped like local@domain.tld."""
    if not email.strip():
        return True
    return EMAIL_PATTERN.fullmatch(email) is None


def validation_message(name_error: bool, email_error: bool) -> str:
    """Build the notification text for failed form validation."""
    if name_error and email_error:
        return "Name and email are invalid."
    if name_error:
        return "Name cannot be empty."
    if email_error:
        return "Invalid email address."
    return ""
