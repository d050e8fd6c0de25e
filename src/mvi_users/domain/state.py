"""View state snapshot and one-shot UI effects."""

from dataclasses import dataclass

from mvi_users.domain.models import User


@dataclass(frozen=True)
class ViewState:
    """Everything the user list screen needs to render."""

    is_loading: bool = False
    users: tuple[User, ...] = ()
    name: str = ""
    email: str = ""
    name_error: bool = False
    email_error: bool = False
    search_query: str = ""
    selected_image_ref: str | None = None


@dataclass(frozen=True)
class ShowNotification:
    """Transient message, optionally with an action button."""

    message: str
    action_label: str | None = None


Effect = ShowNotification
