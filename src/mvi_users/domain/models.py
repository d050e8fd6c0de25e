"""Domain models for the user list."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class User:
    """Represents a person shown in the user list.

    Equality and hashing only look at ``id``; two records with the same id are
    the same user even if the other fields differ.
    """

    id: int
    name: str = field(compare=False)
    email: str = field(compare=False)
    image_ref: str | None = field(default=None, compare=False)
