"""User actions submitted to the dispatcher."""

from dataclasses import dataclass

from mvi_users.domain.models import User


@dataclass(frozen=True)
class LoadUsers:
    """Fetch the full user list from the repository."""


@dataclass(frozen=True)
class AddUser:
    """Validate the form fields and create a user."""

    name: str
    email: str
    image: bytes | None = None


@dataclass(frozen=True)
class DeleteUser:
    """Remove a user and keep it for undo."""

    user: User


@dataclass(frozen=True)
class ClearUsers:
    """Remove every user."""


@dataclass(frozen=True)
class SearchUser:
    """Filter the displayed users by name or email."""

    query: str


@dataclass(frozen=True)
class UpdateName:
    """Name field edited."""

    name: str


@dataclass(frozen=True)
class UpdateEmail:
    """Email field edited."""

    email: str


@dataclass(frozen=True)
class UndoDelete:
    """Restore the most recently deleted user."""


@dataclass(frozen=True)
class SelectImage:
    """Image picked from the gallery, given as an opaque reference."""

    ref: str


@dataclass(frozen=True)
class CaptureImage:
    """Image captured by the camera, given as raw bytes."""

    image: bytes


Intent = (
    LoadUsers
    | AddUser
    | DeleteUser
    | ClearUsers
    | SearchUser
    | UpdateName
    | UpdateEmail
    | UndoDelete
    | SelectImage
    | CaptureImage
)
