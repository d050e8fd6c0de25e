"""User persistence interface."""

from typing import Protocol

from mvi_users.domain.models import User


class UserRepository(Protocol):
    """Persistence interface for the user list.

    Every mutating call returns the full resulting list.
    """

    def next_id(self) -> int:
        """Return an id not used by any user created so far."""

    async def list_users(self) -> list[User]:
        """Return all users in insertion order."""

    async def add_user(self, user: User) -> list[User]:
        """Append a user and return the updated list."""

    async def remove_user(self, user: User) -> list[User]:
        """Remove a user if present and return the updated list."""

    async def clear_users(self) -> list[User]:
        """Remove every user and return the (empty) list."""
