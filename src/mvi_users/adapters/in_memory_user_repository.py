"""In-memory user repository with simulated latency."""

from __future__ import annotations

import asyncio
import itertools
from dataclasses import dataclass, field

from mvi_users.domain.models import User
from mvi_users.services.users import UserRepository


@dataclass
class InMemoryUserRepository(UserRepository):
    """Process-local implementation for user persistence.

    Delays stand in for I/O; callers get copies of the backing list.
    """

    list_delay_seconds: float = 1.0
    mutation_delay_seconds: float = 0.5
    _users: list[User] = field(default_factory=list, init=False)
    _ids: itertools.count[int] = field(
        default_factory=lambda: itertools.count(1), init=False
    )

    def next_id(self) -> int:
        """Return the next id from a monotonic counter."""
        return next(self._ids)

    async def list_users(self) -> list[User]:
        """Return all users after the read delay."""
        await asyncio.sleep(self.list_delay_seconds)
        return list(self._users)

    async def add_user(self, user: User) -> list[User]:
        """Append a user and return the updated list."""
        await asyncio.sleep(self.mutation_delay_seconds)
        self._users.append(user)
        return list(self._users)

    async def remove_user(self, user: User) -> list[User]:
        """Remove a user if present and return the updated list."""
        await asyncio.sleep(self.mutation_delay_seconds)
        if user in self._users:
            self._users.remove(user)
        return list(self._users)

    async def clear_users(self) -> list[User]:
        """Remove every user and return the empty list."""
        await asyncio.sleep(self.mutation_delay_seconds)
        self._users.clear()
        return list(self._users)
