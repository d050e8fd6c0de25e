"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from mvi_users.adapters.in_memory_user_repository import InMemoryUserRepository
from mvi_users.config import Settings
from mvi_users.containers import AppContainer
from mvi_users.domain.models import User
from mvi_users.services.dispatcher import UserListDispatcher
from mvi_users.services.images import ImageStore
from mvi_users.services.streams import EffectChannel
from mvi_users.services.users import UserRepository

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


@dataclass
class RecordingImageStore(ImageStore):
    """Image store that keeps images in memory."""

    saved: list[bytes] = field(default_factory=list)
    fail: bool = False

    def save(self, image_bytes: bytes) -> str | None:
        if self.fail:
            return None
        self.saved.append(image_bytes)
        return f"memory://images/{len(self.saved)}"


@dataclass
class FailingUserRepository(UserRepository):
    """Repository whose calls all raise."""

    message: str = "storage offline"
    _counter: int = 0

    def next_id(self) -> int:
        self._counter += 1
        return self._counter

    async def list_users(self) -> list[User]:
        raise RuntimeError(self.message)

    async def add_user(self, user: User) -> list[User]:
        raise RuntimeError(self.message)

    async def remove_user(self, user: User) -> list[User]:
        raise RuntimeError(self.message)

    async def clear_users(self) -> list[User]:
        raise RuntimeError(self.message)


@dataclass
class GatedUserRepository(InMemoryUserRepository):
    """Repository whose removals wait until released, one gate per user id."""

    gates: dict[int, asyncio.Event] = field(default_factory=dict)
    removed: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.list_delay_seconds = 0.0
        self.mutation_delay_seconds = 0.0

    def gate(self, user_id: int) -> asyncio.Event:
        return self.gates.setdefault(user_id, asyncio.Event())

    async def remove_user(self, user: User) -> list[User]:
        await self.gate(user.id).wait()
        self.removed.append(user.id)
        return await super().remove_user(user)


def seed(repository: InMemoryUserRepository, *names: str) -> list[User]:
    """Add users named after ``names`` directly to the repository."""
    users = [
        User(
            id=repository.next_id(),
            name=name,
            email=f"{name.lower()}@example.com",
        )
        for name in names
    ]
    for user in users:
        asyncio.run(repository.add_user(user))
    return users


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        list_delay_seconds=0.0,
        mutation_delay_seconds=0.0,
        image_dir=tmp_path / "images",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository(list_delay_seconds=0.0, mutation_delay_seconds=0.0)


@pytest.fixture
def image_store() -> RecordingImageStore:
    return RecordingImageStore()


@pytest.fixture
def dispatcher(
    user_repository: InMemoryUserRepository, image_store: RecordingImageStore
) -> UserListDispatcher:
    return UserListDispatcher(repository=user_repository, image_store=image_store)


@pytest.fixture
def container(
    settings: Settings,
    user_repository: InMemoryUserRepository,
    image_store: RecordingImageStore,
) -> AppContainer:
    dispatcher = UserListDispatcher(
        repository=user_repository,
        image_store=image_store,
        effects=EffectChannel(),
    )

    async def close_resources() -> None:
        await dispatcher.join()

    return AppContainer(
        settings=settings,
        user_repository=user_repository,
        image_store=image_store,
        dispatcher=dispatcher,
        close_resources=close_resources,
    )
