"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from mvi_users.adapters.in_memory_user_repository import InMemoryUserRepository
from mvi_users.adapters.local_image_store import LocalImageStore
from mvi_users.config import Settings
from mvi_users.services.dispatcher import UserListDispatcher
from mvi_users.services.images import ImageStore
from mvi_users.services.streams import EffectChannel
from mvi_users.services.users import UserRepository


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_repository: UserRepository
    image_store: ImageStore
    dispatcher: UserListDispatcher
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    user_repository = InMemoryUserRepository(
        list_delay_seconds=resolved_settings.list_delay_seconds,
        mutation_delay_seconds=resolved_settings.mutation_delay_seconds,
    )
    image_store = LocalImageStore(resolved_settings.image_dir)
    dispatcher = UserListDispatcher(
        repository=user_repository,
        image_store=image_store,
        serialize_mutations=resolved_settings.serialize_mutations,
        effects=EffectChannel(resolved_settings.effect_buffer_size),
    )

    async def close_resources() -> None:
        await dispatcher.join()

    return AppContainer(
        settings=resolved_settings,
        user_repository=user_repository,
        image_store=image_store,
        dispatcher=dispatcher,
        close_resources=close_resources,
    )
