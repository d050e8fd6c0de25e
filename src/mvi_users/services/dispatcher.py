"""Intent handling for the user list screen."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from mvi_users.domain.intents import (
    AddUser,
    CaptureImage,
    ClearUsers,
    DeleteUser,
    Intent,
    LoadUsers,
    SearchUser,
    SelectImage,
    UndoDelete,
    UpdateEmail,
    UpdateName,
)
from mvi_users.domain.models import User
from mvi_users.domain.state import ShowNotification
from mvi_users.services.images import ImageStore
from mvi_users.services.streams import EffectChannel, StateStore
from mvi_users.services.users import UserRepository
from mvi_users.services.validation import (
    is_email_invalid,
    is_name_invalid,
    validation_message,
)

_logger = logging.getLogger(__name__)


@dataclass
class UserListDispatcher:
    """Reduces intents into ViewState snapshots and one-shot effects.

    ``handle`` runs synchronously. Intents that touch the repository spawn a
    task on the running loop. By default those tasks are not coordinated, so
    the last one to finish writes the final users list and any of them may
    clear ``is_loading``. With ``serialize_mutations`` they run one at a time
    in dispatch order and ``is_loading`` stays set until no add, delete or
    clear is pending. Loads never touch the flag, so one queued behind a
    mutation may still be running after ``is_loading`` has gone false.
    """

    repository: UserRepository
    image_store: ImageStore
    serialize_mutations: bool = False
    state: StateStore = field(default_factory=StateStore)
    effects: EffectChannel = field(default_factory=EffectChannel)
    recently_deleted: User | None = field(default=None, init=False)
    _tasks: set[asyncio.Task[None]] = field(default_factory=set, init=False)
    _write_lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False)
    _in_flight: int = field(default=0, init=False)

    def handle(self, intent: Intent) -> None:  # noqa: PLR0912
        """Apply an intent; async work is scheduled on the running loop."""
        _logger.info("Intent received: %s", type(intent).__name__)
        if isinstance(intent, LoadUsers):
            self._launch(self._load_users)
        elif isinstance(intent, AddUser):
            self._add_user(intent.name, intent.email, intent.image)
        elif isinstance(intent, DeleteUser):
            self._delete_user(intent.user)
        elif isinstance(intent, ClearUsers):
            self._clear_users()
        elif isinstance(intent, SearchUser):
            self._search_users(intent.query)
        elif isinstance(intent, UpdateName):
            self.state.update(name=intent.name, name_error=is_name_invalid(intent.name))
        elif isinstance(intent, UpdateEmail):
            self.state.update(
                email=intent.email, email_error=is_email_invalid(intent.email)
            )
        elif isinstance(intent, UndoDelete):
            self._undo_delete()
        elif isinstance(intent, SelectImage):
            self.state.update(selected_image_ref=intent.ref)
            self.effects.send(ShowNotification("Image selected from gallery!"))
        elif isinstance(intent, CaptureImage):
            image_ref = self.image_store.save(intent.image)
            self.state.update(selected_image_ref=image_ref)
            self.effects.send(ShowNotification("Image captured successfully!"))
        else:
            raise TypeError(f"Unsupported intent: {intent!r}")

    async def join(self) -> None:
        """Wait until every scheduled unit of work has applied its result."""
        while self._tasks:
            await asyncio.gather(*self._tasks)

    def _launch(self, work: Callable[[], Awaitable[None]]) -> None:
        """Schedule work on the running loop; callers change state only after."""
        loop = asyncio.get_running_loop()
        task = loop.create_task(self._run(work))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run(self, work: Callable[[], Awaitable[None]]) -> None:
        if self.serialize_mutations:
            async with self._write_lock:
                await work()
        else:
            await work()

    def _begin_loading(self) -> None:
        self._in_flight += 1
        self.state.update(is_loading=True)

    def _finish_loading(self) -> bool:
        """Return the is_loading value to publish when a unit of work ends."""
        self._in_flight -= 1
        if self.serialize_mutations:
            return self._in_flight > 0
        return False

    async def _load_users(self) -> None:
        try:
            users = await self.repository.list_users()
        except Exception as exc:
            _logger.exception("Failed to load users")
            self.effects.send(ShowNotification(f"Error loading users: {exc}"))
            return
        self.state.update(users=tuple(users))

    def _add_user(
        self,
        name: str,
        email: str,
        image: bytes | None,
        *,
        require_image: bool = True,
    ) -> None:
        name_error = is_name_invalid(name)
        email_error = is_email_invalid(email)
        if name_error or email_error:
            self.state.update(name_error=name_error, email_error=email_error)
            self.effects.send(
                ShowNotification(validation_message(name_error, email_error))
            )
            return

        if image is None and require_image:
            self.effects.send(ShowNotification("Please select or capture an image!"))
            return

        self._launch(lambda: self._persist_user(name, email, image))
        self._begin_loading()

    async def _persist_user(self, name: str, email: str, image: bytes | None) -> None:
        try:
            image_ref = self.image_store.save(image) if image is not None else None
            user = User(
                id=self.repository.next_id(),
                name=name,
                email=email,
                image_ref=image_ref,
            )
            users = await self.repository.add_user(user)
        except Exception as exc:
            _logger.exception("Failed to add user")
            self.state.update(is_loading=self._finish_loading())
            self.effects.send(ShowNotification(f"Error adding user: {exc}"))
            return
        _logger.info("User added: id=%s", user.id)
        self.state.update(
            is_loading=self._finish_loading(),
            users=tuple(users),
            name="",
            email="",
            selected_image_ref=None,
            name_error=False,
            email_error=False,
        )
        self.effects.send(ShowNotification("User added successfully!"))

    def _delete_user(self, user: User) -> None:
        self._launch(lambda: self._remove_user(user))
        self.recently_deleted = user
        self._begin_loading()

    async def _remove_user(self, user: User) -> None:
        try:
            users = await self.repository.remove_user(user)
        except Exception as exc:
            _logger.exception("Failed to delete user: id=%s", user.id)
            self.state.update(is_loading=self._finish_loading())
            self.effects.send(ShowNotification(f"Error deleting user: {exc}"))
            return
        self.state.update(is_loading=self._finish_loading(), users=tuple(users))
        self.effects.send(ShowNotification("User deleted", "Undo"))

    def _undo_delete(self) -> None:
        deleted = self.recently_deleted
        if deleted is None:
            return
        # The deleted user's image is not restored.
        self._add_user(deleted.name, deleted.email, None, require_image=False)
        self.recently_deleted = None

    def _clear_users(self) -> None:
        self._launch(self._remove_all_users)
        self._begin_loading()

    async def _remove_all_users(self) -> None:
        try:
            users = await self.repository.clear_users()
        except Exception as exc:
            _logger.exception("Failed to clear users")
            self.state.update(is_loading=self._finish_loading())
            self.effects.send(ShowNotification(f"Error clearing users: {exc}"))
            return
        self.state.update(is_loading=self._finish_loading(), users=tuple(users))
        self.effects.send(ShowNotification("All users cleared!"))

    def _search_users(self, query: str) -> None:
        needle = query.lower()
        matches = tuple(
            user
            for user in self.state.value.users
            if needle in user.name.lower() or needle in user.email.lower()
        )
        self.state.update(search_query=query, users=matches)
        if not matches:
            self.effects.send(ShowNotification("No users found"))
