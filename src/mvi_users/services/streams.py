"""Observable view state and the one-shot effect channel."""

import asyncio
import logging
from collections.abc import AsyncIterator
from dataclasses import replace

from mvi_users.domain.state import Effect, ViewState

_logger = logging.getLogger(__name__)


class StateStore:
    """Holds the current ViewState and notifies subscribers of replacements.

    Subscribers always start with the current value and are conflated: a slow
    subscriber only sees the latest snapshot, never a backlog.
    """

    def __init__(self, initial: ViewState | None = None) -> None:
        self._value = initial or ViewState()
        self._listeners: set[asyncio.Event] = set()

    @property
    def value(self) -> ViewState:
        """Return the current snapshot."""
        return self._value

    def set(self, state: ViewState) -> None:
        """Replace the current snapshot; equal values are ignored."""
        if state == self._value:
            return
        self._value = state
        for listener in self._listeners:
            listener.set()

    def update(self, **changes: object) -> ViewState:
        """Replace the snapshot with a copy carrying the given field changes."""
        self.set(replace(self._value, **changes))
        return self._value

    async def subscribe(self) -> AsyncIterator[ViewState]:
        """Yield the current snapshot, then each newer one."""
        changed = asyncio.Event()
        self._listeners.add(changed)
        try:
            last = self._value
            yield last
            while True:
                await changed.wait()
                changed.clear()
                if self._value is not last:
                    last = self._value
                    yield last
        finally:
            self._listeners.discard(changed)


class EffectChannel:
    """FIFO of one-shot effects with a single consumer.

    Effects are removed when received, so nothing is replayed to a new
    consumer. With a bounded buffer, effects sent while it is full are dropped.
    """

    def __init__(self, maxsize: int = 0) -> None:
        self._queue: asyncio.Queue[Effect] = asyncio.Queue(maxsize)

    def send(self, effect: Effect) -> None:
        """Enqueue an effect without waiting."""
        try:
            self._queue.put_nowait(effect)
        except asyncio.QueueFull:
            _logger.warning("Effect buffer full, dropping %r", effect)

    async def receive(self) -> Effect:
        """Wait for and return the next effect."""
        return await self._queue.get()

    def drain(self) -> list[Effect]:
        """Return all pending effects without waiting."""
        effects: list[Effect] = []
        while not self._queue.empty():
            effects.append(self._queue.get_nowait())
        return effects

    def __aiter__(self) -> "EffectChannel":
        return self

    async def __anext__(self) -> Effect:
        return await self.receive()
