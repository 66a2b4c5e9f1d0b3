"""EventDispatcher — sequential event consumer that fans out handler tasks.

The consumer applies every event to the snapshot store before anything is
spawned for it, so a handler looking up "its own" message always sees the
updated snapshot. Handler tasks run independently: no ordering between them,
no cancellation, and failures stay inside the task that raised them.
"""

from __future__ import annotations

import asyncio
import sys
from enum import Enum
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional, Set

from msg_expander.domain.errors import ExpansionFailed, StreamClosed
from msg_expander.ports.inbound import InboundMessage, MessageCreate, OtherEvent, Ready

if TYPE_CHECKING:
    from msg_expander.ports.inbound import Event, EventStream
    from msg_expander.ports.outbound import PresencePort, SnapshotStore

# OtherEvent type pushed by the transport when the gateway drops
DISCONNECT_EVENT = "DISCONNECT"
# OtherEvent type pushed when a dropped session is resumed without a new Ready
RESUMED_EVENT = "RESUMED"


def _log(msg: str):
    print(msg, file=sys.stderr)


class ConnectionState(Enum):
    CONNECTING = "connecting"
    READY = "ready"
    STREAMING = "streaming"
    RECONNECTING = "reconnecting"
    TERMINATED = "terminated"


class EventDispatcher:
    """Consumes an EventStream and spawns one task per qualifying message.

    Concurrency is unbounded unless ``max_concurrency`` > 0, in which case a
    semaphore acquired inside each task limits how many handlers run at once.
    The consumer loop itself never waits on handlers.
    """

    def __init__(
        self,
        store: SnapshotStore,
        handle_message: Callable[[InboundMessage], Awaitable[Any]],
        presence: Optional[PresencePort] = None,
        max_concurrency: int = 0,
    ):
        if max_concurrency < 0:
            raise ValueError("max_concurrency must be >= 0")
        self._store = store
        self._handle_message = handle_message
        self._presence = presence
        self._semaphore: Optional[asyncio.Semaphore] = (
            asyncio.Semaphore(max_concurrency) if max_concurrency else None
        )
        self._tasks: Set[asyncio.Task] = set()
        self.state = ConnectionState.CONNECTING

    @property
    def in_flight(self) -> int:
        return len(self._tasks)

    async def run(self, stream: EventStream):
        """Consume events until the stream reports StreamClosed."""
        while True:
            try:
                event = await stream.next_event()
            except StreamClosed as e:
                self.state = ConnectionState.TERMINATED
                _log(f"[dispatcher] stream closed ({str(e) or 'no reason'}), {self.in_flight} handler(s) in flight")
                return
            self.dispatch(event)

    def dispatch(self, event: Event) -> Optional[asyncio.Task]:
        """Apply one event to the snapshot, then spawn its handler if any."""
        self._store.apply(event)

        if isinstance(event, Ready):
            self.state = ConnectionState.READY
            if self._presence is None:
                return None
            return self._spawn(self._presence.announce, label="ready", bounded=False)

        if isinstance(event, OtherEvent):
            if event.event_type == DISCONNECT_EVENT:
                self.state = ConnectionState.RECONNECTING
            elif event.event_type == RESUMED_EVENT or self.state is ConnectionState.READY:
                self.state = ConnectionState.STREAMING
            return None

        if isinstance(event, MessageCreate):
            # A message can only arrive over a live session
            if self.state in (ConnectionState.READY, ConnectionState.RECONNECTING):
                self.state = ConnectionState.STREAMING
            msg = event.message
            if msg.author_is_bot:
                return None
            return self._spawn(lambda: self._handle_message(msg), label=f"message {msg.id}")
        return None

    async def wait_idle(self):
        """Wait for every spawned handler, including ones spawned meanwhile."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def _spawn(
        self, factory: Callable[[], Awaitable[Any]], label: str, bounded: bool = True,
    ) -> asyncio.Task:
        task = asyncio.create_task(self._guarded(factory, label, bounded))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _guarded(self, factory: Callable[[], Awaitable[Any]], label: str, bounded: bool):
        try:
            if self._semaphore is None or not bounded:
                return await factory()
            async with self._semaphore:
                return await factory()
        except ExpansionFailed as e:
            _log(f"[dispatcher] {label} failed: {type(e).__name__}: {e}")
        except Exception as e:
            _log(f"[dispatcher] {label} crashed: {type(e).__name__}: {e}")
        return None
