"""Queue-backed EventStream — implements the EventStream port."""

import asyncio
from typing import Optional

from msg_expander.domain.errors import StreamClosed
from msg_expander.ports.inbound import Event


class _Closed:
    def __init__(self, reason: str):
        self.reason = reason


class QueueEventStream:
    """Bridges callback-style transports to a pull-based EventStream.

    ``push`` never blocks. After ``close``, queued events are still delivered,
    then ``next_event`` raises StreamClosed.
    """

    def __init__(self):
        self._queue: "asyncio.Queue" = asyncio.Queue()
        self._closed: Optional[_Closed] = None

    @property
    def closed(self) -> bool:
        return self._closed is not None

    def push(self, event: Event) -> None:
        if self._closed is None:
            self._queue.put_nowait(event)

    def close(self, reason: str = "") -> None:
        if self._closed is None:
            self._closed = _Closed(reason)
            self._queue.put_nowait(self._closed)

    async def next_event(self) -> Event:
        item = await self._queue.get()
        if isinstance(item, _Closed):
            # Keep the sentinel so repeated calls also raise
            self._queue.put_nowait(item)
            raise StreamClosed(item.reason)
        return item
