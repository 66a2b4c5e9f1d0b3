"""Outbound ports — interfaces for the platform cache and REST API."""

from typing import Optional, Protocol, runtime_checkable

from msg_expander.domain.models import (
    ChannelRecord,
    MessageRecord,
    Summary,
    UserRecord,
)
from msg_expander.ports.inbound import Event


@runtime_checkable
class SnapshotStore(Protocol):
    """Locally observed platform state.

    Reads may run while handler tasks are in flight; ``apply`` is only ever
    called by the dispatcher's single consumer loop.
    """

    def get_message(self, message_id: int) -> Optional[MessageRecord]: ...
    def get_channel(self, channel_id: int) -> Optional[ChannelRecord]: ...
    def get_user(self, user_id: int) -> Optional[UserRecord]: ...
    def apply(self, event: Event) -> None: ...


@runtime_checkable
class RemoteResolver(Protocol):
    """Single-attempt REST lookups and the final post.

    Fetch failures raise ``RemoteLookupError`` (``RemoteNotFound`` for 404s);
    post failures raise ``PostFailed``.
    """

    async def fetch_message(self, channel_id: int, message_id: int) -> MessageRecord: ...
    async def fetch_user(self, user_id: int) -> UserRecord: ...
    async def post_summary(self, channel_id: int, summary: Summary) -> None: ...


@runtime_checkable
class PresencePort(Protocol):
    """Post-connect side effects. Must be safe to repeat on reconnect."""

    async def announce(self) -> None: ...
