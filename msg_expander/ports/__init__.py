"""Port interfaces (Hexagonal Architecture)."""

from msg_expander.ports.inbound import (
    Event,
    EventStream,
    InboundMessage,
    MessageCreate,
    OtherEvent,
    Ready,
)
from msg_expander.ports.outbound import PresencePort, RemoteResolver, SnapshotStore

__all__ = [
    "Event",
    "EventStream",
    "InboundMessage",
    "MessageCreate",
    "OtherEvent",
    "Ready",
    "PresencePort",
    "RemoteResolver",
    "SnapshotStore",
]
