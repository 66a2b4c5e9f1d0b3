"""Inbound port — platform-agnostic gateway events."""

from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable


@dataclass
class InboundMessage:
    """A freshly created chat message as delivered by the gateway."""

    id: int
    channel_id: int
    author_id: int
    author_is_bot: bool
    content: str


@dataclass
class Ready:
    """Session (re)established. May arrive more than once per process."""

    pass


@dataclass
class MessageCreate:
    message: InboundMessage


@dataclass
class OtherEvent:
    """Any gateway event the expander does not act on."""

    event_type: str = ""


Event = Union[Ready, MessageCreate, OtherEvent]


@runtime_checkable
class EventStream(Protocol):
    """Source of typed gateway events.

    ``next_event`` raises ``StreamClosed`` once the session is gone for good;
    reconnects are handled behind this interface.
    """

    async def next_event(self) -> Event: ...
