"""Discord adapter — bridges discord.Client gateway callbacks to an EventStream.

ExpanderClient owns no pipeline logic: it converts gateway callbacks to
typed events and pushes them, in arrival order, onto a QueueEventStream that
the EventDispatcher consumes.
"""

import discord

from msg_expander.adapters.discord.convert import to_inbound
from msg_expander.adapters.stream import QueueEventStream
from msg_expander.domain.dispatcher import DISCONNECT_EVENT, RESUMED_EVENT
from msg_expander.ports.inbound import MessageCreate, OtherEvent, Ready

# Gateway event types delivered through their own listeners
_TYPED_EVENTS = {"READY", "MESSAGE_CREATE", "RESUMED"}


def default_intents() -> discord.Intents:
    intents = discord.Intents.none()
    intents.guilds = True
    intents.guild_messages = True
    intents.message_content = True
    intents.members = True
    return intents


class ExpanderClient(discord.Client):
    """Thin discord.Client that feeds typed events to a stream.

    Listeners do no awaiting before ``push``, so events enter the queue in
    the order discord.py dispatched them, after its cache was updated.
    """

    def __init__(self, stream: QueueEventStream, **discord_kwargs):
        discord_kwargs.setdefault("intents", default_intents())
        # on_socket_event_type is only dispatched with debug events on
        discord_kwargs.setdefault("enable_debug_events", True)
        super().__init__(**discord_kwargs)
        self._stream = stream

    async def on_ready(self):
        self._stream.push(Ready())

    async def on_message(self, message: discord.Message):
        self._stream.push(MessageCreate(to_inbound(message)))

    async def on_socket_event_type(self, event_type: str):
        if event_type not in _TYPED_EVENTS:
            self._stream.push(OtherEvent(event_type))

    async def on_disconnect(self):
        self._stream.push(OtherEvent(DISCONNECT_EVENT))

    async def on_resumed(self):
        self._stream.push(OtherEvent(RESUMED_EVENT))
