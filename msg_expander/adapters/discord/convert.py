"""discord.py objects -> domain records."""

from typing import Any, Optional

import discord

from msg_expander.domain.models import ChannelRecord, MessageRecord, UserRecord
from msg_expander.ports.inbound import InboundMessage


def to_inbound(message: discord.Message) -> InboundMessage:
    """Convert a gateway MESSAGE_CREATE to platform-agnostic InboundMessage."""
    return InboundMessage(
        id=message.id,
        channel_id=message.channel.id,
        author_id=message.author.id,
        author_is_bot=message.author.bot,
        content=message.content,
    )


def to_message_record(message: discord.Message) -> MessageRecord:
    return MessageRecord(
        id=message.id,
        channel_id=message.channel.id,
        author_id=message.author.id,
        content=message.content,
        attachment_urls=[a.url for a in message.attachments],
    )


def to_channel_record(channel: Any) -> ChannelRecord:
    # DMChannel / PartialMessageable have no name
    name: Optional[str] = getattr(channel, "name", None)
    return ChannelRecord(id=channel.id, name=name)


def to_user_record(user: discord.abc.User) -> UserRecord:
    return UserRecord(
        id=user.id,
        name=user.name,
        avatar=user.avatar.key if user.avatar else None,
    )
