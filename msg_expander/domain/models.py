"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

ChannelId = int
MessageId = int
UserId = int

EMBED_COLOR = 0x02CAF7


@dataclass(frozen=True)
class MessageLink:
    """A parsed discord.com/channels/<guild>/<channel>/<message> link."""

    guild_id: int
    channel_id: ChannelId
    message_id: MessageId


@dataclass
class MessageRecord:
    """A platform message, whether it came from the snapshot or the API."""

    id: MessageId
    channel_id: ChannelId
    author_id: UserId
    content: str
    attachment_urls: List[str] = field(default_factory=list)


@dataclass
class ChannelRecord:
    id: ChannelId
    name: Optional[str] = None  # DMs have no name


@dataclass
class UserRecord:
    id: UserId
    name: str
    avatar: Optional[str] = None  # avatar hash, None = default avatar


@dataclass
class ResolvedMessage:
    id: MessageId
    content: str
    author_id: UserId
    channel_name: str
    image_url: Optional[str] = None


@dataclass
class ResolvedAuthor:
    id: UserId
    display_name: str
    avatar_hash: Optional[str] = None


@dataclass(frozen=True)
class Summary:
    """Outbound embed contents, ready to post."""

    message_id: MessageId
    description: str
    author_name: str
    author_icon_url: str
    footer_text: str
    color: int = EMBED_COLOR
    timestamp: Optional[datetime] = None
    image_url: Optional[str] = None


class ExpandOutcome(Enum):
    NO_LINK = "no_link"
    NOT_FOUND = "not_found"
    POSTED = "posted"
