"""Shared fake ports for domain tests — no discord import."""

import asyncio
from typing import Dict, List, Optional

import pytest

from msg_expander.domain.errors import RemoteNotFound
from msg_expander.domain.models import ChannelRecord, MessageRecord, UserRecord
from msg_expander.ports.inbound import MessageCreate


class FakeStore:
    """In-memory SnapshotStore. ``apply`` caches created messages."""

    def __init__(self):
        self.messages: Dict[int, MessageRecord] = {}
        self.channels: Dict[int, ChannelRecord] = {}
        self.users: Dict[int, UserRecord] = {}
        self.applied: List[object] = []

    def get_message(self, message_id: int) -> Optional[MessageRecord]:
        return self.messages.get(message_id)

    def get_channel(self, channel_id: int) -> Optional[ChannelRecord]:
        return self.channels.get(channel_id)

    def get_user(self, user_id: int) -> Optional[UserRecord]:
        return self.users.get(user_id)

    def apply(self, event) -> None:
        self.applied.append(event)
        if isinstance(event, MessageCreate):
            m = event.message
            self.messages[m.id] = MessageRecord(
                id=m.id, channel_id=m.channel_id, author_id=m.author_id, content=m.content,
            )


class FakeResolver:
    """RemoteResolver that serves from dicts and records every call."""

    def __init__(self):
        self.messages: Dict[int, MessageRecord] = {}
        self.users: Dict[int, UserRecord] = {}
        self.message_error: Optional[Exception] = None
        self.user_error: Optional[Exception] = None
        self.post_error: Optional[Exception] = None
        self.delay = 0.0
        self.fetch_message_calls: List[tuple] = []
        self.fetch_user_calls: List[int] = []
        self.posts: List[tuple] = []

    async def fetch_message(self, channel_id, message_id):
        self.fetch_message_calls.append((channel_id, message_id))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.message_error:
            raise self.message_error
        if message_id not in self.messages:
            raise RemoteNotFound(f"message {message_id}")
        return self.messages[message_id]

    async def fetch_user(self, user_id):
        self.fetch_user_calls.append(user_id)
        if self.user_error:
            raise self.user_error
        if user_id not in self.users:
            raise RemoteNotFound(f"user {user_id}")
        return self.users[user_id]

    async def post_summary(self, channel_id, summary):
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.post_error:
            raise self.post_error
        self.posts.append((channel_id, summary))


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def resolver():
    return FakeResolver()


@pytest.fixture
def linked_world(store, resolver):
    """Channel 2 known locally, author 42 with avatar, message 3 remote-only."""
    store.channels[2] = ChannelRecord(id=2, name="general")
    resolver.users[42] = UserRecord(id=42, name="alice", avatar="abc123")
    resolver.messages[3] = MessageRecord(
        id=3, channel_id=2, author_id=42, content="hello there",
    )
    return store, resolver

