"""SnapshotStore over discord.py's connection-state cache."""

from typing import Optional

import discord

from msg_expander.adapters.discord.convert import (
    to_channel_record,
    to_message_record,
    to_user_record,
)
from msg_expander.domain.models import ChannelRecord, MessageRecord, UserRecord
from msg_expander.ports.inbound import Event


class DiscordSnapshotStore:
    """SnapshotStore implementation backed by a discord.Client's cache.

    Only reflects what the gateway has delivered since login: messages older
    than the process (or evicted past ``max_messages``) and users never seen
    are misses.
    """

    def __init__(self, client: discord.Client):
        self._client = client

    def get_message(self, message_id: int) -> Optional[MessageRecord]:
        message = discord.utils.get(self._client.cached_messages, id=message_id)
        return to_message_record(message) if message else None

    def get_channel(self, channel_id: int) -> Optional[ChannelRecord]:
        channel = self._client.get_channel(channel_id)
        return to_channel_record(channel) if channel else None

    def get_user(self, user_id: int) -> Optional[UserRecord]:
        user = self._client.get_user(user_id)
        return to_user_record(user) if user else None

    def apply(self, event: Event) -> None:
        # discord.py parses every payload into its state before the listener
        # that produced ``event`` runs, so there is nothing left to write.
        return None
