"""RemoteResolver over discord.py's REST client."""

import asyncio

import aiohttp
import discord

from msg_expander.adapters.discord.convert import to_message_record, to_user_record
from msg_expander.adapters.discord.embed import summary_to_embed
from msg_expander.domain.errors import PostFailed, RemoteLookupError, RemoteNotFound
from msg_expander.domain.models import MessageRecord, Summary, UserRecord

# Network-level failures: connection errors and request timeouts
_TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, OSError)


class DiscordRemoteResolver:
    """One attempt per call; discord.py handles rate-limit buckets itself."""

    def __init__(self, client: discord.Client):
        self._client = client

    async def fetch_message(self, channel_id: int, message_id: int) -> MessageRecord:
        channel = self._client.get_partial_messageable(channel_id)
        try:
            message = await channel.fetch_message(message_id)
        except discord.NotFound as e:
            raise RemoteNotFound(f"message {message_id}: {e.text or 'not found'}") from e
        except discord.HTTPException as e:
            # Forbidden included
            raise RemoteLookupError(f"message {message_id}: HTTP {e.status} {e.text}") from e
        except _TRANSPORT_ERRORS as e:
            raise RemoteLookupError(f"message {message_id}: {type(e).__name__}: {e}") from e
        return to_message_record(message)

    async def fetch_user(self, user_id: int) -> UserRecord:
        try:
            user = await self._client.fetch_user(user_id)
        except discord.NotFound as e:
            raise RemoteNotFound(f"user {user_id}: {e.text or 'not found'}") from e
        except discord.HTTPException as e:
            raise RemoteLookupError(f"user {user_id}: HTTP {e.status} {e.text}") from e
        except _TRANSPORT_ERRORS as e:
            raise RemoteLookupError(f"user {user_id}: {type(e).__name__}: {e}") from e
        return to_user_record(user)

    async def post_summary(self, channel_id: int, summary: Summary) -> None:
        channel = self._client.get_partial_messageable(channel_id)
        try:
            await channel.send(embed=summary_to_embed(summary))
        except discord.HTTPException as e:
            raise PostFailed(f"channel {channel_id}: HTTP {e.status} {e.text}") from e
        except _TRANSPORT_ERRORS as e:
            raise PostFailed(f"channel {channel_id}: {type(e).__name__}: {e}") from e
