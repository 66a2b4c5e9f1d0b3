"""Presence announcement on (re)connect — implements PresencePort."""

import sys

import discord

from msg_expander.config import DEFAULT_STATUS_TEXT


def _log(msg: str):
    print(msg, file=sys.stderr)


class PresenceAnnouncer:
    def __init__(self, client: discord.Client, status_text: str = DEFAULT_STATUS_TEXT):
        self._client = client
        self._status_text = status_text

    async def announce(self) -> None:
        """Log readiness and set a "Watching ..." activity. Safe to repeat."""
        _log(f"[expander] logged in as {self._client.user}")
        await self._client.change_presence(
            activity=discord.Activity(type=discord.ActivityType.watching, name=self._status_text),
        )
