"""discord.py adapters — gateway client, cache, REST and embeds."""

from msg_expander.adapters.discord.client import ExpanderClient, default_intents
from msg_expander.adapters.discord.embed import summary_to_embed
from msg_expander.adapters.discord.presence import PresenceAnnouncer
from msg_expander.adapters.discord.resolver import DiscordRemoteResolver
from msg_expander.adapters.discord.snapshot import DiscordSnapshotStore

__all__ = [
    "ExpanderClient",
    "default_intents",
    "summary_to_embed",
    "PresenceAnnouncer",
    "DiscordRemoteResolver",
    "DiscordSnapshotStore",
]
