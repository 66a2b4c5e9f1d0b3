"""Launcher for the message expander bot."""

import asyncio
import sys

from msg_expander.adapters.discord import (
    DiscordRemoteResolver,
    DiscordSnapshotStore,
    ExpanderClient,
    PresenceAnnouncer,
)
from msg_expander.adapters.stream import QueueEventStream
from msg_expander.config import ExpanderConfig
from msg_expander.domain.dispatcher import EventDispatcher
from msg_expander.domain.errors import ConfigError
from msg_expander.domain.expander import MessageExpander


def _log(msg: str):
    print(msg, file=sys.stderr)


def build(config: ExpanderConfig):
    """Wire the client, ports, expander and dispatcher together."""
    stream = QueueEventStream()
    client = ExpanderClient(stream)
    store = DiscordSnapshotStore(client)
    expander = MessageExpander(store, DiscordRemoteResolver(client))
    dispatcher = EventDispatcher(
        store,
        expander.handle,
        presence=PresenceAnnouncer(client, config.status_text),
        max_concurrency=config.max_concurrency,
    )
    return client, stream, dispatcher


async def run(config: ExpanderConfig):
    """Run until the gateway session ends for good."""
    client, stream, dispatcher = build(config)

    async def _connect():
        try:
            await client.start(config.token)
        except Exception as e:
            _log(f"[expander] gateway session ended: {type(e).__name__}: {e}")
        finally:
            stream.close("client stopped")

    cap = config.max_concurrency or "unbounded"
    _log(f"[expander] connecting (max concurrency: {cap})")
    connect_task = asyncio.create_task(_connect())
    try:
        await dispatcher.run(stream)
        await dispatcher.wait_idle()
    finally:
        if not client.is_closed():
            await client.close()
        await connect_task


def main():
    try:
        config = ExpanderConfig.from_env()
    except ConfigError as e:
        _log(f"[expander] {e}")
        sys.exit(1)
    try:
        asyncio.run(run(config))
    except KeyboardInterrupt:
        _log("[expander] interrupted")


if __name__ == "__main__":
    main()
