"""Tests for launcher wiring and startup failure."""

import pytest

from msg_expander import launcher
from msg_expander.adapters.discord import ExpanderClient
from msg_expander.adapters.stream import QueueEventStream
from msg_expander.config import ExpanderConfig
from msg_expander.domain.dispatcher import ConnectionState, EventDispatcher


@pytest.mark.asyncio
async def test_build_wires_components():
    client, stream, dispatcher = launcher.build(ExpanderConfig(token="tok", max_concurrency=2))
    assert isinstance(client, ExpanderClient)
    assert isinstance(stream, QueueEventStream)
    assert isinstance(dispatcher, EventDispatcher)
    assert dispatcher.state is ConnectionState.CONNECTING


def test_main_exits_without_token(monkeypatch):
    monkeypatch.delenv("DISCORD_TOKEN", raising=False)
    with pytest.raises(SystemExit) as exc:
        launcher.main()
    assert exc.value.code == 1
