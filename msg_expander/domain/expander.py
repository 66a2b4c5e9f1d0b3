"""MessageExpander — the per-message pipeline, no framework dependencies.

match link -> resolve message -> resolve author -> build summary -> post
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from msg_expander.domain.errors import MessageNotFound
from msg_expander.domain.link_matcher import match_message_link
from msg_expander.domain.models import ExpandOutcome
from msg_expander.domain.resolution import resolve_author, resolve_message
from msg_expander.domain.summary import build_summary

if TYPE_CHECKING:
    from msg_expander.ports.inbound import InboundMessage
    from msg_expander.ports.outbound import RemoteResolver, SnapshotStore


def _log(msg: str):
    print(msg, file=sys.stderr)


class MessageExpander:
    """Expands the first message link in an inbound message into an embed.

    Testable with mock ports only.
    """

    def __init__(self, store: SnapshotStore, resolver: RemoteResolver):
        self._store = store
        self._resolver = resolver

    async def handle(self, msg: InboundMessage) -> ExpandOutcome:
        """Run the pipeline for one message.

        Soft misses return NOT_FOUND. Hard failures raise ExpansionFailed.
        """
        link = match_message_link(msg.content)
        if link is None:
            return ExpandOutcome.NO_LINK

        try:
            target = await resolve_message(
                self._store, self._resolver, link.channel_id, link.message_id,
            )
        except MessageNotFound as e:
            _log(f"[expander] skip message {msg.id}: {e}")
            return ExpandOutcome.NOT_FOUND

        author = await resolve_author(self._store, self._resolver, target.author_id)
        summary = build_summary(target, author)
        await self._resolver.post_summary(msg.channel_id, summary)
        _log(f"[expander] expanded {target.id} into channel {msg.channel_id}")
        return ExpandOutcome.POSTED
