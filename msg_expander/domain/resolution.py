"""Cache-first, remote-fallback resolution of linked messages and authors.

Pure Python, no framework dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Awaitable, Callable, Optional, TypeVar

from msg_expander.domain.errors import (
    AuthorUnavailable,
    MessageNotFound,
    RemoteLookupError,
)
from msg_expander.domain.models import (
    MessageRecord,
    ResolvedAuthor,
    ResolvedMessage,
    UserRecord,
)

if TYPE_CHECKING:
    from msg_expander.ports.outbound import RemoteResolver, SnapshotStore

K = TypeVar("K")
T = TypeVar("T")


async def resolve_with_fallback(
    key: K,
    cached: Callable[[K], Optional[T]],
    remote: Callable[[K], Awaitable[T]],
) -> T:
    """Look ``key`` up in the snapshot, falling back to one remote call.

    Remote errors propagate unchanged; callers decide whether they are soft.
    """
    hit = cached(key)
    if hit is not None:
        return hit
    return await remote(key)


async def resolve_message(
    store: SnapshotStore,
    resolver: RemoteResolver,
    channel_id: int,
    message_id: int,
) -> ResolvedMessage:
    """Locate a linked message and the name of the channel it was linked from.

    Raises MessageNotFound when the message cannot be fetched for any reason
    or when the channel is unknown to the snapshot.
    """

    async def _fetch(mid: int) -> MessageRecord:
        return await resolver.fetch_message(channel_id, mid)

    try:
        record = await resolve_with_fallback(message_id, store.get_message, _fetch)
    except RemoteLookupError as e:
        raise MessageNotFound(channel_id, message_id, reason=str(e) or "fetch failed") from e

    # The bot is a member of any channel it can read, so the gateway has
    # already delivered it; a miss here means the snapshot is inconsistent.
    channel = store.get_channel(channel_id)
    if channel is None or not channel.name:
        raise MessageNotFound(channel_id, message_id, reason="channel not in snapshot")

    return ResolvedMessage(
        id=record.id,
        content=record.content,
        author_id=record.author_id,
        channel_name=channel.name,
        image_url=record.attachment_urls[0] if record.attachment_urls else None,
    )


async def resolve_author(
    store: SnapshotStore,
    resolver: RemoteResolver,
    author_id: int,
) -> ResolvedAuthor:
    try:
        user: UserRecord = await resolve_with_fallback(
            author_id, store.get_user, resolver.fetch_user,
        )
    except RemoteLookupError as e:
        raise AuthorUnavailable(f"user {author_id}: {e}") from e
    return ResolvedAuthor(id=user.id, display_name=user.name, avatar_hash=user.avatar)
