"""Summary (embed) construction."""

from msg_expander.domain.errors import MissingAvatar
from msg_expander.domain.models import EMBED_COLOR, ResolvedAuthor, ResolvedMessage, Summary
from msg_expander.domain.snowflake import snowflake_datetime

CDN_HOST = "cdn.discordapp.com"


def avatar_url(user_id: int, avatar_hash: str) -> str:
    return f"https://{CDN_HOST}/avatars/{user_id}/{avatar_hash}.png"


def build_summary(message: ResolvedMessage, author: ResolvedAuthor) -> Summary:
    """Render a resolved message and its author into a Summary.

    Authors without a custom avatar raise MissingAvatar instead of falling
    back to a default avatar image.
    """
    if not author.avatar_hash:
        # TODO: confirm with product whether default avatars should render
        # (cdn.discordapp.com/embed/avatars/<n>.png) instead of failing.
        raise MissingAvatar(f"user {author.id} has no avatar hash")

    return Summary(
        message_id=message.id,
        description=message.content,
        author_name=author.display_name,
        author_icon_url=avatar_url(author.id, author.avatar_hash),
        footer_text=message.channel_name,
        color=EMBED_COLOR,
        timestamp=snowflake_datetime(message.id),
        image_url=message.image_url,
    )
