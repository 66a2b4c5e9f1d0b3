"""Domain layer — pure Python, no framework dependencies."""

from msg_expander.domain.models import (
    ExpandOutcome,
    MessageLink,
    ResolvedAuthor,
    ResolvedMessage,
    Summary,
)
from msg_expander.domain.link_matcher import match_message_link
from msg_expander.domain.snowflake import snowflake_datetime, snowflake_time_ms
from msg_expander.domain.summary import avatar_url, build_summary
from msg_expander.domain.resolution import resolve_author, resolve_message, resolve_with_fallback
from msg_expander.domain.expander import MessageExpander
from msg_expander.domain.dispatcher import ConnectionState, EventDispatcher

__all__ = [
    "ExpandOutcome",
    "MessageLink",
    "ResolvedAuthor",
    "ResolvedMessage",
    "Summary",
    "match_message_link",
    "snowflake_datetime",
    "snowflake_time_ms",
    "avatar_url",
    "build_summary",
    "resolve_author",
    "resolve_message",
    "resolve_with_fallback",
    "MessageExpander",
    "ConnectionState",
    "EventDispatcher",
]
