"""Message link matching.

Pure Python, no framework dependencies.
"""

import re
from typing import Optional

from msg_expander.domain.models import MessageLink

# https://[ptb.|canary.]discord[app].com/channels/<guild>/<channel>/<message>
MESSAGE_LINK_RE = re.compile(
    r"https://(?:(?:ptb|canary)\.)?discord(?:app)?\.com"
    r"/channels/(\d+)/(\d+)/(\d+)",
    re.ASCII,
)

SNOWFLAKE_MAX = 2 ** 64 - 1


def _parse_snowflake(raw: str) -> Optional[int]:
    try:
        value = int(raw)
    except ValueError:
        return None
    if value < 0 or value > SNOWFLAKE_MAX:
        return None
    return value


def match_message_link(text: str) -> Optional[MessageLink]:
    """Return the first message link in ``text``, or None.

    Later links in the same text are ignored. Ids that do not fit in an
    unsigned 64-bit integer count as no match.
    """
    m = MESSAGE_LINK_RE.search(text)
    if m is None:
        return None
    ids = [_parse_snowflake(group) for group in m.groups()]
    if any(i is None for i in ids):
        return None
    guild_id, channel_id, message_id = ids
    return MessageLink(guild_id=guild_id, channel_id=channel_id, message_id=message_id)
