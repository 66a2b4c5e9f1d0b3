"""Snowflake id helpers."""

from datetime import datetime, timedelta, timezone

from msg_expander.domain.errors import TimestampOutOfRange

# 2015-01-01T00:00:00Z in milliseconds
DISCORD_EPOCH_MS = 1420070400000

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def snowflake_time_ms(snowflake: int) -> int:
    """Creation time of ``snowflake`` in milliseconds since the Unix epoch."""
    return (snowflake >> 22) + DISCORD_EPOCH_MS


def snowflake_datetime(snowflake: int) -> datetime:
    """Creation time of ``snowflake`` as an aware UTC datetime."""
    if snowflake < 0:
        raise TimestampOutOfRange(f"negative snowflake: {snowflake}")
    try:
        return _UNIX_EPOCH + timedelta(milliseconds=snowflake_time_ms(snowflake))
    except OverflowError as e:
        raise TimestampOutOfRange(f"snowflake {snowflake} out of range: {e}") from e
