"""Tests for domain/snowflake.py."""

from datetime import datetime, timezone

import pytest

from msg_expander.domain.errors import TimestampOutOfRange
from msg_expander.domain.snowflake import DISCORD_EPOCH_MS, snowflake_datetime, snowflake_time_ms


def test_time_ms_documented_example():
    # (175928847299117063 >> 22) + 1420070400000
    assert snowflake_time_ms(175928847299117063) == 1462015105796


def test_datetime_documented_example():
    dt = snowflake_datetime(175928847299117063)
    assert dt == datetime(2016, 4, 30, 11, 18, 25, 796000, tzinfo=timezone.utc)


def test_zero_is_discord_epoch():
    assert snowflake_time_ms(0) == DISCORD_EPOCH_MS
    assert snowflake_datetime(0) == datetime(2015, 1, 1, tzinfo=timezone.utc)


def test_datetime_is_aware_utc():
    assert snowflake_datetime(3).tzinfo is timezone.utc


def test_max_u64_still_decodes():
    dt = snowflake_datetime(2 ** 64 - 1)
    assert dt.year > 2100


def test_negative_raises():
    with pytest.raises(TimestampOutOfRange):
        snowflake_datetime(-1)


def test_absurd_value_raises():
    with pytest.raises(TimestampOutOfRange):
        snowflake_datetime(2 ** 120)
