"""Unit tests for time-based id generation."""

from datetime import datetime, timezone

from pos.domain.service.identity import next_id

NOW = datetime(2026, 10, 19, 10, 0, tzinfo=timezone.utc)
NOW_MS = str(int(NOW.timestamp() * 1000))


def test_uses_epoch_milliseconds():
    assert next_id([], NOW) == NOW_MS


def test_ignores_smaller_ids():
    assert next_id(["1", "2", "3"], NOW) == NOW_MS


def test_same_millisecond_gets_bumped():
    assert next_id([NOW_MS], NOW) == str(int(NOW_MS) + 1)


def test_non_numeric_ids_are_ignored():
    assert next_id(["abc", "x-1"], NOW) == NOW_MS
