"""Tests conversion des timecodes (ticks, HH:MM:SS)."""

from __future__ import annotations

import pytest

from dialogsync.core.errors import MalformedTimestamp, TranscriptError
from dialogsync.core.subtitles import (
    format_seconds,
    hhmmss_to_seconds,
    ticks_to_seconds,
    to_seconds,
)


def test_ticks_with_suffix() -> None:
    assert to_seconds("10000000t") == 1
    assert to_seconds("20000000t") == 2
    assert to_seconds("12345678t") == pytest.approx(1.2345678)


@pytest.mark.parametrize("ticks", [0, 1, 9_999_999, 36_000_000_000, 123_456_789_012])
def test_ticks_divided_by_ten_million(ticks: int) -> None:
    assert to_seconds(f"{ticks}t") == pytest.approx(ticks / 10_000_000)


def test_hhmmss() -> None:
    assert to_seconds("01:00:00") == 3600
    assert to_seconds("00:01:00") == 60
    assert to_seconds("00:00:01") == 1
    assert to_seconds("00:00:01.250") == pytest.approx(1.25)
    assert hhmmss_to_seconds("1:02:03.5") == pytest.approx(3723.5)


def test_bare_number_falls_back_to_ticks() -> None:
    assert to_seconds("5000000") == pytest.approx(0.5)
    assert ticks_to_seconds("5000000") == pytest.approx(0.5)


def test_surrounding_whitespace_ignored() -> None:
    assert to_seconds("  10000000t ") == 1


@pytest.mark.parametrize("token", ["", "abct", "12.5t", "00:xx:01", "00:01", "1:2:3:4", "garbage"])
def test_malformed_tokens_raise(token: str) -> None:
    with pytest.raises(MalformedTimestamp) as exc_info:
        to_seconds(token)
    assert isinstance(exc_info.value, TranscriptError)
    assert isinstance(exc_info.value, ValueError)


def test_malformed_token_is_reported() -> None:
    with pytest.raises(MalformedTimestamp) as exc_info:
        to_seconds("12:ab:00")
    assert exc_info.value.token == "12:ab:00"


def test_format_seconds() -> None:
    assert format_seconds(3723.456) == "01:02:03.456"
    assert format_seconds(0) == "00:00:00.000"
