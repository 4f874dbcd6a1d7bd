"""Tests for lap/gap duration and time-of-day parsing."""

from __future__ import annotations

from datetime import time, timedelta

import pytest

from jolpica.durations import (
    duration_hms_ms,
    duration_m_s_ms,
    duration_s_ms,
    parse_delta,
    parse_duration,
    parse_time,
)
from jolpica.exceptions import InvalidDurationError, InvalidTimeError


class TestDurationHelpers:
    def test_hms_ms(self) -> None:
        assert duration_hms_ms(2, 2, 53, 700) == timedelta(hours=2, minutes=2, seconds=53.7)

    def test_m_s_ms(self) -> None:
        assert duration_m_s_ms(1, 22, 327) == timedelta(minutes=1, seconds=22, milliseconds=327)

    def test_s_ms(self) -> None:
        assert duration_s_ms(59, 37) == timedelta(seconds=59, milliseconds=37)


class TestParseDuration:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1:22.327", duration_m_s_ms(1, 22, 327)),
            ("59.037", duration_s_ms(59, 37)),
            ("10.1", duration_s_ms(10, 100)),
            ("0.4", duration_s_ms(0, 400)),
            ("2:02:53.7", duration_hms_ms(2, 2, 53, 700)),
            ("1:28:12.058", duration_hms_ms(1, 28, 12, 58)),
            ("3:27.071", duration_m_s_ms(3, 27, 71)),
            ("33:17.667", duration_m_s_ms(33, 17, 667)),
        ],
    )
    def test_valid(self, text: str, expected: timedelta) -> None:
        assert parse_duration(text) == expected

    def test_subsecond_digits_are_right_padded(self) -> None:
        assert parse_duration("10.1") == timedelta(seconds=10, milliseconds=100)
        assert parse_duration("10.12") == timedelta(seconds=10, milliseconds=120)

    @pytest.mark.parametrize(
        "text",
        [
            "40.1111",
            "",
            ":",
            ":2.100",
            "1::2.100",
            "1:60:30.100",
            "2:74:10.7",
            "67.769",
            "1:61.100",
            "75:00.000",
            "1:22.327\n",
            " 59.037",
            "+21.217",
            "+1:14.240",
        ],
    )
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidDurationError):
            parse_duration(text)

    def test_invalid_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_duration("abc")

    def test_durations_order_exactly(self) -> None:
        assert parse_duration("1:22.327") < parse_duration("1:22.328")
        assert parse_duration("59.999") < parse_duration("1:00.000")


class TestParseDelta:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("+0.4", duration_s_ms(0, 400)),
            ("+1.882", duration_s_ms(1, 882)),
            ("+103.588", duration_s_ms(103, 588)),
            ("+1:14.240", duration_m_s_ms(1, 14, 240)),
            ("+18:48.66", duration_m_s_ms(18, 48, 660)),
        ],
    )
    def test_valid(self, text: str, expected: timedelta) -> None:
        assert parse_delta(text) == expected

    @pytest.mark.parametrize("text", ["1:28:12.058", "21.217", "+", "+1:2:3.4", "+2.137\n"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidDurationError):
            parse_delta(text)


class TestParseTime:
    def test_valid(self) -> None:
        assert parse_time("11:30:00Z") == time(11, 30, 0)
        assert parse_time("00:00:00Z") == time(0, 0, 0)
        assert parse_time("23:59:59Z") == time(23, 59, 59)

    @pytest.mark.parametrize("text", ["12:00:0Z", "25:00:00Z", "12:00Z", "12:60:00Z", "", "11:30:00Z\n"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidTimeError):
            parse_time(text)

    def test_missing_suffix_rejected_by_default(self) -> None:
        with pytest.raises(InvalidTimeError):
            parse_time("12:00:00")

    def test_missing_suffix_accepted_when_lenient(self) -> None:
        assert parse_time("15:22:00", require_utc_suffix=False) == time(15, 22, 0)
        assert parse_time("15:22:00Z", require_utc_suffix=False) == time(15, 22, 0)

    def test_lenient_still_checks_range(self) -> None:
        with pytest.raises(InvalidTimeError):
            parse_time("25:00:00", require_utc_suffix=False)
