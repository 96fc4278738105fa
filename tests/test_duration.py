"""Unit tests for cql_config.duration — duration text."""

from datetime import timedelta

import pytest

from cql_config.duration import format_duration, parse_duration, to_nanoseconds
from cql_config.exceptions import DurationError


class TestParseDuration:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("0", timedelta(0)),
            ("0s", timedelta(0)),
            ("11s", timedelta(seconds=11)),
            ("1m30s", timedelta(seconds=90)),
            ("1.5h", timedelta(minutes=90)),
            ("2h45m", timedelta(hours=2, minutes=45)),
            ("300ms", timedelta(milliseconds=300)),
            ("200us", timedelta(microseconds=200)),
            ("200µs", timedelta(microseconds=200)),
            ("200μs", timedelta(microseconds=200)),
            ("1500ns", timedelta(microseconds=1)),
            (".5s", timedelta(milliseconds=500)),
            ("1.s", timedelta(seconds=1)),
            ("1h2m3.5s", timedelta(hours=1, minutes=2, seconds=3.5)),
            ("+5s", timedelta(seconds=5)),
            ("-5s", timedelta(seconds=-5)),
            ("-1.5s", timedelta(seconds=-1.5)),
        ],
    )
    def test_valid(self, text: str, expected: timedelta) -> None:
        assert parse_duration(text) == expected

    def test_sub_microsecond_truncates_toward_zero(self) -> None:
        assert parse_duration("1ns") == timedelta(0)
        assert parse_duration("-1500ns") == timedelta(microseconds=-1)

    @pytest.mark.parametrize(
        "text",
        ["", "-", "5", "abc", "5x", "5 s", ".s", "s", "1.2.3s", "5s5", "9223372036854775808ns", "2562048h"],
    )
    def test_invalid(self, text: str) -> None:
        with pytest.raises(DurationError):
            parse_duration(text)

    def test_most_negative_value(self) -> None:
        assert parse_duration("-9223372036854775808ns") == timedelta(microseconds=-9223372036854775)

    def test_error_carries_text(self) -> None:
        with pytest.raises(DurationError) as exc_info:
            parse_duration("10parsecs")
        assert exc_info.value.text == "10parsecs"

    def test_overlong_whole_number(self) -> None:
        with pytest.raises(DurationError):
            parse_duration("1" * 5000 + "s")

    def test_leading_zeros_do_not_count_toward_length(self) -> None:
        assert parse_duration("0" * 5000 + "1s") == timedelta(seconds=1)

    def test_overlong_fraction_is_truncated(self) -> None:
        assert parse_duration("0." + "1" * 5000 + "s") == timedelta(microseconds=111111)


class TestFormatDuration:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (timedelta(0), "0s"),
            (timedelta(microseconds=1), "1µs"),
            (timedelta(microseconds=200), "200µs"),
            (timedelta(microseconds=1500), "1.5ms"),
            (timedelta(milliseconds=100), "100ms"),
            (timedelta(seconds=1.5), "1.5s"),
            (timedelta(seconds=11), "11s"),
            (timedelta(seconds=90), "1m30s"),
            (timedelta(hours=1), "1h0m0s"),
            (timedelta(hours=26, minutes=3, seconds=4, microseconds=5), "26h3m4.000005s"),
            (timedelta(seconds=-5), "-5s"),
            (timedelta(milliseconds=-250), "-250ms"),
        ],
    )
    def test_format(self, value: timedelta, expected: str) -> None:
        assert format_duration(value) == expected

    @pytest.mark.parametrize(
        "value",
        [
            timedelta(microseconds=7),
            timedelta(milliseconds=12, microseconds=345),
            timedelta(days=3, seconds=17, microseconds=1),
            timedelta(seconds=-3725, microseconds=-10),
        ],
    )
    def test_parses_back(self, value: timedelta) -> None:
        assert parse_duration(format_duration(value)) == value

    def test_largest_value(self) -> None:
        value = timedelta(microseconds=9223372036854775)
        assert parse_duration(format_duration(value)) == value

    @pytest.mark.parametrize("value", [timedelta(days=200000), timedelta(days=-200000), timedelta.max])
    def test_out_of_range(self, value: timedelta) -> None:
        with pytest.raises(DurationError):
            format_duration(value)


class TestToNanoseconds:
    def test_positive(self) -> None:
        assert to_nanoseconds(timedelta(seconds=1, microseconds=1)) == 1_000_001_000

    def test_negative(self) -> None:
        assert to_nanoseconds(timedelta(microseconds=-3)) == -3000
