"""Tests for token-layout formatting."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from utilkit.errors import ParseError
from utilkit.format import format19, format_time, format_timestamp, format_timestamp_string

SAMPLE = datetime(2021, 3, 5, 9, 7, 3)


class TestFormatTime:
    """Tests for format_time()."""

    def test_padded_layout(self) -> None:
        """All padded tokens."""
        assert format_time(SAMPLE, "YYYY-MM-DD HH:mm:ss") == "2021-03-05 09:07:03"

    def test_unpadded_layout(self) -> None:
        """All unpadded tokens."""
        assert format_time(SAMPLE, "YY/M/D H:m:s") == "21/3/5 9:7:3"

    def test_two_digit_fields_unaffected_by_padding(self) -> None:
        """Padded and unpadded agree when the field has two digits."""
        dt = datetime(2021, 11, 25, 13, 45, 59)
        assert format_time(dt, "M D H m s") == "11 25 13 45 59"
        assert format_time(dt, "MM DD HH mm ss") == "11 25 13 45 59"

    def test_twelve_hour(self) -> None:
        """hh and h use the 12-hour clock."""
        dt = datetime(2021, 3, 5, 21, 7, 3)
        assert format_time(dt, "hh:mm h HH H") == "09:07 9 21 21"

    def test_twelve_hour_midnight_and_noon(self) -> None:
        """Hour 0 and hour 12 both render as 12 on the 12-hour clock."""
        assert format_time(datetime(2021, 3, 5, 0), "hh h HH H") == "12 12 00 0"
        assert format_time(datetime(2021, 3, 5, 12), "hh h HH H") == "12 12 12 12"

    def test_no_meridiem_marker(self) -> None:
        """No AM/PM text is added."""
        assert format_time(datetime(2021, 3, 5, 21), "h") == "9"

    def test_literal_text_preserved(self) -> None:
        """Non-token characters are copied through."""
        assert format_time(SAMPLE, "[YYYY] @ x_") == "[2021] @ x_"

    def test_repeated_tokens(self) -> None:
        """Every occurrence is replaced."""
        assert format_time(SAMPLE, "DD.DD.DD") == "05.05.05"

    def test_three_letter_runs(self) -> None:
        """Longest-first splits runs of repeated letters."""
        assert format_time(SAMPLE, "YYY") == "21Y"
        assert format_time(SAMPLE, "MMM") == "033"

    def test_lone_year_letter_is_literal(self) -> None:
        """A single Y is not a token."""
        assert format_time(SAMPLE, "Y") == "Y"

    def test_small_year(self) -> None:
        """Years below 1000 are zero-padded."""
        assert format_time(datetime(5, 1, 2), "YYYY YY") == "0005 05"

    def test_aware_datetime_uses_own_fields(self) -> None:
        """Fields come from the datetime's own zone."""
        dt = datetime(2021, 3, 5, 9, 7, 3, tzinfo=timezone(timedelta(hours=8)))
        assert format_time(dt, "HH:mm") == "09:07"

    @pytest.mark.parametrize(
        "dt",
        [
            datetime(2021, 3, 5, 9, 7, 3),
            datetime(1999, 12, 31, 23, 59, 59),
            datetime(2000, 1, 1, 0, 0, 0),
            datetime(2024, 2, 29, 12, 30, 45, tzinfo=ZoneInfo("Asia/Chongqing")),
        ],
    )
    def test_matches_format19(self, dt: datetime) -> None:
        """The token layout agrees with the fixed-width 19 layout."""
        assert format_time(dt, "YYYY-MM-DD HH:mm:ss") == format19(dt)


class TestFormatTimestamp:
    """Tests for format_timestamp() and format_timestamp_string()."""

    def test_epoch_utc(self) -> None:
        """Epoch formatted in UTC."""
        assert format_timestamp(0, "YYYY-MM-DD HH:mm:ss", tz=timezone.utc) == "1970-01-01 00:00:00"

    def test_named_zone(self) -> None:
        """Unix seconds formatted in a named zone."""
        tz = ZoneInfo("Asia/Chongqing")
        assert format_timestamp(1614906423, "YYYY-MM-DD HH:mm:ss", tz=tz) == "2021-03-05 09:07:03"

    def test_local_zone(self, local_tz) -> None:
        """Without tz the process-local zone is used."""
        local_tz("CST-8")
        assert format_timestamp(1614906423, "YYYY-MM-DD HH:mm:ss") == "2021-03-05 09:07:03"

    def test_string_input(self) -> None:
        """Decimal string input."""
        assert format_timestamp_string("1614906423", "YY/M/D", tz=timezone.utc) == "21/3/5"

    def test_string_input_invalid(self) -> None:
        """A non-integer string raises ParseError."""
        with pytest.raises(ParseError, match="invalid unix timestamp"):
            format_timestamp_string("16149x", "YYYY", tz=timezone.utc)

    @pytest.mark.parametrize("text", [" 1614906423", "1_614_906_423", "١٦١٤"])
    def test_string_input_strict(self, text: str) -> None:
        """Whitespace, underscores and non-ASCII digits are rejected."""
        with pytest.raises(ParseError):
            format_timestamp_string(text, "YYYY", tz=timezone.utc)

    def test_string_input_empty(self) -> None:
        """An empty string raises ParseError."""
        with pytest.raises(ParseError):
            format_timestamp_string("", "YYYY", tz=timezone.utc)
