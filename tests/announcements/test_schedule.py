"""Tests for announcement time handling."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from fsops.announcements.schedule import (
    checkin_opens,
    format_airline_date,
    gate_opens,
    parse_schedule_time,
    unix_timestamp,
)
from fsops.core.errors import InvalidScheduleError

DEPARTURE = datetime(2025, 3, 1, 14, 30, tzinfo=UTC)


class TestParseScheduleTime:
    """Tests for parse_schedule_time."""

    def test_valid(self) -> None:
        """Test a well-formed time is parsed as UTC."""
        assert parse_schedule_time("2025-03-01 14:30") == DEPARTURE

    def test_surrounding_whitespace(self) -> None:
        """Test leading and trailing spaces are ignored."""
        assert parse_schedule_time("  2025-03-01 14:30 ") == DEPARTURE

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "2025-03-01",
            "2025-03-01T14:30",
            "01/03/2025 14:30",
            "2025-03-01 14:30:00",
            "2025-02-30 10:00",
            "2025-03-01 25:00",
            "abcd-ef-gh 10:00",
        ],
    )
    def test_invalid(self, value: str) -> None:
        """Test malformed and impossible times are rejected."""
        with pytest.raises(InvalidScheduleError):
            parse_schedule_time(value)

    def test_error_is_value_error(self) -> None:
        """Test schedule errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_schedule_time("tomorrow")


class TestFormatting:
    """Tests for date formatting and timestamps."""

    def test_format_airline_date(self) -> None:
        """Test airline schedule date format."""
        assert format_airline_date(DEPARTURE) == "01 March (Sat) 14:30"

    def test_format_converts_to_utc(self) -> None:
        """Test non-UTC times are shown in UTC."""
        singapore = timezone(timedelta(hours=8))
        moment = datetime(2025, 3, 2, 6, 30, tzinfo=singapore)
        assert format_airline_date(moment) == "01 March (Sat) 22:30"

    def test_unix_timestamp(self) -> None:
        """Test whole-second epoch time."""
        assert unix_timestamp(DEPARTURE) == 1740839400

    def test_checkin_opens(self) -> None:
        """Test check-in opens 48 hours before departure."""
        assert checkin_opens(DEPARTURE) == 1740839400 - 48 * 3600

    def test_gate_opens(self) -> None:
        """Test the gate opens an hour before departure."""
        assert gate_opens(DEPARTURE) == 1740839400 - 3600
