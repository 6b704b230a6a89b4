"""Announcement time parsing and formatting."""

from datetime import UTC, datetime, timedelta

from fsops.core.errors import InvalidScheduleError

SCHEDULE_FORMAT_HINT = "YYYY-MM-DD HH:MM"

# Check-in opens this long before departure
CHECKIN_LEAD_TIME = timedelta(hours=48)

# Gate opens this long before departure
GATE_LEAD_TIME = timedelta(hours=1)

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def parse_schedule_time(value: str) -> datetime:
    """Parse a "YYYY-MM-DD HH:MM" time as UTC.

    Args:
        value: Time string entered by the user.

    Returns:
        Timezone-aware UTC datetime.

    Raises:
        InvalidScheduleError: If the string is not in the expected format
            or is not a real date/time.

    Examples:
        >>> parse_schedule_time("2025-03-01 14:30")
        datetime.datetime(2025, 3, 1, 14, 30, tzinfo=datetime.timezone.utc)
    """
    parts = (value or "").strip().split(" ")
    if len(parts) != 2:
        raise InvalidScheduleError(f"Expected {SCHEDULE_FORMAT_HINT}, got {value!r}")

    date_parts = parts[0].split("-")
    time_parts = parts[1].split(":")
    if len(date_parts) != 3 or len(time_parts) != 2:
        raise InvalidScheduleError(f"Expected {SCHEDULE_FORMAT_HINT}, got {value!r}")

    try:
        year, month, day = (int(p) for p in date_parts)
        hour, minute = (int(p) for p in time_parts)
        return datetime(year, month, day, hour, minute, tzinfo=UTC)
    except ValueError as e:
        raise InvalidScheduleError(f"Invalid time {value!r}: {e}") from e


def format_airline_date(moment: datetime) -> str:
    """Format a time the way airline schedules show it.

    Examples:
        >>> format_airline_date(datetime(2025, 3, 1, 14, 30, tzinfo=UTC))
        '01 March (Sat) 14:30'
    """
    moment = moment.astimezone(UTC)
    return (
        f"{moment.day:02d} {MONTHS[moment.month - 1]} ({WEEKDAYS[moment.weekday()]}) "
        f"{moment.hour:02d}:{moment.minute:02d}"
    )


def unix_timestamp(moment: datetime) -> int:
    """Whole seconds since the epoch, for chat timestamp markup."""
    return int(moment.timestamp())


def checkin_opens(departure: datetime) -> int:
    """Unix time check-in opens for a departure."""
    return unix_timestamp(departure - CHECKIN_LEAD_TIME)


def gate_opens(departure: datetime) -> int:
    """Unix time the gate opens for a departure."""
    return unix_timestamp(departure - GATE_LEAD_TIME)
