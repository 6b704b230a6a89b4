"""Flight number mapping, status derivation and time formatting."""

from datetime import UTC, datetime, timedelta

from fsops.services.flights.models import Flight

# ICAO airline prefixes the community uses, mapped to IATA
AIRLINE_PREFIXES: dict[str, str] = {
    "SIA": "SQ",  # Singapore Airlines
    "TGW": "TR",  # Scoot
    "MAS": "MH",  # Malaysia Airlines
    "HVN": "VN",  # Vietnam Airlines
}

# Departure deviation beyond which a flight is early or delayed
ON_TIME_TOLERANCE = timedelta(minutes=5)

STATUS_LANDED = "Landed"
STATUS_NOT_DEPARTED = "📅 Scheduled"
STATUS_DELAYED = "Delayed"
STATUS_EARLY = "Early"
STATUS_ON_TIME = "On-Time"
STATUS_SCHEDULED = "Scheduled"

NOT_AVAILABLE = "N/A"


def map_flight_number(flight_number: str) -> str:
    """Convert an ICAO-prefixed flight number to IATA.

    Args:
        flight_number: Upper-case flight number (e.g., "SIA826").

    Returns:
        IATA flight number if the prefix is known, else unchanged.

    Examples:
        >>> map_flight_number("SIA826")
        'SQ826'
        >>> map_flight_number("SQ108")
        'SQ108'
    """
    prefix = flight_number[:3]
    if prefix in AIRLINE_PREFIXES:
        return AIRLINE_PREFIXES[prefix] + flight_number[3:]
    return flight_number


def parse_iso(value: str | None) -> datetime | None:
    """Parse an ISO 8601 timestamp, assuming UTC when no offset is given."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def flight_status(flight: Flight) -> str:
    """Derive a display status from flight times.

    Args:
        flight: Tracked flight.

    Returns:
        One of the STATUS_* strings.
    """
    if flight.arrival.actual:
        return STATUS_LANDED
    if not flight.departure.actual:
        return STATUS_NOT_DEPARTED

    scheduled = parse_iso(flight.departure.scheduled)
    estimated = parse_iso(flight.departure.estimated)
    if scheduled and estimated:
        diff = estimated - scheduled
        if diff > ON_TIME_TOLERANCE:
            return STATUS_DELAYED
        if diff < -ON_TIME_TOLERANCE:
            return STATUS_EARLY
        return STATUS_ON_TIME
    return STATUS_SCHEDULED


def format_utc(value: str | None) -> str:
    """Format an ISO timestamp as DD-MM-YYYY HH:MM in UTC.

    Examples:
        >>> format_utc("2025-03-01T14:05:00+08:00")
        '01-03-2025 06:05'
        >>> format_utc(None)
        'N/A'
    """
    parsed = parse_iso(value)
    if parsed is None:
        return NOT_AVAILABLE
    return parsed.astimezone(UTC).strftime("%d-%m-%Y %H:%M")
