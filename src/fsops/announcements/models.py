"""Flight announcement data model."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class AnnouncementStatus(Enum):
    """Flight status an announcement is posted for."""

    BOOKING = "booking"
    CHECKIN = "checkin"
    COUNTER_CHECKIN = "counter_checkin"
    BOARDING = "boarding"
    GATE_CLOSED = "gate_closed"
    CANCELLED = "cancelled"
    DELAYED = "delayed"

    @property
    def label(self) -> str:
        """Display name used in command choices."""
        return STATUS_LABELS[self]


STATUS_LABELS: dict[AnnouncementStatus, str] = {
    AnnouncementStatus.BOOKING: "Booking",
    AnnouncementStatus.CHECKIN: "Check-in Opened",
    AnnouncementStatus.COUNTER_CHECKIN: "Counter Check-in Opened",
    AnnouncementStatus.BOARDING: "Boarding",
    AnnouncementStatus.GATE_CLOSED: "Gate Closed",
    AnnouncementStatus.CANCELLED: "Flight Cancelled",
    AnnouncementStatus.DELAYED: "Flight Delayed",
}


@dataclass
class FlightAnnouncement:
    """Everything needed to render one flight announcement.

    Crew and channel fields hold chat platform IDs; missing optional
    values render as "N/A".

    Attributes:
        status: Which announcement to post.
        airline: Operating airline name.
        flight_number: Flight number as announced.
        departure_airport: Departure airport (free text).
        arrival_airport: Arrival airport (free text).
        non_stop: Whether the flight is non-stop.
        duration: Estimated block time (free text, e.g., "1h 25m").
        departure_time: Scheduled departure (UTC).
        arrival_time: Scheduled arrival (UTC).
        aircraft_type: Aircraft type (free text).
        captain_id: Captain user ID.
        first_officer_id: First officer user ID.
        additional_crew_id: Additional crew member user ID.
        cabin_crew_id: Cabin crew user ID.
        vc_channel_id: Voice channel hosting the flight.
        departure_terminal: Departure terminal.
        departure_gate: Departure gate.
        checkin_row: Check-in row (counter check-in only).
        ping_role: Whether to mention the announcement role.
    """

    status: AnnouncementStatus
    airline: str
    flight_number: str
    departure_airport: str
    arrival_airport: str
    non_stop: bool
    duration: str
    departure_time: datetime
    arrival_time: datetime
    aircraft_type: str
    captain_id: str | None = None
    first_officer_id: str | None = None
    additional_crew_id: str | None = None
    cabin_crew_id: str | None = None
    vc_channel_id: str | None = None
    departure_terminal: str | None = None
    departure_gate: str | None = None
    checkin_row: str | None = None
    ping_role: bool = True
