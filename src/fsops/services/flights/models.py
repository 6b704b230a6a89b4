"""Flight tracking data models."""

from dataclasses import dataclass


@dataclass
class FlightLeg:
    """Departure or arrival side of a tracked flight.

    Attributes:
        airport: Airport name.
        iata: Airport IATA code.
        terminal: Terminal, if published.
        gate: Gate, if published.
        scheduled: Scheduled time (ISO 8601).
        estimated: Estimated time (ISO 8601).
        actual: Actual time (ISO 8601).
    """

    airport: str | None = None
    iata: str | None = None
    terminal: str | None = None
    gate: str | None = None
    scheduled: str | None = None
    estimated: str | None = None
    actual: str | None = None


@dataclass
class Flight:
    """A tracked flight.

    Attributes:
        iata: Flight IATA number (e.g., "SQ108").
        departure: Departure leg.
        arrival: Arrival leg.
        aircraft_type: ICAO (or IATA) aircraft type code.
        registration: Aircraft registration.
    """

    iata: str
    departure: FlightLeg
    arrival: FlightLeg
    aircraft_type: str | None = None
    registration: str | None = None
