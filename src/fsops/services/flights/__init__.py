"""Flight tracking lookups."""

from fsops.services.flights.aviationstack_client import AviationStackClient
from fsops.services.flights.models import Flight, FlightLeg
from fsops.services.flights.status import flight_status, format_utc, map_flight_number

__all__ = [
    "AviationStackClient",
    "Flight",
    "FlightLeg",
    "flight_status",
    "format_utc",
    "map_flight_number",
]
