"""AviationStack client for live flight lookups.

Typical usage:
    from fsops.services.flights import AviationStackClient

    async with AviationStackClient(api_key="...") as client:
        flight = await client.search("SQ108")
"""

from collections.abc import Mapping
from typing import Any

import aiohttp

from fsops.core.errors import MissingCredentialsError, UpstreamError
from fsops.core.http import JsonApiClient
from fsops.core.logging_system import get_logger
from fsops.services.flights.models import Flight, FlightLeg

logger = get_logger(__name__)

# Free plan only serves plain HTTP
AVIATIONSTACK_URL = "http://api.aviationstack.com/v1/flights"

LEG_FIELDS = ("airport", "iata", "terminal", "gate", "scheduled", "estimated", "actual")


def _parse_leg(data: Any) -> FlightLeg:
    if not isinstance(data, Mapping):
        return FlightLeg()
    return FlightLeg(**{name: data.get(name) for name in LEG_FIELDS})


class AviationStackClient(JsonApiClient):
    """Search flights by IATA flight number."""

    provider = "aviationstack"

    def __init__(
        self,
        api_key: str,
        timeout: float = 5.0,
        base_url: str = AVIATIONSTACK_URL,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize AviationStack client.

        Args:
            api_key: AviationStack access key.
            timeout: Total request timeout in seconds.
            base_url: Flights endpoint URL.
            session: Optional shared HTTP session.
        """
        super().__init__(timeout=timeout, session=session)
        self.api_key = api_key
        self.base_url = base_url

    async def search(self, flight_iata: str) -> Flight | None:
        """Find the first flight matching an IATA flight number.

        Args:
            flight_iata: IATA flight number (e.g., "SQ108").

        Returns:
            Flight, or None if AviationStack knows no such flight.

        Raises:
            MissingCredentialsError: If no access key is configured.
            UpstreamError: If the request fails or the body is unusable.
        """
        if not self.api_key:
            raise MissingCredentialsError("AVIATIONSTACK_KEY")

        body = await self._get_json(
            self.base_url,
            params={"access_key": self.api_key, "flight_iata": flight_iata},
        )
        if not isinstance(body, Mapping):
            raise UpstreamError(self.provider, "unexpected response body")
        if "error" in body:
            error = body["error"]
            message = error.get("message") if isinstance(error, Mapping) else str(error)
            raise UpstreamError(self.provider, str(message))

        data = body.get("data")
        if not isinstance(data, list) or not data or not isinstance(data[0], Mapping):
            logger.debug("AviationStack has no flight %s", flight_iata)
            return None

        flight = self.parse_flight(data[0], flight_iata)
        logger.info("Found flight %s", flight.iata)
        return flight

    @staticmethod
    def parse_flight(entry: Mapping[str, Any], flight_iata: str = "") -> Flight:
        """Convert one AviationStack "data" entry into a Flight."""
        aircraft = entry.get("aircraft")
        if not isinstance(aircraft, Mapping):
            aircraft = {}

        flight_info = entry.get("flight")
        iata = flight_info.get("iata") if isinstance(flight_info, Mapping) else None

        return Flight(
            iata=iata or flight_iata,
            departure=_parse_leg(entry.get("departure")),
            arrival=_parse_leg(entry.get("arrival")),
            aircraft_type=aircraft.get("icao") or aircraft.get("iata"),
            registration=aircraft.get("registration"),
        )
