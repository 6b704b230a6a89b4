"""Runway inference from an airport data provider.

Used when an airport is not in the curated catalog. The provider
(AirportDB, OurAirports-shaped data) describes each physical runway with a
low-end and a high-end threshold; both ends are materialized so each can
be checked against the wind independently.

This is a best-effort enrichment path: transport errors, timeouts,
malformed bodies and empty runway lists all produce RunwaysNotFound.

Typical usage:
    from fsops.runways.inference import RunwayInferenceClient, RunwaysFound

    client = RunwayInferenceClient(api_token="...")
    result = await client.fetch("KSFO")
    if isinstance(result, RunwaysFound):
        print(len(result.runway_set))
    await client.close()
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import aiohttp

from fsops.core.errors import UpstreamError
from fsops.core.http import JsonApiClient
from fsops.core.logging_system import get_logger
from fsops.runways.models import AirportRunwaySet, RunwayEnd, build_runway_end

logger = get_logger(__name__)

AIRPORTDB_URL = "https://airportdb.io/api/v1/airport/{icao}"

# Runway threshold field prefixes in the provider payload
THRESHOLD_PREFIXES = ("le", "he")


@dataclass(frozen=True)
class RunwaysFound:
    """Provider returned at least one usable runway end."""

    runway_set: AirportRunwaySet


@dataclass(frozen=True)
class RunwaysNotFound:
    """Provider lookup produced nothing usable.

    Attributes:
        airport_id: ICAO code that was looked up.
        reason: Short description for logs (never shown as an error).
    """

    airport_id: str
    reason: str


InferenceResult = RunwaysFound | RunwaysNotFound


def _parse_heading(value: Any) -> float | None:
    """Parse an optional numeric heading (provider sends strings).

    Non-finite values are dropped so the end falls back to the heading
    implied by its designator.
    """
    if value is None or value == "":
        return None
    try:
        heading = float(value)
    except (TypeError, ValueError):
        return None
    return heading if math.isfinite(heading) else None


def _parse_flag(value: Any) -> bool:
    """Parse a provider boolean ("1"/"0", 1/0, true/false)."""
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes")
    return bool(value)


def parse_runways(airport_id: str, payload: Any) -> AirportRunwaySet:
    """Convert a provider airport document into a runway set.

    Args:
        airport_id: ICAO code the document belongs to.
        payload: Decoded JSON body. Expected to be an object with a
            "runways" list; anything else yields an empty set.

    Returns:
        AirportRunwaySet with two ends per physical runway, minus ends
        without a usable identifier. Never carries preference flags.
    """
    if not isinstance(payload, Mapping):
        return AirportRunwaySet(airport_id=airport_id)

    runways = payload.get("runways")
    if not isinstance(runways, list):
        return AirportRunwaySet(airport_id=airport_id)

    ends: dict[str, RunwayEnd] = {}
    for runway in runways:
        if not isinstance(runway, Mapping):
            continue

        enabled = not _parse_flag(runway.get("closed", False))
        for prefix in THRESHOLD_PREFIXES:
            end = build_runway_end(
                str(runway.get(f"{prefix}_ident") or ""),
                heading=_parse_heading(runway.get(f"{prefix}_heading_degT")),
                enabled=enabled,
            )
            if end is None:
                continue
            if end.identifier in ends:
                logger.debug("Duplicate runway %s at %s, keeping first", end.identifier, airport_id)
                continue
            ends[end.identifier] = end

    return AirportRunwaySet.from_ends(airport_id, ends.values())


class RunwayInferenceClient(JsonApiClient):
    """Fetch runway ends for airports missing from the catalog.

    Makes a single GET per lookup, bounded by a timeout, with no retries
    and no caching.

    Examples:
        >>> client = RunwayInferenceClient(api_token="token", timeout=3.0)
        >>> result = await client.fetch("EGLL")
    """

    provider = "airportdb"

    def __init__(
        self,
        api_token: str = "",
        timeout: float = 5.0,
        base_url: str = AIRPORTDB_URL,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize inference client.

        Args:
            api_token: AirportDB API token.
            timeout: Total request timeout in seconds.
            base_url: Endpoint template with an {icao} placeholder.
            session: Optional shared HTTP session. When omitted, the client
                creates and owns one.
        """
        super().__init__(timeout=timeout, session=session)
        self.api_token = api_token
        self.base_url = base_url

    async def fetch(self, airport_id: str) -> InferenceResult:
        """Look up runway ends for an airport.

        Args:
            airport_id: Upper-case ICAO code.

        Returns:
            RunwaysFound with the runway set, or RunwaysNotFound.
        """
        if not self.api_token:
            return RunwaysNotFound(airport_id, "no airport data token configured")

        try:
            payload = await self._get_json(
                self.base_url.format(icao=airport_id), params={"apiToken": self.api_token}
            )
        except UpstreamError as e:
            logger.warning("Runway inference for %s failed: %s", airport_id, e)
            return RunwaysNotFound(airport_id, str(e))

        runway_set = parse_runways(airport_id, payload)
        if not runway_set.ends:
            logger.debug("Provider has no usable runways for %s", airport_id)
            return RunwaysNotFound(airport_id, "no usable runways")

        logger.info("Inferred %d runway ends for %s", len(runway_set), airport_id)
        return RunwaysFound(runway_set)

