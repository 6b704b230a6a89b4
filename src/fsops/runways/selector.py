"""Runway selection based on wind direction.

Selects departure and arrival runway ends for an airport:
- Runway data from the curated catalog, else inferred from a provider
- Only open ends, filtered by wind alignment (90 degree cutoff)
- Curated preferences first, then any aligned end, then any open end

Every end in the winning tier is returned. Ranking finer than the
alignment cutoff is left to whoever announces the flight.

Typical usage:
    from fsops.runways.selector import RunwaySelector

    selector = RunwaySelector(RunwayCatalog.load_default(), inference_client)
    recommendation = await selector.select("WSSS", WindObservation(20))
    print(recommendation.departure, recommendation.arrival)
"""

from fsops.core.errors import normalize_airport_id
from fsops.core.logging_system import get_logger
from fsops.runways.alignment import is_aligned
from fsops.runways.catalog import RunwayCatalog
from fsops.runways.inference import RunwayInferenceClient, RunwaysFound
from fsops.runways.models import (
    AirportRunwaySet,
    RecommendationSource,
    RunwayEnd,
    RunwayRecommendation,
    SelectionTier,
    WindObservation,
)

logger = get_logger(__name__)


def _select_tier(
    candidates: tuple[RunwayEnd, ...],
    enabled: tuple[RunwayEnd, ...],
    preference: str,
) -> tuple[tuple[str, ...], SelectionTier]:
    """Apply the preference/fallback tiers for one direction of travel.

    Args:
        candidates: Enabled ends aligned with the wind.
        enabled: All enabled ends.
        preference: RunwayEnd attribute holding the curated preference
            ("preferred_departure" or "preferred_arrival").

    Returns:
        Tuple of (identifiers, tier). Identifiers keep runway set order.
    """
    preferred = [end for end in candidates if getattr(end, preference)]
    if preferred:
        return tuple(end.identifier for end in preferred), SelectionTier.PREFERRED
    if candidates:
        return tuple(end.identifier for end in candidates), SelectionTier.ALIGNED
    if enabled:
        return tuple(end.identifier for end in enabled), SelectionTier.ENABLED
    return (), SelectionTier.NONE


def recommend(
    runway_set: AirportRunwaySet,
    wind: WindObservation,
    source: RecommendationSource,
) -> RunwayRecommendation:
    """Build a recommendation from an already-resolved runway set.

    Args:
        runway_set: Runway ends for the airport.
        wind: Current wind.
        source: Where the runway set came from.

    Returns:
        RunwayRecommendation. Empty when there are no enabled ends.

    Examples:
        >>> result = recommend(runways, WindObservation(200), RecommendationSource.CATALOG)
        >>> result.departure
        ('20C',)
    """
    enabled = runway_set.enabled_ends
    candidates = tuple(
        end for end in enabled if is_aligned(end.heading_degrees, wind.direction_degrees)
    )

    departure, departure_tier = _select_tier(candidates, enabled, "preferred_departure")
    arrival, arrival_tier = _select_tier(candidates, enabled, "preferred_arrival")

    if not candidates and enabled:
        logger.info(
            "No runway at %s aligned with wind %s, using all open runways",
            runway_set.airport_id,
            wind.direction_degrees,
        )

    return RunwayRecommendation(
        airport_id=runway_set.airport_id,
        departure=departure,
        arrival=arrival,
        source=source,
        departure_tier=departure_tier,
        arrival_tier=arrival_tier,
    )


class RunwaySelector:
    """Select departure and arrival runways from wind.

    Holds no per-request state: the catalog is immutable and inferred
    runway sets are discarded after each call, so one selector can serve
    concurrent requests.

    Examples:
        >>> selector = RunwaySelector(RunwayCatalog.load_default())
        >>> result = await selector.select("WSSS", WindObservation(20))
        >>> result.departure, result.arrival
        (('02C',), ('02L',))
    """

    def __init__(
        self,
        catalog: RunwayCatalog,
        inference: RunwayInferenceClient | None = None,
    ) -> None:
        """Initialize runway selector.

        Args:
            catalog: Curated runway catalog.
            inference: Client for airports missing from the catalog. When
                None, unknown airports always get an empty recommendation.
        """
        self.catalog = catalog
        self.inference = inference

    async def resolve(
        self, airport_id: str
    ) -> tuple[AirportRunwaySet | None, RecommendationSource]:
        """Find runway data for an airport.

        Args:
            airport_id: Upper-case ICAO code.

        Returns:
            Tuple of (runway set or None, source).
        """
        runway_set = self.catalog.lookup(airport_id)
        if runway_set is not None:
            return runway_set, RecommendationSource.CATALOG

        if self.inference is None:
            return None, RecommendationSource.NONE

        result = await self.inference.fetch(airport_id)
        if isinstance(result, RunwaysFound):
            return result.runway_set, RecommendationSource.INFERRED

        logger.debug("No runway data for %s: %s", airport_id, result.reason)
        return None, RecommendationSource.NONE

    async def select(self, airport_id: str, wind: WindObservation) -> RunwayRecommendation:
        """Recommend departure and arrival runways.

        Args:
            airport_id: ICAO code (case-insensitive).
            wind: Current wind; a None direction aligns with every runway.

        Returns:
            RunwayRecommendation, possibly empty with source NONE.

        Raises:
            InvalidAirportIdError: If airport_id is not 4 alphanumeric
                characters.
        """
        airport_id = normalize_airport_id(airport_id)

        runway_set, source = await self.resolve(airport_id)
        if runway_set is None:
            return RunwayRecommendation(airport_id=airport_id, source=source)

        recommendation = recommend(runway_set, wind, source)
        logger.debug(
            "Runways for %s wind %s: departure=%s arrival=%s (%s)",
            airport_id,
            wind.direction_degrees,
            recommendation.departure,
            recommendation.arrival,
            source.value,
        )
        return recommendation
