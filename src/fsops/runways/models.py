"""Runway data model for wind-based runway recommendations.

A physical runway has two thresholds ("ends"), each used in one direction.
Alignment decisions are made per end, so everything here works on
RunwayEnd rather than on physical runways.
"""

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from fsops.core.logging_system import get_logger
from fsops.runways.alignment import heading_from_identifier, normalize_heading

logger = get_logger(__name__)


class RecommendationSource(Enum):
    """Where the runway data behind a recommendation came from."""

    CATALOG = "catalog"  # Curated local table
    INFERRED = "inferred"  # Airport data provider
    NONE = "none"  # No runway data at all


class SelectionTier(Enum):
    """Which fallback tier produced a departure or arrival list."""

    PREFERRED = "preferred"  # Aligned and flagged preferred in the catalog
    ALIGNED = "aligned"  # Aligned with the wind
    ENABLED = "enabled"  # Nothing aligned, any open runway
    NONE = "none"  # Nothing to recommend


@dataclass(frozen=True)
class RunwayEnd:
    """One threshold of a runway.

    Attributes:
        identifier: Runway designator (e.g., "02L", "20C", "15").
        heading_degrees: Heading in [0, 360).
        enabled: Whether the end is open for use.
        preferred_departure: Curated preference for departures.
        preferred_arrival: Curated preference for arrivals.
    """

    identifier: str
    heading_degrees: int
    enabled: bool = True
    preferred_departure: bool = False
    preferred_arrival: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.heading_degrees < 360:
            raise ValueError(
                f"Runway {self.identifier} heading {self.heading_degrees} outside [0, 360)"
            )


@dataclass(frozen=True)
class AirportRunwaySet:
    """All runway ends known for one airport.

    Attributes:
        airport_id: ICAO airport code (e.g., "WSSS").
        ends: Runway ends, identifiers unique within the set.
    """

    airport_id: str
    ends: tuple[RunwayEnd, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for end in self.ends:
            if end.identifier in seen:
                raise ValueError(f"Duplicate runway {end.identifier} at {self.airport_id}")
            seen.add(end.identifier)

    @classmethod
    def from_ends(cls, airport_id: str, ends: Iterable[RunwayEnd]) -> "AirportRunwaySet":
        """Build a set from any iterable of ends."""
        return cls(airport_id=airport_id, ends=tuple(ends))

    def __iter__(self) -> Iterator[RunwayEnd]:
        return iter(self.ends)

    def __len__(self) -> int:
        return len(self.ends)

    @property
    def enabled_ends(self) -> tuple[RunwayEnd, ...]:
        """Ends that are open for use."""
        return tuple(end for end in self.ends if end.enabled)


@dataclass(frozen=True)
class WindObservation:
    """Wind as used for runway selection.

    Attributes:
        direction_degrees: Direction the wind blows FROM, in [0, 360),
            or None for variable or calm wind.
        speed_kts: Wind speed in knots (informational only).
    """

    direction_degrees: int | None = None
    speed_kts: int | None = None

    def __post_init__(self) -> None:
        if self.direction_degrees is not None and not 0 <= self.direction_degrees < 360:
            raise ValueError(f"Wind direction {self.direction_degrees} outside [0, 360)")

    @classmethod
    def from_degrees(cls, degrees: int | None, speed_kts: int | None = None) -> "WindObservation":
        """Create an observation, folding 360 onto 0 as reported in METARs."""
        if degrees is not None:
            degrees = int(degrees) % 360
        return cls(direction_degrees=degrees, speed_kts=speed_kts)

    @property
    def is_variable(self) -> bool:
        """True when no direction is available (variable or calm)."""
        return self.direction_degrees is None


@dataclass(frozen=True)
class RunwayRecommendation:
    """Runway selection result.

    Attributes:
        airport_id: ICAO airport code.
        departure: Identifiers recommended for departure (may be empty).
        arrival: Identifiers recommended for arrival (may be empty).
        source: Origin of the runway data.
        departure_tier: Fallback tier that produced the departure list.
        arrival_tier: Fallback tier that produced the arrival list.
    """

    airport_id: str
    departure: tuple[str, ...] = ()
    arrival: tuple[str, ...] = ()
    source: RecommendationSource = RecommendationSource.NONE
    departure_tier: SelectionTier = SelectionTier.NONE
    arrival_tier: SelectionTier = SelectionTier.NONE

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to recommend in either direction."""
        return not self.departure and not self.arrival

    @property
    def is_low_confidence(self) -> bool:
        """True when the data is not from the curated catalog."""
        return self.source is not RecommendationSource.CATALOG


def build_runway_end(
    identifier: str,
    heading: float | None = None,
    enabled: bool = True,
    preferred_departure: bool = False,
    preferred_arrival: bool = False,
) -> RunwayEnd | None:
    """Create a RunwayEnd, deriving the heading when none is given.

    An explicit finite heading takes precedence over the designator. Ends whose
    heading can be neither taken nor derived are rejected rather than
    guessed, since 0 degrees is a real runway heading.

    Args:
        identifier: Runway designator (e.g., "07L").
        heading: Explicit heading in degrees, if the source provides one.
        enabled: Whether the end is open.
        preferred_departure: Curated departure preference.
        preferred_arrival: Curated arrival preference.

    Returns:
        RunwayEnd, or None if the identifier is empty or unusable.
    """
    identifier = (identifier or "").strip().upper()
    if not identifier:
        return None

    if heading is not None and math.isfinite(heading):
        heading_degrees = normalize_heading(heading)
    else:
        heading_degrees = heading_from_identifier(identifier)
        if heading_degrees is None:
            logger.warning("Runway %s has no usable heading, excluding it", identifier)
            return None

    return RunwayEnd(
        identifier=identifier,
        heading_degrees=heading_degrees,
        enabled=enabled,
        preferred_departure=preferred_departure,
        preferred_arrival=preferred_arrival,
    )
