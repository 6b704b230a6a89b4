"""Wind-based runway recommendations.

Typical usage:
    from fsops.runways import RunwayCatalog, RunwaySelector, WindObservation

    selector = RunwaySelector(RunwayCatalog.load_default())
    recommendation = await selector.select("WSSS", WindObservation(20))
"""

from fsops.runways.alignment import angular_difference, heading_from_identifier, is_aligned
from fsops.runways.catalog import RunwayCatalog
from fsops.runways.inference import (
    InferenceResult,
    RunwayInferenceClient,
    RunwaysFound,
    RunwaysNotFound,
    parse_runways,
)
from fsops.runways.models import (
    AirportRunwaySet,
    RecommendationSource,
    RunwayEnd,
    RunwayRecommendation,
    SelectionTier,
    WindObservation,
)
from fsops.runways.selector import RunwaySelector, recommend

__all__ = [
    "AirportRunwaySet",
    "InferenceResult",
    "RecommendationSource",
    "RunwayCatalog",
    "RunwayEnd",
    "RunwayInferenceClient",
    "RunwayRecommendation",
    "RunwaySelector",
    "RunwaysFound",
    "RunwaysNotFound",
    "SelectionTier",
    "WindObservation",
    "angular_difference",
    "heading_from_identifier",
    "is_aligned",
    "parse_runways",
    "recommend",
]
