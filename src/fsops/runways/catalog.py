"""Curated runway catalog.

The catalog is operator-maintained configuration: a YAML document mapping
ICAO codes to runway ends with enabled/preference flags. It is loaded once
at startup and never changes afterwards.

Typical usage:
    from fsops.runways.catalog import RunwayCatalog

    catalog = RunwayCatalog.load_default()
    runways = catalog.lookup("WSSS")
"""

from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from fsops.core.logging_system import get_logger
from fsops.runways.models import AirportRunwaySet, build_runway_end

logger = get_logger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "catalog.yaml"


class RunwayCatalog:
    """Read-only lookup of curated runway sets.

    Examples:
        >>> catalog = RunwayCatalog.from_dict({"WSSL": [{"runway": "03"}]})
        >>> catalog.lookup("WSSL").ends[0].heading_degrees
        30
        >>> catalog.lookup("KSFO") is None
        True
    """

    def __init__(self, runway_sets: Mapping[str, AirportRunwaySet] | None = None) -> None:
        """Initialize catalog.

        Args:
            runway_sets: Runway sets keyed by ICAO code. Copied on
                construction.
        """
        self._sets: Mapping[str, AirportRunwaySet] = MappingProxyType(
            {icao.upper(): runway_set for icao, runway_set in (runway_sets or {}).items()}
        )

    def lookup(self, airport_id: str) -> AirportRunwaySet | None:
        """Get the curated runway set for an airport.

        Args:
            airport_id: ICAO code.

        Returns:
            AirportRunwaySet, or None if the airport is not in the catalog.
        """
        return self._sets.get(airport_id.upper())

    def __contains__(self, airport_id: object) -> bool:
        return isinstance(airport_id, str) and airport_id.upper() in self._sets

    def __iter__(self) -> Iterator[str]:
        return iter(self._sets)

    def __len__(self) -> int:
        return len(self._sets)

    @classmethod
    def from_dict(cls, airports: Mapping[str, Any]) -> "RunwayCatalog":
        """Build a catalog from parsed YAML data.

        Args:
            airports: Mapping of ICAO code to a list of runway entries.

        Returns:
            RunwayCatalog instance.

        Raises:
            ValueError: If the structure is not a mapping of lists of
                runway entries.
        """
        if not isinstance(airports, Mapping):
            raise ValueError("Runway catalog must map airport codes to runway lists")

        runway_sets: dict[str, AirportRunwaySet] = {}
        for icao, entries in airports.items():
            icao = str(icao).upper()
            if not isinstance(entries, list):
                raise ValueError(f"Runway catalog entry for {icao} must be a list")

            ends = []
            for entry in entries:
                if not isinstance(entry, Mapping) or "runway" not in entry:
                    raise ValueError(f"Invalid runway entry for {icao}: {entry!r}")

                heading = entry.get("heading")
                end = build_runway_end(
                    str(entry["runway"]),
                    heading=float(heading) if heading is not None else None,
                    enabled=bool(entry.get("enabled", True)),
                    preferred_departure=bool(entry.get("departure", False)),
                    preferred_arrival=bool(entry.get("arrival", False)),
                )
                if end is not None:
                    ends.append(end)

            runway_sets[icao] = AirportRunwaySet.from_ends(icao, ends)

        return cls(runway_sets)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RunwayCatalog":
        """Load a catalog from a YAML file.

        Args:
            path: Path to a YAML document with a top-level "airports" key.

        Returns:
            RunwayCatalog instance.
        """
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, Mapping):
            raise ValueError(f"Runway catalog {path} must be a mapping")

        catalog = cls.from_dict(data.get("airports", {}))
        logger.info("Loaded runway catalog from %s (%d airports)", path, len(catalog))
        return catalog

    @classmethod
    def load_default(cls) -> "RunwayCatalog":
        """Load the packaged catalog."""
        return cls.from_yaml(DEFAULT_CATALOG_PATH)
