"""Aviation weather lookups (METAR and TAF)."""

from fsops.services.weather.checkwx_client import CheckWXClient
from fsops.services.weather.metar_parser import METARParser
from fsops.services.weather.models import CloudLayer, Metar, Taf, TafPeriod, Wind

__all__ = [
    "CheckWXClient",
    "CloudLayer",
    "METARParser",
    "Metar",
    "Taf",
    "TafPeriod",
    "Wind",
]
