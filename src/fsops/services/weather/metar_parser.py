"""Wind extraction from raw METAR strings.

Used when a decoded report has no wind block but the raw text does.
"""

import re

from fsops.core.logging_system import get_logger
from fsops.services.weather.models import Wind

logger = get_logger(__name__)


class METARParser:
    """Parse wind groups out of METAR strings."""

    # dddssKT, dddssGggKT, VRBssKT, optional dddVddd variation (ignored)
    WIND_PATTERN = re.compile(r"\b(\d{3}|VRB)(\d{2,3})(?:G(\d{2,3}))?(KT|MPS)\b")

    # Knots per metre/second
    MPS_TO_KT = 1.943844

    def parse_wind(self, raw_metar: str) -> Wind | None:
        """Parse the wind group of a raw METAR.

        Args:
            raw_metar: Raw METAR (e.g., "WSSS 190830Z 02008KT 9999 FEW018 31/24 Q1009").

        Returns:
            Wind, or None if no wind group is present.

        Examples:
            >>> METARParser().parse_wind("KPAO 251756Z 32008KT 10SM CLR 18/08 A3002")
            Wind(direction=320, speed=8, gust=None)
        """
        if not raw_metar:
            return None

        match = self.WIND_PATTERN.search(raw_metar.upper())
        if not match:
            logger.debug("No wind group in METAR: %s", raw_metar)
            return None

        direction_str, speed_str, gust_str, unit = match.groups()
        speed = int(speed_str)
        gust = int(gust_str) if gust_str else None
        if unit == "MPS":
            speed = round(speed * self.MPS_TO_KT)
            gust = round(gust * self.MPS_TO_KT) if gust is not None else None

        if direction_str == "VRB" or speed == 0:
            return Wind(direction=None, speed=speed, gust=gust)

        return Wind(direction=int(direction_str) % 360, speed=speed, gust=gust)
