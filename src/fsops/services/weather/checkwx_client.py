"""CheckWX client for decoded METAR and TAF reports.

Typical usage:
    from fsops.services.weather import CheckWXClient

    async with CheckWXClient(api_key="...") as client:
        metar = await client.get_metar("WSSS")
"""

import math
from collections.abc import Mapping
from typing import Any

import aiohttp

from fsops.core.errors import MissingCredentialsError, UpstreamError
from fsops.core.http import JsonApiClient
from fsops.core.logging_system import get_logger
from fsops.services.weather.metar_parser import METARParser
from fsops.services.weather.models import CloudLayer, Metar, Taf, TafPeriod, Wind

logger = get_logger(__name__)

CHECKWX_URL = "https://api.checkwx.com"


def _nested(data: Mapping[str, Any], *keys: str) -> Any:
    """Walk nested mappings, returning None on the first missing key."""
    value: Any = data
    for key in keys:
        if not isinstance(value, Mapping):
            return None
        value = value.get(key)
    return value


def _as_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return int(round(number))


class CheckWXClient(JsonApiClient):
    """Fetch decoded weather reports from CheckWX.

    A report that does not exist is returned as None; provider failures
    raise UpstreamError.
    """

    provider = "checkwx"

    def __init__(
        self,
        api_key: str,
        timeout: float = 5.0,
        base_url: str = CHECKWX_URL,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize CheckWX client.

        Args:
            api_key: CheckWX API key (sent as X-API-Key).
            timeout: Total request timeout in seconds.
            base_url: API root URL.
            session: Optional shared HTTP session.
        """
        super().__init__(timeout=timeout, session=session)
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._parser = METARParser()

    async def get_metar(self, icao: str) -> Metar | None:
        """Get the latest decoded METAR.

        Args:
            icao: Upper-case ICAO code.

        Returns:
            Metar, or None if CheckWX has no report for the airport.
        """
        report = await self._get_report("metar", icao)
        if report is None:
            return None

        metar = self.parse_metar(icao, report)
        logger.info("Fetched METAR for %s: %s", icao, metar.raw_text)
        return metar

    async def get_taf(self, icao: str) -> Taf | None:
        """Get the latest decoded TAF.

        Args:
            icao: Upper-case ICAO code.

        Returns:
            Taf, or None if CheckWX has no forecast for the airport.
        """
        report = await self._get_report("taf", icao)
        if report is None:
            return None

        taf = self.parse_taf(icao, report)
        logger.info("Fetched TAF for %s", icao)
        return taf

    async def _get_report(self, kind: str, icao: str) -> Mapping[str, Any] | None:
        """Fetch the first decoded report of a kind ("metar" or "taf")."""
        if not self.api_key:
            raise MissingCredentialsError("CHECKWX_KEY")

        body = await self._get_json(
            f"{self.base_url}/{kind}/{icao}/decoded",
            headers={"X-API-Key": self.api_key},
        )
        if not isinstance(body, Mapping):
            raise UpstreamError(self.provider, "unexpected response body")

        data = body.get("data")
        if not body.get("results") or not isinstance(data, list) or not data:
            logger.debug("CheckWX has no %s for %s", kind.upper(), icao)
            return None

        report = data[0]
        if not isinstance(report, Mapping):
            raise UpstreamError(self.provider, f"unexpected {kind} entry")
        return report

    def parse_metar(self, icao: str, report: Mapping[str, Any]) -> Metar:
        """Convert a decoded CheckWX METAR entry into a Metar.

        Args:
            icao: ICAO code used for the lookup.
            report: One element of the CheckWX "data" list.

        Returns:
            Metar with missing fields left as None.
        """
        raw_text = str(report.get("raw_text") or "")

        wind = None
        if isinstance(report.get("wind"), Mapping):
            wind = Wind(
                direction=_as_int(_nested(report, "wind", "degrees")),
                speed=_as_int(_nested(report, "wind", "speed_kts")),
                gust=_as_int(_nested(report, "wind", "gust_kts")),
            )
            if wind.is_calm:
                wind.direction = None
            elif wind.direction is not None:
                wind.direction %= 360
        elif raw_text:
            wind = self._parser.parse_wind(raw_text)

        clouds = []
        for cloud in report.get("clouds") or []:
            if isinstance(cloud, Mapping):
                clouds.append(
                    CloudLayer(
                        code=str(cloud.get("code", "")),
                        text=str(cloud.get("text", "")),
                        feet=_as_int(cloud.get("feet")),
                    )
                )

        visibility = _nested(report, "visibility", "miles_text")

        return Metar(
            icao=str(report.get("icao") or icao),
            raw_text=raw_text,
            wind=wind,
            temperature=_nested(report, "temperature", "celsius"),
            dewpoint=_nested(report, "dewpoint", "celsius"),
            visibility=str(visibility) if visibility is not None else None,
            qnh=_nested(report, "barometer", "hpa"),
            clouds=clouds,
            observed=report.get("observed"),
        )

    @staticmethod
    def parse_taf(icao: str, report: Mapping[str, Any]) -> Taf:
        """Convert a decoded CheckWX TAF entry into a Taf.

        Forecast periods may carry start_time/end_time directly or a
        timestamp object with from/to.
        """
        periods = []
        for period in report.get("forecast") or []:
            if not isinstance(period, Mapping):
                continue
            start = period.get("start_time") or _nested(period, "timestamp", "from") or ""
            end = period.get("end_time") or _nested(period, "timestamp", "to") or ""
            text = str(period.get("text") or "")
            periods.append(TafPeriod(start_time=str(start), end_time=str(end), text=text))

        return Taf(
            icao=str(report.get("icao") or icao),
            raw_text=str(report.get("raw_text") or ""),
            forecast=periods,
        )
