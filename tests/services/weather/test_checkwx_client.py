"""Tests for the CheckWX weather client."""

from unittest.mock import AsyncMock, patch

import pytest

from fsops.core.errors import MissingCredentialsError, UpstreamError
from fsops.services.weather.checkwx_client import CheckWXClient

METAR_REPORT = {
    "icao": "WSSS",
    "observed": "2025-03-01T08:30:00",
    "raw_text": "WSSS 010830Z 02008KT 9999 FEW018 SCT300 31/24 Q1009 NOSIG",
    "wind": {"degrees": 20, "speed_kts": 8},
    "visibility": {"miles_text": "6+"},
    "barometer": {"hpa": 1009},
    "temperature": {"celsius": 31},
    "dewpoint": {"celsius": 24},
    "clouds": [
        {"code": "FEW", "text": "Few", "feet": 1800},
        {"code": "SCT", "text": "Scattered", "feet": 30000},
    ],
}

TAF_REPORT = {
    "icao": "WSSS",
    "raw_text": "TAF WSSS 010500Z 0106/0212 36008KT 9999 FEW018 TEMPO 0108/0112 4000 TSRA",
    "forecast": [
        {"timestamp": {"from": "2025-03-01T06:00:00", "to": "2025-03-01T08:00:00"}},
        {
            "start_time": "2025-03-01T08:00:00",
            "end_time": "2025-03-01T12:00:00",
            "text": "TEMPO 4000 TSRA",
        },
    ],
}


class TestCheckWXClient:
    """Tests for CheckWXClient."""

    @pytest.fixture
    def client(self) -> CheckWXClient:
        """Create test client."""
        return CheckWXClient(api_key="test_key", timeout=1.0)

    @pytest.mark.asyncio
    async def test_get_metar(self, client: CheckWXClient) -> None:
        """Test fetching and decoding a METAR."""
        with patch.object(client, "_get_json", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = {"results": 1, "data": [METAR_REPORT]}

            metar = await client.get_metar("WSSS")

            assert metar is not None
            assert metar.icao == "WSSS"
            assert metar.wind is not None
            assert metar.wind.direction == 20
            assert metar.wind.speed == 8
            assert metar.temperature == 31
            assert metar.dewpoint == 24
            assert metar.visibility == "6+"
            assert metar.qnh == 1009
            assert [cloud.code for cloud in metar.clouds] == ["FEW", "SCT"]
            assert metar.clouds[0].feet == 1800
            mock_get.assert_called_once_with(
                "https://api.checkwx.com/metar/WSSS/decoded",
                headers={"X-API-Key": "test_key"},
            )

    @pytest.mark.asyncio
    async def test_get_metar_not_found(self, client: CheckWXClient) -> None:
        """Test an airport without reports returns None."""
        with patch.object(client, "_get_json", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = {"results": 0, "data": []}

            assert await client.get_metar("ZZZZ") is None

    @pytest.mark.asyncio
    async def test_get_metar_wind_from_raw_text(self, client: CheckWXClient) -> None:
        """Test wind falls back to the raw METAR when not decoded."""
        report = dict(METAR_REPORT)
        del report["wind"]
        with patch.object(client, "_get_json", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = {"results": 1, "data": [report]}

            metar = await client.get_metar("WSSS")

            assert metar is not None
            assert metar.wind is not None
            assert metar.wind.direction == 20

    @pytest.mark.asyncio
    async def test_get_metar_unexpected_body(self, client: CheckWXClient) -> None:
        """Test a non-object body raises UpstreamError."""
        with patch.object(client, "_get_json", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = ["unexpected"]

            with pytest.raises(UpstreamError):
                await client.get_metar("WSSS")

    @pytest.mark.asyncio
    async def test_upstream_error_propagates(self, client: CheckWXClient) -> None:
        """Test provider failures are raised to the caller."""
        with patch.object(client, "_get_json", new_callable=AsyncMock) as mock_get:
            mock_get.side_effect = UpstreamError("checkwx", "HTTP 500", status=500)

            with pytest.raises(UpstreamError):
                await client.get_metar("WSSS")

    @pytest.mark.asyncio
    async def test_missing_api_key(self) -> None:
        """Test a missing key raises before any request."""
        client = CheckWXClient(api_key="")
        with patch.object(client, "_get_json", new_callable=AsyncMock) as mock_get:
            with pytest.raises(MissingCredentialsError):
                await client.get_metar("WSSS")

            mock_get.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_taf(self, client: CheckWXClient) -> None:
        """Test fetching and decoding a TAF."""
        with patch.object(client, "_get_json", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = {"results": 1, "data": [TAF_REPORT]}

            taf = await client.get_taf("WSSS")

            assert taf is not None
            assert taf.raw_text.startswith("TAF WSSS")
            assert len(taf.forecast) == 2
            assert taf.forecast[0].start_time == "2025-03-01T06:00:00"
            assert taf.forecast[0].end_time == "2025-03-01T08:00:00"
            assert taf.forecast[1].text == "TEMPO 4000 TSRA"
            mock_get.assert_called_once_with(
                "https://api.checkwx.com/taf/WSSS/decoded",
                headers={"X-API-Key": "test_key"},
            )

    @pytest.mark.asyncio
    async def test_get_taf_not_found(self, client: CheckWXClient) -> None:
        """Test an airport without forecasts returns None."""
        with patch.object(client, "_get_json", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = {"results": 0, "data": []}

            assert await client.get_taf("ZZZZ") is None

    def test_parse_metar_calm(self, client: CheckWXClient) -> None:
        """Test decoded calm wind."""
        metar = client.parse_metar(
            "WSSS", {"raw_text": "", "wind": {"degrees": 0, "speed_kts": 0}}
        )

        assert metar.wind is not None
        assert metar.wind.is_calm is True
        assert metar.wind.direction is None
        assert metar.wind_observation().is_variable is True

    @pytest.mark.parametrize("degrees", ["inf", "NaN", 1e400])
    def test_parse_metar_non_finite_direction(
        self, client: CheckWXClient, degrees: object
    ) -> None:
        """Test a non-finite wind direction is treated as unknown."""
        metar = client.parse_metar(
            "WSSS", {"raw_text": "", "wind": {"degrees": degrees, "speed_kts": 8}}
        )

        assert metar.wind is not None
        assert metar.wind.direction is None
        assert metar.wind.speed == 8
        assert metar.wind_observation().is_variable is True

    def test_parse_metar_minimal(self, client: CheckWXClient) -> None:
        """Test a report with almost nothing decoded."""
        metar = client.parse_metar("WSSS", {})

        assert metar.icao == "WSSS"
        assert metar.wind is None
        assert metar.clouds == []
        assert metar.visibility is None
