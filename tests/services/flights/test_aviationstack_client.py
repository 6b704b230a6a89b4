"""Tests for the AviationStack flight client."""

from unittest.mock import AsyncMock, patch

import pytest

from fsops.core.errors import MissingCredentialsError, UpstreamError
from fsops.services.flights.aviationstack_client import AviationStackClient

SQ108 = {
    "flight": {"iata": "SQ108", "icao": "SIA108"},
    "departure": {
        "airport": "Singapore Changi",
        "iata": "SIN",
        "terminal": "3",
        "gate": "B5",
        "scheduled": "2025-03-01T07:45:00+00:00",
        "estimated": "2025-03-01T07:45:00+00:00",
        "actual": None,
    },
    "arrival": {
        "airport": "Kuala Lumpur International",
        "iata": "KUL",
        "terminal": "1",
        "gate": None,
        "scheduled": "2025-03-01T08:50:00+00:00",
    },
    "aircraft": {"registration": "9V-MBA", "iata": "A359", "icao": "A359"},
}


class TestAviationStackClient:
    """Tests for AviationStackClient."""

    @pytest.fixture
    def client(self) -> AviationStackClient:
        """Create test client."""
        return AviationStackClient(api_key="test_key", timeout=1.0)

    @pytest.mark.asyncio
    async def test_search(self, client: AviationStackClient) -> None:
        """Test a successful flight search."""
        with patch.object(client, "_get_json", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = {"data": [SQ108]}

            flight = await client.search("SQ108")

            assert flight is not None
            assert flight.iata == "SQ108"
            assert flight.departure.iata == "SIN"
            assert flight.departure.gate == "B5"
            assert flight.arrival.airport == "Kuala Lumpur International"
            assert flight.aircraft_type == "A359"
            assert flight.registration == "9V-MBA"
            mock_get.assert_called_once_with(
                "http://api.aviationstack.com/v1/flights",
                params={"access_key": "test_key", "flight_iata": "SQ108"},
            )

    @pytest.mark.asyncio
    async def test_search_not_found(self, client: AviationStackClient) -> None:
        """Test an unknown flight returns None."""
        with patch.object(client, "_get_json", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = {"data": []}

            assert await client.search("XX999") is None

    @pytest.mark.asyncio
    async def test_search_api_error(self, client: AviationStackClient) -> None:
        """Test an error object in the body raises UpstreamError."""
        with patch.object(client, "_get_json", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = {
                "error": {"code": "invalid_access_key", "message": "Invalid access key"}
            }

            with pytest.raises(UpstreamError, match="Invalid access key"):
                await client.search("SQ108")

    @pytest.mark.asyncio
    async def test_missing_api_key(self) -> None:
        """Test a missing key raises before any request."""
        client = AviationStackClient(api_key="")
        with patch.object(client, "_get_json", new_callable=AsyncMock) as mock_get:
            with pytest.raises(MissingCredentialsError):
                await client.search("SQ108")

            mock_get.assert_not_called()

    def test_parse_flight_partial(self) -> None:
        """Test entries with missing sections."""
        flight = AviationStackClient.parse_flight({"aircraft": {"iata": "B38M"}}, "TR500")

        assert flight.iata == "TR500"
        assert flight.aircraft_type == "B38M"
        assert flight.registration is None
        assert flight.departure.scheduled is None
        assert flight.arrival.actual is None
