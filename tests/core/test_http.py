"""Tests for the shared JSON API client."""

import pytest
from aiohttp import ClientSession, web
from aiohttp.test_utils import TestServer

from fsops.core.errors import UpstreamError
from fsops.core.http import JsonApiClient


async def _ok(request: web.Request) -> web.Response:
    return web.json_response({"query": dict(request.query), "key": request.headers.get("X-Key")})


async def _broken(request: web.Request) -> web.Response:
    return web.Response(status=503, text="maintenance")


def _app() -> web.Application:
    app = web.Application()
    app.router.add_get("/ok", _ok)
    app.router.add_get("/broken", _broken)
    return app


class TestJsonApiClient:
    """Tests for JsonApiClient."""

    @pytest.mark.asyncio
    async def test_get_json(self) -> None:
        """Test params and headers are sent and the body decoded."""
        async with TestServer(_app()) as server:
            async with JsonApiClient(timeout=2.0) as client:
                body = await client._get_json(
                    str(server.make_url("/ok")), params={"a": "1"}, headers={"X-Key": "k"}
                )

        assert body == {"query": {"a": "1"}, "key": "k"}

    @pytest.mark.asyncio
    async def test_error_status(self) -> None:
        """Test non-200 responses raise UpstreamError with the status."""
        async with TestServer(_app()) as server:
            async with JsonApiClient(timeout=2.0) as client:
                with pytest.raises(UpstreamError) as exc_info:
                    await client._get_json(str(server.make_url("/broken")))

        assert exc_info.value.status == 503
        assert exc_info.value.provider == "http"

    @pytest.mark.asyncio
    async def test_connection_refused(self) -> None:
        """Test transport failures raise UpstreamError."""
        async with TestServer(_app()) as server:
            url = str(server.make_url("/ok"))

        async with JsonApiClient(timeout=2.0) as client:
            with pytest.raises(UpstreamError):
                await client._get_json(url)

    @pytest.mark.asyncio
    async def test_shared_session_not_closed(self) -> None:
        """Test a borrowed session is left open."""
        async with ClientSession() as session:
            client = JsonApiClient(session=session)
            await client.close()

            assert session.closed is False

    @pytest.mark.asyncio
    async def test_owned_session_closed(self) -> None:
        """Test a session created by the client is closed with it."""
        async with TestServer(_app()) as server:
            client = JsonApiClient()
            await client._get_json(str(server.make_url("/ok")))
            session = client._session
            await client.close()

        assert session is not None
        assert session.closed is True
