"""Shared aiohttp client for the JSON data providers.

Each provider client owns (or borrows) one ClientSession and makes single
GET requests bounded by a total timeout. Failures are raised as
UpstreamError so callers decide whether a failure is an error or just
"no data".
"""

from typing import Any

import aiohttp

from fsops.core.errors import UpstreamError
from fsops.core.logging_system import get_logger

logger = get_logger(__name__)


class JsonApiClient:
    """Base class for read-only JSON API clients.

    Attributes:
        provider: Short provider name used in logs and errors.
        timeout: Total request timeout in seconds.
    """

    provider = "http"

    def __init__(self, timeout: float = 5.0, session: aiohttp.ClientSession | None = None) -> None:
        """Initialize client.

        Args:
            timeout: Total request timeout in seconds.
            session: Optional shared HTTP session. When omitted, the client
                creates and owns one on first use.
        """
        self.timeout = timeout
        self._session = session
        self._owns_session = session is None

    async def _get_json(
        self,
        url: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET a URL and decode the JSON body.

        Args:
            url: URL to fetch.
            params: Query parameters (kept out of log messages).
            headers: Extra request headers.

        Returns:
            Decoded JSON document.

        Raises:
            UpstreamError: On timeout, transport error, non-200 status or
                undecodable body.
        """
        if self._session is None:
            self._session = aiohttp.ClientSession()
            self._owns_session = True

        try:
            async with self._session.get(
                url,
                params=params,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as response:
                if response.status != 200:
                    logger.debug(
                        "%s returned status %d for %s", self.provider, response.status, url
                    )
                    raise UpstreamError(
                        self.provider, f"HTTP {response.status}", status=response.status
                    )
                return await response.json(content_type=None)
        except TimeoutError as e:
            logger.debug("%s request timed out: %s", self.provider, url)
            raise UpstreamError(self.provider, "request timed out") from e
        except aiohttp.ClientError as e:
            logger.debug("%s request failed: %s - %s", self.provider, url, e)
            raise UpstreamError(self.provider, f"request failed: {e}") from e
        except ValueError as e:
            logger.debug("%s returned malformed JSON: %s - %s", self.provider, url, e)
            raise UpstreamError(self.provider, "malformed response body") from e

    async def close(self) -> None:
        """Close the HTTP session if this client owns it."""
        if self._session and self._owns_session:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> "JsonApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
