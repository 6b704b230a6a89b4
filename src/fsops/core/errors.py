"""Exception hierarchy for FS Operations.

Runway inference never raises; its failures are reported as a tagged
result. Everything else that can go wrong inside a command derives from
FSOpsError so the command layer can turn it into an ephemeral reply.
"""

import re

AIRPORT_ID_PATTERN = re.compile(r"^[A-Z0-9]{4}$")


class FSOpsError(Exception):
    """Base class for all FS Operations errors."""


class InvalidAirportIdError(FSOpsError, ValueError):
    """Airport identifier is not a 4-character alphanumeric code."""

    def __init__(self, airport_id: str) -> None:
        super().__init__(f"Invalid airport identifier: {airport_id!r}")
        self.airport_id = airport_id


class UpstreamError(FSOpsError):
    """A third-party data provider failed or returned an unusable body.

    Attributes:
        provider: Short provider name (e.g., "checkwx").
        status: HTTP status code, if a response was received.
    """

    def __init__(self, provider: str, message: str, status: int | None = None) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider
        self.status = status


class MissingCredentialsError(FSOpsError):
    """An API key required by a provider is not configured."""

    def __init__(self, setting: str) -> None:
        super().__init__(f"{setting} is not configured")
        self.setting = setting


class InvalidScheduleError(FSOpsError, ValueError):
    """Announcement time is not in YYYY-MM-DD HH:MM format."""


def normalize_airport_id(airport_id: str) -> str:
    """Normalize an airport identifier to upper case and validate it.

    Args:
        airport_id: Airport code as typed by a user (e.g., "wsss").

    Returns:
        Upper-cased identifier.

    Raises:
        InvalidAirportIdError: If the code is not 4 alphanumeric characters.
    """
    normalized = (airport_id or "").strip().upper()
    if not AIRPORT_ID_PATTERN.match(normalized):
        raise InvalidAirportIdError(airport_id)
    return normalized
