"""Core infrastructure shared by all FS Operations services."""

from fsops.core.errors import (
    FSOpsError,
    InvalidAirportIdError,
    InvalidScheduleError,
    MissingCredentialsError,
    UpstreamError,
)
from fsops.core.logging_system import get_logger, initialize_logging

__all__ = [
    "FSOpsError",
    "InvalidAirportIdError",
    "InvalidScheduleError",
    "MissingCredentialsError",
    "UpstreamError",
    "get_logger",
    "initialize_logging",
]
