"""Bot settings loaded from the environment.

API keys and deployment options are read from environment variables.
A .env file, if present, is loaded first without overriding variables
already set in the process environment.

Typical usage:
    from fsops.settings import get_settings

    settings = get_settings()
    client = CheckWXClient(settings.checkwx_key, timeout=settings.http_timeout)
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from fsops.core.logging_system import get_logger

logger = get_logger(__name__)

DEFAULT_PORT = 5000
DEFAULT_HTTP_TIMEOUT = 5.0
DEFAULT_FOOTER = "FS Operations Virtual"
DEFAULT_BOOKING_EMOJI = "<:RSBST:1367435672658640946>"
DEFAULT_ANNOUNCE_ROLE_ID = "1394622346933043292"
DEFAULT_SUPPORT_CONTACT = "@SG1695B_Avgeek"


@dataclass(frozen=True)
class BotSettings:
    """Deployment settings for the bot.

    Attributes:
        discord_token: Chat platform bot token (used by the platform adapter).
        checkwx_key: CheckWX API key for METAR/TAF.
        aviationstack_key: AviationStack access key for flight search.
        airportdb_token: AirportDB API token for runway inference.
        port: Port of the liveness HTTP endpoint.
        http_timeout: Timeout in seconds for every upstream request.
        announce_role_id: Role pinged by flight announcements.
        booking_emoji: Reaction emoji used for booking and check-in.
        support_contact: Who users should contact about errors.
        footer: Footer text for embeds (FSOPS_FOOTER).
        runway_catalog_path: Optional YAML file replacing the packaged catalog.
        log_config_path: Optional YAML logging configuration.
    """

    discord_token: str = ""
    checkwx_key: str = ""
    aviationstack_key: str = ""
    airportdb_token: str = ""
    port: int = DEFAULT_PORT
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    announce_role_id: str = DEFAULT_ANNOUNCE_ROLE_ID
    booking_emoji: str = DEFAULT_BOOKING_EMOJI
    support_contact: str = DEFAULT_SUPPORT_CONTACT
    footer: str = DEFAULT_FOOTER
    runway_catalog_path: Path | None = None
    log_config_path: Path | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "BotSettings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            BotSettings instance.
        """
        env = os.environ if environ is None else environ

        catalog = env.get("RUNWAY_CATALOG", "")
        log_config = env.get("FSOPS_LOG_CONFIG", "")

        return cls(
            discord_token=env.get("DISCORD_TOKEN", ""),
            checkwx_key=env.get("CHECKWX_KEY", ""),
            aviationstack_key=env.get("AVIATIONSTACK_KEY", ""),
            airportdb_token=env.get("AIRPORTDB_TOKEN", ""),
            port=_parse_number(env, "PORT", int, DEFAULT_PORT),
            http_timeout=_parse_number(env, "HTTP_TIMEOUT", float, DEFAULT_HTTP_TIMEOUT),
            announce_role_id=env.get("ANNOUNCE_ROLE_ID", DEFAULT_ANNOUNCE_ROLE_ID),
            booking_emoji=env.get("BOOKING_EMOJI", DEFAULT_BOOKING_EMOJI),
            support_contact=env.get("SUPPORT_CONTACT", DEFAULT_SUPPORT_CONTACT),
            footer=env.get("FSOPS_FOOTER", DEFAULT_FOOTER),
            runway_catalog_path=Path(catalog) if catalog else None,
            log_config_path=Path(log_config) if log_config else None,
        )


def _parse_number(env: Mapping[str, str], key: str, kind: type, default: int | float):
    """Parse a numeric environment variable, falling back on bad input."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        value = kind(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, using default %s", key, raw, default)
        return default
    if value <= 0:
        logger.warning("%s must be positive, using default %s", key, default)
        return default
    return value


# Global singleton instance
_global_settings: BotSettings | None = None


def get_settings() -> BotSettings:
    """Get the global settings singleton.

    Loads .env and reads the environment on first access.

    Returns:
        BotSettings instance.
    """
    global _global_settings
    if _global_settings is None:
        load_dotenv()
        _global_settings = BotSettings.from_env()
    return _global_settings


def reset_settings() -> None:
    """Reset the global settings singleton.

    Forces reload on next access.
    """
    global _global_settings
    _global_settings = None
