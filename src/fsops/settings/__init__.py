"""Runtime settings for FS Operations.

Settings come from environment variables, optionally loaded from a .env
file in the working directory.
"""

from fsops.settings.bot_settings import (
    DEFAULT_FOOTER,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_PORT,
    BotSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "BotSettings",
    "DEFAULT_FOOTER",
    "DEFAULT_HTTP_TIMEOUT",
    "DEFAULT_PORT",
    "get_settings",
    "reset_settings",
]
