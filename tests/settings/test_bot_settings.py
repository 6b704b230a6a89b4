"""Tests for environment-backed bot settings."""

from pathlib import Path
from unittest.mock import patch

import pytest

from fsops.settings import (
    DEFAULT_FOOTER,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_PORT,
    BotSettings,
    get_settings,
    reset_settings,
)


class TestBotSettings:
    """Tests for BotSettings.from_env."""

    def test_defaults(self) -> None:
        """Test an empty environment gives defaults."""
        settings = BotSettings.from_env({})

        assert settings.checkwx_key == ""
        assert settings.port == DEFAULT_PORT
        assert settings.http_timeout == DEFAULT_HTTP_TIMEOUT
        assert settings.footer == DEFAULT_FOOTER
        assert settings.runway_catalog_path is None
        assert settings.log_config_path is None

    def test_reads_environment(self) -> None:
        """Test every variable is read."""
        settings = BotSettings.from_env(
            {
                "DISCORD_TOKEN": "discord",
                "CHECKWX_KEY": "wx",
                "AVIATIONSTACK_KEY": "avs",
                "AIRPORTDB_TOKEN": "adb",
                "PORT": "8080",
                "HTTP_TIMEOUT": "2.5",
                "ANNOUNCE_ROLE_ID": "42",
                "BOOKING_EMOJI": ":ticket:",
                "SUPPORT_CONTACT": "@ops",
                "FSOPS_FOOTER": "Test Ops",
                "RUNWAY_CATALOG": "/etc/fsops/catalog.yaml",
                "FSOPS_LOG_CONFIG": "/etc/fsops/logging.yaml",
            }
        )

        assert settings.discord_token == "discord"
        assert settings.checkwx_key == "wx"
        assert settings.aviationstack_key == "avs"
        assert settings.airportdb_token == "adb"
        assert settings.port == 8080
        assert settings.http_timeout == 2.5
        assert settings.announce_role_id == "42"
        assert settings.booking_emoji == ":ticket:"
        assert settings.support_contact == "@ops"
        assert settings.footer == "Test Ops"
        assert settings.runway_catalog_path == Path("/etc/fsops/catalog.yaml")
        assert settings.log_config_path == Path("/etc/fsops/logging.yaml")

    @pytest.mark.parametrize("value", ["abc", "0", "-3", "1.5"])
    def test_invalid_port_uses_default(self, value: str) -> None:
        """Test malformed or non-positive ports fall back to the default."""
        assert BotSettings.from_env({"PORT": value}).port == DEFAULT_PORT

    @pytest.mark.parametrize("value", ["soon", "0", "-1"])
    def test_invalid_timeout_uses_default(self, value: str) -> None:
        """Test malformed or non-positive timeouts fall back to the default."""
        settings = BotSettings.from_env({"HTTP_TIMEOUT": value})
        assert settings.http_timeout == DEFAULT_HTTP_TIMEOUT

    def test_frozen(self) -> None:
        """Test settings cannot be changed after construction."""
        settings = BotSettings()
        with pytest.raises(AttributeError):
            settings.port = 1  # type: ignore[misc]


class TestSettingsSingleton:
    """Tests for get_settings/reset_settings."""

    @pytest.fixture(autouse=True)
    def clean_singleton(self):
        """Reset the singleton around each test."""
        reset_settings()
        yield
        reset_settings()

    def test_same_instance(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test repeated calls return the cached instance."""
        monkeypatch.setenv("CHECKWX_KEY", "first")
        with patch("fsops.settings.bot_settings.load_dotenv") as mock_load:
            first = get_settings()
            monkeypatch.setenv("CHECKWX_KEY", "second")
            second = get_settings()

            assert first is second
            assert second.checkwx_key == "first"
            mock_load.assert_called_once()

    def test_reset_reloads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test reset forces a reload from the environment."""
        with patch("fsops.settings.bot_settings.load_dotenv"):
            monkeypatch.setenv("CHECKWX_KEY", "first")
            get_settings()
            reset_settings()
            monkeypatch.setenv("CHECKWX_KEY", "second")

            assert get_settings().checkwx_key == "second"
