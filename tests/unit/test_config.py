"""
Unit tests for Settings.

Run with: pytest tests/unit/test_config.py -v
"""

import pytest
from pydantic import ValidationError

from biogrid_mcp.config import ConfigurationError, Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from the developer's environment."""
    for var in (
        "BIOGRID_API_KEY",
        "BIOGRID_API_BASE",
        "REQUEST_TIMEOUT_SECONDS",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)


def make_settings(**kwargs) -> Settings:
    return Settings(_env_file=None, **kwargs)


class TestCredentials:
    """Explicit startup validation of the access key."""

    def test_missing_key(self):
        settings = make_settings()

        assert settings.has_api_key is False
        with pytest.raises(ConfigurationError, match="BIOGRID_API_KEY"):
            settings.validate_credentials()

    def test_blank_key(self):
        with pytest.raises(ConfigurationError):
            make_settings(biogrid_api_key="   ").validate_credentials()

    def test_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("BIOGRID_API_KEY", "from-env")

        settings = make_settings()

        assert settings.validate_credentials() is settings
        assert settings.biogrid_api_key == "from-env"


class TestDefaults:
    """Defaults and validators."""

    def test_defaults(self):
        settings = make_settings()

        assert settings.biogrid_api_base == "https://webservice.thebiogrid.org"
        assert settings.request_timeout_seconds == 20.0
        assert settings.mcp_server_name == "biogrid_mcp"
        assert settings.log_level == "INFO"
        assert settings.log_format == "text"

    def test_base_url_trailing_slash_stripped(self):
        settings = make_settings(biogrid_api_base="https://example.org/")

        assert settings.biogrid_api_base == "https://example.org"

    def test_log_level_normalized(self):
        assert make_settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            make_settings(log_level="verbose")

    def test_invalid_log_format(self):
        with pytest.raises(ValidationError):
            make_settings(log_format="xml")

    @pytest.mark.parametrize("timeout", [0, 301])
    def test_timeout_bounds(self, timeout):
        with pytest.raises(ValidationError):
            make_settings(request_timeout_seconds=timeout)
