"""
Configuration management using Pydantic Settings.

Loads environment variables with validation, defaults, and type safety.
The BioGRID access key is validated explicitly at server startup via
Settings.validate_credentials() rather than at import time.
"""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file explicitly before creating Settings instance
# Search for .env file in project root (parent of src/)
_current_file = Path(__file__)
_project_root = _current_file.parent.parent.parent
_env_file = _project_root / ".env"

# Load .env file if it exists (don't error if missing)
load_dotenv(dotenv_path=_env_file, override=False)


class ConfigurationError(Exception):
    """Required configuration is missing or invalid."""

    pass


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    All settings except the access key have defaults and are validated on load.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown env vars
    )

    # ========================================================================
    # BioGRID Webservice Configuration
    # ========================================================================

    biogrid_api_key: Optional[str] = Field(
        default=None,
        description="BioGRID webservice access key (https://webservice.thebiogrid.org)",
    )
    biogrid_api_base: str = Field(
        default="https://webservice.thebiogrid.org",
        description="Base URL for the BioGRID REST webservice",
    )
    request_timeout_seconds: float = Field(
        default=20.0,
        ge=1.0,
        le=300.0,
        description="HTTP request timeout",
    )
    user_agent: str = Field(
        default="BioGRID-MCP-Server/1.0.0",
        description="User-Agent header sent with every upstream request",
    )

    # ========================================================================
    # MCP Server Configuration
    # ========================================================================

    mcp_server_name: str = Field(
        default="biogrid_mcp",
        description="MCP server name",
    )

    # ========================================================================
    # Logging Configuration
    # ========================================================================

    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: str = Field(
        default="text",
        description="Log format: json or text",
    )

    # ========================================================================
    # Validators
    # ========================================================================

    @field_validator("biogrid_api_base")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URL so endpoint paths can be appended."""
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of {valid_levels}"
            )
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        valid_formats = {"json", "text"}
        v_lower = v.lower()
        if v_lower not in valid_formats:
            raise ValueError(
                f"Invalid log format: {v}. Must be 'json' or 'text'"
            )
        return v_lower

    # ========================================================================
    # Computed Properties
    # ========================================================================

    @property
    def has_api_key(self) -> bool:
        """Check if a non-blank BioGRID access key is configured."""
        return bool(self.biogrid_api_key and self.biogrid_api_key.strip())

    def validate_credentials(self) -> "Settings":
        """
        Validate that the BioGRID access key is configured.

        Returns:
            This settings instance, for chaining

        Raises:
            ConfigurationError: If BIOGRID_API_KEY is missing or blank.
        """
        if self.has_api_key:
            return self

        error_msg = [
            "Missing BIOGRID_API_KEY environment variable.",
            "",
            "Request a free access key at https://webservice.thebiogrid.org/",
            "then either export BIOGRID_API_KEY=<your key> or add it to .env.",
            "",
        ]

        if _env_file.exists():
            error_msg.extend([
                f"Found .env file at: {_env_file}",
                "Please verify BIOGRID_API_KEY is set there.",
            ])
        else:
            error_msg.append(f"No .env file found at: {_env_file}")

        error_msg.append("\nSecurity Note: Never commit .env files to version control!")

        raise ConfigurationError("\n".join(error_msg))


# Global settings instance
# Loaded once at import time; credentials are validated by the server entrypoint
settings = Settings()
