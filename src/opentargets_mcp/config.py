"""
Configuration management using Pydantic Settings.

Loads environment variables with validation, defaults, and type safety.
A single Settings value is built at process start and passed to the
components that need it.
"""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from opentargets_mcp.constants import DEFAULT_API_URL, SERVER_NAME

# Search for .env file in project root (parent of src/)
_current_file = Path(__file__)
_project_root = _current_file.parent.parent.parent
_env_file = _project_root / ".env"

# Load .env file if it exists (don't error if missing)
load_dotenv(dotenv_path=_env_file, override=False)


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    All settings have defaults; none are required.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",  # Ignore unknown env vars
    )

    # ========================================================================
    # Open Targets Platform
    # ========================================================================

    open_targets_api_url: str = Field(
        default=DEFAULT_API_URL,
        validation_alias="OPEN_TARGETS_API",
        description="Open Targets Platform GraphQL endpoint",
    )
    open_targets_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        validation_alias="OPEN_TARGETS_TIMEOUT",
        description="HTTP timeout in seconds (unset = wait indefinitely)",
    )

    # ========================================================================
    # MCP Server Configuration
    # ========================================================================

    mcp_server_name: str = Field(
        default=SERVER_NAME,
        description="MCP server name",
    )
    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Listening port (unused: transport is always stdio)",
    )

    # ========================================================================
    # Logging Configuration
    # ========================================================================

    log_level: str = Field(
        default="info",
        description="Logging level",
    )
    log_format: str = Field(
        default="text",
        description="Log format: json or text",
    )

    # ========================================================================
    # Development/Debug Configuration
    # ========================================================================

    mcp_debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    # ========================================================================
    # Validators
    # ========================================================================

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
    def effective_log_level(self) -> str:
        """Log level after applying the debug override."""
        return "DEBUG" if self.mcp_debug else self.log_level

    @property
    def transport(self) -> str:
        """Transport mode. Only stdio is served."""
        return "stdio"
