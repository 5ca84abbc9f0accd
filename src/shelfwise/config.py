"""Configuration management for the Shelfwise server.

Settings come from, in order of precedence:
1. Keyword arguments (tests and scripts)
2. Environment variables prefixed with ``SHELFWISE_``
3. A ``.env`` file in the working directory
4. The defaults below
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerConfig(BaseSettings):
    """Shelfwise server configuration.

    Covers server identification for the MCP handshake, the transport, where
    library state is persisted between runs, and logging/tracing.
    """

    model_config = SettingsConfigDict(
        env_prefix="SHELFWISE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Server Metadata ===

    server_name: str = Field(
        default="shelfwise",
        description="MCP server name used in protocol handshake",
        pattern=r"^[a-z0-9-]+$",
    )

    server_version: str = Field(
        default="0.1.0",
        description="Server version for capability negotiation",
        pattern=r"^\d+\.\d+\.\d+(-[a-zA-Z0-9.]+)?$",
    )

    # === Transport Configuration ===

    transport: str = Field(
        default="stdio",
        description="Primary transport mechanism",
        pattern=r"^(stdio|streamable_http)$",
    )

    http_host: str = Field(
        default="127.0.0.1",
        description="HTTP server host for Streamable HTTP transport",
    )

    http_port: int = Field(
        default=8080,
        description="HTTP server port for Streamable HTTP transport",
        ge=1024,
        le=65535,
    )

    # === Persistence ===

    snapshot_path: Path = Field(
        default=Path("data/shelfwise.db"),
        description="SQLite file holding the saved library state",
    )

    seed_sample_data: bool = Field(
        default=True,
        description="Seed the sample library when no saved state exists",
    )

    # === Library Behaviour ===

    recommendation_limit: int = Field(
        default=5,
        description="Default number of recommendations returned",
        ge=1,
        le=50,
    )

    # === Logging and Tracing ===

    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    environment: str = Field(
        default="development",
        description="Deployment environment reported to Logfire",
    )

    logfire_enabled: bool = Field(
        default=False,
        description="Configure Logfire tracing at startup",
    )

    logfire_send: bool = Field(
        default=False,
        description="Send spans to the Logfire backend (requires a token)",
    )

    logfire_token: str | None = Field(
        default=None,
        description="Logfire write token",
        repr=False,
    )

    @field_validator("snapshot_path")
    @classmethod
    def validate_snapshot_path(cls, v: Path) -> Path:
        """Resolve the snapshot path and make sure its directory exists."""
        abs_path = v.absolute()
        abs_path.parent.mkdir(parents=True, exist_ok=True)
        if not abs_path.parent.is_dir():
            raise ValueError(f"Snapshot directory {abs_path.parent} is not accessible")
        return abs_path

    @field_validator("server_name")
    @classmethod
    def validate_server_name(cls, v: str) -> str:
        if len(v) < 3:
            raise ValueError("Server name must be at least 3 characters")
        if len(v) > 50:
            raise ValueError("Server name must not exceed 50 characters")
        return v

    # === Computed Properties ===

    @property
    def is_development(self) -> bool:
        return self.debug or self.log_level == "DEBUG"

    def get_database_url(self) -> str:
        """SQLAlchemy URL of the snapshot store."""
        return f"sqlite:///{self.snapshot_path}"


class _ConfigStore:
    """Internal storage for the configuration instance."""

    _instance: ServerConfig | None = None


def get_config() -> ServerConfig:
    """Get or create the configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = ServerConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Drop the cached configuration (used by tests)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]
