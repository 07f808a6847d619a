"""
docvcs.config
Configuration and settings management for the docvcs storage engine.
Overview:
- Provides Pydantic-based settings classes for the storage adapter, the fallback
    identity, and logging.
- Each settings class inherits from FactoryBaseSettings and supports environment variable
    overrides via Field aliases.
Contents:
- Settings Classes:
    - AppSettings:
        Application root, environment name and derived data/log directories.
    - StorageSettings:
        Whether persistence is enabled, the SQLite database path, the collection key
        prefix and the default commit history page size.
    - IdentitySettings:
        The fallback user identity used for commit attribution.
    - LoggingSettings:
        Log level and JSON log file location.
- Functions:
    - get_settings: Cached factory for any settings class (re-exported).
Design Notes:
- Default values are provided for all fields enabling zero-configuration startup.
- The default database path and log file live under AppSettings.data_dir, so
    DOCVCS_DATA_DIR (from the environment, .env or YAML) relocates both.
- `db_path=":memory:"` selects an in-process SQLite database that lives as long as
    the adapter holding it.
"""

from pathlib import Path

from pydantic import Field, field_validator

from .base import APP_ENV, APP_ROOT, DATA_DIR
from .factory import FactoryBaseSettings, get_settings


class AppSettings(FactoryBaseSettings):
    """Application configuration settings."""

    app_root: Path = Field(
        default=Path(APP_ROOT),
        description="Root directory of the application.",
    )
    environment: str = Field(
        default=APP_ENV,
        description="Current application environment (prod, docker, dev).",
        alias="ENVIRONMENT",
    )
    data_dir: Path = Field(
        default=DATA_DIR,
        description="Directory holding the local database.",
        alias="DOCVCS_DATA_DIR",
    )

    @property
    def logs_dir(self) -> Path:
        """Base directory for logs."""
        return self.data_dir / "logs"


class StorageSettings(FactoryBaseSettings):
    """
    Persistent key-value store settings.
    """

    enabled: bool = Field(
        default=True,
        description="Disable to run without persistence (reads are empty, writes are no-ops).",
        alias="DOCVCS_STORAGE_ENABLED",
    )
    db_path: str = Field(
        default_factory=lambda: str(get_settings(AppSettings).data_dir / "docvcs.db"),
        description="Path to the SQLite database file, or ':memory:'.",
        alias="DOCVCS_DB_PATH",
    )
    key_prefix: str = Field(
        default="",
        description="Prefix prepended to every collection key.",
        alias="DOCVCS_KEY_PREFIX",
    )
    history_limit: int = Field(
        default=50,
        ge=1,
        description="Default number of commits returned by a history listing.",
        alias="DOCVCS_HISTORY_LIMIT",
    )

    @field_validator("db_path", mode="before")
    def coerce_path(cls, v):
        if isinstance(v, Path):
            return v.as_posix()
        return v

    @property
    def in_memory(self) -> bool:
        """True when the database only lives in process memory."""
        return self.db_path == ":memory:"


class IdentitySettings(FactoryBaseSettings):
    """
    Fallback identity used for commit attribution.
    """

    user_id: str = Field(
        default="demo-user",
        description="Identifier of the local user.",
        alias="DOCVCS_USER_ID",
    )
    user_email: str = Field(
        default="demo@kanedocs.com",
        description="Email recorded as commit author and repository owner.",
        alias="DOCVCS_USER_EMAIL",
    )
    user_name: str = Field(
        default="Demo User",
        description="Display name recorded as commit author.",
        alias="DOCVCS_USER_NAME",
    )


class LoggingSettings(FactoryBaseSettings):
    """
    Logging configuration settings.
    """

    log_level: str = Field(
        default="info",
        description="Log level for the docvcs logger.",
        alias="DOCVCS_LOG_LEVEL",
    )
    log_file: Path = Field(
        default_factory=lambda: get_settings(AppSettings).logs_dir / "docvcs.jsonl",
        description="JSON lines log file.",
        alias="DOCVCS_LOG_FILE",
    )
    log_to_file: bool = Field(
        default=True,
        description="Write JSON logs to log_file in addition to the console.",
        alias="DOCVCS_LOG_TO_FILE",
    )


__all__ = [
    "AppSettings",
    "IdentitySettings",
    "LoggingSettings",
    "StorageSettings",
    "get_settings",
]
