"""
Configuration Management for Book Log

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
With nothing set in the environment the program behaves exactly like the
fixed-path tool it replaces: state and export files live in the working
directory and the rate is $1 per 100 pages.
"""

import shlex
import sys
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Where the ledger and the export report are written."""

    model_config = SettingsConfigDict(
        env_prefix="BOOKLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    data_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory holding the ledger, export and log files"
    )
    data_file_name: str = Field(
        default="booklog.json",
        min_length=1,
        description="File name of the persisted ledger"
    )
    export_file_name: str = Field(
        default="BookLog_Export.txt",
        min_length=1,
        description="File name of the printable export report"
    )

    @property
    def data_file(self) -> Path:
        return self.data_dir / self.data_file_name

    @property
    def export_file(self) -> Path:
        return self.data_dir / self.export_file_name


class BillingSettings(BaseSettings):
    """Billing rate configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BOOKLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    rate_per_hundred_pages: int = Field(
        default=1,
        ge=0,
        description="Whole dollars owed for every full 100 unpaid pages"
    )


class ViewerSettings(BaseSettings):
    """External text viewer used to open the export report."""

    model_config = SettingsConfigDict(
        env_prefix="BOOKLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    viewer_command: Optional[str] = Field(
        default=None,
        description="Command line used to open the export (file path is appended)"
    )

    @property
    def viewer_args(self) -> list[str]:
        """Get the viewer command as an argument list."""
        if self.viewer_command:
            return shlex.split(self.viewer_command)
        return default_viewer_args()


class LoggingSettings(BaseSettings):
    """Log output configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BOOKLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    log_level: str = Field(
        default="INFO",
        description="Standard library log level name"
    )
    log_file_name: str = Field(
        default="booklog.log",
        min_length=1,
        description="Log file name, relative to the data directory"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept the standard level names."""
        level = v.strip().upper()
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if level not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {sorted(allowed)}")
        return level


def default_viewer_args(platform: Optional[str] = None) -> list[str]:
    """Pick the platform's plain-text viewer."""
    platform = platform or sys.platform
    if platform.startswith("win"):
        return ["notepad.exe"]
    if platform == "darwin":
        return ["open", "-t"]
    return ["xdg-open"]


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def storage(self) -> StorageSettings:
        return StorageSettings()

    @property
    def billing(self) -> BillingSettings:
        return BillingSettings()

    @property
    def viewer(self) -> ViewerSettings:
        return ViewerSettings()

    @property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()
