"""
Configuration models for tg-bot-models.

This module contains Pydantic models for configuration validation.
"""

from typing import Literal

from pydantic import BaseModel, Field

from tg_bot_models.constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_MAX_BYTES,
)


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default=DEFAULT_LOG_LEVEL, description="Log level")
    format: Literal["json", "text"] = Field(default=DEFAULT_LOG_FORMAT, description="Log format (json or text)")
    file: str = Field(default="", description="Log file path (empty disables file logging)")
    max_bytes: int = Field(default=DEFAULT_LOG_MAX_BYTES, ge=1, description="Max log file size in bytes")
    backup_count: int = Field(default=DEFAULT_LOG_BACKUP_COUNT, ge=0, description="Number of backup files")


class OutputConfig(BaseModel):
    """Pretty-printing options for documents shown by the CLI."""

    indent: int = Field(default=2, ge=0, description="JSON indentation")
    ensure_ascii: bool = Field(default=False, description="Escape non-ASCII characters")
    sort_keys: bool = Field(default=False, description="Sort object keys")


class AppConfig(BaseModel):
    """Complete tg-bot-models configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
