"""Configuration models.

Phase durations are fixed and intentionally absent from the configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class OutputConfig(BaseModel):
    """Output configuration for headless commands."""

    model_config = ConfigDict(validate_assignment=True)

    format: Literal["table", "json", "yaml"] = Field(default="table")
    color: bool = Field(default=True)


class UIConfig(BaseModel):
    """Textual UI configuration."""

    model_config = ConfigDict(validate_assignment=True)

    theme: Literal["dark", "light"] = Field(default="dark")


class LoggingConfig(BaseModel):
    """Application log configuration."""

    model_config = ConfigDict(validate_assignment=True)

    level: LogLevel = Field(default="INFO")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept lowercase level names."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


class AppConfig(BaseModel):
    """Main pomotodo configuration."""

    model_config = ConfigDict(validate_assignment=True)

    output: OutputConfig = Field(default_factory=OutputConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
