"""
Configuration module for sheetmap.
All settings are loaded from environment variables (prefix SHEETMAP_) or .env.
"""
from functools import lru_cache
from pathlib import Path
from typing import Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SHEETMAP_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_DIR: Path = Field(default=Path("./logs"), description="Directory for log files")

    # Output
    DEFAULT_SINK: str = Field(
        default="openpyxl",
        description="Sink implementation used when none is given: 'openpyxl' or 'memory'"
    )
    OUTPUT_DIR: Path = Field(
        default=Path("./output"),
        description="Directory of the default output file when no output path is given"
    )

    # Number formats
    # Format tags found here are replaced by the mapped Excel format code
    NUMBER_FORMAT_ALIASES: Dict[str, str] = Field(
        default={
            "currency": '"$"#,##0.00',
            "percent": "0.00%",
            "date": "yyyy-mm-dd",
            "datetime": "yyyy-mm-dd hh:mm:ss",
        },
        description="Named format tags and the Excel number format they expand to"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is one the logging module knows."""
        level = str(v).upper()
        if level not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return level

    @field_validator("DEFAULT_SINK")
    @classmethod
    def validate_default_sink(cls, v):
        """Ensure default sink is valid."""
        if v not in ["openpyxl", "memory"]:
            raise ValueError("DEFAULT_SINK must be 'openpyxl' or 'memory'")
        return v


@lru_cache()
def get_settings() -> Settings:
    """Get the global settings instance."""
    return Settings()
