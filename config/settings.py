"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Settings(BaseSettings):
    """Name generator settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="NAMEGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="TTRPG Name Generator")
    debug: bool = Field(default=False)

    # Logging
    log_level: str = Field(default="WARNING")
    log_file: Optional[str] = Field(default=None)

    # Generation
    default_seed: Optional[int] = Field(default=None)
    custom_themes_dir: Optional[Path] = Field(default=None)

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


# Global settings instance
settings = Settings()
