"""Configuration management using pydantic-settings."""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and config file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Salary scraping
    salary_order: Literal["max_first", "min_first"] = Field(
        default="max_first",
        description="Which bound the source site lists first in a salary range",
    )
    default_currency: str = Field(
        default="USD",
        description="Currency assumed for scraped salaries",
    )

    # Manual entry
    money_strip_thousands: bool = Field(
        default=False,
        description="Strip comma thousands separators from typed amounts",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Root log level when --verbose is not given",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (useful for testing)."""
    global _settings
    _settings = None
