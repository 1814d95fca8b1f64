"""Application settings and configuration management."""
from decimal import Decimal
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Flat-file locations for inventory and reservation records."""

    inventory_file: Path = Path("Room Availability.txt")
    reservations_file: Path = Path("reservation.txt")
    encoding: str = "utf-8"

    model_config = SettingsConfigDict(env_prefix="AEROSTOP_STORAGE_")


class PricingSettings(BaseSettings):
    """Tax, currency and receipt numbering."""

    tax_rate: Decimal = Decimal("0.12")
    currency: str = "PHP"
    receipt_start: int = 1001

    model_config = SettingsConfigDict(env_prefix="AEROSTOP_PRICING_")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "console"] = "console"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    """Main application settings."""

    hotel_name: str = "Aerostop Hotel"

    # Sub-settings
    storage: StorageSettings = StorageSettings()
    pricing: PricingSettings = PricingSettings()
    logging: LoggingSettings = LoggingSettings()

    model_config = SettingsConfigDict(
        env_prefix="AEROSTOP_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
