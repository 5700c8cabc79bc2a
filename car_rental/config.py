"""Configuration settings for the car rental desk."""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Application
    app_name: str = "car-rental"
    app_version: str = "1.0.0"
    log_level: str = "WARNING"  # INFO and below would interleave with the menu

    # Pricing
    tax_rate: float = Field(default=0.18, ge=0)
    currency_symbol: str = "Rs."

    # Customers
    customer_id_prefix: str = "CUS-"

    # Startup
    seed_fleet: bool = True


settings = Settings()
