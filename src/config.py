"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Parking lot layout
    parking_levels: int = 3
    slots_per_level: int = 10

    # API
    rate_limit: str = "100/minute"

    # Logging
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
