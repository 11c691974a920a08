# freightquote/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings.
    Loads values from environment variables (.env file)
    """
    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Rating engine
    CARRIER_SIMULATED_LATENCY: float = 0.5  # seconds per carrier call
    RATE_VALIDITY_HOURS: int = 24
    ALLOW_PARTIAL_RATES: bool = False  # Return surviving carriers' rates when one fails

    # HTTP layer
    QUOTE_TIMEOUT_SECONDS: float = 10.0
    CORS_ORIGINS: str = "http://localhost:3000"  # comma separated

    model_config = ConfigDict(
        env_file=os.environ.get('ENV_FILE', '.env') if os.path.exists('.env') else None,
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache()
def get_settings():
    """Cached settings to avoid loading .env file for every request"""
    return Settings()

def clear_settings_cache():
    """Clear the settings cache - useful when switching between environments"""
    get_settings.cache_clear()
