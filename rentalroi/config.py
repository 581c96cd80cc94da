"""
Engine configuration using Pydantic Settings.
"""

import logging
import os
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def get_env_file() -> str:
    """Determine which env file to use based on environment."""
    env = os.getenv("RENTALROI_ENV", "development")
    if env == "production":
        return ".env.production"
    return ".env.development"


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RENTALROI_",
        env_file=get_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "RentalROI Calculation Engine"
    log_level: str = "WARNING"

    # Property type used when a caller builds inputs without naming one
    default_property_type: str = "single_family"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Apply the configured log level to the package logger.

    Args:
        level: Explicit level name; defaults to ``Settings.log_level``

    Returns:
        The ``rentalroi`` logger
    """
    logger = logging.getLogger("rentalroi")
    logger.setLevel((level or get_settings().log_level).upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s")
        )
        logger.addHandler(handler)
    return logger
