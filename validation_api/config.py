"""
Configuration module for the request validation API.

Loads environment variables and validates required settings.
"""
import logging
import os
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Server Settings (used by serve.py)
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: str = os.getenv("PORT", "8000")

    # CORS Settings (only consulted in production)
    CORS_ALLOWED_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")
        if origin.strip()
    ]

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for LOG_LEVEL (falls back to INFO)."""
        level = logging.getLevelName(self.LOG_LEVEL.upper())
        return level if isinstance(level, int) else logging.INFO

    @property
    def port_value(self) -> int:
        """PORT as an integer."""
        return int(self.PORT)

    @classmethod
    def validate(cls) -> None:
        """
        Validate that all settings hold usable values.

        Raises:
            ValueError: If LOG_LEVEL or PORT is invalid.
        """
        problems = []

        if not isinstance(logging.getLevelName(cls.LOG_LEVEL.upper()), int):
            problems.append(f"LOG_LEVEL={cls.LOG_LEVEL!r} is not a logging level")

        if not cls.PORT.isdigit():
            problems.append(f"PORT={cls.PORT!r} is not an integer")

        if problems:
            raise ValueError(
                f"Invalid environment configuration: {'; '.join(problems)}. "
                "Please check your .env file."
            )

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT.lower() == "development"


# Create a singleton instance
settings = Settings()

# Validate settings on module import (fail fast outside development)
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        if settings.is_development():
            print(f"Warning: {e}")
        else:
            raise
