"""
Configuration management using Pydantic settings.
Handles server, API prefix, CORS and logging options from environment variables.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import List
from functools import lru_cache
import logging


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application configuration
    app_name: str = "Rental Property API"
    app_version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False

    # Logging configuration
    log_level: str = "INFO"
    enable_request_logging: bool = True

    # API configuration
    api_prefix: str = "/api"
    cors_origins: List[str] = ["*"]
    max_request_size: int = 10 * 1024 * 1024  # 10MB

    # Server configuration
    host: str = "0.0.0.0"
    port: int = 3000

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment setting."""
        allowed_envs = ["development", "testing", "staging", "production"]
        if v not in allowed_envs:
            raise ValueError(f"Environment must be one of: {allowed_envs}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Normalize the log level and make sure logging knows it."""
        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, v):
        """API prefix must start with a slash and never end with one."""
        v = v.strip()
        if not v:
            return ""
        if not v.startswith("/"):
            v = "/" + v
        return v.rstrip("/")

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == "testing"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures we only create one instance of settings throughout the app lifecycle.
    """
    return Settings()
