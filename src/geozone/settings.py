"""
Configuration module for GeoZone defaults and environment overrides.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings using Pydantic for validation
    and environment variable support.
    """

    # Network settings
    request_timeout: float = Field(
        default=30.0, description="Request timeout in seconds"
    )

    # Dispatcher settings
    max_workers: int = Field(
        default=4, description="Maximum number of background lookup workers"
    )

    # Default lookup configuration
    default_style: str = Field(default="none", description="Default GeoIP style")
    default_url: str = Field(default="", description="Default GeoIP endpoint")
    default_selector: str = Field(
        default="", description="Default selector for the GeoIP response"
    )

    # General settings
    log_level: str = Field(default="INFO", description="Logging level")

    model_config = {
        "env_prefix": "GEOZONE_",
        "case_sensitive": False,
    }

    @field_validator("max_workers")
    @classmethod
    def check_max_workers(cls, v):
        if v < 1:
            raise ValueError("max_workers must be at least 1")
        return v

    @field_validator("request_timeout")
    @classmethod
    def check_request_timeout(cls, v):
        if v <= 0:
            raise ValueError("request_timeout must be positive")
        return v


settings = Settings()
