"""Base configuration class for the inventory service.

All settings classes inherit from ``Config`` so that they share environment
handling: unknown variables are ignored, assignments are validated and fields
may be populated either by their environment alias or by name.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Base class for all configuration settings."""

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        validate_assignment=True,
    )
