"""Settings of the inventory data-access layer."""

from __future__ import annotations

from pydantic import AliasChoices, Field, PositiveFloat, PositiveInt, ValidationError
from pydantic_settings import SettingsConfigDict

from ivms_inventory.config.base import Config
from ivms_inventory.config.errors import (
    CONFIG_MISSING_KEY,
    CONFIG_VALIDATION_ERROR,
    ConfigurationError,
)


class InventorySettings(Config):
    """Process configuration for the inventory functions.

    Settings are read from environment variables with the ``INVENTORY_``
    prefix; the table name comes from ``INVENTORY_TABLE`` and the region from
    the standard AWS variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="INVENTORY_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        frozen=True,
    )

    table_name: str = Field(
        min_length=1,
        validation_alias=AliasChoices("INVENTORY_TABLE"),
        description="Name of the DynamoDB inventory table",
    )
    region: str | None = Field(
        default=None,
        validation_alias=AliasChoices("AWS_REGION", "AWS_DEFAULT_REGION"),
    )
    endpoint_url: str | None = Field(
        default=None, description="Alternative DynamoDB endpoint, e.g. DynamoDB Local"
    )
    query_limit: PositiveInt | None = Field(
        default=None, description="Maximum number of items evaluated per list page"
    )
    connect_timeout: PositiveFloat = 5.0
    read_timeout: PositiveFloat = 10.0
    max_attempts: PositiveInt = 3


def load_settings(**overrides: object) -> InventorySettings:
    """Load inventory settings from the environment.

    Args:
        **overrides: Explicit values taking precedence over the environment

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If a required setting is missing or a value is invalid
    """
    try:
        return InventorySettings(**overrides)
    except ValidationError as e:
        missing = [
            ".".join(str(part) for part in error["loc"])
            for error in e.errors()
            if error["type"] == "missing"
        ]
        if missing:
            raise ConfigurationError(
                f"Missing required settings: {', '.join(missing)}",
                code=CONFIG_MISSING_KEY,
                missing=missing,
            ) from e
        raise ConfigurationError(
            f"Invalid inventory settings: {e.error_count()} validation error(s)",
            code=CONFIG_VALIDATION_ERROR,
        ) from e
