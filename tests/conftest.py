"""Top-level pytest configuration for the inventory service."""

import logging
import os

import pytest

from ivms_inventory.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def clean_inventory_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove inventory settings inherited from the developer's shell."""
    for name in list(os.environ):
        if name.upper().startswith("INVENTORY_"):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo ``configure_logging`` so records reach pytest's capture again."""
    yield

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True

