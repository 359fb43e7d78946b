"""Placeholder checks for the required Google identifiers."""

from __future__ import annotations

import logging

from ..errors import ConfigurationError
from .config_model import InventoryConfig

logger = logging.getLogger(__name__)

# Attribute name -> key used in the host script's settings object
REQUIRED_FIELDS: dict[str, str] = {
    "form_id": "FORM_ID",
    "spreadsheet_id": "SPREADSHEET_ID",
}

PLACEHOLDER_MARKERS: tuple[str, ...] = ("YOUR_", "_HERE")


def is_placeholder(value: str | None) -> bool:
    """True when a value is empty or still carries a template marker."""
    if not value:
        return True
    return any(marker in value for marker in PLACEHOLDER_MARKERS)


def check_required_fields(config: InventoryConfig) -> bool:
    """Raise ConfigurationError for the first required field left unset.

    Returns True and logs a confirmation when every required field holds
    a real value.
    """
    for attr, key in REQUIRED_FIELDS.items():
        if is_placeholder(getattr(config, attr, None)):
            raise ConfigurationError(key, "must be set with actual value")

    logger.info("✅ Configuration validated successfully")
    return True
