"""Process-wide inventory configuration.

Usage:
    from chem_inventory import get_config, validate_config

    validate_config()  # opt-in; raises ConfigurationError on placeholders
    config = get_config()
    sheet = config.spreadsheet_id

The record is built once at import and is immutable. Code that wants the
settings injected can call ``get_config()`` at its composition root and
pass the result down.
"""

from __future__ import annotations

from .adapters.config_env import load_app_config
from .core.config_model import InventoryConfig
from .core.validation import check_required_fields

CONFIG: InventoryConfig = load_app_config()


def get_config() -> InventoryConfig:
    return CONFIG


def validate_config(config: InventoryConfig | None = None) -> bool:
    """Check that the form and spreadsheet IDs have been filled in.

    Validates the process-wide config unless another one is given.
    Not called automatically on import.
    """
    return check_required_fields(CONFIG if config is None else config)
