"""Env configuration adapter producing a structured InventoryConfig."""

from __future__ import annotations

from .. import config as config_module
from ..config import ENV_PREFIX
from ..core.config_model import Environment, FeatureFlags, InventoryConfig, SystemSettings
from ..errors import ConfigurationError

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: str) -> bool:
    normalized = str(value).strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    raise ConfigurationError(ENV_PREFIX + name, f"must be a boolean, got {value!r}")


def _parse_environment(value: str) -> Environment:
    try:
        return Environment(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(e.value for e in Environment)
        raise ConfigurationError(
            ENV_PREFIX + "ENVIRONMENT", f"must be one of {choices}, got {value!r}"
        ) from None


def _parse_non_negative_int(name: str, value: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        number = -1
    if number < 0:
        raise ConfigurationError(
            ENV_PREFIX + name, f"must be a non-negative integer, got {value!r}"
        )
    return number


def load_debug_flag(source=None) -> bool:
    """Parse the DEBUG switch with the same rules as the feature flags."""
    source = source or config_module.config
    return _parse_bool("DEBUG", source.DEBUG)


def load_app_config(source=None) -> InventoryConfig:
    """Build the typed config from a raw Config (the environment by default)."""
    source = source or config_module.config
    return InventoryConfig(
        form_id=source.FORM_ID,
        spreadsheet_id=source.SPREADSHEET_ID,
        environment=_parse_environment(source.ENVIRONMENT),
        features=FeatureFlags(
            auto_sync=_parse_bool("AUTO_SYNC", source.AUTO_SYNC),
            email_notifications=_parse_bool("EMAIL_NOTIFICATIONS", source.EMAIL_NOTIFICATIONS),
            advanced_logging=_parse_bool("ADVANCED_LOGGING", source.ADVANCED_LOGGING),
        ),
        notification_email=source.NOTIFICATION_EMAIL,
        system=SystemSettings(
            default_timezone=source.DEFAULT_TIMEZONE,
            date_format=source.DATE_FORMAT,
            decimal_places=_parse_non_negative_int("DECIMAL_PLACES", source.DECIMAL_PLACES),
        ),
    )
