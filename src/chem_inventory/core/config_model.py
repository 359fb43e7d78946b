"""Core configuration model (structured view)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Environment(Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"


@dataclass(frozen=True)
class FeatureFlags:
    """Optional behaviour toggles read by the host workflow."""

    auto_sync: bool = True
    email_notifications: bool = False
    advanced_logging: bool = True


@dataclass(frozen=True)
class SystemSettings:
    """Locale and display defaults."""

    default_timezone: str = "America/Chicago"
    date_format: str = "yyyy-MM-dd"
    decimal_places: int = 2

    def format_quantity(self, value: float) -> str:
        """Render a numeric quantity with the configured precision."""
        return f"{value:.{self.decimal_places}f}"


@dataclass(frozen=True)
class InventoryConfig:
    """Settings for the form and spreadsheet backed inventory workflow.

    Defaults are the shipped template: the two Google identifiers hold
    placeholder values that must be replaced before use.
    """

    form_id: str = "YOUR_FORM_ID_HERE"
    spreadsheet_id: str = "YOUR_SPREADSHEET_ID_HERE"
    environment: Environment = Environment.DEVELOPMENT
    features: FeatureFlags = field(default_factory=FeatureFlags)
    notification_email: str = "your-email@company.com"
    system: SystemSettings = field(default_factory=SystemSettings)

    @property
    def is_production(self) -> bool:
        return self.environment is Environment.PRODUCTION

    @property
    def notification_recipient(self) -> str | None:
        """Email to notify, or None while email notifications are off."""
        if not self.features.email_notifications:
            return None
        return self.notification_email

    def to_dict(self) -> dict:
        """Return the settings keyed the way the host script expects them."""
        return {
            "FORM_ID": self.form_id,
            "SPREADSHEET_ID": self.spreadsheet_id,
            "ENVIRONMENT": self.environment.value,
            "FEATURES": {
                "AUTO_SYNC": self.features.auto_sync,
                "EMAIL_NOTIFICATIONS": self.features.email_notifications,
                "ADVANCED_LOGGING": self.features.advanced_logging,
            },
            "NOTIFICATION_EMAIL": self.notification_email,
            "SYSTEM": {
                "DEFAULT_TIMEZONE": self.system.default_timezone,
                "DATE_FORMAT": self.system.date_format,
                "DECIMAL_PLACES": self.system.decimal_places,
            },
        }
