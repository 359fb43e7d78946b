"""Configuration for the chemical inventory workflow"""
import os

from dotenv import load_dotenv

load_dotenv()

ENV_PREFIX = "CHEM_INVENTORY_"


def _env(name: str, default: str) -> str:
    return os.getenv(ENV_PREFIX + name, default)


class Config:
    """Raw settings, template values unless overridden by the environment"""

    # Google identifiers (found in the form and spreadsheet URLs)
    FORM_ID = _env("FORM_ID", "YOUR_FORM_ID_HERE")
    SPREADSHEET_ID = _env("SPREADSHEET_ID", "YOUR_SPREADSHEET_ID_HERE")

    # "development" or "production"
    ENVIRONMENT = _env("ENVIRONMENT", "development")

    # Feature flags (parsed by adapters.config_env)
    AUTO_SYNC = _env("AUTO_SYNC", "true")
    EMAIL_NOTIFICATIONS = _env("EMAIL_NOTIFICATIONS", "false")
    ADVANCED_LOGGING = _env("ADVANCED_LOGGING", "true")

    # Only used when email notifications are enabled
    NOTIFICATION_EMAIL = _env("NOTIFICATION_EMAIL", "your-email@company.com")

    # System
    DEFAULT_TIMEZONE = _env("TIMEZONE", "America/Chicago")
    DATE_FORMAT = _env("DATE_FORMAT", "yyyy-MM-dd")
    DECIMAL_PLACES = _env("DECIMAL_PLACES", "2")

    LOG_LEVEL = _env("LOG_LEVEL", "INFO").upper()
    # Parsed by adapters.config_env.load_debug_flag
    DEBUG = _env("DEBUG", "false")


config = Config()
