"""Chemical inventory configuration - Google Form and Spreadsheet settings"""

__version__ = "1.0.0"
__author__ = "chem-inventory maintainers"
__description__ = "Configuration template for a form and spreadsheet backed chemical inventory"

__all__ = ["get_config", "validate_config", "ConfigurationError", "__version__"]

from .errors import ConfigurationError


def __getattr__(name: str):
    """Lazy import so the config is only built (and .env read) on first use.

    Importing the package alone does not build the settings record.
    """
    if name in ("get_config", "validate_config"):
        from . import settings

        return getattr(settings, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
