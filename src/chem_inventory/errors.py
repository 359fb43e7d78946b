"""Custom exceptions for inventory configuration errors."""


class ConfigurationError(Exception):
    """Raised when a configuration value is missing, unset or unparsable."""

    def __init__(self, field: str, message: str):
        super().__init__(f"Configuration error: {field} {message}")
        self.field = field
