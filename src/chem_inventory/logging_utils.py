"""Logging setup for command-line use.

Library modules only create module loggers; handlers are installed here so
importing the package never touches the host's logging configuration.
"""

import logging

from . import config as config_module
from .adapters.config_env import load_debug_flag

LOGGER_NAME = "chem_inventory"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_level(level_name: str, debug: bool = False, advanced_logging: bool = False) -> int:
    if debug or advanced_logging:
        return logging.DEBUG
    return _LEVELS.get(level_name.upper(), logging.INFO)


def configure_logging(advanced_logging: bool = False) -> logging.Logger:
    """Attach a stream handler to the package logger once.

    Raises ConfigurationError if the DEBUG override is not a boolean.
    """
    env_config = config_module.config
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(
        resolve_level(env_config.LOG_LEVEL, load_debug_flag(env_config), advanced_logging)
    )
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s | %(levelname)8s | %(name)s | %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.addHandler(handler)
    return logger
