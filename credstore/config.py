"""Configuration management for the credential store commands.

This module provides utilities for loading and validating configuration
from environment variables.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dotenv import load_dotenv

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

LOGGER = logging.getLogger(__name__)

_DEFAULT_STORE_PATH = "users.json"
_DEFAULT_LOGGING_LEVEL = "WARNING"


def configure_logging(app_config: AppConfig) -> None:
    """Configure logging based on the application configuration.

    :param app_config: The application configuration instance
    """
    if not app_config.logging_level:
        logging.basicConfig(level=logging.INFO)
        return

    numeric_level = getattr(logging, app_config.logging_level.upper(), None)
    if not isinstance(numeric_level, int):
        logging.basicConfig(level=logging.INFO)
        LOGGER.warning("Invalid log level: %s, using INFO", app_config.logging_level)
        return
    logging.basicConfig(level=numeric_level)


@dataclass
class AppConfig:
    """Holds configuration loaded from environment variables."""

    store_path: str
    logging_level: str | None


def get_env_str(
    var_name: str,
    default: str | None,
    value_checker: Callable[[str], bool] | None = None,
) -> str:
    """Get an environment variable as a string with optional constraints.

    :param var_name: Name of the environment variable
    :param default: Default value if the variable is not set
    :param value_checker: Optional function to validate the value
    :return: The environment variable value
    :raises ValueError: If the value does not meet the constraints
    """
    value = os.getenv(var_name, default)
    if value is None:
        msg = f"Environment variable {var_name} is required"
        raise ValueError(msg)

    if value_checker and not value_checker(value):
        msg = f"Environment variable {var_name} has invalid value: {value}"
        raise ValueError(msg)

    return value


def load_config_from_env(env_file: str | Path | None = None) -> AppConfig:
    """Load configuration from environment variables.

    :param env_file: Optional dotenv file loaded before the environment is read
    :return: An AppConfig instance populated with environment variable values
    """
    if env_file:
        load_dotenv(dotenv_path=env_file)

    return AppConfig(
        store_path=get_env_str(
            "STORE_PATH",
            _DEFAULT_STORE_PATH,
            lambda path: path != "",
        ),
        logging_level=get_env_str("LOGGING_LEVEL", _DEFAULT_LOGGING_LEVEL),
    )
