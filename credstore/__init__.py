"""JSON-backed credential store with register and authenticate commands."""

from .config import AppConfig, configure_logging, load_config_from_env

__all__ = ["AppConfig", "configure_logging", "load_config_from_env"]
