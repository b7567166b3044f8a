"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List

from .models import AppConfig, LoggingConfig


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check a raw configuration mapping for keys that will be ignored.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    known_keys = set(AppConfig.model_fields)
    for key in config_dict:
        if key not in known_keys:
            warning_messages.append(f"Unknown configuration key '{key}' will be ignored")

    logging_section = config_dict.get("logging")
    if isinstance(logging_section, dict):
        known_logging_keys = set(LoggingConfig.model_fields)
        for key in logging_section:
            if key not in known_logging_keys:
                warning_messages.append(
                    f"Unknown configuration key 'logging.{key}' will be ignored"
                )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """Emit warning messages using Python's warnings module."""
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
