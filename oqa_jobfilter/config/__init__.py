"""Configuration management module for the job filter."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config
from .models import AppConfig, LogFormat, LogLevel, LoggingConfig

__all__ = [
    "load_config",
    "load_environment_config",
    "AppConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    "LogLevel",
    "LogFormat",
    "ConfigurationError",
]
