"""Configuration management module for civjobs."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config
from .models import (
    AppConfig,
    CacheConfig,
    DataConfig,
    LLMConfig,
    LogFormat,
    LogLevel,
    LoggingConfig,
)

__all__ = [
    # Main loader functions
    "load_config",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "DataConfig",
    "LoggingConfig",
    "LLMConfig",
    "CacheConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
