"""Environment variable loading and validation."""

import os
from pathlib import Path
from typing import Optional

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        openai_api_key: Optional[str] = None,
        log_level: Optional[str] = None,
        data_dir: Optional[Path] = None,
        environment: Optional[str] = None,
    ):
        self.openai_api_key = openai_api_key
        self.log_level = log_level
        self.data_dir = data_dir
        self.environment = environment or "local"


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    All variables are optional:
    - OPENAI_API_KEY: credential for the answer step (``ask``); searching and
      the ETL run without it
    - LOG_LEVEL: override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - CIVJOBS_DATA_DIR: override ``data.root`` from the config file
    - ENVIRONMENT: label stamped on log records (default: local)

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If a variable is set to an invalid value
    """
    errors = []

    openai_api_key = os.getenv("OPENAI_API_KEY") or None
    log_level = os.getenv("LOG_LEVEL") or None
    data_dir_str = os.getenv("CIVJOBS_DATA_DIR") or None
    environment = os.getenv("ENVIRONMENT") or None

    if log_level and log_level.upper() not in VALID_LOG_LEVELS:
        errors.append(
            f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
        )

    data_dir = None
    if data_dir_str:
        data_dir = Path(data_dir_str.strip())
        if data_dir.exists() and not data_dir.is_dir():
            errors.append(f"CIVJOBS_DATA_DIR is not a directory: '{data_dir_str}'")

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Copy .env.example to .env and adjust the values",
                "Unset variables you do not need; all of them are optional",
            ],
        )

    return EnvironmentConfig(
        openai_api_key=openai_api_key,
        log_level=log_level.upper() if log_level else None,
        data_dir=data_dir,
        environment=environment,
    )
