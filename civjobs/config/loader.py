"""Configuration loader for civjobs."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .models import AppConfig
from .validators import check_for_warnings, emit_warnings

DEFAULT_CONFIG_LOCATIONS = (
    Path("config.yaml"),
    Path("config") / "config.yaml",
)


def load_config(config_path: Optional[Path] = None) -> tuple[AppConfig, EnvironmentConfig]:
    """
    Load and validate configuration from an optional YAML file and the environment.

    Config file lookup:
    1. Use config_path if given (it must exist)
    2. Try config.yaml in the current directory
    3. Try ./config/config.yaml
    4. Fall back to built-in defaults

    CIVJOBS_DATA_DIR, when set, replaces ``data.root``.

    Args:
        config_path: Optional path to configuration file

    Returns:
        Tuple of (AppConfig, EnvironmentConfig)

    Raises:
        ConfigurationError: If the file is unreadable or invalid, or the environment is invalid
    """
    config_file = _find_config_file(config_path)

    config_dict = {}
    if config_file is not None:
        config_dict = _read_yaml(config_file)

    warnings = check_for_warnings(config_dict)
    if warnings:
        emit_warnings(warnings)

    try:
        app_config = AppConfig.model_validate(config_dict)
    except ValidationError as e:
        errors = []
        for error in e.errors():
            field_path = " -> ".join(str(loc) for loc in error["loc"])
            if error["type"] == "extra_forbidden":
                errors.append(f"Unknown field: {field_path}")
            elif "enum" in error["type"]:
                errors.append(f"Invalid value for '{field_path}': {error['msg']}")
            else:
                errors.append(f"{field_path}: {error['msg']}")

        raise ConfigurationError(
            "Configuration validation failed",
            errors=errors,
            suggestions=[
                "Review config.example.yaml for correct format",
                "Verify field types match the expected schema",
            ],
        )

    env_config = load_environment_config()
    if env_config.data_dir is not None:
        app_config.data.root = env_config.data_dir

    return app_config, env_config


def _read_yaml(config_file: Path) -> dict:
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse YAML configuration: {e}",
            suggestions=[
                "Check YAML syntax in your config file",
                "Ensure proper indentation (use spaces, not tabs)",
            ],
        )
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read configuration file: {e}",
            suggestions=[
                f"Ensure {config_file} is readable",
                "Check file permissions",
            ],
        )

    if config_dict is None:
        return {}

    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping, got {type(config_dict).__name__}",
            suggestions=["Review config.example.yaml for correct format"],
        )

    return config_dict


def _find_config_file(config_path: Optional[Path] = None) -> Optional[Path]:
    """
    Resolve the configuration file to read.

    Args:
        config_path: Optional explicit path to config file

    Returns:
        Path to the configuration file, or None when no default location exists

    Raises:
        ConfigurationError: If an explicit path does not exist
    """
    if config_path:
        if not config_path.exists():
            raise ConfigurationError(
                f"Specified configuration file not found: {config_path}",
                suggestions=[
                    f"Ensure {config_path} exists",
                    "Omit --config to use config.yaml or the built-in defaults",
                ],
            )
        return config_path

    for candidate in DEFAULT_CONFIG_LOCATIONS:
        if candidate.exists():
            return candidate

    return None
