#!/usr/bin/env python3
"""Simple script to verify config.example.yaml structure without importing civjobs."""

import yaml
from pathlib import Path

KNOWN_SECTIONS = {
    'data': {'root', 'bronze_dir', 'silver_dir', 'gold_dir'},
    'logging': {'level', 'format'},
    'llm': {'model', 'temperature', 'api_url', 'timeout_seconds', 'max_jobs_in_prompt'},
    'cache': {'enabled', 'capacity'},
}


def verify_config_structure(config_file=Path("config.example.yaml")):
    """Verify a config file only uses known sections and keys."""
    if not config_file.exists():
        print(f"✗ {config_file} not found")
        return False

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        print(f"✗ Failed to parse {config_file}: {e}")
        return False

    if not isinstance(config, dict):
        print(f"✗ {config_file} must contain a mapping")
        return False

    errors = []

    for section, value in config.items():
        if section not in KNOWN_SECTIONS:
            errors.append(f"Unknown section: {section}")
            continue
        if not isinstance(value, dict):
            errors.append(f"'{section}' must be a dictionary")
            continue
        for key in value:
            if key not in KNOWN_SECTIONS[section]:
                errors.append(f"Unknown key: {section}.{key}")

    logging_format = config.get('logging', {}).get('format')
    if logging_format is not None and logging_format not in ('json', 'key-value'):
        errors.append(f"logging.format must be 'json' or 'key-value', got: {logging_format}")

    if errors:
        print(f"✗ {config_file} validation failed:")
        for error in errors:
            print(f"  - {error}")
        return False

    print(f"✓ {config_file} structure is valid")
    print(f"  - Data root: {config.get('data', {}).get('root', 'data')}")
    print(f"  - LLM model: {config.get('llm', {}).get('model', 'default')}")
    print(f"  - Cache capacity: {config.get('cache', {}).get('capacity', 'default')}")
    return True


if __name__ == "__main__":
    import sys
    success = verify_config_structure()
    sys.exit(0 if success else 1)
