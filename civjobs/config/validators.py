"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check a raw configuration mapping for settings that are legal but suspicious.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    data = config_dict.get("data", {})
    if isinstance(data, dict):
        layers = {
            name: str(data[name]).rstrip("/")
            for name in ("bronze_dir", "silver_dir", "gold_dir")
            if data.get(name)
        }
        if len(set(layers.values())) < len(layers):
            warning_messages.append(
                "Two data layers share a directory; ETL output may overwrite input files"
            )

    llm = config_dict.get("llm", {})
    if isinstance(llm, dict):
        temperature = llm.get("temperature")
        if isinstance(temperature, (int, float)) and temperature > 1.0:
            warning_messages.append(
                f"High llm.temperature ({temperature}) may produce answers that "
                "drift from the matched jobs"
            )
        max_jobs = llm.get("max_jobs_in_prompt")
        if isinstance(max_jobs, int) and max_jobs > 100:
            warning_messages.append(
                f"Large llm.max_jobs_in_prompt ({max_jobs}) may exceed the model context window"
            )

    cache = config_dict.get("cache", {})
    if isinstance(cache, dict):
        capacity = cache.get("capacity")
        if isinstance(capacity, int) and capacity > 10000:
            warning_messages.append(
                f"Large cache.capacity ({capacity}) keeps many answers in memory"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
