"""Utility functions for hashing and time handling."""

from .hashing import cache_key, hash_string
from .timestamps import elapsed_seconds, utc_now

__all__ = [
    "cache_key",
    "hash_string",
    "elapsed_seconds",
    "utc_now",
]
