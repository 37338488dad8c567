"""Deterministic hashing for cache keys."""

import hashlib


def hash_string(value: str) -> str:
    """Compute SHA256 hex digest of a string value."""
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def cache_key(namespace: str, *parts: str) -> str:
    """Build a cache key from a namespace and normalized text parts.

    Parts are lowercased and whitespace-collapsed before hashing, so
    "Sheriff  jobs" and "sheriff jobs" share a key.

    Example:
        >>> cache_key("search", "Sheriff  jobs") == cache_key("search", "sheriff jobs")
        True
    """
    normalized = "\x1f".join(" ".join(part.lower().split()) for part in parts)
    return f"{namespace}:{hash_string(normalized)}"
