"""Scoped logging context.

Fields pushed here (``run_id`` for an ETL run, ``query_id`` for a search) are
copied onto every log record emitted inside the scope by ``ContextualFilter``.
Backed by contextvars so nested scopes and threads do not leak into each other.
"""

from contextvars import ContextVar, Token
from typing import Any, Dict, Optional

LogContextVar: ContextVar[Dict[str, Any]] = ContextVar("civjobs_log_context", default={})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the active logging context."""
    return LogContextVar.get().copy()


def push_log_context(**fields) -> Token:
    """Merge ``fields`` into the active context.

    Returns:
        Token for pop_log_context() to restore the previous state
    """
    return LogContextVar.set({**LogContextVar.get(), **fields})


def pop_log_context(token: Token) -> None:
    """Restore the context captured by push_log_context()."""
    LogContextVar.reset(token)


def clear_log_context() -> None:
    """Drop every context field. Used by tests."""
    LogContextVar.set({})


class log_context:
    """Context manager form of push/pop.

    Example:
        >>> with log_context(run_id="3f2a", stage="silver"):
        ...     logger.info("Normalizing salaries")
    """

    def __init__(self, **fields):
        self.fields = fields
        self.token: Optional[Token] = None

    def __enter__(self):
        self.token = push_log_context(**self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token is not None:
            pop_log_context(self.token)
        return False
