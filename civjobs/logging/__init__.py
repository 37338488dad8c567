"""Structured logging helpers shared by the ETL, search, and chat layers."""

import logging
from typing import Optional


class ComponentLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that stamps a component name onto every record.

    Per-call ``extra`` fields are merged on top of the adapter's own, so a call
    may still override ``component`` when it needs to.
    """

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(name: str, component: Optional[str] = None):
    """Return a module logger, optionally bound to a component name.

    Args:
        name: Logger name (typically __name__)
        component: Component label injected into every record (e.g. "etl", "search")

    Returns:
        Logger or ComponentLoggerAdapter instance

    Example:
        >>> logger = get_logger(__name__, component="etl")
        >>> logger.info("ETL run started", extra={"event": "etl.run.started"})
    """
    logger = logging.getLogger(name)

    if component:
        return ComponentLoggerAdapter(logger, {"component": component})

    return logger
