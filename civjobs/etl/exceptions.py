"""Exceptions raised by the ETL pipeline."""

from pathlib import Path
from typing import Optional


class EtlInputError(Exception):
    """A bronze input file is missing or cannot be parsed.

    Attributes:
        path: The offending input file
        reason: Short description of the problem
    """

    def __init__(self, path: Path, reason: str, cause: Optional[Exception] = None):
        self.path = Path(path)
        self.reason = reason
        self.cause = cause
        super().__init__(f"Cannot read ETL input {self.path}: {reason}")
