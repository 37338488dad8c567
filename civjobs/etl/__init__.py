"""Offline bronze -> silver -> gold normalization of the job catalog.

This module provides:
- EtlNormalizer: pure record transformations for each stage
- EtlPipeline: reads bronze files, runs the stages, writes silver and gold
- EtlRunResult: counts and diagnostics for one run
"""

from .exceptions import EtlInputError
from .models import EtlRunResult
from .runner import EtlPipeline
from .service import EtlNormalizer, extract_keywords, pad_job_code

__all__ = [
    "EtlInputError",
    "EtlNormalizer",
    "EtlPipeline",
    "EtlRunResult",
    "extract_keywords",
    "pad_job_code",
]
