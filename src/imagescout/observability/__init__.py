"""Logging and metrics for imagescout."""

from .logging import configure_logging
from .metrics import METRICS

__all__ = ["configure_logging", "METRICS"]
