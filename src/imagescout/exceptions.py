"""
Exception hierarchy for imagescout.

A search either produces a complete report or raises one of these; there is
no partial or "failure" report.
"""

from __future__ import annotations


class ImageScoutError(Exception):
    """Base class for all imagescout errors."""


class FetchError(ImageScoutError):
    """The search page could not be fetched (HTTP status or transport failure)."""

    def __init__(
        self,
        url: str,
        *,
        status: int | None = None,
        reason: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.url = url
        self.status = status
        self.reason = reason
        self.cause = cause

        if status is not None:
            message = f"HTTP Error: {status}" + (f" {reason}" if reason else "")
        elif cause is not None:
            message = f"Request failed: {str(cause) or type(cause).__name__}"
        else:
            message = "Request failed: unknown transport error"
        super().__init__(message)


class ConfigurationError(ImageScoutError):
    """Configuration file is missing, unreadable, or fails validation."""
