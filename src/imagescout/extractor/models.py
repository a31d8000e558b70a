"""
Data models for extraction results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class ImageResult:
    """A validated image URL and the site that hosts it."""

    url: str
    source_site: str

    def to_dict(self) -> dict[str, Any]:
        return {"url": self.url, "source_site": self.source_site}


@dataclass(slots=True, frozen=True)
class ExtractionOutcome:
    """Output of one extraction pass over a results page.

    ``raw_found`` counts accepted, deduplicated images before truncation;
    ``after_filter`` is the length of ``results`` after truncation.
    """

    results: tuple[ImageResult, ...]
    raw_found: int
    after_filter: int
    parse_seconds: float

    def __post_init__(self) -> None:
        """Validate the outcome."""
        if self.raw_found < 0 or self.parse_seconds < 0:
            raise ValueError("raw_found and parse_seconds must be non-negative")
        if self.after_filter != len(self.results):
            raise ValueError("after_filter must equal the number of results")
        if self.after_filter > self.raw_found:
            raise ValueError("after_filter cannot exceed raw_found")
