"""
Pattern-based image URL extraction from search result pages.

Result pages carry inline metadata arrays of the shape ``["<url>",W,H]`` in
their script data. Rather than building a DOM or decoding the scripts, the
extractor scans the raw markup for that literal shape. When the page
changes how it embeds images, only ``IMAGE_LITERAL_PATTERN`` needs updating.
"""

from __future__ import annotations

import re
import time
from typing import List

import structlog

from .domain import extract_domain
from .models import ExtractionOutcome, ImageResult
from .normalizer import clean_url
from .validator import is_valid_image_url

logger = structlog.get_logger(__name__)

# A double-quoted https URL ending in an image extension (optionally followed
# by a query string), then two unsigned integers and a closing bracket.
IMAGE_LITERAL_PATTERN = re.compile(r'\["(https://[^"]*\.(?:jpg|jpeg|png|gif|webp)(?:\?[^"]*)?)",\d+,\d+\]')


class ImageExtractor:
    """Extracts, validates and deduplicates embedded image URLs."""

    name = "inline_literal"

    def __init__(self, pattern: re.Pattern[str] = IMAGE_LITERAL_PATTERN) -> None:
        self.pattern = pattern

    def parse(self, html: str) -> List[ImageResult]:
        """Return every accepted image in document order, without truncation."""
        results: List[ImageResult] = []
        seen: set[str] = set()
        matches = 0

        for match in self.pattern.finditer(html):
            matches += 1
            url = clean_url(match.group(1))
            if url in seen or not is_valid_image_url(url):
                continue
            seen.add(url)
            results.append(ImageResult(url=url, source_site=extract_domain(url)))

        logger.debug("Scanned document for image literals", matches=matches, accepted=len(results))
        return results

    def extract(self, html: str, max_images: int) -> ExtractionOutcome:
        """
        Extract up to ``max_images`` images from ``html``.

        Args:
            html: Raw HTML of the results page
            max_images: Maximum number of results to keep (earliest first)

        Returns:
            ExtractionOutcome with the truncated results and counts

        Raises:
            ValueError: if max_images is negative
        """
        if max_images < 0:
            raise ValueError("max_images must be >= 0")

        parse_start = time.perf_counter()
        results = self.parse(html)
        raw_found = len(results)
        truncated = tuple(results[:max_images])
        parse_seconds = time.perf_counter() - parse_start

        return ExtractionOutcome(
            results=truncated,
            raw_found=raw_found,
            after_filter=len(truncated),
            parse_seconds=parse_seconds,
        )
