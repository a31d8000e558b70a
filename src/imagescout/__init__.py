"""
imagescout - Image search scraper with pattern-based URL extraction.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import Config
from .exceptions import ConfigurationError, FetchError, ImageScoutError
from .report import Report
from .scraper import ImageSearchScraper, search_images

__all__ = [
    "__version__",
    "Config",
    "ConfigurationError",
    "FetchError",
    "ImageScoutError",
    "ImageSearchScraper",
    "Report",
    "search_images",
]
