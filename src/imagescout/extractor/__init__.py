"""
imagescout Extraction Module

Turns a raw search results page into an ordered, deduplicated list of image
URLs:
1. Scan for inline ``["<url>",W,H]`` literals
2. Decode escaped URL fragments
3. Reject engine thumbnails, site chrome and non-image URLs
4. Tag each image with the site that hosts it
"""

from .domain import UNKNOWN_DOMAIN, extract_domain
from .image_extractor import IMAGE_LITERAL_PATTERN, ImageExtractor
from .models import ExtractionOutcome, ImageResult
from .normalizer import clean_url
from .validator import BLOCKED_SUBSTRINGS, IMAGE_EXTENSIONS, is_valid_image_url

__all__ = [
    "BLOCKED_SUBSTRINGS",
    "ExtractionOutcome",
    "IMAGE_EXTENSIONS",
    "IMAGE_LITERAL_PATTERN",
    "ImageExtractor",
    "ImageResult",
    "UNKNOWN_DOMAIN",
    "clean_url",
    "extract_domain",
    "is_valid_image_url",
]
