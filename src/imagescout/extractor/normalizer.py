"""
Decoding of image URLs lifted out of inline JSON-like literals.

Search result pages embed URLs inside script data where `=`, `&`, `/`, `?`
and `:` may appear as literal `\\uXXXX` escapes, slashes may be
backslash-escaped, and ampersands may be HTML entities.
"""

from __future__ import annotations

import re
from typing import Dict

# Literal six-character escapes: a backslash, "u", then four hex digits.
# Hex digits are matched in either case since pages emit both forms.
UNICODE_ESCAPE_PATTERN = re.compile(r"\\u00((?i:3d|26|2f|3f|3a))")

UNICODE_ESCAPES: Dict[str, str] = {
    "3d": "=",
    "26": "&",
    "2f": "/",
    "3f": "?",
    "3a": ":",
}


def _decode_escape(match: re.Match[str]) -> str:
    return UNICODE_ESCAPES[match.group(1).lower()]


def clean_url(url: str) -> str:
    """Decode embedded escape sequences and trim surrounding whitespace.

    Steps run in a fixed order: unicode escapes, escaped slashes, then the
    ``&amp;`` entity. Never raises; the result is not guaranteed to be a
    valid URL.
    """
    url = UNICODE_ESCAPE_PATTERN.sub(_decode_escape, url)
    url = url.replace("\\/", "/")
    url = url.replace("&amp;", "&")
    return url.strip()
