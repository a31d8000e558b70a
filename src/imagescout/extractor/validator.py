"""
Acceptance rules for candidate image URLs.
"""

from __future__ import annotations

from typing import Tuple

IMAGE_EXTENSIONS: Tuple[str, ...] = (".jpg", ".jpeg", ".png", ".gif", ".webp")

# Thumbnails served by the engine itself, site chrome, and inline data.
BLOCKED_SUBSTRINGS: Tuple[str, ...] = ("encrypted-tbn", "gstatic.com", "logo", "icon", "base64")


def is_valid_image_url(url: str) -> bool:
    """Return True if ``url`` looks like a full-size third-party image.

    The extension check is a substring test, so ``photo.jpg?w=300`` passes
    and so does ``/img.png/view``. Blocked substrings always win.
    """
    lower = url.lower()
    return (
        lower.startswith("http")
        and any(ext in lower for ext in IMAGE_EXTENSIONS)
        and not any(blocked in lower for blocked in BLOCKED_SUBSTRINGS)
    )
