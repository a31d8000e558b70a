"""
Source-site derivation for extracted image URLs.
"""

from __future__ import annotations

from urllib.parse import urlsplit

UNKNOWN_DOMAIN = "unknown"

# Code points a host may not contain; urlsplit does not reject them itself.
FORBIDDEN_HOST_CHARS = frozenset(" \t\n\r#/:<>?@[\\]^|%")


def extract_domain(url: str) -> str:
    """Return the host of ``url`` with every ``www.`` removed, or ``"unknown"``.

    The removal is a plain substring replace, so ``img.www.example.com``
    becomes ``img.example.com``. Hosts containing a forbidden host code
    point (space, ``<``, ``^``, ``%`` and so on) count as unparsable.
    """
    try:
        parts = urlsplit(url)
        # Accessing .port validates it; a bad port raises ValueError.
        parts.port
        host = parts.hostname
    except ValueError:
        return UNKNOWN_DOMAIN

    if not host:
        return UNKNOWN_DOMAIN
    if "[" in parts.netloc:
        # Bracketed IPv6 literal, already validated by urlsplit
        return host
    if not FORBIDDEN_HOST_CHARS.isdisjoint(host):
        return UNKNOWN_DOMAIN
    return host.replace("www.", "")
