"""
imagescout Crawler Module

Transport for search requests:
- aiohttp session with cookie jar, decompression and bounded redirects
- Uniform user-agent rotation over a fixed browser pool
"""

from .http_client import FetchResponse, HttpClient
from .user_agents import UserAgentRotator

__all__ = [
    "FetchResponse",
    "HttpClient",
    "UserAgentRotator",
]
