"""
HTTP client for fetching search result pages.

One request, no retries: a non-2xx status or a transport error is raised as
``FetchError`` and ends the search.
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

import aiohttp
import structlog

from imagescout.config.config import Config
from imagescout.exceptions import FetchError
from imagescout.observability.metrics import METRICS

logger = structlog.get_logger(__name__)


@dataclass
class FetchResponse:
    """Successful response with decoded body and timing information."""

    status: int
    headers: Dict[str, str]
    text: str
    url: str
    final_url: str
    start_ts: float
    end_ts: float

    @property
    def elapsed(self) -> float:
        return self.end_ts - self.start_ts


class HttpClient:
    """aiohttp-backed client with a cookie jar, bounded redirects and a total timeout."""

    def __init__(self, config: Config):
        self.config = config
        self.scraper_config = config.scraper

        # Session will be initialized in initialize()
        self.session: Optional[aiohttp.ClientSession] = None
        self._is_initialized = False

    async def initialize(self) -> None:
        """Initialize the HTTP client session."""
        if self.session is None:
            timeout = aiohttp.ClientTimeout(total=self.scraper_config.timeout)
            self.session = aiohttp.ClientSession(
                timeout=timeout,
                cookie_jar=aiohttp.CookieJar(),
                auto_decompress=True,
            )
            self._is_initialized = True
            logger.debug(
                "HTTP client session initialized",
                timeout=self.scraper_config.timeout,
                max_redirects=self.scraper_config.max_redirects,
            )

    async def close(self) -> None:
        """Close the HTTP client and clean up resources."""
        if self.session:
            await self.session.close()
            self.session = None
        self._is_initialized = False
        logger.debug("HTTP client closed")

    async def __aenter__(self) -> "HttpClient":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def fetch(self, url: str, *, headers: Optional[Mapping[str, str]] = None) -> FetchResponse:
        """
        Fetch ``url`` once, following up to ``max_redirects`` redirects.

        Args:
            url: URL to fetch
            headers: Request headers (User-Agent, Accept, Accept-Language)

        Returns:
            FetchResponse with the decoded body

        Raises:
            FetchError: on a non-2xx status or any transport failure
            RuntimeError: if the client has not been initialized
        """
        if not self._is_initialized or self.session is None:
            raise RuntimeError("HTTP client not initialized. Call initialize() first.")

        start_time = time.time()
        try:
            async with self.session.get(
                url,
                headers=dict(headers or {}),
                allow_redirects=True,
                max_redirects=self.scraper_config.max_redirects,
            ) as response:
                METRICS["http_responses_total"].labels(status_class=f"{response.status // 100}xx").inc()

                if not 200 <= response.status < 300:
                    logger.warning("Search request rejected", url=url, status=response.status, reason=response.reason)
                    raise FetchError(url, status=response.status, reason=response.reason)

                text = await response.text(errors="replace")
                end_time = time.time()
                METRICS["fetch_latency_seconds"].observe(end_time - start_time)

                logger.debug(
                    "Fetched search page",
                    url=url,
                    final_url=str(response.url),
                    status=response.status,
                    bytes=len(text),
                    elapsed=end_time - start_time,
                )
                return FetchResponse(
                    status=response.status,
                    headers=dict(response.headers),
                    text=text,
                    url=url,
                    final_url=str(response.url),
                    start_ts=start_time,
                    end_ts=end_time,
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning("Search request failed", url=url, error=str(e) or type(e).__name__)
            raise FetchError(url, cause=e) from e
