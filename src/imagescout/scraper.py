"""
Image search orchestration: fetch one results page, extract, report.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Dict, Optional
from urllib.parse import quote

import structlog

from imagescout.config.config import Config, ScraperConfig
from imagescout.crawler.http_client import HttpClient
from imagescout.crawler.user_agents import UserAgentRotator
from imagescout.exceptions import FetchError
from imagescout.extractor.image_extractor import ImageExtractor
from imagescout.observability.metrics import METRICS
from imagescout.report import Report, build_report

logger = structlog.get_logger(__name__)


def build_search_url(query: str, scraper_config: ScraperConfig) -> str:
    """Build the image search URL, percent-encoding every reserved character of ``query``."""
    return (
        f"{scraper_config.base_url}?q={quote(query, safe='')}"
        f"&tbm={scraper_config.search_mode}"
        f"&hl={scraper_config.locale}"
        f"&safe={scraper_config.safe_mode}"
    )


class ImageSearchScraper:
    """
    Runs a single image search.

    Pass an already-open ``HttpClient`` to share a session; otherwise a
    client is opened and closed around each search.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        *,
        http_client: Optional[HttpClient] = None,
        user_agents: Optional[UserAgentRotator] = None,
        extractor: Optional[ImageExtractor] = None,
    ):
        self.config = config or Config()
        self.http_client = http_client
        self.user_agents = user_agents or UserAgentRotator(
            include_mobile=self.config.user_agents.include_mobile,
            custom_agents=self.config.user_agents.custom_agents,
        )
        self.extractor = extractor or ImageExtractor()

    def build_headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self.user_agents.get_random_user_agent(),
            "Accept": self.config.scraper.accept,
            "Accept-Language": self.config.scraper.accept_language,
        }

    async def search(self, query: str, max_images: int) -> Report:
        """
        Search for ``query`` and return a report of at most ``max_images`` images.

        Raises:
            FetchError: if the results page could not be fetched
            ValueError: if max_images is negative
        """
        if max_images < 0:
            raise ValueError("max_images must be >= 0")

        scraper_config = self.config.scraper
        start = time.perf_counter()
        created_at = datetime.now(timezone.utc)
        request_url = build_search_url(query, scraper_config)

        with structlog.contextvars.bound_contextvars(run_query=query):
            logger.info("Starting image search", url=request_url, max_images=max_images)
            try:
                html = await self._fetch_html(request_url)
            except FetchError as e:
                METRICS["searches_total"].labels(status="failure").inc()
                logger.error("Image search failed", url=request_url, error=str(e))
                raise

            outcome = self.extractor.extract(html, max_images)
            completed_at = datetime.now(timezone.utc)
            elapsed_seconds = time.perf_counter() - start

            METRICS["searches_total"].labels(status="success").inc()
            METRICS["parse_latency_seconds"].observe(outcome.parse_seconds)
            METRICS["images_extracted"].observe(outcome.raw_found)
            logger.info(
                "Image search completed",
                raw_found=outcome.raw_found,
                after_filter=outcome.after_filter,
                parse_seconds=outcome.parse_seconds,
                total_seconds=elapsed_seconds,
            )

        return build_report(
            query=query,
            request_url=request_url,
            outcome=outcome,
            created_at=created_at,
            completed_at=completed_at,
            elapsed_seconds=elapsed_seconds,
            locale=scraper_config.locale,
            safe_mode=scraper_config.safe_mode,
        )

    async def _fetch_html(self, url: str) -> str:
        headers = self.build_headers()
        if self.http_client is not None:
            response = await self.http_client.fetch(url, headers=headers)
        else:
            async with HttpClient(self.config) as client:
                response = await client.fetch(url, headers=headers)
        return response.text


async def search_images(query: str, max_images: int = 10, config: Optional[Config] = None) -> Report:
    """Search for images using a fresh scraper and HTTP session."""
    return await ImageSearchScraper(config).search(query, max_images)
