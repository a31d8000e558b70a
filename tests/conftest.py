"""
Test configuration for imagescout.

Provides fixtures for configuration, HTTP clients and sample result pages.
"""

# Standard library imports
import random
from typing import AsyncGenerator

# Third-party imports
import pytest
import pytest_asyncio

# Local imports
from imagescout.config import Config
from imagescout.crawler.http_client import HttpClient
from imagescout.crawler.user_agents import UserAgentRotator

from tests.helpers.pages import image_literal, results_page

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across modules")


# ============================================================================
# Core Test Fixtures
# ============================================================================


@pytest.fixture
def test_config() -> Config:
    """Configuration with short timeouts and no config-file lookup."""
    config = Config()
    config.scraper.timeout = 5.0
    config.scraper.max_redirects = 3
    return config


@pytest_asyncio.fixture
async def http_client(test_config) -> AsyncGenerator[HttpClient, None]:
    """Initialized HTTP client, closed after the test."""
    async with HttpClient(test_config) as client:
        yield client


@pytest.fixture
def seeded_user_agents() -> UserAgentRotator:
    """User agent rotator with a deterministic random source."""
    return UserAgentRotator(rng=random.Random(1234))


# ============================================================================
# Sample Pages
# ============================================================================


@pytest.fixture
def sample_results_html() -> str:
    """A realistic results page with accepted, rejected and duplicate literals."""
    return results_page(
        image_literal("https://encrypted-tbn0.gstatic.com/images?q=tbn:abc.jpg", 259, 194),
        image_literal("https://www.catphotos.com/uploads/tabby.jpg", 1200, 800),
        image_literal("https://cdn.petsite.org/img/kitten.png?w=640&amp;h=480", 640, 480),
        image_literal("https://www.catphotos.com/uploads/tabby.jpg", 1200, 800),
        image_literal("https://example.net/assets/logo.png", 120, 40),
        image_literal("https://images.example.com/sleepy.webp", 900, 600),
    )

