"""
Defines Prometheus metrics for search and extraction.

Collectors live in the default process registry; nothing is exported over
HTTP. Embedding applications can expose them with their own exporter.
"""

from __future__ import annotations

from typing import Any, Dict

from prometheus_client import REGISTRY as _PROM_REGISTRY
from prometheus_client import Counter as _OrigCounter
from prometheus_client import Histogram as _OrigHistogram

# ---------------------------------------------------------------------------
# Duplicate-safe Prometheus metric wrappers
# ---------------------------------------------------------------------------
# Reloading this module (the test suite does) must not register a collector
# twice, so existing collectors are reused by name.


def _duplicate_safe_factory(metric_cls):
    """Return a factory that reuses an existing collector if already present."""

    def _factory(name: str, documentation: str, *args, **kwargs):  # type: ignore[override]
        existing = _PROM_REGISTRY._names_to_collectors.get(name)
        if existing is not None:
            return existing  # type: ignore[return-value]

        try:
            return metric_cls(name, documentation, *args, **kwargs)  # type: ignore[call-arg]
        except ValueError:
            # Registration lost the race, fall back to the now-existing collector.
            return _PROM_REGISTRY._names_to_collectors[name]  # type: ignore[return-value]

    return _factory


Counter = _duplicate_safe_factory(_OrigCounter)  # type: ignore[assignment]
Histogram = _duplicate_safe_factory(_OrigHistogram)  # type: ignore[assignment]


def _create_metrics() -> Dict[str, Any]:
    return {
        "searches_total": Counter(
            "imagescout_searches_total",
            "Total number of image searches, by outcome",
            ["status"],
        ),
        "http_responses_total": Counter(
            "imagescout_http_responses_total",
            "HTTP responses received from the search endpoint",
            ["status_class"],
        ),
        "fetch_latency_seconds": Histogram(
            "imagescout_fetch_latency_seconds",
            "Time spent fetching the search results page",
        ),
        "parse_latency_seconds": Histogram(
            "imagescout_parse_latency_seconds",
            "Time spent extracting image URLs from the results page",
            buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
        ),
        "images_extracted": Histogram(
            "imagescout_images_extracted",
            "Accepted, deduplicated images found per search before truncation",
            buckets=(0, 1, 5, 10, 25, 50, 100, 250),
        ),
    }


METRICS: Dict[str, Any] = _create_metrics()
