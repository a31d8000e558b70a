"""
Report assembly and serialization.

The serialized field names (including the accented ones) are the external
contract that downstream consumers parse; they are kept verbatim.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Tuple

import structlog

from imagescout.extractor.models import ExtractionOutcome, ImageResult

logger = structlog.get_logger(__name__)

ENGINE_NAME = "Google"
FALLBACK_RUN_ID = "0"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U64_MASK = 2**64 - 1


class SearchStatus(Enum):
    """Outcome label written into the report metadata."""

    SUCCESS = "Succès"
    FAILURE = "Échec"


@dataclass(slots=True, frozen=True)
class SearchParameters:
    query: str
    locale: str = "en"
    safe_mode: str = "off"
    engine: str = ENGINE_NAME

    def to_dict(self) -> Dict[str, Any]:
        return {"moteur": self.engine, "q": self.query, "hl": self.locale, "safe": self.safe_mode}


@dataclass(slots=True, frozen=True)
class SearchMetadata:
    run_id: str
    status: SearchStatus
    request_url: str
    created_at: datetime
    completed_at: datetime
    elapsed_seconds: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "identifiant": self.run_id,
            "statut": self.status.value,
            "google_url": self.request_url,
            "created_at": format_timestamp(self.created_at),
            "processed_at": format_timestamp(self.completed_at),
            "total_time_secs": self.elapsed_seconds,
        }


@dataclass(slots=True, frozen=True)
class ExtractionStats:
    raw_found: int
    after_filter: int
    parse_seconds: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "brut_images_trouvees": self.raw_found,
            "apres_filtre": self.after_filter,
            "temps_parse_secs": self.parse_seconds,
        }


@dataclass(slots=True, frozen=True)
class Report:
    """Complete result of one image search."""

    metadata: SearchMetadata
    parameters: SearchParameters
    stats: ExtractionStats
    results: Tuple[ImageResult, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "recherche_métadonnées": self.metadata.to_dict(),
            "paramètres_de_recherche": self.parameters.to_dict(),
            "recherche_informations": self.stats.to_dict(),
            "résultats_images": [result.to_dict() for result in self.results],
        }

    def to_json(self, *, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` as an RFC 3339 UTC timestamp with a ``Z`` suffix."""
    return _as_utc(moment).isoformat().replace("+00:00", "Z")


def derive_run_id(completed_at: datetime) -> str:
    """
    Derive a run identifier from the completion time.

    The identifier is the lowercase hex rendering of the timestamp's
    nanoseconds since the Unix epoch, taken as a signed 64-bit value
    (negative values render in two's complement). It is not a uniqueness
    guarantee. Timestamps outside the 64-bit nanosecond range (before 1677 or
    after 2262) yield ``FALLBACK_RUN_ID``.
    """
    try:
        delta = _as_utc(completed_at) - _EPOCH
        nanos = (delta.days * 86_400 + delta.seconds) * 1_000_000_000 + delta.microseconds * 1_000
    except (OverflowError, ValueError) as e:
        logger.warning("Could not derive run id, using fallback", error=str(e))
        return FALLBACK_RUN_ID

    if not _I64_MIN <= nanos <= _I64_MAX:
        logger.warning("Completion time outside nanosecond range, using fallback run id", completed_at=str(completed_at))
        return FALLBACK_RUN_ID

    return format(nanos & _U64_MASK, "x")


def build_report(
    *,
    query: str,
    request_url: str,
    outcome: ExtractionOutcome,
    created_at: datetime,
    completed_at: datetime,
    elapsed_seconds: float,
    locale: str = "en",
    safe_mode: str = "off",
) -> Report:
    """
    Assemble the final report for a successful search.

    Args:
        query: The query string exactly as the caller supplied it
        request_url: The URL that was fetched
        outcome: Extraction output for the fetched page
        created_at: Wall-clock time captured before the request was issued
        completed_at: Wall-clock time captured after extraction finished
        elapsed_seconds: Duration between the two instants
        locale: Interface language sent with the request
        safe_mode: SafeSearch setting sent with the request

    Returns:
        Report with status SUCCESS; failed searches never produce a report
    """
    metadata = SearchMetadata(
        run_id=derive_run_id(completed_at),
        status=SearchStatus.SUCCESS,
        request_url=request_url,
        created_at=created_at,
        completed_at=completed_at,
        elapsed_seconds=elapsed_seconds,
    )
    return Report(
        metadata=metadata,
        parameters=SearchParameters(query=query, locale=locale, safe_mode=safe_mode),
        stats=ExtractionStats(
            raw_found=outcome.raw_found,
            after_filter=outcome.after_filter,
            parse_seconds=outcome.parse_seconds,
        ),
        results=outcome.results,
    )
