"""
Atomic JSON file writing for saved reports.

The report is written to a temporary file in the target directory and moved
into place with ``os.replace``, so readers never observe a half-written file.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict

import structlog

logger = structlog.get_logger(__name__)


def atomic_write_json(target_path: Path, data: Dict[str, Any], *, indent: int | None = 2) -> None:
    """
    Atomically write JSON data to a file.

    Args:
        target_path: Target file path to write to
        data: Dictionary data to serialize as JSON
        indent: JSON indentation; None for a single line

    Raises:
        OSError: If the file cannot be written or moved into place
        ValueError: If data cannot be serialized to JSON
    """
    target_path = Path(target_path)
    target_path.parent.mkdir(parents=True, exist_ok=True)

    # Serialize data first to catch JSON errors early
    try:
        json_content = json.dumps(data, indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        logger.error("Failed to serialize data to JSON", error=str(e))
        raise ValueError(f"Cannot serialize data to JSON: {e}") from e

    temp_file_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=target_path.parent,
            prefix=f".{target_path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as temp_file:
            temp_file_path = Path(temp_file.name)
            temp_file.write(json_content)
            temp_file.flush()
            os.fsync(temp_file.fileno())

        os.replace(temp_file_path, target_path)
        logger.debug("Atomic write completed", target=str(target_path))
    except OSError:
        if temp_file_path is not None and temp_file_path.exists():
            temp_file_path.unlink(missing_ok=True)
        raise
