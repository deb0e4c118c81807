"""JSON file helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def read_json(path: str | Path) -> dict[str, Any]:
    """Read and parse a JSON object file.

    Args:
        path: Input file path

    Returns:
        Parsed JSON as dictionary

    Raises:
        ValueError: If the document is not a JSON object
    """
    data: Any = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object, got {type(data).__name__}")
    return data
