"""Loading raw monitoring records from JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def coerce_records(data: Any) -> list[dict[str, Any]]:
    """Accept a bare list of records or a PagerDuty ``{"services": [...]}`` envelope."""
    if isinstance(data, dict) and "services" in data:
        data = data["services"]
    if not isinstance(data, list):
        raise ValueError("Expected a list of service records or an object with a 'services' list")
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise ValueError(f"Record {index} is not an object")
    return data


def load_records(path: Path) -> list[dict[str, Any]]:
    if not path.exists():
        raise FileNotFoundError(f"Records file not found: {path}")
    with path.open("r", encoding="utf-8") as fh:
        try:
            data = json.load(fh)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    return coerce_records(data)
