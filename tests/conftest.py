"""Shared fixtures for Statusboard tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import pytest
import yaml

from statusboard.config.models import StatusboardConfig

SUBDOMAIN = "acme"

SAMPLE_CONFIG: Dict[str, Any] = {
    "statusboard": {"name": "Statusboard", "version": "0.1.0"},
    "pagerduty": {"subdomain": SUBDOMAIN},
}

SAMPLE_RECORDS: List[Dict[str, Any]] = [
    {
        "id": "P1",
        "name": "Checkout: Site",
        "service_url": "/services/P1",
        "status": "active",
        "description": "[dashboard-primary]",
    },
    {
        "id": "P2",
        "name": "Checkout: Payments",
        "service_url": "/services/P2",
        "status": "critical",
        "last_incident_timestamp": "2024-01-01T00:00:00Z",
        "description": "[dashboard-primary] [dashboard-depends|Database, Queue]",
    },
    {
        "id": "P3",
        "name": "Database",
        "service_url": "/services/P3",
        "status": "active",
    },
    {
        "id": "P4",
        "name": "Job Queue",
        "service_url": "/services/P4",
        "status": "warning",
        "last_incident_timestamp": "2024-02-01T12:00:00Z",
        "description": "Background workers",
    },
]


@pytest.fixture()
def sample_config() -> StatusboardConfig:
    return StatusboardConfig(**SAMPLE_CONFIG)


@pytest.fixture()
def sample_records() -> List[Dict[str, Any]]:
    """Return a fresh copy of the sample records."""
    return [dict(r) for r in SAMPLE_RECORDS]


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    """Write sample config to a temp .statusboard.yaml and return the path."""
    path = tmp_path / ".statusboard.yaml"
    with path.open("w") as fh:
        yaml.dump(SAMPLE_CONFIG, fh)
    return path

