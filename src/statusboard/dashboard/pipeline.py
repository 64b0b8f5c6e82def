"""Dashboard pipeline: raw records in, aggregated groups out."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from statusboard.config.models import StatusboardConfig, normalize_subdomain
from statusboard.dashboard.aggregate import aggregate_groups
from statusboard.dashboard.grouping import build_groups
from statusboard.dashboard.models import Group
from statusboard.registry.registry import ServiceRegistry

logger = logging.getLogger(__name__)


def build_dashboard(raw_records: Iterable[Mapping[str, Any]], subdomain: str) -> list[Group]:
    """Run the full transformation. Pure and deterministic."""
    registry = ServiceRegistry.from_records(raw_records, subdomain)
    groups = build_groups(registry)
    return aggregate_groups(groups.values())


class DashboardPipeline:
    """Runs the dashboard transformation with a configured PagerDuty subdomain."""

    def __init__(self, config: StatusboardConfig, subdomain: str | None = None) -> None:
        self._config = config
        self._subdomain = normalize_subdomain(subdomain) if subdomain else config.pagerduty.subdomain

    @property
    def subdomain(self) -> str:
        return self._subdomain

    def run(self, raw_records: Iterable[Mapping[str, Any]]) -> list[Group]:
        if not self._subdomain:
            raise ValueError("No PagerDuty subdomain configured (set pagerduty.subdomain or pass one)")
        records = list(raw_records)
        groups = build_dashboard(records, self._subdomain)
        failing = sum(1 for g in groups if not g.is_online)
        logger.info(
            "Built %d groups from %d records (%d offline)",
            len(groups),
            len(records),
            failing,
        )
        return groups
