"""Roll group members up into a single group status."""

from __future__ import annotations

import math
from collections.abc import Iterable

from statusboard.dashboard.models import Group
from statusboard.registry.models import Service
from statusboard.registry.status import StatusFields

EMPTY_GROUP_STATUS = "disabled"


def worse_status_service(current: Service, candidate: Service) -> Service:
    """Return the worse of two services; ties keep *current*."""
    return candidate if candidate.status_number > current.status_number else current


def earliest_incident_time(services: Iterable[Service]) -> float:
    """Earliest incident time among offline services, or 0 when there is none."""
    earliest: float | None = None
    for service in services:
        if service.is_online or math.isnan(service.last_incident_time):
            continue
        if earliest is None or service.last_incident_time < earliest:
            earliest = service.last_incident_time
    return earliest if earliest is not None else 0


def aggregate_group(group: Group) -> Group:
    members = group.members
    worst: Service | None = None
    dependencies: dict[str, Service] = {}

    for service in members:
        worst = service if worst is None else worse_status_service(worst, service)
        for dependency in service.dependencies:
            dependencies.setdefault(dependency.name, dependency)

    group.apply_status(worst.status_fields if worst else StatusFields.from_status(EMPTY_GROUP_STATUS))
    group.last_incident_time = earliest_incident_time(members)
    group.dependencies = list(dependencies.values())
    return group


def aggregate_groups(groups: Iterable[Group]) -> list[Group]:
    return [aggregate_group(group) for group in groups]
