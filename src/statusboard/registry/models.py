"""Data model for normalized monitoring services."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from statusboard.registry.status import StatusFields

# Incident time for services with no parseable last_incident_timestamp.
NO_INCIDENT_TIME: float = math.nan


@dataclass(eq=False)
class Service:
    """One monitoring service, normalized from a raw record.

    ``extra`` holds the raw record verbatim. When serialized, the derived
    fields are laid over it, so a raw key never shadows a derived one.
    A missing incident time serializes as null.
    """

    name: str
    proper_name: str
    group_name: str
    status: str | None
    status_number: int
    is_online: bool
    last_incident_time: float = NO_INCIDENT_TIME
    description: str = ""
    link: str = ""
    is_site_or_server: bool = False
    dependencies: list[Service] = field(default_factory=list, repr=False)
    extra: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def status_fields(self) -> StatusFields:
        return StatusFields(self.status, self.status_number, self.is_online)

    def summary(self) -> dict[str, Any]:
        """Reference form used when this service appears as a dependency."""
        return {
            "name": self.name,
            "properName": self.proper_name,
            "groupName": self.group_name,
            "status": self.status,
            "statusNumber": self.status_number,
            "isOnline": self.is_online,
            "link": self.link,
        }

    def to_dict(self) -> dict[str, Any]:
        derived = {
            **self.summary(),
            "lastIncidentTime": None if math.isnan(self.last_incident_time) else self.last_incident_time,
            "description": self.description,
            "isSiteOrServer": self.is_site_or_server,
            "dependencies": [dep.summary() for dep in self.dependencies],
        }
        return {**self.extra, **derived}
