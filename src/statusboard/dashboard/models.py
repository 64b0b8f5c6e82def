"""Data model for dashboard groups."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from statusboard.registry.builder import OTHER_ISSUES, OTHER_PRODUCTS
from statusboard.registry.models import Service
from statusboard.registry.status import StatusFields

OTHER_GROUP_NAMES = (OTHER_PRODUCTS, OTHER_ISSUES)

_WHITESPACE = re.compile(r"\s")


def group_id(name: str) -> str:
    """Slug for a group name: lowercased, each whitespace character replaced by a hyphen."""
    return _WHITESPACE.sub("-", name.lower())


@dataclass(eq=False)
class Group:
    """A named cluster of services rolled up to one status."""

    name: str
    id: str
    is_other_group: bool = False
    features: list[Service] = field(default_factory=list)
    site: Service | None = None
    server: Service | None = None
    number_failures: int = 0
    status: str | None = "disabled"
    status_number: int = 0
    is_online: bool = True
    last_incident_time: float = 0
    dependencies: list[Service] = field(default_factory=list)

    @classmethod
    def new(cls, name: str) -> Group:
        return cls(name=name, id=group_id(name), is_other_group=name in OTHER_GROUP_NAMES)

    @property
    def members(self) -> list[Service]:
        """Features, then the site and server slots when occupied."""
        members = list(self.features)
        if self.site is not None:
            members.append(self.site)
        if self.server is not None:
            members.append(self.server)
        return members

    def apply_status(self, fields: StatusFields) -> None:
        self.status = fields.status
        self.status_number = fields.status_number
        self.is_online = fields.is_online

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "id": self.id,
            "isOtherGroup": self.is_other_group,
            "features": [s.to_dict() for s in self.features],
            "site": self.site.to_dict() if self.site else None,
            "server": self.server.to_dict() if self.server else None,
            "numberFailures": self.number_failures,
            "status": self.status,
            "statusNumber": self.status_number,
            "isOnline": self.is_online,
            "lastIncidentTime": self.last_incident_time,
            "dependencies": [d.summary() for d in self.dependencies],
        }
