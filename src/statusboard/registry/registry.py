"""Service registry: the ordered, name-keyed set of normalized services."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Dict, List, Optional

from statusboard.registry.builder import build_service
from statusboard.registry.dependencies import resolve_dependencies
from statusboard.registry.models import Service


class ServiceRegistry:
    """Registry of services keyed by raw name, in first-seen order."""

    def __init__(self, services: Optional[Dict[str, Service]] = None) -> None:
        self._services: Dict[str, Service] = dict(services or {})

    @classmethod
    def from_records(cls, raw_records: Iterable[Mapping[str, Any]], subdomain: str) -> ServiceRegistry:
        """Build every service, then resolve dependencies against the full set.

        A repeated name replaces the earlier record but keeps its position.
        """
        services: Dict[str, Service] = {}
        for raw in raw_records:
            service = build_service(raw, subdomain)
            services[service.name] = service
        registry = cls(services)
        registry.resolve_dependencies()
        return registry

    @property
    def service_names(self) -> List[str]:
        return list(self._services.keys())

    @property
    def services(self) -> List[Service]:
        return list(self._services.values())

    def get_entry(self, name: str) -> Optional[Service]:
        return self._services.get(name)

    def resolve_dependencies(self) -> None:
        for service in self._services.values():
            service.dependencies = resolve_dependencies(service, self._services)

    def __iter__(self) -> Iterator[Service]:
        return iter(self._services.values())

    def __len__(self) -> int:
        return len(self._services)
