"""Dependency annotation parsing and name resolution."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from statusboard.registry.models import Service

logger = logging.getLogger(__name__)

_DEPENDS_PATTERN = re.compile(r"\[dashboard-depends\|(.*)]")


def parse_dependency_names(description: str) -> list[str]:
    """Return the names declared by the first ``[dashboard-depends|...]`` annotation."""
    match = _DEPENDS_PATTERN.search(description)
    if match is None:
        return []
    names = (part.strip() for part in match.group(1).split(","))
    return [name for name in names if name]


def compile_dependency_pattern(name: str) -> re.Pattern[str] | None:
    """Compile a declared name as a case-insensitive pattern, or None if it is not one."""
    try:
        return re.compile(name, re.IGNORECASE)
    except re.error as exc:
        logger.debug("Ignoring dependency %r: not a valid pattern (%s)", name, exc)
        return None


def match_dependency(name: str, services: Mapping[str, Service]) -> dict[str, Service]:
    """Resolve one declared name: exact key first, else every pattern match."""
    exact = services.get(name)
    if exact is not None:
        return {name: exact}
    pattern = compile_dependency_pattern(name)
    if pattern is None:
        return {}
    matches = {key: svc for key, svc in services.items() if pattern.search(key)}
    if not matches:
        logger.debug("Dependency %r matched no services", name)
    return matches


def resolve_dependencies(service: Service, services: Mapping[str, Service]) -> list[Service]:
    """Resolve every dependency *service* declares, in discovery order."""
    found: dict[str, Service] = {}
    for name in parse_dependency_names(service.description):
        for key, dependency in match_dependency(name, services).items():
            found.setdefault(key, dependency)
    return list(found.values())
