"""Normalize raw monitoring records into Service objects."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

from statusboard.registry.models import NO_INCIDENT_TIME, Service
from statusboard.registry.status import StatusFields

PRIMARY_MARKER = "[dashboard-primary]"
OTHER_PRODUCTS = "Other Products"
OTHER_ISSUES = "Other Issues"
SITE_OR_SERVER_NAMES = ("Site", "Server")

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def is_primary(description: str) -> bool:
    return PRIMARY_MARKER in description


def split_group_name(name: str) -> tuple[str, str]:
    """Split ``"<group>: <service>"`` on the first colon, trimming both sides."""
    prefix, _, suffix = name.partition(":")
    return prefix.strip(), suffix.strip()


def parse_incident_time(value: Any) -> float:
    """Parse an ISO-8601 timestamp into epoch milliseconds.

    Returns NaN for missing or unparseable values. Naive timestamps are read as UTC.
    """
    if not isinstance(value, str) or not value.strip():
        return NO_INCIDENT_TIME
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return NO_INCIDENT_TIME
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return (parsed - _EPOCH) // timedelta(milliseconds=1)


def build_link(subdomain: str, service_url: Any) -> str:
    return f"https://{subdomain}.pagerduty.com{service_url or ''}"


def build_service(raw: Mapping[str, Any], subdomain: str) -> Service:
    """Build a Service from one raw record."""
    name = str(raw.get("name") or "")
    description = raw.get("description") or ""
    if not isinstance(description, str):
        description = str(description)
    status = StatusFields.from_status(raw.get("status"))

    # Only primary services named "<group>: <service>" get their own group.
    if is_primary(description) and ":" in name:
        group_name, proper_name = split_group_name(name)
    else:
        proper_name = name
        group_name = OTHER_PRODUCTS if status.is_online else OTHER_ISSUES

    return Service(
        name=name,
        proper_name=proper_name,
        group_name=group_name,
        status=status.status,
        status_number=status.status_number,
        is_online=status.is_online,
        last_incident_time=parse_incident_time(raw.get("last_incident_timestamp")),
        description=description,
        link=build_link(subdomain, raw.get("service_url")),
        is_site_or_server=proper_name in SITE_OR_SERVER_NAMES,
        extra=dict(raw),
    )
