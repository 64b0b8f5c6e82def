"""Partition services into dashboard groups."""

from __future__ import annotations

from collections.abc import Iterable

from statusboard.dashboard.models import OTHER_GROUP_NAMES, Group
from statusboard.registry.models import Service


def add_service_to_group(service: Service, groups: dict[str, Group]) -> Group:
    """Place *service* in its group, creating the group on first use."""
    group = groups.get(service.group_name)
    if group is None:
        group = groups[service.group_name] = Group.new(service.group_name)

    if service.is_site_or_server:
        # Last write wins when a group has two Site (or Server) services.
        setattr(group, service.proper_name.lower(), service)
    else:
        group.features.append(service)

    if not service.is_online:
        group.number_failures += 1
    return group


def build_groups(services: Iterable[Service]) -> dict[str, Group]:
    """Group services by name. The two catch-all groups always come first."""
    groups: dict[str, Group] = {name: Group.new(name) for name in OTHER_GROUP_NAMES}
    for service in services:
        add_service_to_group(service, groups)
    return groups
