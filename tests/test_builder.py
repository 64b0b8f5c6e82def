"""Tests for normalizing raw records into services."""

from __future__ import annotations

import math

from statusboard.registry.builder import (
    build_service,
    parse_incident_time,
    split_group_name,
)
from factories import record


class TestSplitGroupName:
    def test_trims_both_sides(self):
        assert split_group_name(" Core :  API ") == ("Core", "API")

    def test_splits_on_first_colon(self):
        assert split_group_name("Core: API: v2") == ("Core", "API: v2")


class TestParseIncidentTime:
    def test_utc_z_suffix(self):
        assert parse_incident_time("2024-01-01T00:00:00Z") == 1704067200000

    def test_offset(self):
        assert parse_incident_time("2024-01-01T01:00:00+01:00") == 1704067200000

    def test_naive_is_utc(self):
        assert parse_incident_time("2024-01-01T00:00:00") == 1704067200000

    def test_missing(self):
        assert math.isnan(parse_incident_time(None))

    def test_garbage(self):
        assert math.isnan(parse_incident_time("yesterday-ish"))


class TestBuildService:
    def test_primary_service(self):
        svc = build_service(record("Core: API", "critical", "[dashboard-primary]"), "acme")
        assert svc.group_name == "Core"
        assert svc.proper_name == "API"
        assert svc.name == "Core: API"

    def test_primary_without_colon_goes_to_catch_all(self):
        svc = build_service(record("Standalone", "critical", "[dashboard-primary]"), "acme")
        assert svc.group_name == "Other Issues"
        assert svc.proper_name == "Standalone"

    def test_primary_without_colon_keeps_name_verbatim(self):
        svc = build_service(record(" Standalone ", "active", "[dashboard-primary]"), "acme")
        assert svc.group_name == "Other Products"
        assert svc.proper_name == " Standalone "

    def test_colon_without_primary_marker(self):
        svc = build_service(record("Core: API", "active", "no marker"), "acme")
        assert svc.proper_name == "Core: API"
        assert svc.group_name == "Other Products"

    def test_online_non_primary_goes_to_other_products(self):
        svc = build_service(record("Thing", "maintenance"), "acme")
        assert svc.group_name == "Other Products"

    def test_offline_non_primary_goes_to_other_issues(self):
        svc = build_service(record("Thing", "warning"), "acme")
        assert svc.group_name == "Other Issues"

    def test_unknown_status_is_online(self):
        svc = build_service(record("Thing", "mystery"), "acme")
        assert svc.status_number == -1
        assert svc.is_online
        assert svc.group_name == "Other Products"

    def test_link(self):
        svc = build_service(record("Thing"), "acme")
        assert svc.link == "https://acme.pagerduty.com/services/Thing"

    def test_missing_description(self):
        svc = build_service(record("Thing"), "acme")
        assert svc.description == ""

    def test_null_description(self):
        raw = record("Thing")
        raw["description"] = None
        assert build_service(raw, "acme").description == ""

    def test_site_and_server_flags(self):
        site = build_service(record("Shop: Site", description="[dashboard-primary]"), "acme")
        server = build_service(record("Server"), "acme")
        feature = build_service(record("Shop: Sites", description="[dashboard-primary]"), "acme")
        assert site.is_site_or_server
        assert server.is_site_or_server
        assert not feature.is_site_or_server

    def test_passthrough_fields(self):
        svc = build_service(record("Thing", id="PX1", escalation_policy={"id": "E1"}), "acme")
        data = svc.to_dict()
        assert data["id"] == "PX1"
        assert data["escalation_policy"] == {"id": "E1"}

    def test_derived_fields_win_over_raw_keys(self):
        raw = record(
            "Core: API",
            "critical",
            "[dashboard-primary]",
            properName="spoofed",
            groupName="spoofed",
            link="http://spoofed",
            isSiteOrServer=True,
            statusNumber=99,
            isOnline=True,
        )
        data = build_service(raw, "acme").to_dict()
        assert data["properName"] == "API"
        assert data["groupName"] == "Core"
        assert data["link"] == "https://acme.pagerduty.com/services/Core: API"
        assert data["isSiteOrServer"] is False
        assert data["statusNumber"] == 4
        assert data["isOnline"] is False

    def test_missing_incident_time_serializes_as_null(self):
        data = build_service(record("Thing"), "acme").to_dict()
        assert data["lastIncidentTime"] is None

    def test_incident_time_serialized(self):
        svc = build_service(record("Thing", last_incident_timestamp="2024-01-01T00:00:00Z"), "acme")
        assert svc.to_dict()["lastIncidentTime"] == 1704067200000
