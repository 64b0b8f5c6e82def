"""Tests for status classification."""

from __future__ import annotations

import pytest

from statusboard.registry.status import StatusFields, is_online_status, status_to_number


class TestStatusToNumber:
    @pytest.mark.parametrize(
        "status,expected",
        [("critical", 4), ("warning", 3), ("active", 2), ("maintenance", 1), ("disabled", 0)],
    )
    def test_known_labels(self, status, expected):
        assert status_to_number(status) == expected

    def test_unknown_label(self):
        assert status_to_number("exploded") == -1

    def test_none(self):
        assert status_to_number(None) == -1

    def test_case_sensitive(self):
        assert status_to_number("Critical") == -1


class TestIsOnline:
    def test_offline_labels(self):
        assert not is_online_status("critical")
        assert not is_online_status("warning")

    def test_online_labels(self):
        for status in ("active", "maintenance", "disabled"):
            assert is_online_status(status)

    def test_unknown_is_online(self):
        assert is_online_status("exploded")
        assert is_online_status(None)


class TestStatusFields:
    def test_from_status(self):
        fields = StatusFields.from_status("warning")
        assert fields.status == "warning"
        assert fields.status_number == 3
        assert fields.is_online is False

    def test_from_missing_status(self):
        fields = StatusFields.from_status(None)
        assert fields.status is None
        assert fields.status_number == -1
        assert fields.is_online is True
