"""Severity and incompatible filtering of ranked versions."""

from __future__ import annotations

from mod_check.core.upgrade_filter import eligible_upgrades, select_upgrades
from mod_check.core.version_collection import build_ranked
from mod_check.models import UpdateStatus
from mod_check.utils.version_parser import parse_version

ALL = {UpdateStatus.MAJOR, UpdateStatus.MINOR, UpdateStatus.PATCH}


def _ranked(*raws, baseline="v1.2.3"):
    return build_ranked(parse_version(baseline), raws, True)


def _originals(versions):
    return [v.original for v in versions]


RANKED = _ranked("v1.2.3", "v1.3.0", "v2.0.0", "v1.2.4", "garbage", "")


class TestSelectUpgrades:

    def test_major_only_capped(self):
        assert _originals(select_upgrades(RANKED, {UpdateStatus.MAJOR}, False, 1)) == ["v2.0.0"]

    def test_all_severities_skip_current(self):
        assert _originals(select_upgrades(RANKED, ALL, False, 10)) == ["v2.0.0", "v1.3.0", "v1.2.4"]

    def test_current_is_never_eligible(self):
        allowed = ALL | {UpdateStatus.CURRENT}
        assert "v1.2.3" not in _originals(select_upgrades(RANKED, allowed, False, 10))

    def test_minor_and_patch(self):
        allowed = {UpdateStatus.MINOR, UpdateStatus.PATCH}
        assert _originals(select_upgrades(RANKED, allowed, False, 10)) == ["v1.3.0", "v1.2.4"]

    def test_truncation_keeps_order(self):
        ranked = _ranked("v1.2.4", "v1.2.5", "v1.2.6", "v1.2.7")
        assert _originals(select_upgrades(ranked, ALL, False, 2)) == ["v1.2.7", "v1.2.6"]

    def test_incompatible_hidden(self):
        ranked = _ranked("v3.0.0+incompatible", "v2.0.0", baseline="v1.0.0")
        assert _originals(select_upgrades(ranked, {UpdateStatus.MAJOR}, False, 10)) == ["v2.0.0"]

    def test_incompatible_shown(self):
        ranked = _ranked("v3.0.0+incompatible", "v2.0.0", baseline="v1.0.0")
        selected = select_upgrades(ranked, {UpdateStatus.MAJOR}, True, 10)
        assert _originals(selected) == ["v3.0.0+incompatible", "v2.0.0"]

    def test_empty_input(self):
        assert select_upgrades([], ALL, True, 5) == []


def test_eligible_upgrades_does_not_truncate():
    ranked = _ranked("v1.2.4", "v1.2.5", "v1.2.6")
    assert len(eligible_upgrades(ranked, ALL, False)) == 3
