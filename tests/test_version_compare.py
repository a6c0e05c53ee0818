"""Ordering and update classification."""

from __future__ import annotations

import itertools
from functools import cmp_to_key

import pytest

from mod_check.models import UpdateStatus
from mod_check.utils.version_compare import (
    ReconcileError,
    classify_status,
    compare_versions,
    is_newer,
    sort_descending,
)
from mod_check.utils.version_parser import parse_version

SAMPLE = [
    "v0.1.0", "v0.1.0-rc.1", "v1.0.0", "v1.0.0-alpha", "v1.0.0-beta",
    "v1.0.1", "v1.1.0", "v2.0.0+incompatible", "v2", "v10.0.0", "v1.10.0", "v1.9.9",
]


def _versions():
    return [parse_version(s) for s in SAMPLE]


class TestCompareVersions:

    def test_numeric_segments_are_compared_as_integers(self):
        assert compare_versions(parse_version("v1.10.0"), parse_version("v1.9.9")) == 1
        assert compare_versions(parse_version("v10.0.0"), parse_version("v2.0.0")) == 1

    def test_first_differing_segment_decides(self):
        assert compare_versions(parse_version("v2.0.0"), parse_version("v1.99.99")) == 1
        assert compare_versions(parse_version("v1.2.0"), parse_version("v1.2.1")) == -1

    def test_release_outranks_prerelease(self):
        release = parse_version("v1.0.0")
        pre = parse_version("v1.0.0-rc.1")
        assert compare_versions(release, pre) == 1
        assert compare_versions(pre, release) == -1

    def test_prereleases_are_not_ordered(self):
        assert compare_versions(parse_version("v1.0.0-alpha"), parse_version("v1.0.0-beta")) == 0

    def test_metadata_is_ignored(self):
        assert compare_versions(parse_version("v1.0.0+a"), parse_version("v1.0.0+b")) == 0

    def test_antisymmetric(self):
        for a, b in itertools.permutations(_versions(), 2):
            assert compare_versions(a, b) == -compare_versions(b, a)

    def test_transitive(self):
        for a, b, c in itertools.permutations(_versions(), 3):
            if compare_versions(a, b) >= 0 and compare_versions(b, c) >= 0:
                assert compare_versions(a, c) >= 0

    def test_is_newer(self):
        assert is_newer(parse_version("v1.0.0"), parse_version("v1.0.1"))
        assert not is_newer(parse_version("v1.0.0"), parse_version("v1.0.0"))


class TestSortDescending:

    def test_highest_first(self):
        ranked = [v.original for v in sort_descending(_versions())]
        assert ranked[0] == "v10.0.0"
        assert ranked[-1] == "v0.1.0-rc.1"
        assert ranked.index("v1.0.0") < ranked.index("v1.0.0-alpha")

    def test_ties_keep_input_order(self):
        ranked = sort_descending([parse_version("v1.0.0-beta"), parse_version("v1.0.0-alpha")])
        assert [v.original for v in ranked] == ["v1.0.0-beta", "v1.0.0-alpha"]

    def test_reverse_of_ascending(self):
        versions = _versions()
        ascending = sorted(versions, key=cmp_to_key(compare_versions))
        assert [compare_versions(a, b) for a, b in zip(sort_descending(versions), ascending[::-1])] == [0] * len(versions)


class TestClassifyStatus:

    @pytest.mark.parametrize("baseline, candidate, expected", [
        ("v1.2.3", "v1.2.3", UpdateStatus.CURRENT),
        ("v1.2.3", "v1.2.4", UpdateStatus.PATCH),
        ("v1.2.3", "v1.3.0", UpdateStatus.MINOR),
        ("v1.2.3", "v1.3.5", UpdateStatus.MINOR),
        ("v1.2.3", "v2.0.0", UpdateStatus.MAJOR),
        ("v1.2.3", "v2.5.9", UpdateStatus.MAJOR),
        ("v0.0.1", "v0.0.2", UpdateStatus.PATCH),
    ])
    def test_policy(self, baseline, candidate, expected):
        assert classify_status(parse_version(baseline), parse_version(candidate)) is expected

    def test_newer_candidates_match_first_differing_segment(self):
        versions = _versions()
        names = {0: UpdateStatus.MAJOR, 1: UpdateStatus.MINOR, 2: UpdateStatus.PATCH}
        for base, cand in itertools.permutations(versions, 2):
            if compare_versions(cand, base) <= 0 or cand.core == base.core:
                continue
            first = next(i for i in range(3) if cand.core[i] != base.core[i])
            assert classify_status(base, cand) is names[first]

    def test_older_candidate_raises(self):
        with pytest.raises(ReconcileError):
            classify_status(parse_version("v1.2.3"), parse_version("v1.2.2"))

    def test_reconcile_error_is_not_a_value_error(self):
        assert not issubclass(ReconcileError, ValueError)
