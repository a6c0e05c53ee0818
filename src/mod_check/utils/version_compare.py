"""Version ordering and update classification."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable

from mod_check.models import UpdateStatus
from mod_check.models.version import Version


class ReconcileError(RuntimeError):
    """A candidate could not be classified against its baseline.

    Signals disagreement between ordering and classification, i.e. a bug,
    never bad user input.
    """


def compare_versions(a: Version, b: Version) -> int:
    """Return 1, 0 or -1 as *a* ranks above, level with or below *b*.

    Only major/minor/patch are ordered. On a numeric tie a release outranks
    a pre-release; two pre-releases (or two releases) are equal.
    """
    for x, y in zip(a.core, b.core):
        if x != y:
            return 1 if x > y else -1

    if a.is_prerelease == b.is_prerelease:
        return 0
    return -1 if a.is_prerelease else 1


def is_newer(current: Version, candidate: Version) -> bool:
    """Return True if candidate ranks strictly above current."""
    return compare_versions(candidate, current) > 0


def sort_descending(versions: Iterable[Version]) -> list[Version]:
    """Sort highest first; ties keep their input order."""
    return sorted(versions, key=cmp_to_key(compare_versions), reverse=True)


def classify_status(baseline: Version, candidate: Version) -> UpdateStatus:
    """Classify the update from *baseline* to *candidate*."""
    if baseline.core == candidate.core:
        return UpdateStatus.CURRENT
    if candidate.major > baseline.major:
        return UpdateStatus.MAJOR
    if candidate.minor > baseline.minor:
        return UpdateStatus.MINOR
    if candidate.patch > baseline.patch:
        return UpdateStatus.PATCH
    raise ReconcileError("failed to reconcile version status")
