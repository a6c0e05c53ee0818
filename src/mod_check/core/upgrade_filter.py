"""Narrow a ranked version set to the upgrades worth reporting."""

from __future__ import annotations

from typing import AbstractSet, Iterable

from mod_check.models import UpdateStatus
from mod_check.models.version import Version

UPGRADE_STATUSES: frozenset[UpdateStatus] = frozenset({
    UpdateStatus.MAJOR,
    UpdateStatus.MINOR,
    UpdateStatus.PATCH,
})


def eligible_upgrades(
    ranked: Iterable[Version],
    allowed: AbstractSet[UpdateStatus],
    show_incompatible: bool,
) -> list[Version]:
    """Every candidate that passes the severity and incompatible filters."""
    allowed = allowed & UPGRADE_STATUSES
    return [
        v for v in ranked
        if v.status in allowed and (show_incompatible or not v.incompatible)
    ]


def select_upgrades(
    ranked: Iterable[Version],
    allowed: AbstractSet[UpdateStatus],
    show_incompatible: bool,
    max_count: int,
) -> list[Version]:
    """Filter *ranked* and keep at most *max_count* entries, order preserved."""
    return eligible_upgrades(ranked, allowed, show_incompatible)[:max_count]
