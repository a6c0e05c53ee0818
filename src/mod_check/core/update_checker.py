"""Compare pinned module versions against the versions a proxy publishes."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import AbstractSet, Callable, Iterable

from mod_check.core.upgrade_filter import eligible_upgrades, select_upgrades
from mod_check.core.version_collection import build_ranked, is_current, split_version_list
from mod_check.models import UpdateStatus
from mod_check.models.module import ModuleReport, PendingUpgrade, Requirement
from mod_check.models.version import Version
from mod_check.utils.version_compare import is_newer
from mod_check.utils.version_parser import VersionParseError, parse_version

logger = logging.getLogger(__name__)

FetchVersions = Callable[[str], str]
ProgressCallback = Callable[[int, int, str], None]


def build_report(
    requirement: Requirement,
    fetch: FetchVersions,
    skip_prerelease: bool = True,
) -> ModuleReport:
    """Build the report for one dependency.

    Raises VersionParseError if the declared version itself is malformed;
    such a dependency cannot be checked at all.
    """
    try:
        current = parse_version(requirement.version)
    except VersionParseError as exc:
        raise VersionParseError(
            f"{requirement.path}: cannot parse declared version {requirement.version!r}: {exc}"
        ) from exc
    raw = fetch(requirement.path)
    ranked = build_ranked(current, split_version_list(raw), skip_prerelease)
    if not ranked:
        logger.debug("No usable versions published for %s", requirement.path)
    return ModuleReport(
        path=requirement.path,
        current_version=current,
        available_versions=ranked,
        is_current=is_current(current, ranked),
    )


def newer_versions(report: ModuleReport) -> list[Version]:
    """Candidates ranking strictly above the pinned version."""
    return [v for v in report.available_versions if is_newer(report.current_version, v)]


def direct_requirements(requirements: Iterable[Requirement]) -> list[Requirement]:
    return [r for r in requirements if not r.indirect]


def check_updates(
    requirements: Iterable[Requirement],
    fetch: FetchVersions,
    on_progress: ProgressCallback | None = None,
    workers: int = 1,
    skip_prerelease: bool = True,
) -> list[ModuleReport]:
    """Build a report for every direct requirement, in manifest order.

    With ``workers > 1`` the proxy is queried concurrently. The first
    failure (transport or declared-version parse error) propagates and
    aborts the run.
    """
    direct = direct_requirements(requirements)
    total = len(direct)
    results: list[ModuleReport] = []

    if workers <= 1 or total <= 1:
        for i, req in enumerate(direct, 1):
            if on_progress:
                on_progress(i, total, req.path)
            results.append(build_report(req, fetch, skip_prerelease))
        return results

    with ThreadPoolExecutor(max_workers=min(workers, total)) as pool:
        futures = [pool.submit(build_report, req, fetch, skip_prerelease) for req in direct]
        for i, (req, future) in enumerate(zip(direct, futures), 1):
            results.append(future.result())
            if on_progress:
                on_progress(i, total, req.path)
    return results


def select_dependency(reports: list[ModuleReport], name: str | None) -> list[ModuleReport]:
    """Keep only the report for *name*; keep everything if it is absent."""
    if not name:
        return reports
    selected = [r for r in reports if r.path == name]
    if not selected:
        logger.warning("dependency '%s' not found. Listing all dependencies", name)
        return reports
    return selected


def pending_upgrades(
    reports: Iterable[ModuleReport],
    allowed: AbstractSet[UpdateStatus],
    show_incompatible: bool,
    max_count: int,
) -> list[PendingUpgrade]:
    """Filter every report down to what should be displayed.

    Current dependencies and dependencies with nothing qualifying are left
    out. ``omitted`` counts eligible versions cut by *max_count*.
    """
    pending: list[PendingUpgrade] = []
    for report in reports:
        if report.is_current or not report.has_versions:
            continue
        candidates = newer_versions(report)
        shown = select_upgrades(candidates, allowed, show_incompatible, max_count)
        if not shown:
            continue
        eligible = len(eligible_upgrades(candidates, allowed, show_incompatible))
        pending.append(PendingUpgrade(report=report, versions=shown, omitted=eligible - len(shown)))
    return pending
