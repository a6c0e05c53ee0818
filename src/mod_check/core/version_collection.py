"""Turn a raw proxy version list into a ranked, classified set."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable

from mod_check.models.version import Version
from mod_check.utils.version_compare import classify_status, compare_versions, sort_descending
from mod_check.utils.version_parser import VersionParseError, parse_version

logger = logging.getLogger(__name__)


def split_version_list(text: str) -> list[str]:
    """Split a newline-separated version list into raw tokens.

    Blank lines are kept; they fail to parse and are dropped later.
    """
    return text.split("\n")


def build_ranked(
    baseline: Version,
    raw_candidates: Iterable[str],
    skip_prerelease: bool = True,
) -> list[Version]:
    """Parse, classify and rank candidate versions, highest first.

    Tokens that do not parse are skipped: the proxy list may carry blank
    lines or tags that are not versions, and one bad line must not fail the
    whole dependency. Versions ranking below *baseline* are never upgrades
    and are left out before classification.
    """
    versions: list[Version] = []
    for raw in raw_candidates:
        try:
            parsed = parse_version(raw)
        except VersionParseError as exc:
            logger.debug("Skipping version %r: %s", raw, exc)
            continue
        if skip_prerelease and parsed.is_prerelease:
            continue
        if compare_versions(parsed, baseline) < 0:
            logger.debug("Skipping version %s, older than %s", raw, baseline.original)
            continue
        versions.append(replace(parsed, status=classify_status(baseline, parsed)))
    return sort_descending(versions)


def is_current(baseline: Version, ranked: list[Version]) -> bool:
    """True iff the top-ranked candidate is textually the baseline.

    Compares ``original`` strings, so ``v1.2.3+build1`` is not current
    against an available ``v1.2.3``.
    """
    if not ranked:
        return False
    return ranked[0].original == baseline.original
