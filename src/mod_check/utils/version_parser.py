"""Parse Go module version tokens into structured versions."""

from __future__ import annotations

import re
import string
from dataclasses import replace

from mod_check.models.version import Version
from mod_check.utils.version_compare import classify_status

_VERSION_RE = re.compile(
    r"v?([0-9]+)(\.[0-9]+)?(\.[0-9]+)?"
    r"(-([0-9A-Za-z\-]+(\.[0-9A-Za-z\-]+)*))?"
    r"(\+([0-9A-Za-z\-]+(\.[0-9A-Za-z\-]+)*))?"
)

_IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "-")
_MAX_SEGMENT = 2**64 - 1
_MAX_SEGMENT_DIGITS = len(str(_MAX_SEGMENT))


class VersionParseError(ValueError):
    """Raised when a token is not a usable module version."""


def parse_version(raw: str, baseline: Version | None = None) -> Version:
    """Parse *raw* into a :class:`Version`.

    When *baseline* is given the result carries the update status of *raw*
    relative to it. A :class:`~mod_check.utils.version_compare.ReconcileError`
    from that step is not a parse failure and propagates as-is.
    """
    m = _VERSION_RE.fullmatch(raw)
    if m is None:
        raise VersionParseError("invalid semantic version")

    major = _parse_segment(m.group(1))
    minor = _parse_segment(m.group(2)[1:]) if m.group(2) else 0
    patch = _parse_segment(m.group(3)[1:]) if m.group(3) else 0
    prerelease = m.group(5) or ""
    metadata = m.group(8) or ""

    if prerelease:
        _validate_prerelease(prerelease)
    if metadata:
        _validate_metadata(metadata)

    version = Version(
        major=major,
        minor=minor,
        patch=patch,
        prerelease=tuple(prerelease.split(".")) if prerelease else (),
        metadata=metadata,
        # Go marks +incompatible tags this way; match anywhere in the token.
        incompatible="incompatible" in raw,
        original=raw,
    )
    if baseline is not None:
        version = replace(version, status=classify_status(baseline, version))
    return version


def _parse_segment(digits: str) -> int:
    # Bound the length before int(); huge digit strings are rejected by CPython.
    significant = digits.lstrip("0") or "0"
    if len(significant) > _MAX_SEGMENT_DIGITS:
        raise VersionParseError("invalid segment")
    value = int(significant)
    if value > _MAX_SEGMENT:
        raise VersionParseError("invalid segment")
    return value


def _validate_prerelease(prerelease: str) -> None:
    for part in prerelease.split("."):
        if part.isdigit():
            if len(part) > 1 and part[0] == "0":
                raise VersionParseError("version segment starts with 0")
        elif not set(part) <= _IDENT_CHARS:
            raise VersionParseError("invalid prerelease string")


def _validate_metadata(metadata: str) -> None:
    for part in metadata.split("."):
        if not set(part) <= _IDENT_CHARS:
            raise VersionParseError("invalid metadata string")
