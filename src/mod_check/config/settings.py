"""Application configuration and defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from mod_check.models import UpdateStatus

logger = logging.getLogger(__name__)

DEFAULT_PROXY = "https://proxy.golang.org"
MAX_VERSIONS_LIMIT = 1000

_FILTER_VALUES: dict[str, UpdateStatus] = {
    "major": UpdateStatus.MAJOR,
    "minor": UpdateStatus.MINOR,
    "patch": UpdateStatus.PATCH,
}


class ConfigError(ValueError):
    """Invalid command-line or environment configuration."""


def _default_proxy_url() -> str:
    """Return the first HTTP(S) proxy listed in GOPROXY.

    GOPROXY is a comma or pipe separated list that may also hold the
    keywords ``direct`` and ``off``; those are skipped.
    """
    raw = os.environ.get("GOPROXY", "")
    for entry in raw.replace("|", ",").split(","):
        entry = entry.strip()
        if entry.startswith(("http://", "https://")):
            return entry.rstrip("/")
    return DEFAULT_PROXY


def _env_number(name: str, default: float, cast=float):
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r, not a number", name, raw)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r, must be positive", name, raw)
        return default
    return value


@dataclass
class Settings:
    proxy_url: str = field(default_factory=_default_proxy_url)
    timeout: float = field(default_factory=lambda: _env_number("MODCHECK_TIMEOUT", 10.0))
    workers: int = field(default_factory=lambda: _env_number("MODCHECK_WORKERS", 8, int))
    manifest_file: str = "go.mod"
    default_filter: str = "major,minor,patch"
    default_max_versions: int = 15
    skip_prerelease: bool = True


def parse_filter(value: str | None) -> frozenset[UpdateStatus]:
    """Parse a comma separated severity filter; empty means all severities."""
    if not value:
        return frozenset(_FILTER_VALUES.values())
    statuses = set()
    for part in value.split(","):
        if part not in _FILTER_VALUES:
            raise ConfigError(
                "`filter` can be made up only from `major`, `minor` and `patch` values"
            )
        statuses.add(_FILTER_VALUES[part])
    return frozenset(statuses)


def validate_max_versions(value: int) -> int:
    if value <= 0 or value > MAX_VERSIONS_LIMIT:
        raise ConfigError(f"`max-versions` can be between 1 and {MAX_VERSIONS_LIMIT}")
    return value


# Global singleton
settings = Settings()
