"""Dependency and report models."""

from __future__ import annotations

from dataclasses import dataclass, field

from mod_check.models.version import Version


@dataclass
class Requirement:
    path: str
    version: str
    indirect: bool = False


@dataclass
class ModuleReport:
    path: str
    current_version: Version
    available_versions: list[Version] = field(default_factory=list)
    is_current: bool = False

    @property
    def has_versions(self) -> bool:
        """False when the proxy returned no usable versions at all."""
        return bool(self.available_versions)


@dataclass
class PendingUpgrade:
    """The versions of one dependency that pass the display filters."""

    report: ModuleReport
    versions: list[Version]
    omitted: int = 0

    @property
    def path(self) -> str:
        return self.report.path
