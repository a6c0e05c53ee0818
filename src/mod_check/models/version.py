"""Structured module version."""

from __future__ import annotations

from dataclasses import dataclass

from mod_check.models import UpdateStatus


@dataclass(frozen=True)
class Version:
    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: tuple[str, ...] = ()
    metadata: str = ""
    incompatible: bool = False
    original: str = ""
    # Only meaningful next to the baseline it was classified against.
    status: UpdateStatus = UpdateStatus.UNSET

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    @property
    def core(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def __str__(self) -> str:
        return f"v{self.major}.{self.minor}.{self.patch}"
