"""Data models for mod-check."""

from __future__ import annotations

import enum


class UpdateStatus(enum.Enum):
    CURRENT = "current"
    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"
    UNSET = ""


class OutputFormat(enum.Enum):
    TEXT = "text"
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"
