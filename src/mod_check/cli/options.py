"""Shared CLI options."""

from __future__ import annotations

from pathlib import Path

import typer

from mod_check.config.settings import ConfigError, parse_filter, settings, validate_max_versions
from mod_check.models import OutputFormat


def _check_filter(value: str) -> str:
    try:
        parse_filter(value)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return value


def _check_max_versions(value: int) -> int:
    try:
        return validate_max_versions(value)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc


ManifestOption = typer.Option(Path(settings.manifest_file), "--file", help="Path to the go.mod file")
ProxyOption = typer.Option(None, "--proxy", help="Module proxy URL (default: $GOPROXY)")
WorkersOption = typer.Option(settings.workers, "--workers", "-w", min=1, help="Concurrent proxy requests")
OutputOption = typer.Option(OutputFormat.TEXT, "--output", "-o", help="Output format: text, table, json, yaml")
FilterOption = typer.Option(
    settings.default_filter,
    "--filter",
    "-f",
    callback=_check_filter,
    help="Version types to display, comma separated: major, minor, patch",
)
MaxVersionsOption = typer.Option(
    settings.default_max_versions,
    "--max-versions",
    "-m",
    callback=_check_max_versions,
    help="Maximum number of versions to display for each dependency (1-1000)",
)
IncompatibleOption = typer.Option(False, "--show-incompatible", help="Show +incompatible versions")
