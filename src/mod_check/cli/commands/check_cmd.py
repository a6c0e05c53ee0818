"""modcheck check - Report newer versions of direct dependencies."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from mod_check.cli.commands.common import load_reports
from mod_check.cli.options import (
    FilterOption,
    IncompatibleOption,
    ManifestOption,
    MaxVersionsOption,
    OutputOption,
    ProxyOption,
    WorkersOption,
)
from mod_check.config.settings import parse_filter
from mod_check.core.update_checker import pending_upgrades, select_dependency
from mod_check.models import OutputFormat
from mod_check.output.formatters import console, output_upgrades

app = typer.Typer()


@app.callback(invoke_without_command=True)
def check(
    file: Path = ManifestOption,
    filter: str = FilterOption,
    max_versions: int = MaxVersionsOption,
    show_incompatible: bool = IncompatibleOption,
    dependency: Optional[str] = typer.Option(None, "--dependency", "-d", help="Only check this module path"),
    output: OutputFormat = OutputOption,
    pretty: bool = typer.Option(False, "--pretty", "-p", help="Shorthand for --output table"),
    workers: int = WorkersOption,
    proxy: Optional[str] = ProxyOption,
) -> None:
    """Report direct dependencies that have newer versions available."""
    if pretty:
        output = OutputFormat.TABLE

    reports = load_reports(console, file, proxy, workers)
    reports = select_dependency(reports, dependency)
    pending = pending_upgrades(reports, parse_filter(filter), show_incompatible, max_versions)
    output_upgrades(pending, output, filter, max_versions, show_incompatible)
