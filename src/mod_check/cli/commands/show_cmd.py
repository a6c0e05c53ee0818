"""modcheck show - List direct dependencies."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from mod_check.cli.commands.common import load_reports
from mod_check.cli.options import ManifestOption, ProxyOption, WorkersOption
from mod_check.output.formatters import console

app = typer.Typer()


@app.callback(invoke_without_command=True)
def show(
    file: Path = ManifestOption,
    old: bool = typer.Option(False, "--old", help="Only list dependencies with newer versions"),
    workers: int = WorkersOption,
    proxy: Optional[str] = ProxyOption,
) -> None:
    """List direct dependencies the proxy knows about."""
    reports = load_reports(console, file, proxy, workers)

    num = 0
    for report in reports:
        if not report.has_versions:
            continue
        if old and report.is_current:
            continue
        console.print(escape(report.path), soft_wrap=True)
        num += 1
    console.print(f"Total entries: {num}")
