"""Helpers shared by the commands that query the proxy."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from mod_check.config.settings import settings
from mod_check.core.proxy_client import ProxyClient, ProxyError
from mod_check.core.update_checker import check_updates
from mod_check.models.module import ModuleReport
from mod_check.utils.manifest_parser import ManifestError, read_go_mod
from mod_check.utils.version_parser import VersionParseError

err_console = Console(stderr=True)


def fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(code=1)


def load_reports(
    console: Console,
    manifest: Path,
    proxy: Optional[str],
    workers: int,
) -> list[ModuleReport]:
    """Read the manifest and check every direct dependency against the proxy."""
    try:
        requirements = read_go_mod(manifest)
        with console.status("[bold cyan]Checking modules…") as status, ProxyClient(proxy) as client:

            def on_progress(i: int, total: int, path: str) -> None:
                status.update(f"[bold cyan]Checking modules… [dim]({i}/{total})[/dim] {escape(path)}")

            return check_updates(
                requirements,
                client.fetch_version_list,
                on_progress=on_progress,
                workers=workers,
                skip_prerelease=settings.skip_prerelease,
            )
    except (ManifestError, ProxyError, VersionParseError) as exc:
        fail(str(exc))
