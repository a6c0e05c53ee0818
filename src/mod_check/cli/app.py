"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="modcheck",
    help="mod-check - Find newer versions of the modules in go.mod.",
    no_args_is_help=True,
)


@app.callback()
def _root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _register_commands() -> None:
    from mod_check.cli.commands.check_cmd import app as check_app
    from mod_check.cli.commands.show_cmd import app as show_app

    app.add_typer(check_app, name="check", help="Report newer versions of direct dependencies")
    app.add_typer(show_app, name="show", help="List direct dependencies")


_register_commands()


def main() -> None:
    app()
