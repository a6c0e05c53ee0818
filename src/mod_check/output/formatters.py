"""Text / table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape

from mod_check.models import OutputFormat
from mod_check.models.module import PendingUpgrade
from mod_check.output.themes import CURRENT_STYLE, PATH_STYLE, styled_version

console = Console()


def _pending_to_dict(item: PendingUpgrade) -> dict[str, Any]:
    return {
        "path": item.path,
        "current": item.report.current_version.original,
        "is_current": item.report.is_current,
        "available": [
            {
                "version": v.original,
                "status": v.status.value,
                "incompatible": v.incompatible,
            }
            for v in item.versions
        ],
        "omitted": item.omitted,
    }


def _print_empty_summary(filter_value: str, max_versions: int, show_incompatible: bool) -> None:
    console.print("There are no newer versions that fulfill provided requirements.")
    console.print(f"Filter: {escape(filter_value)}")
    console.print(f"Max-versions: {max_versions}")
    console.print(f"Show incompatible: {str(show_incompatible).lower()}")


def output_upgrades(
    pending: list[PendingUpgrade],
    fmt: OutputFormat,
    filter_value: str,
    max_versions: int,
    show_incompatible: bool,
) -> None:
    if fmt == OutputFormat.JSON:
        data = [_pending_to_dict(p) for p in pending]
        console.print_json(json.dumps(data, indent=2))
    elif fmt == OutputFormat.YAML:
        data = [_pending_to_dict(p) for p in pending]
        text = yaml.dump(data, default_flow_style=False, sort_keys=False)
        console.print(text, markup=False, highlight=False, soft_wrap=True)
    elif fmt == OutputFormat.TABLE:
        if not pending:
            _print_empty_summary(filter_value, max_versions, show_incompatible)
            return
        from mod_check.output.tables import upgrades_table
        console.print(upgrades_table(pending, console.width))
    else:
        for item in pending:
            versions = ", ".join(styled_version(v) for v in item.versions)
            current = item.report.current_version.original
            console.print(
                f"[{PATH_STYLE}]{escape(item.path)}[/{PATH_STYLE}] "
                f"current: [{CURRENT_STYLE}]{escape(current)}[/{CURRENT_STYLE}]; available: {versions}",
                soft_wrap=True,
            )
