"""Rich table builder for the upgrade report."""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from mod_check.models.module import PendingUpgrade
from mod_check.output.layout import SEPARATOR, versions_per_row, wrap_versions
from mod_check.output.themes import CURRENT_STYLE, PATH_STYLE, styled_version


def upgrades_table(pending: list[PendingUpgrade], terminal_width: int) -> Table:
    table = Table(title="Module Updates", show_lines=False)
    table.add_column("#", justify="center", max_width=3)
    table.add_column("Dependency", style=PATH_STYLE, justify="center", max_width=30)
    table.add_column("Current Version", style=CURRENT_STYLE, justify="center", max_width=17)
    table.add_column("Available Versions")

    for i, item in enumerate(pending, 1):
        per_row = versions_per_row(terminal_width, [v.original for v in item.versions])
        rows = wrap_versions(item.versions, per_row)
        cells = [SEPARATOR.join(styled_version(v) for v in row) for row in rows]
        if item.omitted:
            cells[-1] += f" [dim](+{item.omitted} more)[/dim]"

        for n, cell in enumerate(cells):
            if n == 0:
                lead = [str(i), escape(item.path), escape(item.report.current_version.original)]
            else:
                lead = ["", "", ""]
            table.add_row(*lead, cell, end_section=n == len(cells) - 1)
    return table
