"""Row wrapping for the available-versions column.

Pure functions, no terminal access: the caller passes in the width.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")

# "#", "Dependency" and "Current Version" column widths, as in tables.py.
FIXED_COLUMNS_WIDTH = 3 + 30 + 17
# Table borders and cell padding for four columns.
TABLE_CHROME_WIDTH = 13
SEPARATOR = ", "


def versions_per_row(terminal_width: int, versions: Sequence[str]) -> int:
    """How many version tokens fit on one line of the versions column."""
    if not versions:
        return 1
    column = terminal_width - FIXED_COLUMNS_WIDTH - TABLE_CHROME_WIDTH
    token = max(len(v) for v in versions) + len(SEPARATOR)
    return max(1, column // token)


def wrap_versions(versions: Sequence[T], per_row: int) -> list[list[T]]:
    """Split *versions* into consecutive rows of at most *per_row* items."""
    if per_row < 1:
        raise ValueError("per_row must be positive")
    return [list(versions[i:i + per_row]) for i in range(0, len(versions), per_row)]
