"""Rendering helpers for filled crossword grids."""

from __future__ import annotations

import sys
from typing import Sequence

from ..core.constants import BLOCKED_SYMBOL, EMPTY_LETTER

UNFILLED_SYMBOL = "_"


def format_filled_grid(rows: Sequence[Sequence[str]]) -> str:
    """Serialise a solved grid: one line per row, ``.`` for blocked cells."""

    return "\n".join(
        "".join(cell if cell == BLOCKED_SYMBOL else cell.lower() for cell in row)
        for row in rows
    )


def cell_symbol(cell: str) -> str:
    if cell == EMPTY_LETTER:
        return UNFILLED_SYMBOL
    return cell if cell == BLOCKED_SYMBOL else cell.lower()


def format_grid(rows: Sequence[Sequence[str]]) -> str:
    width = len(rows[0]) if rows else 0
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * max(3 * width - 1, 0))
    for r, row in enumerate(rows):
        row_render = " ".join(f"{cell_symbol(cell):>2}" for cell in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_grid(rows: Sequence[Sequence[str]], *, label: str | None = None, stream=None) -> None:
    """Print a filled or partially filled grid with row and column indices."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(rows), file=stream)
