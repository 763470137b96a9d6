from __future__ import annotations

from typing import NamedTuple

Grid = list[list[str]]


class MalformedGrid(ValueError):
    pass


class Position(NamedTuple):
    row: int
    col: int


def validate_grid(grid: Grid) -> tuple[int, int]:
    """Check the grid is rectangular with single-character cells.

    Returns (rows, cols). An empty grid is (0, 0).
    """
    if not grid:
        return 0, 0
    cols = len(grid[0])
    for r, row in enumerate(grid):
        if len(row) != cols:
            raise MalformedGrid(f"Row {r} has {len(row)} cells, expected {cols}")
        for c, cell in enumerate(row):
            if not isinstance(cell, str) or len(cell) != 1:
                raise MalformedGrid(f"Cell ({r},{c}) must be a single character, got {cell!r}")
    return len(grid), cols


def parse_grid(text: str, row_separator: str = " ") -> Grid:
    """Split typed input into rows on row_separator, then into characters."""
    rows = [row.strip() for row in text.strip().split(row_separator)]
    grid = [list(row) for row in rows if row]
    validate_grid(grid)
    return grid


def format_grid(grid: Grid) -> str:
    return " / ".join(" ".join(row) for row in grid)
