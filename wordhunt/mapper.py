from __future__ import annotations

from typing import Iterable, NamedTuple

from wordhunt.grid import Position

GRID_CELL_SIZE_MM = 12.5


class MachinePoint(NamedTuple):
    x: float
    y: float


def map_grid_to_machine(row: int, col: int, cell_size: float = GRID_CELL_SIZE_MM) -> MachinePoint:
    # machine x runs along grid columns, machine y along rows
    return MachinePoint(x=col * cell_size, y=row * cell_size)


def generate_path(positions: Iterable[Position], cell_size: float = GRID_CELL_SIZE_MM) -> list[MachinePoint]:
    return [map_grid_to_machine(row, col, cell_size) for row, col in positions]
