from wordhunt.grid import Position
from wordhunt.mapper import GRID_CELL_SIZE_MM, MachinePoint, generate_path, map_grid_to_machine


def test_axes_are_swapped():
    point = map_grid_to_machine(1, 2)
    assert point == MachinePoint(x=2 * GRID_CELL_SIZE_MM, y=1 * GRID_CELL_SIZE_MM)
    assert point.x == 25.0
    assert point.y == 12.5


def test_origin_maps_to_origin():
    assert map_grid_to_machine(0, 0) == MachinePoint(0.0, 0.0)


def test_custom_cell_size():
    assert map_grid_to_machine(3, 1, cell_size=10) == MachinePoint(x=10, y=30)


def test_generate_path_preserves_order():
    positions = [Position(0, 0), Position(1, 1), Position(2, 1), Position(2, 2)]
    assert generate_path(positions, cell_size=1) == [
        MachinePoint(0, 0),
        MachinePoint(1, 1),
        MachinePoint(1, 2),
        MachinePoint(2, 2),
    ]


def test_generate_path_accepts_plain_tuples():
    assert generate_path([(0, 3)], cell_size=2) == [MachinePoint(x=6, y=0)]


def test_generate_path_empty():
    assert generate_path([]) == []
