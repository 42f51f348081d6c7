"""Adjacency tables for the 4x4 board."""

SIZE = 4

Cell = tuple[int, int]

#  top-left, top, top-right, left, right, bottom-left, bottom, bottom-right
DIRECTIONS: tuple[Cell, ...] = tuple(
    (dr, dc) for dr in range(-1, 2) for dc in range(-1, 2) if dr != 0 or dc != 0
)
assert len(DIRECTIONS) == 8

# Row-major.
START_CELLS: tuple[Cell, ...] = tuple(
    (row, col) for row in range(SIZE) for col in range(SIZE)
)


def in_bounds(row: int, col: int):
    return 0 <= row < SIZE and 0 <= col < SIZE


def neighbors(cell: Cell) -> list[Cell]:
    """In-bounds neighbors of a cell, in DIRECTIONS order."""
    row, col = cell
    return [
        (row + dr, col + dc) for dr, dc in DIRECTIONS if in_bounds(row + dr, col + dc)
    ]


def are_adjacent(a: Cell, b: Cell):
    return a != b and abs(a[0] - b[0]) <= 1 and abs(a[1] - b[1]) <= 1


def is_simple_path(path: list[Cell]):
    """Is this a path of distinct, in-bounds, pairwise-adjacent cells?"""
    if len(set(path)) != len(path):
        return False
    if not all(in_bounds(*cell) for cell in path):
        return False
    return all(are_adjacent(a, b) for a, b in zip(path, path[1:]))
