import pytest

from mrvsudoku.formats import parse_puzzle

PUZZLE = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"

# (0, 0) has no legal value: 2 and 3 in its row, 4 in its column, 1 in its box
DEAD_END_4X4 = [
    [0, 2, 3, 0],
    [0, 1, 0, 0],
    [4, 0, 0, 0],
    [0, 0, 0, 0],
]


def brute_candidates(rows, x, y):
    """Values legal at (x, y), recomputed from scratch."""
    n = len(rows)
    base = int(n ** 0.5)
    if rows[y][x]:
        return set()
    used = set(rows[y]) | {rows[yy][x] for yy in range(n)}
    x0, y0 = x - x % base, y - y % base
    used |= {rows[yy][xx] for yy in range(y0, y0 + base) for xx in range(x0, x0 + base)}
    return set(range(1, n + 1)) - used


def is_valid_solution(rows):
    n = len(rows)
    base = int(n ** 0.5)
    expected = set(range(1, n + 1))
    for i in range(n):
        if set(rows[i]) != expected:
            return False
        if {rows[y][i] for y in range(n)} != expected:
            return False
        y0, x0 = (i // base) * base, (i % base) * base
        box = {rows[y][x] for y in range(y0, y0 + base) for x in range(x0, x0 + base)}
        if box != expected:
            return False
    return True


@pytest.fixture
def puzzle_board():
    return parse_puzzle(PUZZLE)


@pytest.fixture
def solution_board():
    return parse_puzzle(SOLUTION)


@pytest.fixture
def empty_4x4():
    return [[0] * 4 for _ in range(4)]
