import pytest

from mrvsudoku import ConflictingCluesError, ConstraintGrid, InvalidGridError, validate_board
from mrvsudoku.validation import check_board


@pytest.mark.parametrize(
    "board, fragment",
    [
        ([], "square"),
        ([[0, 0], [0]], "square"),
        ([[0] * 3 for _ in range(3)], "perfect squares"),
        ([[0] * 4 for _ in range(3)] + [[0, 0, 0, 5]], "allowed: 0..4"),
        ([[0] * 4 for _ in range(3)] + [[0, 0, 0, -1]], "allowed: 0..4"),
        ([[0] * 4 for _ in range(3)] + [[0, 0, 0, "1"]], "not an integer"),
        ([[1, 0, 0, 1]] + [[0] * 4 for _ in range(3)], "Conflict"),
    ],
)
def test_validate_board_rejects(board, fragment):
    ok, msg = validate_board(board)
    assert not ok
    assert fragment in msg
    with pytest.raises(InvalidGridError):
        check_board(board)


def test_validate_board_accepts(puzzle_board):
    assert validate_board(puzzle_board) == (True, "OK")
    assert check_board(puzzle_board).n == 9


def test_conflicting_clues_are_rejected_at_construction(puzzle_board):
    puzzle_board[8][8] = 1  # column 8 already has a 1 in row 4
    with pytest.raises(ConflictingCluesError) as info:
        ConstraintGrid(puzzle_board)
    assert (info.value.x, info.value.y, info.value.value) == (8, 8, 1)


def test_region_conflict_detected():
    board = [[0] * 4 for _ in range(4)]
    board[0][0] = 3
    board[1][1] = 3
    with pytest.raises(ConflictingCluesError):
        ConstraintGrid(board)


def test_invalid_grid_error_is_value_error():
    with pytest.raises(ValueError):
        ConstraintGrid([[0] * 5 for _ in range(5)])
