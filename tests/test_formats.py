import pytest

from mrvsudoku import InvalidGridError
from mrvsudoku.formats import (
    board_to_csv,
    format_braces,
    parse_puzzle,
    pretty_board,
    serialize_board,
)

from conftest import PUZZLE, SOLUTION


def test_parse_flat_string(puzzle_board):
    assert len(puzzle_board) == 9
    assert puzzle_board[0] == [5, 3, 0, 0, 7, 0, 0, 0, 0]
    assert serialize_board(puzzle_board) == PUZZLE


def test_parse_dots_and_comments():
    text = "# a 4x4 puzzle\n1. ..\n.. 3_\n.. ..\n.. .4\n"
    assert parse_puzzle(text) == [
        [1, 0, 0, 0],
        [0, 0, 3, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 4],
    ]


def test_pretty_board_reads_back(solution_board):
    pretty = pretty_board(solution_board)
    assert "------+-------+------" in pretty
    assert pretty.count("\n") == 10
    assert parse_puzzle(pretty) == solution_board


def test_pretty_board_marks_empty_cells(puzzle_board):
    assert pretty_board(puzzle_board).splitlines()[0] == "5 3 . | . 7 . | . . ."


def test_csv_round_trip_for_large_values():
    board = [[(x + y) % 16 for x in range(16)] for y in range(16)]
    csv = board_to_csv(board).decode("utf-8")
    assert csv.splitlines()[0].startswith("0,1,2,")
    assert parse_puzzle(csv) == board


def test_csv_accepts_empty_marks():
    assert parse_puzzle("1,.,_,0\n# note\n2, 3 ,4,1\n") == [[1, 0, 0, 0], [2, 3, 4, 1]]


def test_format_braces():
    assert format_braces([[1, 2], [3, 4]]) == "{1, 2},\n{3, 4},\n"


@pytest.mark.parametrize("text", ["", "# nothing\n", "12345", "1,x,3\n"])
def test_parse_rejects_bad_text(text):
    with pytest.raises(InvalidGridError):
        parse_puzzle(text)


def test_serialize_solution(solution_board):
    assert serialize_board(solution_board) == SOLUTION


def test_whitespace_rows_for_large_values():
    board = [[0] * 16 for _ in range(16)]
    board[0][0] = 10
    board[0][1] = 16
    board[15][15] = 7
    text = "\n".join(" ".join(str(v) if v else "." for v in row) for row in board)
    assert parse_puzzle(text) == board


def test_pretty_board_reads_back_for_16x16():
    board = [[0] * 16 for _ in range(16)]
    board[3][2] = 12
    board[9][14] = 5
    assert parse_puzzle(pretty_board(board)) == board


def test_dash_marks_an_empty_cell():
    assert parse_puzzle("1---\n----\n----\n---4") == [
        [1, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 4],
    ]
