"""Sudoku engine: bitmask constraint tracking and MRV backtracking search."""

from .bitset import BitSet
from .errors import (
    ConflictError,
    ConflictingCluesError,
    InvalidGridError,
    InvariantError,
    SudokuError,
)
from .grid import ConstraintGrid
from .models import Board
from .solver import SearchState, SolveResult, Solver, solve_all, solve_sudoku
from .validation import validate_board

__all__ = [
    "BitSet",
    "Board",
    "ConflictError",
    "ConflictingCluesError",
    "ConstraintGrid",
    "InvalidGridError",
    "InvariantError",
    "SearchState",
    "SolveResult",
    "Solver",
    "SudokuError",
    "solve_all",
    "solve_sudoku",
    "validate_board",
]
