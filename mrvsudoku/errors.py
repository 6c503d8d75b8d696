"""Exceptions raised by the engine."""

from __future__ import annotations


class SudokuError(Exception):
    """Base class for every error raised by mrvsudoku."""


class InvalidGridError(SudokuError, ValueError):
    """The starting board is malformed (shape, size or values)."""


class ConflictingCluesError(InvalidGridError):
    """A clue value is repeated in a row, column or region."""

    def __init__(self, message: str, x: int, y: int, value: int):
        super().__init__(message)
        self.x = x
        self.y = y
        self.value = value


class ConflictError(SudokuError, ValueError):
    """A cell assignment would break the row/column/region rule."""


class InvariantError(SudokuError, RuntimeError):
    """Engine bookkeeping is inconsistent. Always a bug, never bad input."""
