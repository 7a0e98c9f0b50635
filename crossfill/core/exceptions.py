"""Custom exception hierarchy for crossword filling.

Each class carries the literal ``report`` string returned to callers of
:func:`crossfill.engine.crossword.solve_crossword`.
"""

from .constants import (
    ERROR_COUNT_MISMATCH,
    ERROR_INVALID_PUZZLE,
    ERROR_INVALID_WORDS,
    ERROR_UNPLACEABLE,
)


class CrosswordError(Exception):
    """Base exception for solver failures."""

    report = ERROR_UNPLACEABLE


class PuzzleFormatError(CrosswordError):
    """Raised when the puzzle text is not a rectangle over ``{0,1,2,.}``."""

    report = ERROR_INVALID_PUZZLE


class WordListError(CrosswordError):
    """Raised when the supplied words cannot form a valid word list."""

    report = ERROR_INVALID_WORDS


class SlotCountError(CrosswordError):
    """Raised when the declared starting positions disagree with the word count."""

    report = ERROR_COUNT_MISMATCH


class PlacementError(CrosswordError):
    """Raised when the words cannot be assigned to the slots."""

    report = ERROR_UNPLACEABLE


class SearchLimitExceeded(PlacementError):
    """Raised when the search runs out of its step or time budget."""
