"""Shared constants and enumerations for the crossword filler."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import FrozenSet, Tuple


class CellCode(IntEnum):
    """Integer codes of a parsed puzzle grid."""

    BLOCKED = -1
    FILLABLE = 0
    SINGLE_START = 1
    DOUBLE_START = 2


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)


BLOCKED_SYMBOL = "."
EMPTY_LETTER = ""
PUZZLE_ALPHABET: FrozenSet[str] = frozenset("012" + BLOCKED_SYMBOL)
MIN_WORD_COUNT = 4
MIN_SLOT_LENGTH = 2

ERROR_INVALID_PUZZLE = "Error: Invalid puzzle format"
ERROR_INVALID_WORDS = "Error: Invalid word list"
ERROR_COUNT_MISMATCH = "Error: The number of starting positions does not match the number of words"
ERROR_UNPLACEABLE = "Error: Unable to place all words"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
