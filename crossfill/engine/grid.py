"""Grid representation and helper utilities."""

from __future__ import annotations

from typing import Callable, Dict, List, Tuple

from ..core.constants import (
    BLOCKED_SYMBOL,
    EMPTY_LETTER,
    MIN_SLOT_LENGTH,
    Bounds,
    CellCode,
    Direction,
)
from ..core.exceptions import PlacementError
from ..core.models import CodeGrid, LetterGrid, Slot
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def parse_puzzle_string(text: str) -> CodeGrid:
    """Turn validated puzzle text into rows of integer cell codes."""

    return [
        [CellCode.BLOCKED.value if char == BLOCKED_SYMBOL else int(char) for char in line]
        for line in text.split("\n")
    ]


def initialize_filled_grid(grid: CodeGrid) -> LetterGrid:
    return [
        [BLOCKED_SYMBOL if code == CellCode.BLOCKED else EMPTY_LETTER for code in row]
        for row in grid
    ]


def count_starting_positions(grid: CodeGrid) -> int:
    """Total number of slots declared by the ``1``/``2`` start codes."""

    return sum(
        code
        for row in grid
        for code in row
        if code in (CellCode.SINGLE_START, CellCode.DOUBLE_START)
    )


class PuzzleGrid:
    """Parsed puzzle layout with slot derivation from cell adjacency."""

    def __init__(self, codes: CodeGrid) -> None:
        self.codes = codes
        self.bounds = Bounds(rows=len(codes), cols=len(codes[0]) if codes else 0)

    @classmethod
    def from_text(cls, text: str) -> "PuzzleGrid":
        return cls(parse_puzzle_string(text))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_fillable(self, row: int, col: int) -> bool:
        return self.bounds.contains(row, col) and self.codes[row][col] != CellCode.BLOCKED

    def is_boundary(self, row: int, col: int, direction: Direction) -> bool:
        """True when the cell before ``(row, col)`` is blocked or off-grid."""

        dr, dc = direction.step
        return not self.is_fillable(row - dr, col - dc)

    def starts_slot(self, row: int, col: int, direction: Direction) -> bool:
        dr, dc = direction.step
        return (
            self.is_fillable(row, col)
            and self.is_boundary(row, col, direction)
            and self.is_fillable(row + dr, col + dc)
        )

    @property
    def declared_slot_count(self) -> int:
        return count_starting_positions(self.codes)

    # ------------------------------------------------------------------
    # Slot derivation
    # ------------------------------------------------------------------
    def enumerate_slots(self) -> List[Slot]:
        """Derive across and down slots in row-major order, across first."""

        slots: List[Slot] = []
        for r in range(self.bounds.rows):
            for c in range(self.bounds.cols):
                for direction in (Direction.ACROSS, Direction.DOWN):
                    if not self.starts_slot(r, c, direction):
                        continue
                    length = self._run_length(r, c, direction)
                    if length >= MIN_SLOT_LENGTH:
                        slots.append(Slot(r, c, direction, length))
        LOGGER.debug("Derived %d slots from a %dx%d grid", len(slots), self.bounds.rows, self.bounds.cols)
        return slots

    def derived_start_counts(self) -> Dict[Tuple[int, int], int]:
        counts: Dict[Tuple[int, int], int] = {}
        for slot in self.enumerate_slots():
            key = (slot.start_row, slot.start_col)
            counts[key] = counts.get(key, 0) + 1
        return counts

    def inconsistent_starts(self) -> List[Tuple[int, int]]:
        """Coordinates whose declared code disagrees with the derived slot starts."""

        derived = self.derived_start_counts()
        mismatched: List[Tuple[int, int]] = []
        for r in range(self.bounds.rows):
            for c in range(self.bounds.cols):
                declared = self.codes[r][c]
                if declared == CellCode.BLOCKED:
                    continue
                if declared != derived.get((r, c), 0):
                    mismatched.append((r, c))
        return mismatched

    def _run_length(self, row: int, col: int, direction: Direction) -> int:
        dr, dc = direction.step
        length = 0
        while self.is_fillable(row, col):
            length += 1
            row += dr
            col += dc
        return length


class FilledGrid:
    """Mutable letter buffer written by the placement engines."""

    def __init__(self, rows: LetterGrid) -> None:
        self.rows = rows

    @classmethod
    def from_codes(cls, grid: CodeGrid) -> "FilledGrid":
        return cls(initialize_filled_grid(grid))

    def letter(self, row: int, col: int) -> str:
        return self.rows[row][col]

    def pattern(self, slot: Slot) -> List[str]:
        return [self.rows[r][c] for r, c in slot.cells]

    def place_word_undoable(self, slot: Slot, word: str) -> Callable[[], None]:
        """Write ``word`` into ``slot`` and return an undo callable for backtracking.

        Only cells that were empty before the call are cleared by the undo, so
        letters owned by crossing words survive.
        """

        if len(word) != slot.length:
            raise PlacementError("Word length mismatch")
        for index, (row, col) in enumerate(slot.cells):
            existing = self.rows[row][col]
            if existing == BLOCKED_SYMBOL:
                raise PlacementError("Word overlaps blocked cell")
            if existing and existing != word[index]:
                raise PlacementError("Letter conflict")

        written: List[Tuple[int, int]] = []
        for index, (row, col) in enumerate(slot.cells):
            if self.rows[row][col] == EMPTY_LETTER:
                self.rows[row][col] = word[index]
                written.append((row, col))

        def undo() -> None:
            for row, col in written:
                self.rows[row][col] = EMPTY_LETTER

        return undo

    def apply(self, slot: Slot, word: str) -> None:
        self.place_word_undoable(slot, word)

    def to_lists(self) -> LetterGrid:
        return [list(row) for row in self.rows]

