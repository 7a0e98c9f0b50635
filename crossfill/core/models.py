"""Data models supporting the crossword filler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from .constants import Direction

CodeGrid = List[List[int]]
LetterGrid = List[List[str]]


@dataclass(frozen=True)
class Slot:
    """A maximal run of fillable cells that receives exactly one word."""

    start_row: int
    start_col: int
    direction: Direction
    length: int
    _cells: Tuple[Tuple[int, int], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        dr, dc = self.direction.step
        cells = tuple(
            (self.start_row + dr * i, self.start_col + dc * i) for i in range(self.length)
        )
        object.__setattr__(self, "_cells", cells)

    @property
    def id(self) -> str:
        prefix = "AC" if self.direction == Direction.ACROSS else "DN"
        return f"{prefix}_{self.start_row}_{self.start_col}"

    @property
    def cells(self) -> Tuple[Tuple[int, int], ...]:
        return self._cells


@dataclass(frozen=True)
class Placement:
    """A word assigned to a slot by one of the engines."""

    slot: Slot
    word: str
