"""Crossword solving orchestration.

Pipeline: validate the raw inputs, parse the grid, derive slots, run the
selected placement engine, then render the filled grid.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from ..core.constants import MIN_WORD_COUNT
from ..core.exceptions import (
    CrosswordError,
    PlacementError,
    PuzzleFormatError,
    SlotCountError,
    WordListError,
)
from ..core.models import LetterGrid, Placement
from ..utils.logger import get_logger
from ..utils.pretty import format_filled_grid
from .grid import FilledGrid, PuzzleGrid
from .solver import SearchBudget, fill_slots
from .validator import has_valid_entries, is_valid_puzzle_format

LOGGER = get_logger(__name__)

BACKTRACKING = "backtracking"
CP_SAT = "cp-sat"
ENGINES = (BACKTRACKING, CP_SAT)


@dataclass
class SolverConfig:
    """Solve options. ``max_steps`` bounds backtracking only; ``seed`` is used by cp-sat only."""

    engine: str = BACKTRACKING
    max_steps: Optional[int] = None
    timeout_seconds: Optional[float] = None
    seed: int = 0
    min_words: int = MIN_WORD_COUNT

    def __post_init__(self) -> None:
        if self.engine not in ENGINES:
            raise ValueError(f"Unknown engine '{self.engine}', expected one of {ENGINES}")
        if self.engine == CP_SAT and self.max_steps is not None:
            raise ValueError("max_steps only applies to the backtracking engine; use timeout_seconds with cp-sat")


@dataclass
class SolveResult:
    ok: bool
    text: str
    filled_grid: Optional[LetterGrid] = None
    placements: List[Placement] = field(default_factory=list)
    steps: int = 0
    engine: str = BACKTRACKING


class CrosswordSolver:
    """Runs one puzzle through validation, slot extraction and placement."""

    def __init__(self, config: Optional[SolverConfig] = None) -> None:
        self.config = config or SolverConfig()

    def solve(self, puzzle_text: Any, words: Any) -> SolveResult:
        budget = SearchBudget(
            max_steps=self.config.max_steps, timeout=self.config.timeout_seconds
        )
        try:
            filled, placements = self._solve(puzzle_text, words, budget)
        except CrosswordError as exc:
            LOGGER.warning("Solve failed: %s", exc)
            return SolveResult(
                ok=False, text=exc.report, steps=budget.steps, engine=self.config.engine
            )
        LOGGER.info("Placed %d words", len(placements))
        return SolveResult(
            ok=True,
            text=format_filled_grid(filled.rows),
            filled_grid=filled.to_lists(),
            placements=placements,
            steps=budget.steps,
            engine=self.config.engine,
        )

    def _solve(self, puzzle_text: Any, words: Any, budget: SearchBudget):
        if not is_valid_puzzle_format(puzzle_text):
            raise PuzzleFormatError("Puzzle text is not a rectangle over {0,1,2,.}")
        if not has_valid_entries(words):
            raise WordListError("Word list must hold distinct alphabetic strings")

        grid = PuzzleGrid.from_text(puzzle_text)
        declared = grid.declared_slot_count
        if declared != len(words):
            raise SlotCountError(
                f"Grid declares {declared} starting positions for {len(words)} words"
            )
        if len(words) < self.config.min_words:
            raise WordListError(
                f"Word list has {len(words)} entries, at least {self.config.min_words} required"
            )

        mismatched = grid.inconsistent_starts()
        if mismatched:
            raise PlacementError(f"Declared start codes disagree with the layout at {mismatched}")

        slots = grid.enumerate_slots()
        filled = FilledGrid.from_codes(grid.codes)
        # Overlaps compare letters case-insensitively; the rendered grid is lowercase.
        words = [word.lower() for word in words]
        placements = self._run_engine(filled, slots, words, budget)
        if placements is None:
            raise PlacementError(f"No assignment of {len(words)} words to {len(slots)} slots")
        return filled, placements

    def _run_engine(
        self,
        filled: FilledGrid,
        slots: Sequence,
        words: List[str],
        budget: SearchBudget,
    ) -> Optional[List[Placement]]:
        if self.config.engine == CP_SAT:
            from .cp_solver import fill_slots_cp_sat

            return fill_slots_cp_sat(
                filled,
                slots,
                words,
                timeout=self.config.timeout_seconds,
                seed=self.config.seed,
            )
        return fill_slots(filled, slots, words, budget=budget)


def solve_crossword(puzzle_text: Any, words: Any, config: Optional[SolverConfig] = None) -> str:
    """Fill ``puzzle_text`` with ``words`` and return the grid text or an error string."""

    return CrosswordSolver(config).solve(puzzle_text, words).text
