"""Depth-first backtracking placement of words into slots."""

from __future__ import annotations

import time
from typing import Callable, List, Optional, Sequence, Tuple

from ..core.constants import EMPTY_LETTER
from ..core.exceptions import SearchLimitExceeded
from ..core.models import Placement, Slot
from ..utils.logger import get_logger
from .grid import FilledGrid

LOGGER = get_logger(__name__)


def can_place_word(filled: FilledGrid, slot: Slot, word: str) -> bool:
    """Return True when ``word`` fits ``slot`` given the letters already placed."""

    if len(word) != slot.length:
        return False
    for letter, existing in zip(word, filled.pattern(slot)):
        if existing != EMPTY_LETTER and existing != letter:
            return False
    return True


class SearchBudget:
    """Optional step and wall-clock limits checked during the search."""

    def __init__(self, max_steps: Optional[int] = None, timeout: Optional[float] = None) -> None:
        self.max_steps = max_steps
        self.deadline = time.monotonic() + timeout if timeout is not None else None
        self.steps = 0

    def check(self) -> None:
        if self.deadline is not None and time.monotonic() > self.deadline:
            raise SearchLimitExceeded(f"Search timed out after {self.steps} placements")

    def spend(self) -> None:
        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            raise SearchLimitExceeded(f"Search exceeded {self.max_steps} placements")


def place_words(
    filled: FilledGrid,
    slots: Sequence[Slot],
    words: Sequence[str],
    used: List[bool],
    index: int = 0,
    budget: Optional[SearchBudget] = None,
    assignment: Optional[List[Optional[str]]] = None,
) -> bool:
    """Assign ``words`` to ``slots[index:]`` in place.

    Slots are visited in order and candidates are tried in input order, so the
    first consistent assignment found is the one left in ``filled``. On failure
    every letter written below ``index`` has been undone.

    The search keeps an explicit stack of ``(word_index, undo)`` frames, one
    per placed slot, so its depth is not bounded by the interpreter's
    recursion limit.
    """

    if index == len(slots):
        return True
    if budget is not None:
        budget.check()

    stack: List[Tuple[int, Callable[[], None]]] = []
    depth = index
    next_candidate = 0
    while True:
        slot = slots[depth]
        placed = False
        for word_index in range(next_candidate, len(words)):
            word = words[word_index]
            if used[word_index] or not can_place_word(filled, slot, word):
                continue
            if budget is not None:
                budget.spend()
            undo = filled.place_word_undoable(slot, word)
            used[word_index] = True
            if assignment is not None:
                assignment[depth] = word
            LOGGER.debug("Trying '%s' at %s", word, slot.id)
            stack.append((word_index, undo))
            placed = True
            break

        if placed:
            depth += 1
            if depth == len(slots):
                return True
            if budget is not None:
                budget.check()
            next_candidate = 0
            continue

        # Candidates for this slot are exhausted: step back one slot.
        if not stack:
            return False
        word_index, undo = stack.pop()
        depth -= 1
        undo()
        used[word_index] = False
        if assignment is not None:
            assignment[depth] = None
        next_candidate = word_index + 1


def fill_slots(
    filled: FilledGrid,
    slots: Sequence[Slot],
    words: Sequence[str],
    budget: Optional[SearchBudget] = None,
) -> Optional[List[Placement]]:
    """Fill every slot with a distinct word via backtracking.

    Args:
        filled: Letter buffer, mutated in place.
        slots: Slots in extraction order.
        words: Candidate words, tried in the given order.
        budget: Step and time limits; unlimited when omitted. Its ``steps``
            counter is left at the number of tentative placements made.

    Returns:
        One placement per slot, or None when no assignment exists.

    Raises:
        SearchLimitExceeded: when the step or time budget runs out.
    """
    if len(slots) != len(words):
        LOGGER.warning("Cannot fill %d slots with %d words", len(slots), len(words))
        return None

    LOGGER.info("Backtracking: %d slots, %d words", len(slots), len(words))
    budget = budget or SearchBudget()
    used = [False] * len(words)
    assignment: List[Optional[str]] = [None] * len(slots)

    if not place_words(filled, slots, words, used, budget=budget, assignment=assignment):
        LOGGER.warning("Backtracking: no assignment after %d placements", budget.steps)
        return None

    LOGGER.info("Backtracking: solution found after %d placements", budget.steps)
    return [Placement(slot=slot, word=word) for slot, word in zip(slots, assignment) if word is not None]
