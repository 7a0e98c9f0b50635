"""CP-SAT crossword filling solver using OR-Tools."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from ortools.sat.python import cp_model

from ..core.constants import EMPTY_LETTER
from ..core.models import Placement, Slot
from ..utils.logger import get_logger
from .grid import FilledGrid

LOGGER = get_logger(__name__)


def fill_slots_cp_sat(
    filled: FilledGrid,
    slots: Sequence[Slot],
    words: Sequence[str],
    timeout: Optional[float] = None,
    seed: int = 0,
) -> Optional[List[Placement]]:
    """Fill every slot with a distinct word via CP-SAT.

    Args:
        filled: Letter buffer; written only when a solution is found.
        slots: Slots in extraction order.
        words: Candidate words.
        timeout: Solver time limit in seconds, ``None`` for no limit.
        seed: Random seed for the single search worker.

    Returns:
        One placement per slot, or None if unsolvable or timed out.
    """
    if len(slots) != len(words):
        LOGGER.warning("Cannot fill %d slots with %d words", len(slots), len(words))
        return None
    if not slots:
        return []

    model = cp_model.CpModel()
    alphabet = sorted({letter for word in words for letter in word})
    letter_codes = {letter: index for index, letter in enumerate(alphabet)}

    # ------------------------------------------------------------------
    # Step 1: Cell letter variables
    # ------------------------------------------------------------------
    cell_vars: Dict[Tuple[int, int], object] = {}  # (r,c) -> IntVar or int
    for slot in slots:
        for r, c in slot.cells:
            if (r, c) in cell_vars:
                continue
            existing = filled.letter(r, c)
            if existing != EMPTY_LETTER:
                if existing not in letter_codes:
                    LOGGER.debug("Prefilled letter '%s' at (%d,%d) is not in any word", existing, r, c)
                    return None
                cell_vars[(r, c)] = letter_codes[existing]
            else:
                cell_vars[(r, c)] = model.new_int_var(0, len(alphabet) - 1, f"L_{r}_{c}")

    # ------------------------------------------------------------------
    # Step 2: One boolean per length-compatible (slot, word) pair
    # ------------------------------------------------------------------
    choices: Dict[Tuple[int, int], cp_model.IntVar] = {}
    for slot_index, slot in enumerate(slots):
        options = []
        for word_index, word in enumerate(words):
            if len(word) != slot.length:
                continue
            chosen = model.new_bool_var(f"x_{slot.id}_{word_index}")
            choices[(slot_index, word_index)] = chosen
            options.append(chosen)
            for (r, c), letter in zip(slot.cells, word):
                var = cell_vars[(r, c)]
                if isinstance(var, int):
                    if var != letter_codes[letter]:
                        model.add(chosen == 0)
                    continue
                model.add(var == letter_codes[letter]).only_enforce_if(chosen)
        if not options:
            LOGGER.debug("No word of length %d for slot %s", slot.length, slot.id)
            return None
        model.add_exactly_one(options)

    # ------------------------------------------------------------------
    # Step 3: Every word used exactly once
    # ------------------------------------------------------------------
    for word_index, word in enumerate(words):
        uses = [var for (_, w), var in choices.items() if w == word_index]
        if not uses:
            LOGGER.debug("No slot of length %d for word '%s'", len(word), word)
            return None
        model.add_exactly_one(uses)

    # ------------------------------------------------------------------
    # Step 4: Solve
    # ------------------------------------------------------------------
    solver = cp_model.CpSolver()
    if timeout is not None:
        solver.parameters.max_time_in_seconds = timeout
    solver.parameters.num_workers = 1
    solver.parameters.random_seed = seed

    LOGGER.info(
        "CP-SAT: %d slots, %d words, %d choice vars, solving...",
        len(slots),
        len(words),
        len(choices),
    )

    status = solver.solve(model)

    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        LOGGER.warning("CP-SAT: no solution found (status=%s)", solver.status_name(status))
        return None

    LOGGER.info("CP-SAT: solution found in %.2fs", solver.wall_time)

    # ------------------------------------------------------------------
    # Step 5: Extract solution
    # ------------------------------------------------------------------
    result: List[Placement] = []
    for slot_index, slot in enumerate(slots):
        for word_index, word in enumerate(words):
            chosen = choices.get((slot_index, word_index))
            if chosen is not None and solver.boolean_value(chosen):
                filled.apply(slot, word)
                result.append(Placement(slot=slot, word=word))
                break
    return result
