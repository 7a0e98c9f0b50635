import unittest

from crossfill.core.constants import Direction
from crossfill.core.exceptions import SearchLimitExceeded
from crossfill.core.models import Slot
from crossfill.engine.grid import FilledGrid, PuzzleGrid
from crossfill.engine.solver import SearchBudget, can_place_word, fill_slots, place_words

PUZZLE = "2001\n0..0\n1000\n0..0"


def _setup(puzzle: str):
    grid = PuzzleGrid.from_text(puzzle)
    return FilledGrid.from_codes(grid.codes), grid.enumerate_slots()


class CanPlaceWordTests(unittest.TestCase):
    def test_length_must_match(self) -> None:
        filled, slots = _setup(PUZZLE)
        self.assertTrue(can_place_word(filled, slots[0], "casa"))
        self.assertFalse(can_place_word(filled, slots[0], "xyz"))
        self.assertFalse(can_place_word(filled, slots[0], "casas"))

    def test_existing_letters_must_agree(self) -> None:
        filled, slots = _setup(PUZZLE)
        filled.place_word_undoable(slots[0], "casa")
        self.assertTrue(can_place_word(filled, slots[1], "ciao"))
        self.assertFalse(can_place_word(filled, slots[1], "alan"))
        self.assertTrue(can_place_word(filled, slots[2], "alan"))


class BacktrackingTests(unittest.TestCase):
    def test_first_solution_in_input_order(self) -> None:
        filled, slots = _setup(PUZZLE)
        placements = fill_slots(filled, slots, ["casa", "alan", "ciao", "anta"])
        self.assertIsNotNone(placements)
        assert placements is not None
        self.assertEqual(
            [(p.slot.id, p.word) for p in placements],
            [("AC_0_0", "casa"), ("DN_0_0", "ciao"), ("DN_0_3", "alan"), ("AC_2_0", "anta")],
        )
        self.assertEqual(
            filled.rows,
            [
                ["c", "a", "s", "a"],
                ["i", ".", ".", "l"],
                ["a", "n", "t", "a"],
                ["o", ".", ".", "n"],
            ],
        )

    def test_backtracks_out_of_first_slot(self) -> None:
        filled, slots = _setup(PUZZLE)
        budget = SearchBudget()
        placements = fill_slots(filled, slots, ["anta", "casa", "alan", "ciao"], budget=budget)
        assert placements is not None
        self.assertEqual([p.word for p in placements], ["casa", "ciao", "alan", "anta"])
        # anta, alan, casa, ciao, anta, alan, anta
        self.assertEqual(budget.steps, 7)

    def test_overlaps_and_uniqueness_hold(self) -> None:
        filled, slots = _setup("2010\n0.0.\n1000")
        words = ["tone", "cart", "ran", "cat"]
        placements = fill_slots(filled, slots, words)
        assert placements is not None
        self.assertEqual(sorted(p.word for p in placements), sorted(words))
        letters = {}
        for placement in placements:
            for (r, c), letter in zip(placement.slot.cells, placement.word):
                self.assertEqual(letters.setdefault((r, c), letter), letter)
                self.assertEqual(filled.letter(r, c), letter)

    def test_failure_restores_the_buffer(self) -> None:
        filled, slots = _setup(PUZZLE)
        placements = fill_slots(filled, slots, ["casa", "alan", "ciao", "xyzw"])
        self.assertIsNone(placements)
        self.assertEqual(filled.rows, FilledGrid.from_codes(PuzzleGrid.from_text(PUZZLE).codes).rows)

    def test_unplaceable_length(self) -> None:
        filled, slots = _setup(PUZZLE)
        self.assertIsNone(fill_slots(filled, slots, ["casa", "alan", "ciao", "xyz"]))

    def test_count_mismatch_returns_none(self) -> None:
        filled, slots = _setup(PUZZLE)
        self.assertIsNone(fill_slots(filled, slots, ["casa", "alan", "ciao"]))

    def test_place_words_marks_used(self) -> None:
        filled, slots = _setup(PUZZLE)
        used = [False] * 4
        self.assertTrue(place_words(filled, slots, ["casa", "alan", "ciao", "anta"], used))
        self.assertEqual(used, [True, True, True, True])

    def test_step_budget_raises(self) -> None:
        filled, slots = _setup(PUZZLE)
        with self.assertRaises(SearchLimitExceeded):
            fill_slots(filled, slots, ["anta", "casa", "alan", "ciao"], budget=SearchBudget(max_steps=3))

    def test_expired_deadline_raises(self) -> None:
        filled, slots = _setup(PUZZLE)
        with self.assertRaises(SearchLimitExceeded):
            fill_slots(filled, slots, ["casa", "alan", "ciao", "anta"], budget=SearchBudget(timeout=-1.0))

    def test_empty_slot_list_succeeds(self) -> None:
        filled = FilledGrid([["."]])
        self.assertEqual(fill_slots(filled, [], []), [])

    def test_two_letter_slots(self) -> None:
        slots = [Slot(0, 0, Direction.ACROSS, 2), Slot(0, 0, Direction.DOWN, 2)]
        filled = FilledGrid([["", ""], ["", "."]])
        placements = fill_slots(filled, slots, ["on", "ox"])
        assert placements is not None
        self.assertEqual(filled.rows, [["o", "n"], ["x", "."]])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
