import io
import unittest

from crossfill.utils.pretty import format_filled_grid, format_grid, pretty_print_grid

FILLED = [
    ["C", "a", "s", "a"],
    ["i", ".", ".", "l"],
]


class RendererTests(unittest.TestCase):
    def test_format_filled_grid(self) -> None:
        self.assertEqual(format_filled_grid(FILLED), "casa\ni..l")

    def test_format_grid_marks_unfilled_cells(self) -> None:
        rendered = format_grid([["a", ""], [".", "b"]])
        lines = rendered.split("\n")
        self.assertEqual(lines[0], "     0  1")
        self.assertEqual(lines[2], " 0 |  a  _")
        self.assertEqual(lines[3], " 1 |  .  b")

    def test_pretty_print_grid_with_label(self) -> None:
        stream = io.StringIO()
        pretty_print_grid(FILLED, label="Filled grid:", stream=stream)
        self.assertTrue(stream.getvalue().startswith("Filled grid:\n"))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
