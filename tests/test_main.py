import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path

import main


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.tmpdir = Path(self._tmp.name)
        self.puzzle = self.tmpdir / "puzzle.txt"
        self.puzzle.write_text("2001\n0..0\n1000\n0..0\n", encoding="utf-8")

    def _run(self, *argv: str):
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            code = main.main(list(argv))
        return code, stdout.getvalue()

    def test_parse_words_file_skips_comments(self) -> None:
        words_file = self.tmpdir / "words.txt"
        words_file.write_text("# italian\ncasa\n\nalan\n  ciao  \nanta\n", encoding="utf-8")
        self.assertEqual(main.parse_words_file(words_file), ["casa", "alan", "ciao", "anta"])

    def test_prints_solution(self) -> None:
        code, out = self._run("--puzzle", str(self.puzzle), "--words", "casa", "alan", "ciao", "anta")
        self.assertEqual(code, 0)
        self.assertEqual(out, "casa\ni..l\nanta\no..n\n")

    def test_error_exit_status(self) -> None:
        code, out = self._run("--puzzle", str(self.puzzle), "--words", "casa", "alan", "ciao", "xyz")
        self.assertEqual(code, 1)
        self.assertEqual(out, "Error: Unable to place all words\n")

    def test_json_output_to_file(self) -> None:
        words_file = self.tmpdir / "words.txt"
        words_file.write_text("casa\nalan\nciao\nanta\n", encoding="utf-8")
        output = self.tmpdir / "out.json"
        code, out = self._run(
            "--puzzle", str(self.puzzle),
            "--words-file", str(words_file),
            "--json",
            "--output", str(output),
        )
        self.assertEqual(code, 0)
        self.assertEqual(out, "")
        payload = json.loads(output.read_text(encoding="utf-8"))
        self.assertTrue(payload["ok"])
        self.assertEqual(payload["text"], "casa\ni..l\nanta\no..n")
        self.assertEqual(payload["placements"][0], {
            "id": "AC_0_0",
            "start": [0, 0],
            "direction": "ACROSS",
            "length": 4,
            "word": "casa",
        })

    def test_words_are_required(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main.main(["--puzzle", str(self.puzzle)])

    def test_step_limit_rejected_with_cp_sat(self) -> None:
        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr):
            with self.assertRaises(SystemExit):
                main.main([
                    "--puzzle", str(self.puzzle), "--engine", "cp-sat", "--max-steps", "5",
                    "--words", "casa", "alan", "ciao", "anta",
                ])
        self.assertIn("max_steps", stderr.getvalue())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
