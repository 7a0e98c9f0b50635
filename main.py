"""CLI entrypoint for the crossword filler."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

from crossfill.engine.crossword import ENGINES, CrosswordSolver, SolverConfig
from crossfill.utils.logger import configure_logging
from crossfill.utils.pretty import pretty_print_grid


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def read_puzzle(source: str) -> str:
    if source == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")
    # Editors usually terminate the last row with a newline.
    if text.endswith("\n"):
        text = text[:-1]
    return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fill a coded crossword grid with a fixed list of words",
    )
    parser.add_argument(
        "--puzzle",
        type=str,
        required=True,
        metavar="FILE",
        help="Puzzle file with rows over 0, 1, 2 and '.' ('-' reads stdin)",
    )
    parser.add_argument("--words", nargs="+", metavar="WORD", help="Words to place")
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--engine",
        type=str,
        choices=list(ENGINES),
        default=ENGINES[0],
        help="Placement engine (default: backtracking)",
    )
    parser.add_argument("--max-steps", type=int, default=None, help="Abort after this many placements (backtracking only)")
    parser.add_argument("--timeout", type=float, default=None, help="Abort after this many seconds")
    parser.add_argument("--seed", type=int, default=0, help="Random seed for the cp-sat engine")
    parser.add_argument("--json", action="store_true", help="Print a JSON payload instead of the grid text")
    parser.add_argument("--pretty", action="store_true", help="Also print an indexed grid to stderr")
    parser.add_argument("--output", type=Path, help="Optional path to write the output to")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    if not args.words and not args.words_file:
        parser.error("provide --words or --words-file")

    words: List[str] = []
    if args.words:
        words.extend(args.words)
    if args.words_file:
        words.extend(parse_words_file(args.words_file))

    try:
        config = SolverConfig(
            engine=args.engine,
            max_steps=args.max_steps,
            timeout_seconds=args.timeout,
            seed=args.seed,
        )
    except ValueError as exc:
        parser.error(str(exc))
    result = CrosswordSolver(config).solve(read_puzzle(args.puzzle), words)

    if args.pretty and result.filled_grid is not None:
        pretty_print_grid(result.filled_grid, label="Filled grid:", stream=sys.stderr)

    if args.json:
        payload: Dict[str, Any] = {
            "ok": result.ok,
            "engine": result.engine,
            "text": result.text,
            "grid": result.filled_grid,
            "placements": [
                {
                    "id": placement.slot.id,
                    "start": [placement.slot.start_row, placement.slot.start_col],
                    "direction": placement.slot.direction.value,
                    "length": placement.slot.length,
                    "word": placement.word,
                }
                for placement in result.placements
            ],
            "steps": result.steps,
        }
        output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    else:
        output_text = result.text

    if args.output:
        args.output.write_text(output_text + "\n", encoding="utf-8")
    else:
        print(output_text)
    return 0 if result.ok else 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
