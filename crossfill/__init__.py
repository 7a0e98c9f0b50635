"""Crossword filler: place a fixed word list into a coded puzzle grid.

This package exposes the public API surface via:

- ``crossfill.engine.crossword.solve_crossword``: text in, filled grid or error text out.
- ``crossfill.engine.crossword.CrosswordSolver``: the same pipeline returning a ``SolveResult``.
- ``crossfill.engine.validator`` predicates for puzzle text and word lists.
"""

from .engine.crossword import CrosswordSolver, SolveResult, SolverConfig, solve_crossword
from .engine.validator import is_valid_puzzle_format, is_valid_word_list

__all__ = [
    "CrosswordSolver",
    "SolveResult",
    "SolverConfig",
    "solve_crossword",
    "is_valid_puzzle_format",
    "is_valid_word_list",
]

__version__ = "0.1.0"
