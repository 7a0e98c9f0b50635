"""Structural checks run on the raw puzzle text and word list before solving."""

from __future__ import annotations

from typing import Any

from ..core.constants import MIN_WORD_COUNT, PUZZLE_ALPHABET


def is_valid_puzzle_format(text: Any) -> bool:
    """Return True when ``text`` is a rectangle of ``0``, ``1``, ``2`` and ``.``."""

    if not isinstance(text, str):
        return False
    lines = text.split("\n")
    width = len(lines[0])
    if width == 0:
        return False
    for line in lines:
        if len(line) != width:
            return False
        if any(char not in PUZZLE_ALPHABET for char in line):
            return False
    return True


def has_no_duplicates(words: Any) -> bool:
    seen = set()
    for word in words:
        if word in seen:
            return False
        seen.add(word)
    return True


def has_valid_entries(words: Any) -> bool:
    """Check the word list shape without the minimum-size rule.

    ``words`` must be a list or tuple of non-empty ASCII-letter strings with no
    duplicate values.
    """

    if not isinstance(words, (list, tuple)):
        return False
    for word in words:
        if not isinstance(word, str) or not (word.isascii() and word.isalpha()):
            return False
    return has_no_duplicates(words)


def is_valid_word_list(words: Any) -> bool:
    if not isinstance(words, (list, tuple)) or len(words) < MIN_WORD_COUNT:
        return False
    return has_valid_entries(words)
