"""Word list parsing utilities."""

import re
from typing import List


ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÜ"

_INVALID_CHARS = re.compile(f"[^{ALPHABET}]")
_SEPARATORS = re.compile(r"\n|,|;")


def sanitize_word(raw: str) -> str:
    """Uppercase a word and strip every character outside the alphabet."""
    return _INVALID_CHARS.sub('', raw.strip().upper())


def sanitize_words(raw: str) -> List[str]:
    """
    Parse free text into a word list.

    Words are separated by newlines, commas or semicolons. Words shorter
    than two letters are skipped, duplicates keep their first position.
    """
    words: List[str] = []
    for part in _SEPARATORS.split(raw):
        word = sanitize_word(part)
        if len(word) > 1 and word not in words:
            words.append(word)
    return words
