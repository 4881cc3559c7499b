"""Tile count report for a word list."""

import unicodedata
from collections import Counter
from typing import Iterable, Tuple

from .models import TileCount, TileStats


def letter_sort_key(letter: str) -> Tuple[str, str]:
    """Sort accented letters right after their base letter (A < Ä < B)."""
    base = unicodedata.normalize("NFD", letter)[0]
    return base, letter


def tile_stats(words: Iterable[str]) -> TileStats:
    """
    Count how many tiles of each letter the word list needs.

    Every word contributes all of its letters, whether or not it made it
    onto the grid.

    Args:
        words: The current word list

    Returns:
        TileStats with the total and alphabetically sorted counts
    """
    counts = Counter(letter for word in words for letter in word)

    entries = [
        TileCount(letter=letter, count=counts[letter])
        for letter in sorted(counts, key=letter_sort_key)
    ]

    return TileStats(total=sum(counts.values()), entries=entries)


def format_distribution(stats: TileStats) -> str:
    """Format the counts as `A:1  B:2`."""
    return '  '.join(f"{entry.letter}:{entry.count}" for entry in stats.entries)
