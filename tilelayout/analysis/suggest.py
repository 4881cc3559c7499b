"""Rank dictionary words by how many letters they share with the word list."""

from typing import Iterable, List, Optional, Sequence

from ..layout.data import DICTIONARY
from ..layout.parsing import sanitize_word
from .models import Suggestion


SUGGESTION_LIMIT = 12


def letter_overlap(word: str, used: set) -> int:
    """Count the distinct letters of `word` found in `used`."""
    return sum(1 for letter in set(word) if letter in used)


def suggest(
    words: Sequence[str],
    dictionary: Optional[Iterable[str]] = None,
    limit: int = SUGGESTION_LIMIT,
) -> List[Suggestion]:
    """
    Suggest dictionary words that share letters with the current list.

    Words already in the list are skipped, as are candidates sharing no
    letter at all. Candidates are ranked by overlap, then by length; the
    dictionary order decides remaining ties.

    Args:
        words: The current word list
        dictionary: Candidate words (defaults to the built-in DICTIONARY)
        limit: Maximum number of suggestions to return

    Returns:
        Up to `limit` suggestions, best first
    """
    if dictionary is None:
        dictionary = DICTIONARY

    used = {letter for word in words for letter in word}
    existing = {sanitize_word(word) for word in words}

    scored: List[Suggestion] = []
    for entry in dictionary:
        candidate = sanitize_word(entry)
        if not candidate or candidate in existing:
            continue

        overlap = letter_overlap(candidate, used)
        if overlap == 0:
            continue

        scored.append(Suggestion(word=candidate, overlap=overlap, length=len(candidate)))

    scored.sort(key=lambda s: (-s.overlap, -s.length))
    return scored[:limit]
