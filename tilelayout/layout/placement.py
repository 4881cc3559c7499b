"""
Greedy placement of a word list onto a fixed-size grid.

Each word after the first is anchored on the first already-placed cell
(row-major) that shares one of its letters, trying a vertical crossing before
a horizontal one. Words without any usable anchor go to the next free
fallback row at column 1. Words that fit nowhere are dropped.
"""

from typing import List, Optional, Sequence

from .grid import GRID_SIZE, can_place, create_grid, occupied_cells, place
from .models import Grid, LayoutResult, Placement


def _place_intersecting(grid: Grid, word: str) -> Optional[Placement]:
    """Place `word` across the first matching anchor, or return None."""
    for cell in occupied_cells(grid):
        for i, letter in enumerate(word):
            if letter != cell.letter:
                continue

            row, col = cell.row - i, cell.col
            if can_place(grid, word, row, col, 'V'):
                place(grid, word, row, col, 'V')
                return Placement(word, row, col, 'V')

            row, col = cell.row, cell.col - i
            if can_place(grid, word, row, col, 'H'):
                place(grid, word, row, col, 'H')
                return Placement(word, row, col, 'H')

    return None


def compose_layout(words: Sequence[str], size: int = GRID_SIZE) -> LayoutResult:
    """
    Lay out `words` in order and report what was placed and dropped.

    Args:
        words: Sanitized, de-duplicated words in input order
        size: Grid edge length

    Returns:
        LayoutResult with the grid, placements in order, and dropped words
    """
    grid = create_grid(size)
    placements: List[Placement] = []
    dropped: List[str] = []

    if not words:
        return LayoutResult(size=size, grid=grid)

    # First word goes in the middle row, centered
    first = words[0]
    row0 = size // 2
    col0 = max(0, (size - len(first)) // 2)
    if len(first) <= size:
        place(grid, first, row0, col0, 'H')
        placements.append(Placement(first, row0, col0, 'H'))
    else:
        dropped.append(first)

    fallback_row = 1
    for word in words[1:]:
        placement = _place_intersecting(grid, word)

        if placement is None:
            while fallback_row < size - 1 and not can_place(grid, word, fallback_row, 1, 'H'):
                fallback_row += 1
            if fallback_row < size - 1:
                place(grid, word, fallback_row, 1, 'H')
                placement = Placement(word, fallback_row, 1, 'H')
            # The cursor moves on even when the word was dropped
            fallback_row += 2

        if placement is None:
            dropped.append(word)
        else:
            placements.append(placement)

    return LayoutResult(size=size, grid=grid, placements=placements, dropped=dropped)


def build_layout(words: Sequence[str], size: int = GRID_SIZE) -> Grid:
    """Lay out `words` and return the populated grid."""
    return compose_layout(words, size).grid
