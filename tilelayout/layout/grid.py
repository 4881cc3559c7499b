"""Grid buffer primitives and rendering utilities."""

from typing import List

from .models import Cell, Grid


GRID_SIZE = 25
EMPTY = ''


def create_grid(size: int = GRID_SIZE) -> Grid:
    """Create a size x size grid with every cell empty."""
    return [[EMPTY] * size for _ in range(size)]


def can_place(grid: Grid, word: str, row: int, col: int, orientation: str) -> bool:
    """
    Check whether `word` fits at (row, col) along `orientation`.

    A covered cell that already holds the same letter is not a conflict;
    that is what lets words intersect.
    """
    size = len(grid)

    if orientation == 'H' and col + len(word) > size:
        return False
    if orientation == 'V' and row + len(word) > size:
        return False
    if row < 0 or col < 0:
        return False

    for i, letter in enumerate(word):
        r = row if orientation == 'H' else row + i
        c = col + i if orientation == 'H' else col
        existing = grid[r][c]
        if existing and existing != letter:
            return False

    return True


def place(grid: Grid, word: str, row: int, col: int, orientation: str) -> None:
    """Write `word` into the grid. Callers must check `can_place` first."""
    for i, letter in enumerate(word):
        r = row if orientation == 'H' else row + i
        c = col + i if orientation == 'H' else col
        grid[r][c] = letter


def occupied_cells(grid: Grid) -> List[Cell]:
    """All non-empty cells in row-major order."""
    return [
        Cell(r, c, letter)
        for r, line in enumerate(grid)
        for c, letter in enumerate(line)
        if letter
    ]


def grid_rows(grid: Grid, empty: str = '.') -> List[str]:
    """Render each grid row to a string."""
    return [''.join(letter or empty for letter in line) for line in grid]


def render_grid(grid: Grid, empty: str = '.') -> str:
    """Render the grid to a string."""
    return '\n'.join(grid_rows(grid, empty))
