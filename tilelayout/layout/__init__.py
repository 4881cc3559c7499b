"""Grid layout for tile-layout."""

from .placement import build_layout, compose_layout
from .models import Orientation, Grid, Placement, Cell, LayoutResult
from .parsing import ALPHABET, sanitize_word, sanitize_words
from .grid import (
    GRID_SIZE,
    EMPTY,
    create_grid,
    can_place,
    place,
    occupied_cells,
    grid_rows,
    render_grid,
)
from .data import DICTIONARY, load_dictionary

__all__ = [
    # Placement engine
    "build_layout",
    "compose_layout",
    # Models
    "Orientation",
    "Grid",
    "Placement",
    "Cell",
    "LayoutResult",
    # Parsing
    "ALPHABET",
    "sanitize_word",
    "sanitize_words",
    # Grid utilities
    "GRID_SIZE",
    "EMPTY",
    "create_grid",
    "can_place",
    "place",
    "occupied_cells",
    "grid_rows",
    "render_grid",
    # Dictionary
    "DICTIONARY",
    "load_dictionary",
]
