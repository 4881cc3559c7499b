"""Tile counts and word suggestions for tile-layout."""

from .models import TileCount, TileStats, Suggestion
from .tiles import tile_stats, format_distribution, letter_sort_key
from .suggest import suggest, letter_overlap, SUGGESTION_LIMIT

__all__ = [
    "TileCount",
    "TileStats",
    "Suggestion",
    "tile_stats",
    "format_distribution",
    "letter_sort_key",
    "suggest",
    "letter_overlap",
    "SUGGESTION_LIMIT",
]
