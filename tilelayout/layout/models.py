"""Data models for grid layouts."""

from typing import List, Literal, NamedTuple
from pydantic import BaseModel, Field


Orientation = Literal['H', 'V']
Grid = List[List[str]]


class Placement(NamedTuple):
    """Represents where a word was written on the grid."""
    word: str
    row: int
    col: int
    orientation: str


class Cell(NamedTuple):
    """A non-empty grid cell."""
    row: int
    col: int
    letter: str


class LayoutResult(BaseModel):
    """Result of laying out a word list."""
    size: int = Field(..., ge=1)
    grid: Grid
    placements: List[Placement] = Field(default_factory=list)
    dropped: List[str] = Field(default_factory=list)

    @property
    def placed_words(self) -> List[str]:
        """Words that made it onto the grid, in placement order."""
        return [p.word for p in self.placements]
