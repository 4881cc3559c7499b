"""Data models for word list analysis."""

from typing import Dict, List
from pydantic import BaseModel, Field


class TileCount(BaseModel):
    """How many tiles of one letter the word list needs."""
    letter: str = Field(..., min_length=1, max_length=1)
    count: int = Field(..., ge=1)


class TileStats(BaseModel):
    """Letter frequency across a word list."""
    total: int = 0
    entries: List[TileCount] = Field(default_factory=list)

    def as_dict(self) -> Dict[str, int]:
        """Letter -> count mapping in display order."""
        return {entry.letter: entry.count for entry in self.entries}


class Suggestion(BaseModel):
    """A dictionary word scored against the letters already in use."""
    word: str
    overlap: int = Field(..., ge=1)
    length: int
