"""
Pydantic models for the workbench layer.

This module contains the configuration and result models used by the
Workbench and the CLI. The layout and analysis models live in their own
packages.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from ..analysis.models import Suggestion, TileStats
from ..layout.grid import GRID_SIZE
from ..layout.models import Placement
from ..analysis.suggest import SUGGESTION_LIMIT


STARTER_WORDS = ['EXPLORE', 'CREATE', 'ADVENTURE', 'RELAX', 'HAPPY']


class WorkbenchConfig(BaseModel):
    """Configuration for a workbench session."""
    grid_size: int = Field(default=GRID_SIZE, ge=2)
    suggestion_limit: int = Field(default=SUGGESTION_LIMIT, ge=1)
    dictionary_path: Optional[str] = None
    words: List[str] = Field(default_factory=lambda: list(STARTER_WORDS))


class BuildResult(BaseModel):
    """Result of a full rebuild of the layout."""
    config: WorkbenchConfig
    words: List[str] = Field(default_factory=list)
    grid: List[List[str]] = Field(default_factory=list)
    rendered_grid: str = ""
    placements: List[Placement] = Field(default_factory=list)
    dropped: List[str] = Field(default_factory=list)
    tile_stats: TileStats = Field(default_factory=TileStats)
    suggestions: List[Suggestion] = Field(default_factory=list)
    built_at: str = ""
