"""Word list session for tile-layout."""

from .models import (
    STARTER_WORDS,
    WorkbenchConfig,
    BuildResult,
)
from .workbench import Workbench

__all__ = [
    "STARTER_WORDS",
    "WorkbenchConfig",
    "BuildResult",
    "Workbench",
]
