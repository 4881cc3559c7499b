import json
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional, Sequence
from pydantic import BaseModel, Field

from ..analysis import Suggestion, format_distribution, suggest, tile_stats
from ..layout import compose_layout, load_dictionary, render_grid, sanitize_word, sanitize_words
from ..layout.data import DICTIONARY
from .models import BuildResult, WorkbenchConfig


class Workbench(BaseModel):
    """
    Holds the current word list and rebuilds the layout on demand.

    Every build recomputes the grid, the tile counts and (optionally) the
    suggestions from scratch; nothing is carried over between builds.

    Attributes:
        config: Workbench configuration
        words: Current sanitized word list, in first-seen order
        last_result: Result of the most recent build, if any
    """

    config: WorkbenchConfig = Field(default_factory=WorkbenchConfig)
    words: List[str] = Field(default_factory=list)
    last_result: Optional[BuildResult] = None

    @classmethod
    def create(
        cls,
        config: Optional[WorkbenchConfig] = None,
        **config_kwargs: Any
    ) -> "Workbench":
        """
        Factory method to create a workbench seeded with the config's words.

        Args:
            config: Optional WorkbenchConfig instance
            **config_kwargs: Config parameters if config not provided

        Returns:
            Workbench holding the sanitized starter words
        """
        if config is None:
            config = WorkbenchConfig(**config_kwargs)

        bench = cls(config=config)
        bench.set_text('\n'.join(config.words))
        return bench

    @classmethod
    def resume(cls, result_path: str | Path) -> "Workbench":
        """
        Restore a workbench from a saved build result.

        Args:
            result_path: Path to the saved result JSON file

        Returns:
            Workbench with the saved config and word list
        """
        result_path = Path(result_path)
        if not result_path.exists():
            raise FileNotFoundError(f"Result file not found: {result_path}")

        with open(result_path, encoding="utf-8") as f:
            data = json.load(f)

        result = BuildResult(**data)
        return cls(config=result.config, words=list(result.words), last_result=result)

    # Word list editing

    @property
    def text(self) -> str:
        """The word list, one word per line."""
        return '\n'.join(self.words)

    def set_text(self, raw: str) -> None:
        """Replace the word list with the words parsed from `raw`."""
        self.words = sanitize_words(raw)

    def add_word(self, raw: str) -> bool:
        """
        Append a word to the list.

        Args:
            raw: The word as typed; it is sanitized first

        Returns:
            True if the list changed
        """
        word = sanitize_word(raw)
        if len(word) < 2 or word in self.words:
            return False
        self.words.append(word)
        return True

    def remove_word(self, index: int) -> str:
        """Remove and return the word at `index`."""
        return self.words.pop(index)

    def clear(self) -> None:
        """Remove every word."""
        self.words = []

    def accept_suggestion(self, word: str) -> bool:
        """Add a suggested word to the list."""
        return self.add_word(word)

    # Analysis

    @property
    def dictionary(self) -> Sequence[str]:
        """The reference dictionary used for suggestions."""
        if self.config.dictionary_path:
            return load_dictionary(self.config.dictionary_path)
        return DICTIONARY

    def suggest(self) -> List[Suggestion]:
        """Suggest dictionary words for the current list."""
        return suggest(self.words, self.dictionary, limit=self.config.suggestion_limit)

    def build(self, include_suggestions: bool = False) -> BuildResult:
        """
        Rebuild the layout from the current word list.

        Args:
            include_suggestions: Also score the dictionary against the list

        Returns:
            BuildResult for the current word list
        """
        layout = compose_layout(self.words, self.config.grid_size)

        result = BuildResult(
            config=self.config,
            words=list(self.words),
            grid=layout.grid,
            rendered_grid=render_grid(layout.grid),
            placements=layout.placements,
            dropped=layout.dropped,
            tile_stats=tile_stats(self.words),
            suggestions=self.suggest() if include_suggestions else [],
            built_at=datetime.now().isoformat(),
        )
        self.last_result = result
        return result

    def summary(self, result: Optional[BuildResult] = None) -> str:
        """
        Format the stats panel for a build.

        Args:
            result: Build to describe (defaults to a fresh build)

        Returns:
            Word count, total tiles and letter distribution, one per line
        """
        if result is None:
            result = self.build()

        return (
            f"Words: {len(result.words)}\n"
            f"Total tiles: {result.tile_stats.total}\n"
            f"Distribution: {format_distribution(result.tile_stats)}"
        )

    def save_result(self, path: str | Path, result: Optional[BuildResult] = None) -> None:
        """
        Save a build result to a JSON file.

        Args:
            path: Path to save the result file
            result: Build to save (defaults to the last build, or a fresh one)
        """
        if result is None:
            result = self.last_result or self.build()

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding="utf-8") as f:
            json.dump(result.model_dump(mode="json"), f, indent=2, ensure_ascii=False)
