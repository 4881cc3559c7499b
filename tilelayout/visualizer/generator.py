"""Generate self-contained HTML visualizer from build results."""

import html
import json
from pathlib import Path
from typing import Optional

from ..analysis.models import TileStats
from ..analysis.tiles import format_distribution


def _render_cells(grid: list) -> str:
    """One div per cell, row by row."""
    cells = []
    for row in grid:
        for letter in row:
            css_class = "filled" if letter else "empty"
            cells.append(f'        <div class="cell {css_class}">{html.escape(letter)}</div>')
    return '\n'.join(cells)


def generate_visualizer(
    results_path: str | Path,
    output_path: Optional[str | Path] = None,
) -> Path:
    """
    Generate a self-contained HTML visualizer from a build result.

    Args:
        results_path: Path to the results JSON file
        output_path: Output path for HTML (defaults to same name with .html)

    Returns:
        Path to the generated HTML file
    """
    results_path = Path(results_path)

    if output_path is None:
        output_path = results_path.with_suffix(".html")
    else:
        output_path = Path(output_path)

    # Load build data
    with open(results_path, encoding="utf-8") as f:
        build_data = json.load(f)

    # Load template and assets
    module_dir = Path(__file__).parent
    template_path = module_dir / "templates" / "visualizer.html"
    css_path = module_dir / "assets" / "styles.css"

    with open(template_path, encoding="utf-8") as f:
        template = f.read()

    with open(css_path, encoding="utf-8") as f:
        css = f.read()

    words = build_data.get("words", [])
    grid = build_data.get("grid", [])
    stats = TileStats(**build_data.get("tile_stats", {}))

    if not words:
        page_title = "Empty layout"
    elif len(words) <= 3:
        page_title = ", ".join(words)
    else:
        page_title = f"{', '.join(words[:3])} + {len(words) - 3} more"

    stats_text = (
        f"Words: {len(words)}\n"
        f"Total tiles: {stats.total}\n"
        f"Distribution: {format_distribution(stats)}"
    )

    suggestion_items = '\n'.join(
        f"        <li>{html.escape(s['word'])} (Match: {s['overlap']})</li>"
        for s in build_data.get("suggestions", [])
    )

    # Substitute template variables
    page = template.replace("{{ inline_css }}", css)
    page = page.replace("{{ page_title }}", html.escape(page_title))
    page = page.replace("{{ built_at }}", html.escape(build_data.get("built_at", "")))
    page = page.replace("{{ grid_size }}", str(len(grid)))
    page = page.replace("{{ grid_cells }}", _render_cells(grid))
    page = page.replace("{{ stats_text }}", html.escape(stats_text))
    page = page.replace("{{ dropped_words }}", html.escape(", ".join(build_data.get("dropped", [])) or "none"))
    page = page.replace("{{ suggestion_items }}", suggestion_items)

    # Write output
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(page)

    return output_path
