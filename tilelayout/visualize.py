"""
Standalone CLI for generating visualizers from saved layouts.

Usage:
    python -m tilelayout.visualize results/layout.json
    python -m tilelayout.visualize results/layout.json --output layout.html
"""

import argparse
import sys
from pathlib import Path

from .visualizer import generate_visualizer


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate an HTML visualizer from a saved tile layout",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m tilelayout.visualize results/layout.json
  python -m tilelayout.visualize results/layout.json --output my_layout.html
        """
    )
    parser.add_argument(
        "results",
        help="Path to the results JSON file"
    )
    parser.add_argument(
        "--output", "-o",
        help="Output path for HTML file (default: same as input with .html extension)"
    )

    args = parser.parse_args(argv)

    # Validate input file
    results_path = Path(args.results)
    if not results_path.exists():
        print(f"Error: Results file not found: {args.results}", file=sys.stderr)
        return 1

    if not results_path.suffix == ".json":
        print("Warning: Input file doesn't have .json extension", file=sys.stderr)

    # Generate visualizer
    try:
        output_path = generate_visualizer(
            results_path,
            args.output
        )
        print(f"Visualizer generated: {output_path}")
    except Exception as e:
        print(f"Error generating visualizer: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
