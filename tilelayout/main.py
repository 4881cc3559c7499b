"""
Main entry point for building tile layouts.

Usage:
    python -m tilelayout.main words.txt
    python -m tilelayout.main --words "HOME, LOVE" --suggest
    python -m tilelayout.main --config config.yaml --output results/layout.json --visualize
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path

import yaml

from .workbench import Workbench, WorkbenchConfig


def load_config(config_path: str) -> WorkbenchConfig:
    """Load workbench configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return WorkbenchConfig(**data)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Lay out a word list on a tile grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  grid_size: 25
  suggestion_limit: 12
  dictionary_path: data/words.txt
  words:
    - HOME
    - LOVE
        """
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Path to a word file (one word per line, commas and semicolons also separate)"
    )
    parser.add_argument(
        "--words", "-w",
        help="Words as free text, e.g. \"HOME, LOVE\""
    )
    parser.add_argument(
        "--add", "-a",
        action="append",
        default=[],
        help="Append a word to the list (repeatable)"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--size",
        type=int,
        help="Grid size (overrides the config)"
    )
    parser.add_argument(
        "--resume",
        help="Rebuild from a saved result JSON file"
    )
    parser.add_argument(
        "--suggest", "-s",
        action="store_true",
        help="Suggest dictionary words that share letters with the list"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the result JSON"
    )
    parser.add_argument(
        "--visualize",
        action="store_true",
        help="Generate an HTML visualizer next to the result JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stdout"
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Set up the workbench from a saved result or from config
    if args.resume:
        if args.verbose:
            print(f"Resuming from: {args.resume}")
        try:
            bench = Workbench.resume(args.resume)
        except Exception as e:
            print(f"Error resuming from {args.resume}: {e}", file=sys.stderr)
            return 1
    else:
        try:
            config = load_config(args.config) if args.config else WorkbenchConfig()
            if args.size is not None:
                config = WorkbenchConfig(**{**config.model_dump(), "grid_size": args.size})
        except Exception as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            return 1

        bench = Workbench.create(config=config)

        try:
            if args.input:
                input_path = Path(args.input)
                if not input_path.exists():
                    raise FileNotFoundError(f"Word file not found: {args.input}")
                bench.set_text(input_path.read_text(encoding="utf-8"))
            elif args.words is not None:
                bench.set_text(args.words)
        except Exception as e:
            print(f"Error reading words: {e}", file=sys.stderr)
            return 1

    for word in args.add:
        if not bench.add_word(word) and args.verbose:
            print(f"Skipped word: {word!r}")

    if args.verbose:
        print(f"Words ({len(bench.words)}): {' '.join(bench.words)}")
        print(f"Grid size: {bench.config.grid_size}")
        print("-" * 40)

    try:
        result = bench.build(include_suggestions=args.suggest)
    except Exception as e:
        print(f"Error during build: {e}", file=sys.stderr)
        return 1

    print(result.rendered_grid)
    print()
    print(bench.summary(result))

    if result.dropped:
        print(f"Dropped: {', '.join(result.dropped)}")

    if args.suggest:
        print()
        print("=== Suggestions ===")
        if not result.suggestions:
            print("(none)")
        for s in result.suggestions:
            print(f"{s.word} (Match: {s.overlap})")

    # Save results
    output_path = None
    if args.output:
        output_path = Path(args.output)
    elif args.visualize:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = Path("results") / f"layout_{timestamp}.json"

    if output_path is not None:
        bench.save_result(output_path, result)
        if args.verbose:
            print()
            print(f"Results saved to: {output_path}")

    # Generate visualizer if requested
    if args.visualize:
        from .visualizer import generate_visualizer
        html_path = generate_visualizer(output_path)
        print(f"Visualizer generated: {html_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
