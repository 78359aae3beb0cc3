"""worldgraph CLI entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from worldgraph.config import Config, GraphConfig, load_config
from worldgraph.generator import GenerationError, generate_with_retry
from worldgraph.output import export_json, export_spoiler_log
from worldgraph.stats import report_stats


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the worldgraph command."""
    parser = argparse.ArgumentParser(
        description="worldgraph - Generate dungeon level room graphs",
    )
    parser.add_argument(
        "config",
        type=Path,
        nargs="?",
        default=None,
        help="Path to config.toml (optional, uses defaults if not provided)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output directory (default: config's output_dir). "
        "Files are written to <output>/<seed>/",
    )
    parser.add_argument(
        "--spoiler",
        action="store_true",
        help="Generate spoiler log file",
    )
    parser.add_argument(
        "--seed",
        help="Random seed (overrides config, 0 = auto-reroll)",
    )
    parser.add_argument(
        "--depth",
        type=int,
        help="Rooms on every path from start to a final room (overrides config)",
    )
    parser.add_argument(
        "--finals",
        type=int,
        help="Number of final rooms (overrides config)",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=100,
        help="Max generation attempts for auto-reroll (default: 100)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Load or create config
    try:
        if args.config:
            config = load_config(args.config)
            if args.verbose:
                print(f"Loaded config from {args.config}")
        else:
            config = Config()
            if args.verbose:
                print("Using default configuration")

        # Apply CLI overrides
        if args.seed is not None:
            config.seed = int(args.seed) if args.seed.isdigit() else args.seed
        if args.depth is not None or args.finals is not None:
            config.graph = GraphConfig(
                depth=args.depth if args.depth is not None else config.graph.depth,
                final_nodes_count=(
                    args.finals
                    if args.finals is not None
                    else config.graph.final_nodes_count
                ),
            )
    except FileNotFoundError:
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1

    # Determine output directory: CLI > config
    if args.output is not None:
        output_dir = args.output
    else:
        output_dir = Path(config.output.output_dir)

    if args.verbose:
        mode = "fixed seed" if str(config.seed) != "0" else "auto-reroll"
        print(f"Generating world graph ({mode})...")

    try:
        result = generate_with_retry(
            config.graph.to_options(), config.seed, max_attempts=args.max_attempts
        )
    except GenerationError as e:
        print(f"Error: Generation failed: {e}", file=sys.stderr)
        return 1

    graph = result.graph

    if args.verbose and result.validation.warnings:
        print("Validation warnings:")
        for warning in result.validation.warnings:
            print(f"  - {warning}")

    # Print summary
    print(f"Generated world graph with seed {result.seed}")
    print(f"  Depth: {graph.depth}")
    print(f"  Rooms: {graph.total_nodes()}")
    print(f"  Paths: {len(graph.debug_paths)}")
    if result.attempts > 1:
        print(f"  Attempts: {result.attempts}")

    if args.verbose:
        print()
        print(report_stats(graph))

    # Create output directory: <output>/<seed>/
    seed_dir = output_dir / str(result.seed)
    seed_dir.mkdir(parents=True, exist_ok=True)

    json_path = seed_dir / "graph.json"
    export_json(graph, json_path)
    print(f"Written: {json_path}")

    if args.spoiler or config.output.spoiler:
        spoiler_path = seed_dir / "spoiler.txt"
        export_spoiler_log(graph, spoiler_path)
        print(f"Written: {spoiler_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
