# imports_graph/main.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
CLI entry point for imports-graph.

Usage:
    imports-graph src --ignore "*.test.ts" --format svg --output imports.svg
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .config import GraphConfig
from .files import IgnorePatternError
from .pipeline import create_graph
from .render import RenderError, render_svg

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="imports-graph",
        description="Draw the file imports graph of a JavaScript/TypeScript tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # DOT for the current directory
    imports-graph

    # Skip test files and vendored code, render to SVG
    imports-graph src --ignore "*.test.ts" "vendor/*" --format svg -o graph.svg

    # Arrows from each file to the files that depend on it, no clusters
    imports-graph src --reverse --no-dir
        """,
    )
    parser.add_argument(
        "root",
        nargs="?",
        type=Path,
        default=None,
        help="Directory to scan (default: current directory)",
    )
    parser.add_argument(
        "--ignore",
        "-i",
        nargs="+",
        default=None,
        metavar="PATTERN",
        help="Files to leave out; * matches any run of characters",
    )
    parser.add_argument(
        "--no-dir",
        action="store_true",
        default=None,
        help="Do not group files by directory",
    )
    parser.add_argument(
        "--reverse",
        action="store_true",
        default=None,
        help="Draw arrows from imported files to their importers",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=["dot", "svg"],
        default=None,
        help="Output format (default: dot)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write to a file instead of stdout",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML configuration file (default: IMPORTS_GRAPH_* environment)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of threads reading files",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose (debug) logging",
    )
    return parser


def load_config(args: argparse.Namespace) -> GraphConfig:
    """Base config from --config or the environment, overridden by flags."""
    if args.config is not None:
        config = GraphConfig.from_yaml(args.config)
    else:
        config = GraphConfig.from_env()

    overrides = {
        "root": args.root,
        "ignore": args.ignore,
        "no_dir": args.no_dir,
        "reverse": args.reverse,
        "output_format": args.format,
        "max_workers": args.workers,
    }
    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return config
    return GraphConfig(**{**config.model_dump(), **updates})


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for imports-graph CLI.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    args = build_parser().parse_args(argv)

    # Logs go to stderr, stdout carries the graph
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = load_config(args)
    except FileNotFoundError as e:
        logger.error(f"Config file not found: {e}")
        return 1
    except yaml.YAMLError as e:
        logger.error(f"Invalid YAML in config file: {e}")
        return 1
    except (ValidationError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        output = create_graph(config)
        if config.output_format == "svg":
            output = render_svg(output)
    except (IgnorePatternError, FileNotFoundError, RenderError) as e:
        logger.error(str(e))
        return 1

    if args.output is not None:
        args.output.write_text(output, encoding="utf-8")
        logger.info(f"Graph written to {args.output}")
    else:
        sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
