"""Command line entry point: scenario file in, Voronoi image out."""

import argparse
import sys
from typing import List, Optional

import structlog

from .config import settings
from .core.errors import VoronoiError
from .log_config import configure_logging
from .render import render
from .scenario import build_graph, load_scenario

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build and draw an exact Voronoi diagram")
    parser.add_argument("input", nargs="?", default="input.json", help="Scenario JSON file")
    parser.add_argument(
        "output", nargs="?", default=None,
        help=f"Output image, format from extension (default: {settings.default_output_path})",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    parser.add_argument(
        "--log-format", default=settings.log_format, choices=["json", "console"], help="Logging format"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_format)

    output = args.output or settings.default_output_path
    try:
        scenario = load_scenario(args.input)
        graph = build_graph(scenario, max_coordinate=settings.max_coordinate)
        render(graph, output)
    except VoronoiError as e:
        logger.error("Voronoi generation failed", input=args.input, error=str(e))
        return 1

    print(f"{len(graph.sites)} sites, {len(graph.edges)} edges -> {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
