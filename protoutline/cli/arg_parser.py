"""Argument parsing for the protoutline CLI."""

import argparse
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="protoutline",
        description="Print the declaration outline of protobuf files",
    )
    parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        metavar="FILE",
        help=".proto files to outline",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the outline as JSON (1-indexed lines) instead of a tree",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Return a truncated outline when a file ends inside a declaration",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Config file path (default: ~/.protoutline/config.json + ./.protoutline/config.json)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)
