"""Entry point for the protoutline CLI."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from protoutline.cli.arg_parser import parse_args
from protoutline.cli.bootstrap import configure_logging
from protoutline.config.loader import load_config
from protoutline.core.errors import (
    ConfigError,
    LoadError,
    StructuralParseError,
    UnexpectedEndOfInputError,
)
from protoutline.display.console import get_console
from protoutline.display.tree import build_outline_tree
from protoutline.ide.document import read_source_file
from protoutline.outline.parser import parse_document_symbols
from protoutline.outline.types import OutlineNode

logger = logging.getLogger(__name__)


def _report_error(message: str) -> None:
    """Print error message to stderr (so it doesn't pollute JSON output)."""
    print(message, file=sys.stderr)


def outline_file(path: Path, *, strict: bool) -> list[OutlineNode]:
    """Read a file and build its outline.

    Raises:
        LoadError: If the file can't be read or decoded.
        StructuralParseError: If brackets in the file are mismatched.
        UnexpectedEndOfInputError: In strict mode, if the file ends inside a
            declaration.
    """
    return parse_document_symbols(read_source_file(path), strict=strict)


def run(args: argparse.Namespace) -> int:
    """Run the CLI with parsed arguments.

    Outlines go to stdout, errors to stderr.

    Returns:
        Exit code: 0 if every file was outlined, 1 otherwise.
    """
    try:
        config = load_config(args.config)
    except ConfigError as e:
        _report_error(f"Config error: {e.message}")
        return 1

    configure_logging("DEBUG" if args.verbose else config.logging.level)
    strict = config.parser.strict_end_of_input and not args.lenient

    exit_code = 0
    outlines: list[dict[str, Any]] = []
    for path in args.files:
        try:
            symbols = outline_file(path, strict=strict)
        except LoadError as e:
            logger.debug("Failed to read %s", path, exc_info=True)
            _report_error(f"{path}: {e.message}")
            exit_code = 1
            continue
        except (StructuralParseError, UnexpectedEndOfInputError) as e:
            _report_error(f"{path}: {e.message}")
            exit_code = 1
            continue

        if args.json:
            outlines.append({
                "file": str(path),
                "symbols": [node.to_dict() for node in symbols],
            })
        else:
            get_console().print(build_outline_tree(symbols, title=str(path)))

    if args.json:
        sys.stdout.write(json.dumps(outlines, indent=2) + "\n")
    return exit_code


def main() -> None:
    """Entry point for the protoutline CLI."""
    raise SystemExit(run(parse_args()))


if __name__ == "__main__":
    main()
