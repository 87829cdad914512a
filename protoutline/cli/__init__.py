"""Command-line interface for protoutline."""

from protoutline.cli.main import main, run

__all__ = ["main", "run"]
