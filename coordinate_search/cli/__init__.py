"""CLI module for coordinate tools.

Provides the `coords` command-line interface for detecting, parsing and
converting coordinate strings.
"""

from coordinate_search.cli.main import app

__all__ = ["app"]
