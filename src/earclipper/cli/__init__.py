"""Command-line interface for earclipper.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Batch triangulation of JSON polygon files
- Progress bars for parallel processing
- Verbose/quiet output modes
- Ellipse triangulation helper
"""

from earclipper.cli.app import cli, main

__all__ = ["cli", "main"]
