"""Command-line interface for glyphspack.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Automatic conversion direction from the input path
- Default output path from the input extension
- Progress bar for glyph files
- Quiet mode and machine-readable output path
"""

from glyphspack.cli.app import cli, main

__all__ = ["cli", "main"]
