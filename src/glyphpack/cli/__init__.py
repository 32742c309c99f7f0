"""Command-line interface for glyphpack.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bar for icon rendering
- Hex color and style validation
- Free and licensed source selection
- Errors reported with the failing stage and icon
"""

from glyphpack.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
