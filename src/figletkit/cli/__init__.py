"""Command-line interface for figletkit.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Header and glyph count summaries
- Printing individual glyph designs
- Listing and randomly picking fonts from a directory or the bundled set
"""

from figletkit.cli.app import cli, main

__all__ = ["cli", "main"]
