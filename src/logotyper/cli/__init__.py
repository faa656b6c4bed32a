"""Command-line interface for logotyper.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Composition previews (text, layers, background paint)
- Line path inspection
- Gradient validation
- Palette listing
"""

from logotyper.cli.app import cli, main

__all__ = ["cli", "main"]
