"""Command-line interface for rectcanvas.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Canvas dimension prompts that re-ask until the input is valid
- Results listed in a fixed order: in canvas, no overlap, included, free area
- Optional JSON export and verbose input statistics
"""

from rectcanvas.cli.app import cli, main

__all__ = ["cli", "main"]
