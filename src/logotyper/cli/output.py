"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from logotyper.core.gradient import css_for_background
from logotyper.core.layers import render_order
from logotyper.core.palette import Palette
from logotyper.domain import Composition

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Logotyper[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_composition(comp: Composition) -> None:
    """Print a summary of a composition.

    Args:
        comp: Composition to describe
    """
    line = Text("  ")
    line.append(comp.text or "(empty)", style="bold")
    if comp.font_name:
        line.append(f" ({comp.font_name})")
    console.print(line)
    console.print(
        f"  {len(comp.characters)} characters {SYM_DOT} {len(comp.dots)} dots "
        f"{SYM_DOT} {len(comp.lines)} lines"
    )
    console.print(f"  Background  {css_for_background(comp.background)}")
    console.print(f"  Text color  {comp.text_color}")
    enabled = [feature.tag for feature in comp.font_features if feature.enabled]
    console.print(f"  Features    {', '.join(enabled) or '(none)'}")


def print_characters(comp: Composition) -> None:
    """Print the character table."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("Char")
    table.add_column("Glyph")
    table.add_column("Color")
    table.add_column("Scale", justify="right")
    table.add_column("Rotation", justify="right")

    for char in comp.characters:
        table.add_row(
            str(char.index),
            Text(char.char),
            Text(char.glyph),
            char.color,
            f"{char.scale:.2f}",
            f"{char.rotation:g}°",
        )
    console.print(table)


def print_layers(comp: Composition) -> None:
    """Print layers topmost first, marking hidden and locked ones."""
    visible_ids = {layer.id for layer in render_order(comp.layers)}
    for layer in sorted(comp.layers, key=lambda layer: layer.order, reverse=True):
        flags = []
        if layer.id not in visible_ids:
            flags.append("hidden")
        if layer.locked:
            flags.append("locked")
        suffix = f" [dim]({', '.join(flags)})[/dim]" if flags else ""
        console.print(f"  {layer.order}  {layer.name}{suffix}")


def print_path(svg: str, length: float, segment_count: int) -> None:
    """Print path data and its approximate length.

    Args:
        svg: SVG path data
        length: Approximate length in percent units
        segment_count: Number of drawn segments
    """
    console.print(f"  {svg}")
    plural = "segment" if segment_count == 1 else "segments"
    console.print(f"  {segment_count} {plural} {SYM_DOT} length ≈ {length:.2f}")


def print_palettes(palettes: list[Palette]) -> None:
    """Print palettes with their colors."""
    for palette in palettes:
        console.print(f"  [bold]{palette.name}[/bold]")
        console.print(f"    {' '.join(palette.colors)}")


def print_success(message: str) -> None:
    """Print a success line."""
    console.print(f"\n[bold green]{SYM_OK}[/bold green] {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
