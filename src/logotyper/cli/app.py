"""CLI application entry point for logotyper.

This module provides the main CLI interface using Typer.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from logotyper import __version__
from logotyper.cli.output import (
    console,
    print_characters,
    print_composition,
    print_error,
    print_header,
    print_layers,
    print_palettes,
    print_path,
    print_step,
    print_success,
)
from logotyper.config import LoggingConfig, LogotyperSettings
from logotyper.core import (
    EditingSession,
    build_gradient,
    css_for_background,
    font_feature_settings,
    generate_palettes,
    layer_for,
    palette_gradient,
    parse_gradient,
    path_for,
    path_length,
)
from logotyper.core.palette import CATEGORIES
from logotyper.domain import (
    AddControlPoint,
    ControlPoint,
    LayerCategory,
    LayerFlag,
    Line,
)
from logotyper.exceptions import LogotyperError
from logotyper.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="logotyper",
    help="Compose logotypes from styled text, dots, lines and gradient backgrounds.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Logotyper[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Compose logotypes from styled text, dots, lines and gradient backgrounds."""


def parse_point(value: str) -> ControlPoint:
    """Parse an ``X,Y`` percent pair.

    Args:
        value: Text such as ``"20,50"``

    Returns:
        ControlPoint with the parsed coordinates

    Raises:
        typer.BadParameter: If the text is not two comma-separated numbers
    """
    parts = value.split(",")
    if len(parts) != 2:
        raise typer.BadParameter(f"Expected X,Y but got '{value}'")
    try:
        return ControlPoint(float(parts[0]), float(parts[1]))
    except ValueError as e:
        raise typer.BadParameter(f"Expected numbers in '{value}'") from e


@app.command()
def preview(
    text: Annotated[
        str,
        typer.Argument(help="Logotype text", show_default=False),
    ],
    font: Annotated[
        str,
        typer.Option("--font", "-f", help="Font identifier"),
    ] = "",
    background: Annotated[
        str | None,
        typer.Option("--bg", help="Solid background color"),
    ] = None,
    gradient: Annotated[
        str | None,
        typer.Option("--gradient", "-g", help="Background as CSS linear-gradient(...)"),
    ] = None,
    text_color: Annotated[
        str | None,
        typer.Option("--text-color", "-c", help="Global text color"),
    ] = None,
    dots: Annotated[
        int,
        typer.Option("--dots", help="Number of default dots to add", min=0),
    ] = 0,
    lines: Annotated[
        int,
        typer.Option("--lines", help="Number of default lines to add", min=0),
    ] = 0,
    hide: Annotated[
        list[str] | None,
        typer.Option("--hide", help="Hide a layer category (text|dots|lines)"),
    ] = None,
    features: Annotated[
        list[str] | None,
        typer.Option("--feature", help="Toggle an OpenType feature by tag (repeatable)"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the composition snapshot as JSON"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
) -> None:
    """Build a composition from TEXT and describe it.

    Example:
        logotyper preview "LogoType" --gradient "linear-gradient(45deg, #667eea, #764ba2)"
    """
    settings = LogotyperSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )

    try:
        categories = [LayerCategory(name.lower()) for name in hide or []]
    except ValueError:
        print_error(
            f"Invalid layer category in --hide: {', '.join(hide or [])}",
            details="Valid values: text, dots, lines",
        )
        raise typer.Exit(code=1)

    try:
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
        )
        session = EditingSession(
            settings=settings, text=text, font_name=font, logger=logger
        )

        if text_color is not None:
            session.set_global_text_color(text_color)
        if background is not None:
            session.set_background_color(background)
        if gradient is not None:
            session.set_background_gradient(parse_gradient(gradient, strict=True))
        for _ in range(dots):
            session.add_dot()
        for _ in range(lines):
            session.add_line()
        for tag in features or []:
            session.toggle_font_feature(tag)
        for category in categories:
            layer = layer_for(session.composition.layers, category)
            if layer is not None:
                session.set_layer_flag(layer.id, LayerFlag.VISIBLE, False)
        session.clear_selection()
    except LogotyperError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    comp = session.composition
    if as_json:
        data = comp.to_dict()
        data["background"]["paint"] = css_for_background(comp.background)
        data["font_feature_settings"] = font_feature_settings(comp.font_features)
        console.print_json(json.dumps(data))
        return

    print_header(__version__)
    print_step("Composition")
    print_composition(comp)
    if comp.characters:
        print_step("Characters")
        print_characters(comp)
    print_step("Layers")
    print_layers(comp)


@app.command()
def path(
    start: Annotated[str, typer.Argument(help="Start point as X,Y (percent)")],
    end: Annotated[str, typer.Argument(help="End point as X,Y (percent)")],
    points: Annotated[
        list[str] | None,
        typer.Option("--point", "-p", help="Control point as X,Y (repeatable)"),
    ] = None,
    tolerance: Annotated[
        float,
        typer.Option("--tolerance", "-t", help="Flattening tolerance", min=0.001),
    ] = 0.1,
) -> None:
    """Print the SVG path of a line through optional control points."""
    first = parse_point(start)
    last = parse_point(end)
    line = Line(id="cli", x1=first.x, y1=first.y, x2=last.x, y2=last.y)

    # Route control points through the mutation so they are clamped like edits
    settings = LogotyperSettings()
    for value in points or []:
        point = parse_point(value)
        line = AddControlPoint(point.x, point.y).apply(line, settings)

    line_path = path_for(line)
    print_path(
        line_path.to_svg(),
        path_length(line_path, tolerance),
        len(line_path.segments),
    )


@app.command()
def gradient(
    css: Annotated[str, typer.Argument(help="CSS linear-gradient(...) text")],
) -> None:
    """Validate a gradient and print its canonical form."""
    try:
        descriptor = parse_gradient(css, strict=True)
    except LogotyperError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    console.print(f"  {build_gradient(descriptor)}")
    console.print(f"  {len(descriptor.colors)} colors, {descriptor.direction.value}")
    print_success("Gradient is valid")


@app.command()
def palettes(
    category: Annotated[
        str,
        typer.Option("--category", "-c", help="Palette category"),
    ] = "professional",
    offset: Annotated[
        int,
        typer.Option("--offset", help="Index of the first palette", min=0),
    ] = 0,
    limit: Annotated[
        int,
        typer.Option("--limit", "-n", help="Number of palettes", min=1, max=100),
    ] = 12,
    as_gradient: Annotated[
        bool,
        typer.Option("--gradient", help="Print each palette as a gradient"),
    ] = False,
) -> None:
    """List generated color palettes."""
    if category not in CATEGORIES:
        print_error(
            f"Unknown category: {category}",
            details=f"Valid values: {', '.join(CATEGORIES)}",
        )
        raise typer.Exit(code=1)

    generated = generate_palettes(category, offset=offset, limit=limit)
    if as_gradient:
        for palette in generated:
            console.print(f"  {build_gradient(palette_gradient(palette))}")
        return
    print_palettes(generated)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
