"""CLI application entry point for rectcanvas.

This module provides the main CLI interface using Typer.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer

from rectcanvas import __version__
from rectcanvas.cli.output import (
    console,
    print_dimension_error,
    print_error,
    print_header,
    print_report,
    print_saved,
    print_step,
    print_summary,
)
from rectcanvas.config import (
    CoverageConfig,
    CoverageMethod,
    InputConfig,
    LoggingConfig,
    LogLevel,
    RectCanvasSettings,
)
from rectcanvas.core import CanvasAnalyzer, validate_canvas_dimension
from rectcanvas.domain import Canvas
from rectcanvas.exceptions import (
    InvalidDimensionError,
    MissingInputSourceError,
    RectCanvasError,
    ReportWriteError,
)
from rectcanvas.io import RectangleReader, ReportWriter
from rectcanvas.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="rectcanvas",
    help="Analyze rectangles on a canvas: overlaps, containment and free area.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Rectcanvas[/bold blue] v{__version__}")
        raise typer.Exit()


def prompt_canvas_dimension(
    label: str,
    read: Callable[[str], str] | None = None,
) -> int:
    """Ask for a canvas dimension until a valid one is entered.

    Each rejected entry prints its reason before asking again.

    Args:
        label: Prompt text, e.g. "Canvas width"
        read: Function reading one line given a prompt (console input if None)

    Returns:
        The validated dimension

    Raises:
        EOFError: If the input ends before a valid dimension is entered
    """
    read = read or console.input
    while True:
        text = read(f"{label}: ")
        try:
            return validate_canvas_dimension(text)
        except InvalidDimensionError as e:
            print_dimension_error(e.kind.value)


def resolve_canvas_dimension(label: str, value: str | None) -> int:
    """Validate a dimension given as an option, or prompt for it.

    Args:
        label: Prompt and error label
        value: Option value, None if the option was omitted

    Returns:
        The validated dimension

    Raises:
        typer.Exit: If the option value is invalid or input ends early
    """
    if value is None:
        try:
            return prompt_canvas_dimension(label)
        except EOFError:
            print_error(f"{label}: no input")
            raise typer.Exit(code=1) from None

    try:
        return validate_canvas_dimension(value)
    except InvalidDimensionError as e:
        print_error(f"{label}: {e.kind.value}", details=f"Got '{value}'.")
        raise typer.Exit(code=1) from None


@app.command()
def analyze(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Rectangle file, one 'name x y width height' line per rectangle",
        ),
    ] = Path("input.txt"),
    width: Annotated[
        str | None,
        typer.Option(
            "--width",
            "-W",
            help="Canvas width (prompted if omitted)",
            show_default=False,
        ),
    ] = None,
    height: Annotated[
        str | None,
        typer.Option(
            "--height",
            "-H",
            help="Canvas height (prompted if omitted)",
            show_default=False,
        ),
    ] = None,
    method: Annotated[
        str,
        typer.Option(
            "--method",
            "-m",
            help="Coverage algorithm (sweep|exact)",
        ),
    ] = "sweep",
    json_output: Annotated[
        Path | None,
        typer.Option(
            "--json",
            help="Also write the report as JSON to this path",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show input statistics",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only print the results",
        ),
    ] = False,
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
    """Analyze the rectangles in INPUT_FILE against a canvas.

    Lists the rectangles lying inside the canvas, those overlapping no other
    rectangle, those completely included in another rectangle, and the
    canvas area left uncovered. Malformed lines are skipped silently.

    Example:
        rectcanvas input.txt --width 10 --height 10
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        coverage_method = CoverageMethod(method.lower())
    except ValueError:
        print_error(
            f"Invalid method: {method}",
            details="Valid values: sweep, exact",
        )
        raise typer.Exit(code=1)

    try:
        level = LogLevel(log_level.upper())
    except ValueError:
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    settings = RectCanvasSettings(
        input=InputConfig(rectangles_file=input_file),
        coverage=CoverageConfig(method=coverage_method),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=level.value if not quiet else LogLevel.WARNING.value,
        ),
    )

    if not quiet:
        print_header(__version__)

    try:
        # The source must exist before anything is asked or computed
        reader = RectangleReader(
            settings.input.rectangles_file,
            encoding=settings.input.encoding,
            errors=settings.input.errors,
        )
        reader.load()

        try:
            canvas_width = resolve_canvas_dimension("Canvas width", width)
            canvas_height = resolve_canvas_dimension("Canvas height", height)
            canvas = Canvas(canvas_width, canvas_height)

            logger = configure_logging(
                log_file=settings.logging.log_file,
                console_level=settings.logging.log_level,
                file_level=settings.logging.file_log_level,
                quiet=quiet,
            )

            if not quiet:
                print_step("Analyzing ", str(settings.input.rectangles_file))

            analyzer = CanvasAnalyzer(settings, logger=logger)
            report = analyzer.analyze(canvas, reader.iter_lines())
        finally:
            reader.close()

        print_report(report)

        if verbose:
            print_summary(report)

        if json_output is not None:
            written = ReportWriter(json_output).write(report)
            if not quiet:
                print_saved(str(written))

    except MissingInputSourceError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except ReportWriteError as e:
        print_error(f"Could not write report: {e.reason}")
        raise typer.Exit(code=1)
    except RectCanvasError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
