"""Rich console output helpers for the CLI.

This module renders analysis results on the console using the Rich
library. Rectangle names are user data, so they are always appended as
plain Text and never parsed as markup.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.text import Text

from rectcanvas.domain import AnalysisReport, Rectangle

console = Console(soft_wrap=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

SECTION_IN_CANVAS = "Rectangles in canvas:"
SECTION_NO_OVERLAP = "Rectangles with no overlap:"
SECTION_INCLUDED = "Rectangles in another rectangle:"
FREE_AREA_LABEL = "Free area in canvas:"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Rectcanvas[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str, path: str | None = None) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
        path: Optional path appended after the message
    """
    # Use Text so brackets in paths are not read as markup
    line = Text(f"\n{SYM_STEP} {message}")
    if path is not None:
        line.append(path)
    console.print(line)


def print_dimension_error(message: str) -> None:
    """Print the reason a canvas dimension was rejected before re-prompting."""
    console.print(f"[red]{message}[/red]")


def print_rectangles(title: str, rectangles: Sequence[Rectangle]) -> None:
    """Print a titled list of rectangle descriptors.

    Args:
        title: Section title
        rectangles: Rectangles to list, in order
    """
    console.print()
    console.print(f"[bold]{title}[/bold]")
    for rect in rectangles:
        console.print(Text(rect.describe()))


def print_free_area(free_area: int) -> None:
    """Print the uncovered canvas area.

    Args:
        free_area: Area not covered by any rectangle
    """
    console.print()
    console.print(f"[bold]{FREE_AREA_LABEL}[/bold] {free_area}")


def print_report(report: AnalysisReport) -> None:
    """Print every section of a report in the fixed order.

    Args:
        report: Report to render
    """
    print_rectangles(SECTION_IN_CANVAS, report.rectangles)
    print_rectangles(SECTION_NO_OVERLAP, report.non_overlapping)
    print_rectangles(SECTION_INCLUDED, report.completely_included)
    print_free_area(report.free_area)


def print_summary(report: AnalysisReport) -> None:
    """Print input statistics for verbose mode.

    Args:
        report: Report to summarize
    """
    console.print(
        f"\n  {report.lines_read} lines {SYM_DOT} "
        f"{report.rectangle_count} in canvas {SYM_DOT} "
        f"{report.rejected_lines} rejected {SYM_DOT} "
        f"{len(report.out_of_canvas)} outside"
    )
    console.print(
        f"  canvas {report.canvas.width}x{report.canvas.height} {SYM_DOT} "
        f"covered {report.covered_area} {SYM_DOT} method {report.coverage_method}"
    )


def print_saved(path: str) -> None:
    """Print confirmation that the JSON report was written."""
    line = Text(f"\n{SYM_OK} Report written to ")
    line.append(path, style="bold")
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    line = Text()
    line.append(f"\n{SYM_ERR} Error: ", style="bold red")
    line.append(message)
    console.print(line)
    if details:
        console.print(Text(f"  {details}"))
