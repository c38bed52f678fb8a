"""Input validation for canvas dimensions and rectangle lines.

This module turns raw text into validated domain values:
- Canvas dimensions are parsed strictly and rejected with a reason
- Rectangle lines are parsed leniently: anything malformed is dropped
  silently, the caller only sees ``None``
- The in-canvas test decides which rectangles enter the snapshot

All functions are pure and perform no I/O.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from rectcanvas.domain import Canvas, Rectangle
from rectcanvas.exceptions import DimensionErrorKind, InvalidDimensionError

logger = logging.getLogger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

FIELD_SEPARATOR = " "
RECTANGLE_FIELD_COUNT = 5

_INTEGER_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")


def _parse_integer(text: str | None) -> int | None:
    """Parse an integer of arbitrary size, or return None.

    Only an optional sign and ASCII digits are accepted, with surrounding
    whitespace allowed. ``int()`` alone would also accept underscores.
    """
    if text is None or not _INTEGER_RE.match(text):
        return None
    return int(text)


def _parse_int32(text: str) -> int | None:
    value = _parse_integer(text)
    if value is None or not INT32_MIN <= value <= INT32_MAX:
        return None
    return value


def validate_canvas_dimension(text: str | None) -> int:
    """Validate one canvas dimension typed by the user.

    Args:
        text: Raw text of the dimension, None if no input was available

    Returns:
        The dimension as a non-negative integer

    Raises:
        InvalidDimensionError: With kind NOT_A_NUMBER if the text is not an
            integer, TOO_LARGE if it does not fit a signed 32-bit integer,
            NEGATIVE if it is below zero

    Examples:
        >>> validate_canvas_dimension("10")
        10
    """
    value = _parse_integer(text)
    if value is None:
        raise InvalidDimensionError(text, DimensionErrorKind.NOT_A_NUMBER)
    # Range is checked before sign, so -2^31 - 1 is "too large"
    if not INT32_MIN <= value <= INT32_MAX:
        raise InvalidDimensionError(text, DimensionErrorKind.TOO_LARGE)
    if value < 0:
        raise InvalidDimensionError(text, DimensionErrorKind.NEGATIVE)
    return value


def validate_rectangle_line(line: str) -> Rectangle | None:
    """Parse a ``name x y width height`` line into a rectangle.

    Fields are separated by single spaces, so repeated or trailing spaces
    change the field count and reject the line.

    Args:
        line: One line of rectangle input without its line ending

    Returns:
        The parsed rectangle, or None if the line is malformed or the
        rectangle has a non-positive width or height
    """
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) != RECTANGLE_FIELD_COUNT:
        return None

    name = parts[0]
    numbers = [_parse_int32(part) for part in parts[1:]]
    if any(n is None for n in numbers):
        return None

    x, y, width, height = numbers
    if width <= 0 or height <= 0:
        return None

    return Rectangle(name=name, x=x, y=y, width=width, height=height)


def is_within_canvas(rect: Rectangle, canvas: Canvas) -> bool:
    """Check whether a rectangle lies entirely inside the canvas.

    Args:
        rect: Rectangle to test
        canvas: Canvas bounds

    Returns:
        True if x >= 0, y >= 0, right <= canvas width and top <= canvas height
    """
    return canvas.contains(rect)


@dataclass
class SnapshotResult:
    """Outcome of building the rectangle snapshot from raw lines.

    Attributes:
        rectangles: Valid in-canvas rectangles in input order
        lines_read: Number of lines consumed
        rejected_lines: Number of malformed lines dropped
        out_of_canvas: Valid rectangles dropped for leaving the canvas
    """

    rectangles: tuple[Rectangle, ...]
    lines_read: int = 0
    rejected_lines: int = 0
    out_of_canvas: list[Rectangle] = field(default_factory=list)


def build_snapshot(lines: Iterable[str], canvas: Canvas) -> SnapshotResult:
    """Build the immutable rectangle snapshot from rectangle lines.

    Malformed lines and rectangles outside the canvas are dropped without
    raising. They are only counted.

    Args:
        lines: Rectangle definitions, one per item
        canvas: Canvas the rectangles must fit in

    Returns:
        SnapshotResult holding the snapshot and drop counters
    """
    kept: list[Rectangle] = []
    out_of_canvas: list[Rectangle] = []
    lines_read = 0
    rejected = 0

    for line_no, line in enumerate(lines, start=1):
        lines_read += 1
        rect = validate_rectangle_line(line)
        if rect is None:
            rejected += 1
            logger.debug("Dropped malformed rectangle line %d: %r", line_no, line)
            continue
        if not is_within_canvas(rect, canvas):
            out_of_canvas.append(rect)
            logger.debug("Dropped rectangle outside canvas: %s", rect.describe())
            continue
        kept.append(rect)

    return SnapshotResult(
        rectangles=tuple(kept),
        lines_read=lines_read,
        rejected_lines=rejected,
        out_of_canvas=out_of_canvas,
    )
