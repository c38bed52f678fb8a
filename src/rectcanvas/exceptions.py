"""Exception hierarchy for Rectcanvas."""

from enum import Enum


class RectCanvasError(Exception):
    """Base exception for all Rectcanvas errors."""

    pass


class InputError(RectCanvasError):
    """Errors related to user input or input sources."""

    pass


class DimensionErrorKind(str, Enum):
    """Reason a canvas dimension was rejected.

    The value of each member is the message shown to the user before
    re-prompting.
    """

    NOT_A_NUMBER = "Please enter a valid number."
    TOO_LARGE = "Please enter a number less than 2,147,483,648."
    NEGATIVE = "Please enter a number >= 0."


class InvalidDimensionError(InputError):
    """A canvas dimension could not be accepted."""

    def __init__(self, text: str | None, kind: DimensionErrorKind) -> None:
        self.text = text
        self.kind = kind
        super().__init__(kind.value)


class MissingInputSourceError(InputError):
    """The rectangle source does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"The file '{path}' was not found.")


class GeometryError(RectCanvasError):
    """Errors in geometric values."""

    pass


class InvalidRectangleError(GeometryError):
    """Rectangle constructed with a non-positive width or height."""

    def __init__(self, name: str, width: int, height: int) -> None:
        self.name = name
        self.width = width
        self.height = height
        super().__init__(
            f"Rectangle '{name}' must have positive size, got {width}x{height}"
        )


class InvalidCanvasError(GeometryError):
    """Canvas constructed with a negative dimension."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        super().__init__(f"Canvas dimensions must be >= 0, got {width}x{height}")


class ReportWriteError(RectCanvasError):
    """Error writing an analysis report."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write report '{path}': {reason}")
