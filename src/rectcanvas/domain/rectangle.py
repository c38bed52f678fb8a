"""Core geometric types for rectangle analysis.

This module defines the value types shared by every computation:
- Rectangle: An axis-aligned rectangle anchored at its bottom-left corner
- Canvas: The bounded region with corners (0, 0) and (width, height)
"""

from dataclasses import dataclass
from typing import Any

from rectcanvas.exceptions import InvalidCanvasError, InvalidRectangleError


@dataclass(frozen=True, slots=True)
class Rectangle:
    """An axis-aligned rectangle with integer coordinates.

    Immutable and hashable. Names are labels only and need not be unique,
    so two rectangles with equal fields compare equal.

    Attributes:
        name: Opaque label for the rectangle
        x: X coordinate of the bottom-left corner
        y: Y coordinate of the bottom-left corner
        width: Horizontal extent, always > 0
        height: Vertical extent, always > 0
    """

    name: str
    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidRectangleError(self.name, self.width, self.height)

    @property
    def right(self) -> int:
        """X coordinate of the right edge."""
        return self.x + self.width

    @property
    def top(self) -> int:
        """Y coordinate of the top edge."""
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def describe(self) -> str:
        """Return the human-readable descriptor used in reports.

        Returns:
            String of the form ``Name: R1, X: 0, Y: 0, Width: 5, Height: 5``
        """
        return (
            f"Name: {self.name}, X: {self.x}, Y: {self.y}, "
            f"Width: {self.width}, Height: {self.height}"
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with name, x, y, width and height fields
        """
        return {
            "name": self.name,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Rectangle":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with name, x, y, width and height fields

        Returns:
            Rectangle instance
        """
        return cls(
            name=data["name"],
            x=data["x"],
            y=data["y"],
            width=data["width"],
            height=data["height"],
        )


@dataclass(frozen=True, slots=True)
class Canvas:
    """The bounded drawing area.

    The origin is (0, 0) and the canvas extends to (width, height).
    A zero dimension is allowed and yields a canvas no rectangle fits in.

    Attributes:
        width: Horizontal extent, >= 0
        height: Vertical extent, >= 0
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise InvalidCanvasError(self.width, self.height)

    @property
    def area(self) -> int:
        """Total canvas area.

        Python ints do not overflow, so canvases near the 32-bit limit in
        both directions are fine.
        """
        return self.width * self.height

    def contains(self, rect: Rectangle) -> bool:
        """Check whether a rectangle lies entirely inside the canvas.

        Edges may touch the canvas border.

        Args:
            rect: Rectangle to test

        Returns:
            True if the rectangle is fully inside the canvas
        """
        return (
            rect.x >= 0
            and rect.y >= 0
            and rect.right <= self.width
            and rect.top <= self.height
        )

    def to_dict(self) -> dict[str, Any]:
        return {"width": self.width, "height": self.height}
