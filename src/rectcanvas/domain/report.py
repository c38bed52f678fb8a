"""Analysis result types.

This module defines the structured output of a full canvas analysis. The
report is consumed by the CLI renderer and the JSON writer; it never
performs I/O itself.
"""

from dataclasses import dataclass, field
from typing import Any

from rectcanvas.domain.rectangle import Canvas, Rectangle


@dataclass(frozen=True)
class AnalysisReport:
    """Result of analyzing one rectangle snapshot.

    Attributes:
        canvas: Canvas the rectangles were checked against
        rectangles: In-canvas rectangles in input order (the snapshot)
        non_overlapping: Snapshot members that overlap no other member
        completely_included: Snapshot members lying inside another member
        free_area: Canvas area not covered by any rectangle
        covered_area: Canvas area covered by at least one rectangle
        lines_read: Number of lines consumed from the source
        rejected_lines: Number of malformed lines that were dropped
        out_of_canvas: Valid rectangles dropped for leaving the canvas
        coverage_method: Name of the coverage method used
    """

    canvas: Canvas
    rectangles: tuple[Rectangle, ...]
    non_overlapping: tuple[Rectangle, ...]
    completely_included: tuple[Rectangle, ...]
    free_area: int
    covered_area: int
    lines_read: int = 0
    rejected_lines: int = 0
    out_of_canvas: tuple[Rectangle, ...] = field(default_factory=tuple)
    coverage_method: str = "sweep"

    @property
    def rectangle_count(self) -> int:
        return len(self.rectangles)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation suitable for JSON export
        """
        return {
            "canvas": self.canvas.to_dict(),
            "rectangles": [r.to_dict() for r in self.rectangles],
            "non_overlapping": [r.to_dict() for r in self.non_overlapping],
            "completely_included": [r.to_dict() for r in self.completely_included],
            "free_area": self.free_area,
            "covered_area": self.covered_area,
            "lines_read": self.lines_read,
            "rejected_lines": self.rejected_lines,
            "out_of_canvas": [r.to_dict() for r in self.out_of_canvas],
            "coverage_method": self.coverage_method,
        }
