"""Domain models for rectcanvas.

This module contains the value types describing the canvas, the rectangles
placed on it and the result of analyzing them. All models are immutable
(frozen dataclasses) so a snapshot can be shared by every computation
without copying.

Key classes:
- Rectangle: An axis-aligned rectangle with integer coordinates
- Canvas: The bounded region rectangles must fit in
- AnalysisReport: Structured result of a full analysis
"""

from rectcanvas.domain.rectangle import Canvas, Rectangle
from rectcanvas.domain.report import AnalysisReport

__all__: list[str] = [
    "AnalysisReport",
    "Canvas",
    "Rectangle",
]
