"""Core geometric algorithms for rectcanvas.

This module contains the algorithms for:

- Input validation (canvas dimensions, rectangle lines, in-canvas test)
- Pairwise overlap computation
- Non-overlap and containment classification
- Covered/uncovered area via a vertical sweep line

All functions are pure and only read the immutable snapshot.

Key functions:
- validate_canvas_dimension: Parse and range-check a canvas dimension
- validate_rectangle_line: Parse a rectangle definition line
- is_within_canvas: Test whether a rectangle fits the canvas
- build_snapshot: Build the in-canvas rectangle snapshot
- compute_overlap: Intersect two rectangles
- get_non_overlapping: Rectangles overlapping no other rectangle
- get_completely_included: Rectangles inside another rectangle
- calculate_uncovered_area: Canvas area not covered by any rectangle

Key classes:
- CanvasAnalyzer: Runs the full pipeline and builds an AnalysisReport
"""

from rectcanvas.core.analyzer import CanvasAnalyzer
from rectcanvas.core.classifiers import (
    get_completely_included,
    get_non_overlapping,
    is_completely_included,
)
from rectcanvas.core.coverage import (
    calculate_covered_area,
    calculate_uncovered_area,
)
from rectcanvas.core.overlap import compute_overlap, overlaps
from rectcanvas.core.validation import (
    SnapshotResult,
    build_snapshot,
    is_within_canvas,
    validate_canvas_dimension,
    validate_rectangle_line,
)

__all__ = [
    # Analyzer
    "CanvasAnalyzer",
    "SnapshotResult",
    "build_snapshot",
    # Coverage
    "calculate_covered_area",
    "calculate_uncovered_area",
    # Overlap and classifiers
    "compute_overlap",
    "get_completely_included",
    "get_non_overlapping",
    "is_completely_included",
    "is_within_canvas",
    "overlaps",
    # Validation
    "validate_canvas_dimension",
    "validate_rectangle_line",
]
