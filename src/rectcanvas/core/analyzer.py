"""Analysis orchestration for a canvas and its rectangles.

The analyzer runs the full pipeline on one static input:

1. Validate rectangle lines and keep the in-canvas ones (the snapshot)
2. Classify non-overlapping rectangles
3. Classify completely included rectangles
4. Compute covered and free area with the configured method

Every step only reads the snapshot, which is an immutable tuple.
"""

import time
from collections.abc import Iterable

import structlog

from rectcanvas.config import RectCanvasSettings
from rectcanvas.core.classifiers import get_completely_included, get_non_overlapping
from rectcanvas.core.coverage import calculate_covered_area
from rectcanvas.core.validation import build_snapshot
from rectcanvas.domain import AnalysisReport, Canvas
from rectcanvas.utils import AnalysisLogger


class CanvasAnalyzer:
    """Builds an AnalysisReport from a canvas and raw rectangle lines.

    Example:
        analyzer = CanvasAnalyzer(RectCanvasSettings())
        report = analyzer.analyze(Canvas(10, 10), ["R1 0 0 5 5", "R2 5 5 5 5"])
        report.free_area  # 50
    """

    def __init__(
        self,
        settings: RectCanvasSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the analyzer.

        Args:
            settings: Application settings (defaults if None)
            logger: Structured logger (module logger if None)
        """
        self.settings = settings or RectCanvasSettings()
        self.logger = logger or structlog.get_logger("rectcanvas")
        self.analysis_logger = AnalysisLogger(self.logger)

    def analyze(self, canvas: Canvas, lines: Iterable[str]) -> AnalysisReport:
        """Run every computation on the given input.

        Args:
            canvas: Validated canvas
            lines: Rectangle definitions, one per item

        Returns:
            AnalysisReport with the snapshot, both classifications and areas
        """
        stats = self.analysis_logger.reset()
        stats.start_time = time.time()

        snapshot = build_snapshot(lines, canvas)
        rectangles = snapshot.rectangles
        self.analysis_logger.log_snapshot(
            lines_read=snapshot.lines_read,
            rejected=snapshot.rejected_lines,
            out_of_canvas=len(snapshot.out_of_canvas),
            kept=len(rectangles),
        )

        n = len(rectangles)
        non_overlapping = get_non_overlapping(rectangles)
        self.analysis_logger.log_classification(
            "non_overlapping", len(non_overlapping), n * (n - 1) // 2
        )

        included = get_completely_included(rectangles)
        self.analysis_logger.log_classification(
            "completely_included", len(included), n * (n - 1)
        )

        method = self.settings.coverage.method
        coverage_start = time.time()
        covered = calculate_covered_area(rectangles, method)
        free = canvas.area - covered
        self.analysis_logger.log_coverage(
            method=method.value,
            covered=covered,
            free=free,
            duration_ms=(time.time() - coverage_start) * 1000,
        )

        stats.end_time = time.time()

        return AnalysisReport(
            canvas=canvas,
            rectangles=rectangles,
            non_overlapping=tuple(non_overlapping),
            completely_included=tuple(included),
            free_area=free,
            covered_area=covered,
            lines_read=snapshot.lines_read,
            rejected_lines=snapshot.rejected_lines,
            out_of_canvas=tuple(snapshot.out_of_canvas),
            coverage_method=method.value,
        )
