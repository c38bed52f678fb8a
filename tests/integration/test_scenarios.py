"""End-to-end scenarios: rectangle file in, report out."""

from pathlib import Path

import pytest

from rectcanvas.config import CoverageConfig, CoverageMethod, RectCanvasSettings
from rectcanvas.core import CanvasAnalyzer
from rectcanvas.domain import Canvas, Rectangle
from rectcanvas.io import RectangleReader


def analyze_file(path: Path, canvas: Canvas, method: CoverageMethod = CoverageMethod.SWEEP):
    """Read a rectangle file and analyze it the way the CLI does."""
    settings = RectCanvasSettings(coverage=CoverageConfig(method=method))
    with RectangleReader(path) as reader:
        return CanvasAnalyzer(settings).analyze(canvas, reader.iter_lines())


def write_input(tmp_path: Path, *lines: str) -> Path:
    path = tmp_path / "input.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.mark.parametrize("method", [CoverageMethod.SWEEP, CoverageMethod.EXACT])
class TestScenarios:
    """Reference scenarios, identical under both coverage methods."""

    def test_disjoint_rectangles(self, tmp_path, method):
        """Two rectangles touching at a corner do not overlap."""
        path = write_input(tmp_path, "R1 0 0 5 5", "R2 5 5 5 5")
        report = analyze_file(path, Canvas(10, 10), method)

        r1, r2 = Rectangle("R1", 0, 0, 5, 5), Rectangle("R2", 5, 5, 5, 5)
        assert report.rectangles == (r1, r2)
        assert set(report.non_overlapping) == {r1, r2}
        assert report.completely_included == ()
        assert report.free_area == 50

    def test_rectangle_inside_another(self, tmp_path, method):
        path = write_input(tmp_path, "R1 0 0 10 10", "R2 2 2 3 3")
        report = analyze_file(path, Canvas(10, 10), method)

        assert report.completely_included == (Rectangle("R2", 2, 2, 3, 3),)
        assert report.non_overlapping == ()
        assert report.free_area == 0

    def test_rectangle_outside_canvas(self, tmp_path, method):
        path = write_input(tmp_path, "R1 5 5 2 2")
        report = analyze_file(path, Canvas(4, 4), method)

        assert report.rectangles == ()
        assert report.out_of_canvas == (Rectangle("R1", 5, 5, 2, 2),)
        assert report.free_area == 16

    def test_empty_file(self, tmp_path, method):
        path = tmp_path / "input.txt"
        path.write_text("", encoding="utf-8")
        report = analyze_file(path, Canvas(3, 7), method)

        assert report.rectangles == ()
        assert report.free_area == 21

    def test_mixed_input(self, tmp_path, method):
        """Malformed lines are skipped without affecting the results."""
        path = write_input(
            tmp_path,
            "A 0 0 4 4",
            "B 2 2 4 4",
            "C 8 0 2 2",
            "D 8 1 1 1",
            "E 0 0 4",
            "F 1 1 -1 2",
            "G -1 0 2 2",
            "H x 0 1 1",
            "",
        )
        report = analyze_file(path, Canvas(10, 10), method)

        assert [r.name for r in report.rectangles] == ["A", "B", "C", "D"]
        assert report.non_overlapping == ()
        assert [r.name for r in report.completely_included] == ["D"]
        assert report.rejected_lines == 4
        assert [r.name for r in report.out_of_canvas] == ["G"]
        # A and B cover 28, C covers 4 and D lies inside C
        assert report.covered_area == 32
        assert report.free_area == 68
