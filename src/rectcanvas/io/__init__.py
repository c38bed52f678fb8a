"""I/O layer for rectcanvas.

This module handles the outer collaborators of the analysis: reading
rectangle definitions from a text file and exporting reports.

Key responsibilities:
- Open the rectangle source, failing fast when it is missing
- Yield raw rectangle lines without line endings
- Write reports as JSON

Key classes:
- RectangleReader: Load rectangle lines
- ReportWriter: Save reports
"""

from rectcanvas.io.reader import RectangleReader
from rectcanvas.io.writer import ReportWriter

__all__ = [
    "RectangleReader",
    "ReportWriter",
]
