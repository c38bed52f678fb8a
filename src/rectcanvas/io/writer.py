"""Report writer for exporting analysis results.

This module provides the ReportWriter class for saving an AnalysisReport
as JSON, next to the console output.
"""

import json
from pathlib import Path

from rectcanvas.domain import AnalysisReport
from rectcanvas.exceptions import ReportWriteError


class ReportWriter:
    """Writes analysis reports to JSON files.

    Example:
        writer = ReportWriter(Path("report.json"))
        writer.write(report)
    """

    def __init__(self, path: Path, indent: int = 2) -> None:
        """Initialize the report writer.

        Args:
            path: Destination file
            indent: JSON indentation
        """
        self._path = path
        self._indent = indent

    def write(self, report: AnalysisReport) -> Path:
        """Serialize the report and write it to disk.

        Parent directories are created as needed.

        Args:
            report: Report to write

        Returns:
            Path the report was written to

        Raises:
            ReportWriteError: If the file cannot be written
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(
                json.dumps(report.to_dict(), indent=self._indent) + "\n",
                encoding="utf-8",
            )
        except OSError as e:
            raise ReportWriteError(str(self._path), str(e)) from e
        return self._path
