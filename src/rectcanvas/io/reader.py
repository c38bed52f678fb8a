"""Rectangle reader for line-oriented rectangle sources.

This module provides the RectangleReader class for loading rectangle
definitions from a text file, one ``name x y width height`` line each.
Lines are handed out as-is; validating them is up to the core.
"""

from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from rectcanvas.exceptions import MissingInputSourceError


class RectangleReader:
    """Loads a rectangle definition file and yields its lines.

    Example:
        with RectangleReader(Path("input.txt")) as reader:
            for line in reader.iter_lines():
                print(line)
    """

    def __init__(self, path: Path, encoding: str = "utf-8", errors: str = "replace") -> None:
        """Initialize the rectangle reader.

        Args:
            path: Path to the rectangle file
            encoding: Text encoding of the file
            errors: Decoding error handler, bytes invalid in the encoding
                are replaced by U+FFFD by default
        """
        self._path = path
        self._encoding = encoding
        self._errors = errors
        self._file: TextIO | None = None

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> None:
        """Open the rectangle file.

        Raises:
            MissingInputSourceError: If the path does not exist or is not a file
        """
        if not self._path.is_file():
            raise MissingInputSourceError(str(self._path))

        self._file = self._path.open("r", encoding=self._encoding, errors=self._errors)

    def iter_lines(self) -> Iterator[str]:
        """Iterate over the file's lines without their line endings.

        ``\\n``, ``\\r\\n`` and ``\\r`` endings are all recognized.

        Yields:
            One raw line per rectangle definition

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._file is None:
            raise RuntimeError("Rectangle file not loaded. Call load() first.")

        for line in self._file:
            yield line.rstrip("\n")

    def read_lines(self) -> list[str]:
        """Read every line at once.

        Returns:
            List of lines without line endings
        """
        return list(self.iter_lines())

    def close(self) -> None:
        """Close the rectangle file."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "RectangleReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
