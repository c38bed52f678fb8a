"""Logging utilities for Rectcanvas."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

_FILE_HANDLER_NAME = "rectcanvas-file"
_CONSOLE_HANDLER_NAME = "rectcanvas-console"


@dataclass
class AnalysisStats:
    """Statistics from an analysis run."""

    lines_read: int = 0
    rejected_lines: int = 0
    out_of_canvas: int = 0
    rectangles_kept: int = 0
    pairs_evaluated: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate analysis duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if handler.get_name() in (_FILE_HANDLER_NAME, _CONSOLE_HANDLER_NAME):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_FILE_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(_CONSOLE_HANDLER_NAME)
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("rectcanvas")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class AnalysisLogger:
    """Logger for tracking analysis progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = AnalysisStats()

    def reset(self) -> AnalysisStats:
        """Start a fresh set of statistics for a new run."""
        self._stats = AnalysisStats()
        return self._stats

    def log_snapshot(
        self,
        lines_read: int,
        rejected: int,
        out_of_canvas: int,
        kept: int,
    ) -> None:
        """Log the outcome of building the snapshot."""
        self._logger.info(
            "Snapshot built",
            lines=lines_read,
            rejected=rejected,
            out_of_canvas=out_of_canvas,
            kept=kept,
        )
        self._stats.lines_read = lines_read
        self._stats.rejected_lines = rejected
        self._stats.out_of_canvas = out_of_canvas
        self._stats.rectangles_kept = kept

    def log_classification(self, label: str, count: int, pairs: int) -> None:
        """Log a classifier result."""
        self._logger.debug("Classification done", classifier=label, count=count, pairs=pairs)
        self._stats.pairs_evaluated += pairs

    def log_coverage(self, method: str, covered: int, free: int, duration_ms: float) -> None:
        """Log the coverage result."""
        self._logger.info(
            "Coverage computed",
            method=method,
            covered=covered,
            free=free,
            duration_ms=round(duration_ms, 2),
        )

    @property
    def stats(self) -> AnalysisStats:
        """Get current analysis statistics."""
        return self._stats
