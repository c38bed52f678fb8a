"""Configuration settings for Rectcanvas."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class CoverageMethod(str, Enum):
    """Algorithm used to compute the covered canvas area."""

    SWEEP = "sweep"
    EXACT = "exact"


class LogLevel(str, Enum):
    """Accepted logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class InputConfig(BaseModel):
    """Configuration for the rectangle source."""

    rectangles_file: Path = Field(
        default=Path("input.txt"),
        description="Text file with one 'name x y width height' line per rectangle",
    )
    encoding: str = Field(
        default="utf-8",
        description="Encoding of the rectangle file",
    )
    errors: str = Field(
        default="replace",
        description="Decoding error handler; undecodable bytes become U+FFFD by default",
    )


class CoverageConfig(BaseModel):
    """Configuration for the coverage calculation."""

    method: CoverageMethod = Field(
        default=CoverageMethod.SWEEP,
        description="Coverage algorithm (sweep = single-key interval map, exact = segment tree)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class RectCanvasSettings(BaseModel):
    """Main application settings."""

    input: InputConfig = Field(default_factory=InputConfig)
    coverage: CoverageConfig = Field(default_factory=CoverageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> RectCanvasSettings:
    """Get default application settings."""
    return RectCanvasSettings()
