"""Configuration management for rectcanvas.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- InputConfig: Rectangle source settings
- CoverageConfig: Coverage algorithm selection
- LoggingConfig: Logging settings
- RectCanvasSettings: Main application settings
"""

from rectcanvas.config.settings import (
    CoverageConfig,
    CoverageMethod,
    InputConfig,
    LoggingConfig,
    LogLevel,
    RectCanvasSettings,
    get_default_settings,
)

__all__ = [
    "CoverageConfig",
    "CoverageMethod",
    "InputConfig",
    "LogLevel",
    "LoggingConfig",
    "RectCanvasSettings",
    "get_default_settings",
]
