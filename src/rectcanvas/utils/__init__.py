"""Utility functions for rectcanvas.

This module provides utility functions including:

- Logging setup and configuration
- Run statistics tracking
"""

from rectcanvas.utils.logging import (
    AnalysisLogger,
    AnalysisStats,
    configure_logging,
)

__all__ = [
    "AnalysisLogger",
    "AnalysisStats",
    "configure_logging",
]
