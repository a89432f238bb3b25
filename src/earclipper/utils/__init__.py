"""Utility functions for earclipper.

This module provides utility functions including:

- Logging setup and configuration
- Batch statistics tracking
"""

from earclipper.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
