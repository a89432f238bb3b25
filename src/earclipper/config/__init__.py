"""Configuration management for earclipper.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- TriangulationConfig: Ear-clipping settings
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- EarClipperSettings: Main application settings
"""

from earclipper.config.settings import (
    EarClipperSettings,
    LoggingConfig,
    ProcessingConfig,
    TriangulationConfig,
    get_default_settings,
)

__all__ = [
    "EarClipperSettings",
    "LoggingConfig",
    "ProcessingConfig",
    "TriangulationConfig",
    "get_default_settings",
]
