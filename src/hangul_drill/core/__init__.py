"""Core module for hangul-drill.

This module provides core functionality including:
- Configuration management (Settings, get_settings)
- Custom exceptions (HangulDrillException and subclasses)
- Logging utilities
"""

from hangul_drill.core.config import Settings, get_settings
from hangul_drill.core.exceptions import (
    ConfigurationError,
    HangulDrillException,
    UnknownMatchUnitError,
)
from hangul_drill.core.logging import get_logger, setup_logging

__all__ = [
    "ConfigurationError",
    "HangulDrillException",
    "Settings",
    "UnknownMatchUnitError",
    "get_logger",
    "get_settings",
    "setup_logging",
]
