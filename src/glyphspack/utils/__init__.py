"""Utility functions for glyphspack.

This module provides utility functions including:

- Logging setup and configuration
- Conversion statistics
"""

from glyphspack.utils.logging import (
    ConversionLogger,
    ConversionStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "ConversionLogger",
    "ConversionStats",
    "configure_logging",
    "get_logger",
]
