"""Configuration management for glyphspack.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- PackageLayout: File names and keys of the Glyphs file flavors
- ProcessingConfig: Worker and overwrite settings
- LoggingConfig: Logging settings
- GlyphspackSettings: Main application settings
"""

from glyphspack.config.settings import (
    GlyphspackSettings,
    LoggingConfig,
    PackageLayout,
    ProcessingConfig,
    get_default_settings,
)

__all__ = [
    "GlyphspackSettings",
    "LoggingConfig",
    "PackageLayout",
    "ProcessingConfig",
    "get_default_settings",
]
