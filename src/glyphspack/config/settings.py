"""Configuration settings for glyphspack."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class PackageLayout(BaseModel):
    """File names and keys of the two Glyphs file flavors.

    The layout is fixed by the Glyphs file format and is never mutated at
    runtime.
    """

    model_config = ConfigDict(frozen=True)

    standalone_suffix: str = Field(
        default=".glyphs",
        description="Extension of standalone files",
    )
    package_suffix: str = Field(
        default=".glyphspackage",
        description="Extension of package directories",
    )
    glyph_suffix: str = Field(
        default=".glyph",
        description="Extension of per-glyph files inside a package",
    )
    fontinfo_file: str = Field(
        default="fontinfo.plist",
        description="Package file holding the font metadata",
    )
    order_file: str = Field(
        default="order.plist",
        description="Package file holding the glyph order",
    )
    ui_state_file: str = Field(
        default="UIState.plist",
        description="Optional package file holding the UI state",
    )
    glyphs_dir: str = Field(
        default="glyphs",
        description="Package directory holding the glyph files",
    )
    glyphs_key: str = Field(
        default="glyphs",
        description="Standalone key of the glyph list",
    )
    glyph_name_key: str = Field(
        default="glyphname",
        description="Glyph key holding the glyph name",
    )
    display_strings_standalone_key: str = Field(
        default="DisplayStrings",
        description="Display strings key in standalone files",
    )
    display_strings_package_key: str = Field(
        default="displayStrings",
        description="Display strings key in UIState.plist",
    )


class ProcessingConfig(BaseModel):
    """Configuration for conversions."""

    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Max worker threads for glyph files (None = auto)",
    )
    overwrite: bool = Field(
        default=False,
        description="Replace an existing output",
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


class GlyphspackSettings(BaseModel):
    """Main application settings."""

    layout: PackageLayout = Field(default_factory=PackageLayout)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphspackSettings:
    """Get default application settings."""
    return GlyphspackSettings()
