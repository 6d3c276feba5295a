"""Tests for settings and logging utilities."""

import logging

import pytest
from pydantic import ValidationError

from glyphspack.config import (
    GlyphspackSettings,
    LoggingConfig,
    PackageLayout,
    ProcessingConfig,
    get_default_settings,
)
from glyphspack.exceptions import SchemaError
from glyphspack.utils import ConversionLogger, ConversionStats, configure_logging, get_logger


class TestSettings:
    """Tests for the pydantic settings models."""

    def test_defaults(self):
        settings = get_default_settings()

        assert settings.layout == PackageLayout()
        assert settings.layout.fontinfo_file == "fontinfo.plist"
        assert settings.layout.order_file == "order.plist"
        assert settings.layout.ui_state_file == "UIState.plist"
        assert settings.layout.glyphs_dir == "glyphs"
        assert settings.processing.max_workers is None
        assert settings.processing.overwrite is False
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"

    def test_layout_is_frozen(self):
        layout = PackageLayout()
        with pytest.raises(ValidationError):
            layout.glyphs_dir = "other"  # type: ignore

    def test_workers_must_be_positive(self):
        with pytest.raises(ValidationError):
            ProcessingConfig(max_workers=0)

    def test_nested_settings(self):
        settings = GlyphspackSettings(
            processing=ProcessingConfig(max_workers=4, overwrite=True),
            logging=LoggingConfig(log_level="DEBUG"),
        )
        assert settings.processing.max_workers == 4
        assert settings.processing.overwrite
        assert settings.logging.file_log_level == "DEBUG"


class TestConversionStats:
    """Tests for ConversionStats."""

    def test_duration(self):
        stats = ConversionStats(start_time=10.0, end_time=12.5)
        assert stats.duration_seconds == 2.5

    def test_duration_before_finish(self):
        stats = ConversionStats()
        stats.start()
        assert stats.duration_seconds == 0.0


class TestLogging:
    """Tests for configure_logging and ConversionLogger."""

    def test_handlers_replaced_on_reconfigure(self, tmp_path):
        root = logging.getLogger()
        configure_logging(quiet=True)
        baseline = len(root.handlers)

        configure_logging(log_file=tmp_path / "a.log")
        configure_logging(log_file=tmp_path / "b.log")
        assert len(root.handlers) == baseline + 1

        configure_logging(quiet=True)
        assert len(root.handlers) == baseline

    def test_conversion_logger_stats(self, tmp_path):
        conversion_logger = ConversionLogger(get_logger())

        conversion_logger.log_start("pack", tmp_path / "in.glyphs", tmp_path / "out")
        conversion_logger.log_file_written(tmp_path / "out" / "order.plist")
        conversion_logger.log_orphan_glyph("x", tmp_path / "x.glyph")
        conversion_logger.log_error(SchemaError(tmp_path, "bad"))
        conversion_logger.log_complete(tmp_path / "out", 3)

        stats = conversion_logger.stats
        assert stats.glyph_count == 3
        assert stats.files_written == 1
        assert stats.orphan_glyph_files == [str(tmp_path / "x.glyph")]
        assert stats.duration_seconds >= 0.0
