"""Logging utilities for glyphspack."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# handlers added by configure_logging, replaced when it is called again
_installed_handlers: list[logging.Handler] = []


@dataclass
class ConversionStats:
    """Statistics from a pack or unpack run."""

    glyph_count: int = 0
    files_written: int = 0
    orphan_glyph_files: list[str] = field(default_factory=list)
    has_ui_state: bool = False
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate conversion duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    def start(self) -> None:
        self.start_time = time.time()

    def finish(self) -> None:
        self.end_time = time.time()


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)
    else:
        null_handler = logging.NullHandler()
        root_logger.addHandler(null_handler)
        _installed_handlers.append(null_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("glyphspack")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


def get_logger() -> structlog.stdlib.BoundLogger:
    """Return the glyphspack logger without reconfiguring logging.

    The logger always sits on top of the stdlib "glyphspack" logger, so
    library calls made before configure_logging follow the stdlib defaults
    instead of printing every event to stdout.
    """
    return structlog.wrap_logger(
        logging.getLogger("glyphspack"),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


class ConversionLogger:
    """Logger for tracking conversion progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ConversionStats()

    def log_start(self, operation: str, input_path: Path, output_path: Path) -> None:
        """Log start of a conversion."""
        self._stats.start()
        self._logger.info(
            "Starting conversion",
            operation=operation,
            input=str(input_path),
            output=str(output_path),
        )

    def log_glyph_written(self, glyph_name: str, path: Path) -> None:
        """Log a glyph file written during packing."""
        self._logger.debug("Glyph written", glyph=glyph_name, path=str(path))

    def log_glyph_read(self, glyph_name: str, path: Path) -> None:
        """Log a glyph file read during unpacking."""
        self._logger.debug("Glyph read", glyph=glyph_name, path=str(path))

    def log_file_written(self, path: Path) -> None:
        """Log a file written to the staging area."""
        self._logger.debug("File written", path=str(path))
        self._stats.files_written += 1

    def log_orphan_glyph(self, glyph_name: str, path: Path) -> None:
        """Log a glyph file that the order does not reference."""
        self._logger.warning(
            "Glyph file not listed in order, skipping",
            glyph=glyph_name,
            path=str(path),
        )
        self._stats.orphan_glyph_files.append(str(path))

    def log_error(self, error: Exception) -> None:
        """Log a failed conversion."""
        self._logger.error(
            "Conversion failed",
            error=str(error),
            error_type=type(error).__name__,
        )

    def log_complete(self, output_path: Path, glyph_count: int) -> None:
        """Log successful conversion."""
        self._stats.glyph_count = glyph_count
        self._stats.finish()
        self._logger.info(
            "Conversion complete",
            output=str(output_path),
            glyphs=glyph_count,
            files_written=self._stats.files_written,
            duration_seconds=round(self._stats.duration_seconds, 2),
        )

    @property
    def stats(self) -> ConversionStats:
        """Get current conversion statistics."""
        return self._stats
