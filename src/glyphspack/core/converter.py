"""Direction detection and dispatch between packing and unpacking."""

from enum import Enum
from pathlib import Path

import structlog

from glyphspack.config import GlyphspackSettings
from glyphspack.core.packer import Packer
from glyphspack.core.pool import ProgressCallback
from glyphspack.core.unpacker import Unpacker
from glyphspack.exceptions import FileReadError
from glyphspack.io import get_package_path, get_standalone_path
from glyphspack.utils import ConversionStats, get_logger


class Operation(str, Enum):
    """Conversion direction."""

    PACK = "pack"
    UNPACK = "unpack"


def detect_operation(input_path: Path) -> Operation:
    """Return UNPACK for a package directory and PACK for a standalone file.

    Raises:
        FileReadError: If the input does not exist
    """
    if not input_path.exists():
        raise FileReadError(input_path, "no such file or directory")
    if input_path.is_dir():
        return Operation.UNPACK
    return Operation.PACK


class Converter:
    """Converts between the standalone and package flavors.

    Example:
        converter = Converter(GlyphspackSettings())
        output = converter.default_output_path(Path("Font.glyphs"))
        stats = converter.convert(Path("Font.glyphs"), output)
    """

    def __init__(
        self,
        settings: GlyphspackSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self.settings = settings or GlyphspackSettings()
        self.logger = logger or get_logger()

    def default_output_path(self, input_path: Path, operation: Operation | None = None) -> Path:
        """Derive the output path from the input path and direction.

        Converts: Font.glyphs -> Font.glyphspackage
                  Font.glyphspackage -> Font.glyphs
        """
        if operation is None:
            operation = detect_operation(input_path)
        if operation is Operation.PACK:
            return get_package_path(input_path, self.settings.layout)
        return get_standalone_path(input_path, self.settings.layout)

    def convert(
        self,
        input_path: Path,
        output_path: Path | None = None,
        operation: Operation | None = None,
        overwrite: bool | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> ConversionStats:
        """Pack or unpack input_path depending on what it is.

        Args:
            input_path: A .glyphs file or a .glyphspackage directory
            output_path: Output path (derived from input_path if None)
            operation: Conversion direction (detected if None)
            overwrite: Replace an existing output (config default if None)
            progress_callback: Optional callback(completed, total, name)

        Returns:
            ConversionStats of the conversion
        """
        if operation is None:
            operation = detect_operation(input_path)
        if output_path is None:
            output_path = self.default_output_path(input_path, operation)

        if operation is Operation.PACK:
            return Packer(self.settings, self.logger).pack(
                input_path, output_path, overwrite, progress_callback
            )
        return Unpacker(self.settings, self.logger).unpack(
            input_path, output_path, overwrite, progress_callback
        )
