"""Conversion of a .glyphspackage directory into a standalone .glyphs file.

Glyph files are read and parsed in parallel, then reassembled in the order
given by order.plist. The resulting dictionary lists all entries sorted by
key, each written from its verbatim source text.

Key components:
- LoadedGlyph: A parsed glyph file
- Unpacker: Orchestrates reading, merging and writing
- unpack: Convenience function around Unpacker
"""

from dataclasses import dataclass
from pathlib import Path

import structlog

from glyphspack.config import GlyphspackSettings
from glyphspack.core.parser import parse, parse_file
from glyphspack.core.pool import ProgressCallback, run_glyph_tasks
from glyphspack.core.schema import glyph_name_slice, require_array, string_elements
from glyphspack.domain import Root
from glyphspack.exceptions import DuplicateGlyphError, GlyphspackError, MissingGlyphError
from glyphspack.io import (
    PackageReader,
    StandaloneWriter,
    check_output,
    format_array_entry,
    read_text,
    staged_file,
)
from glyphspack.utils import ConversionLogger, ConversionStats, get_logger


@dataclass(frozen=True)
class LoadedGlyph:
    """A glyph file read from a package.

    Attributes:
        name: Glyph name from the file's glyphname entry
        code: Whole file text with surrounding whitespace removed
        path: Path of the glyph file
    """

    name: str
    code: str
    path: Path


def load_glyph(path: Path, glyph_name_key: str = "glyphname") -> LoadedGlyph:
    """Read and parse one glyph file.

    Raises:
        FileReadError: If the file cannot be read
        PlistSyntaxError: If the file is not a property list dictionary
        SchemaError: If the file has no string glyph name
    """
    text = read_text(path)
    glyph = parse(Root.DICT, text, path)
    name = glyph_name_slice(glyph, path, glyph_name_key, "glyph")
    return LoadedGlyph(name=name.text, code=text.strip(), path=path)


class Unpacker:
    """Converts packages into standalone files.

    Example:
        unpacker = Unpacker(GlyphspackSettings())
        stats = unpacker.unpack(Path("Font.glyphspackage"), Path("Font.glyphs"))
    """

    def __init__(
        self,
        settings: GlyphspackSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the unpacker.

        Args:
            settings: Layout and processing settings (defaults if None)
            logger: Logger to report to (the glyphspack logger if None)
        """
        self.settings = settings or GlyphspackSettings()
        self.layout = self.settings.layout
        self.logger = logger or get_logger()

    def merge(
        self,
        input_path: Path,
        conversion_logger: ConversionLogger,
        progress_callback: ProgressCallback | None = None,
    ) -> tuple[list[str], int]:
        """Read a package and merge it into standalone entry codes.

        Args:
            input_path: Path to the package directory
            conversion_logger: Logger collecting the conversion statistics
            progress_callback: Optional callback(completed, total, path)
                invoked after each glyph file is parsed

        Returns:
            Entry codes sorted by key, and the number of glyphs
        """
        layout = self.layout
        reader = PackageReader(input_path, layout)

        fontinfo = parse_file(reader.fontinfo_path, Root.DICT)
        entries: list[tuple[str, str]] = [
            (entry.key, entry.code) for entry in fontinfo.entries
        ]

        # without an order file the standalone document had no glyphs entry
        order: list[str] | None = None
        if reader.has_order():
            order_array = parse_file(reader.order_path, Root.ARRAY)
            order = string_elements(order_array, reader.order_path, "glyph name")

        glyphs = self._load_glyphs(reader, conversion_logger, progress_callback)
        glyph_codes = self._ordered_glyph_codes(reader, order or [], glyphs, conversion_logger)

        if reader.has_ui_state():
            ui_state = parse_file(reader.ui_state_path, Root.DICT)
            conversion_logger.stats.has_ui_state = True
            for entry in ui_state.entries:
                if entry.key == layout.display_strings_package_key:
                    value = require_array(entry.value, reader.ui_state_path, entry.key)
                    key = layout.display_strings_standalone_key
                    entries.append((key, format_array_entry(key, value.body)))
                else:
                    entries.append((entry.key, entry.code))

        if order is not None:
            entries.append(
                (layout.glyphs_key, format_array_entry(layout.glyphs_key, ",\n".join(glyph_codes)))
            )

        # stable sort on the key alone: str comparison is by code point
        entries.sort(key=lambda item: item[0])
        return [code for _, code in entries], len(glyph_codes)

    def _load_glyphs(
        self,
        reader: PackageReader,
        conversion_logger: ConversionLogger,
        progress_callback: ProgressCallback | None,
    ) -> dict[str, LoadedGlyph]:
        paths = reader.list_glyph_files()
        key = self.layout.glyph_name_key

        loaded = run_glyph_tasks(
            lambda path: load_glyph(path, key),
            paths,
            describe=lambda path: path.name,
            max_workers=self.settings.processing.max_workers,
            progress_callback=progress_callback,
        )

        glyphs: dict[str, LoadedGlyph] = {}
        for glyph in loaded:
            if glyph.name in glyphs:
                raise DuplicateGlyphError(
                    glyph.name,
                    str(glyphs[glyph.name].path),
                    str(glyph.path),
                    reader.glyphs_path,
                )
            glyphs[glyph.name] = glyph
            conversion_logger.log_glyph_read(glyph.name, glyph.path)
        return glyphs

    def _ordered_glyph_codes(
        self,
        reader: PackageReader,
        order: list[str],
        glyphs: dict[str, LoadedGlyph],
        conversion_logger: ConversionLogger,
    ) -> list[str]:
        codes: list[str] = []
        seen: set[str] = set()

        for name in order:
            if name in seen:
                raise DuplicateGlyphError(
                    name, reader.order_path.name, reader.order_path.name, reader.order_path
                )
            seen.add(name)

            glyph = glyphs.get(name)
            if glyph is None:
                raise MissingGlyphError(name, reader.order_path, reader.glyphs_path)
            codes.append(glyph.code)

        for name, glyph in glyphs.items():
            if name not in seen:
                conversion_logger.log_orphan_glyph(name, glyph.path)

        return codes

    def unpack(
        self,
        input_path: Path,
        output_path: Path,
        overwrite: bool | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> ConversionStats:
        """Convert a package directory into a standalone file.

        Args:
            input_path: Path to the .glyphspackage directory
            output_path: Path of the .glyphs file to create
            overwrite: Replace an existing output (config default if None)
            progress_callback: Optional callback(completed, total, path)
                invoked after each glyph file is parsed

        Returns:
            ConversionStats with counts and timing

        Raises:
            FileReadError: If a package file cannot be read
            FileWriteError: If the output cannot be written
            OutputExistsError: If the output exists and overwrite is off
            PlistSyntaxError: If a package file does not parse
            SchemaError: If the package does not have the required shape
            MissingGlyphError: If the order lists a glyph without a file
        """
        if overwrite is None:
            overwrite = self.settings.processing.overwrite

        conversion_logger = ConversionLogger(self.logger)
        conversion_logger.log_start("unpack", input_path, output_path)

        try:
            check_output(output_path, overwrite)
            codes, glyph_count = self.merge(input_path, conversion_logger, progress_callback)
            with staged_file(output_path, overwrite) as staging:
                StandaloneWriter(staging).write(codes)
                conversion_logger.log_file_written(output_path)
        except GlyphspackError as e:
            conversion_logger.log_error(e)
            raise

        conversion_logger.log_complete(output_path, glyph_count)
        return conversion_logger.stats


def unpack(
    input_path: Path,
    output_path: Path,
    overwrite: bool = False,
    settings: GlyphspackSettings | None = None,
) -> ConversionStats:
    """Convert a .glyphspackage directory into a standalone .glyphs file.

    See Unpacker.unpack for the errors raised.
    """
    return Unpacker(settings).unpack(Path(input_path), Path(output_path), overwrite=overwrite)
