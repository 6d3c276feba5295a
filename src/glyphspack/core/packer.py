"""Conversion of a standalone .glyphs file into a .glyphspackage directory.

The standalone dictionary is split into font metadata, glyph order, UI state
and one file per glyph. Every piece is written from its verbatim source
text; only the display strings entry is renamed and re-wrapped.

Key components:
- GlyphRecord: A glyph ready to be written to its own file
- PackedDocument: The split standalone document
- Packer: Orchestrates reading, splitting and writing
- pack: Convenience function around Packer
"""

from dataclasses import dataclass, field
from pathlib import Path

import structlog

from glyphspack.config import GlyphspackSettings
from glyphspack.core.parser import parse_file
from glyphspack.core.pool import ProgressCallback, run_glyph_tasks
from glyphspack.core.sanitizer import glyph_file_name, is_plain_file_name
from glyphspack.core.schema import glyph_name_slice, require_array, single_entry
from glyphspack.domain import Root, Slice
from glyphspack.exceptions import DuplicateGlyphError, GlyphspackError, SchemaError
from glyphspack.io import PackageWriter, check_output, format_array_entry, staged_directory
from glyphspack.utils import ConversionLogger, ConversionStats, get_logger


@dataclass(frozen=True)
class GlyphRecord:
    """A glyph of the standalone file.

    Attributes:
        name: Glyph name, quotes stripped
        name_code: Verbatim glyph name as written, used in the order file
        code: Verbatim glyph dictionary, used as the glyph file content
        file_name: Sanitized glyph file name
    """

    name: str
    name_code: str
    code: str
    file_name: str


@dataclass
class PackedDocument:
    """A standalone document split into the parts of a package.

    ``has_glyphs`` records whether the document had a glyphs entry at all, so
    an empty glyph list can be told apart from a missing one.
    """

    metadata_codes: list[str] = field(default_factory=list)
    ui_state_codes: list[str] = field(default_factory=list)
    glyphs: list[GlyphRecord] = field(default_factory=list)
    has_glyphs: bool = False

    @property
    def order_codes(self) -> list[str]:
        return [glyph.name_code for glyph in self.glyphs]


class Packer:
    """Converts standalone files into packages.

    Example:
        packer = Packer(GlyphspackSettings())
        stats = packer.pack(Path("Font.glyphs"), Path("Font.glyphspackage"))
    """

    def __init__(
        self,
        settings: GlyphspackSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the packer.

        Args:
            settings: Layout and processing settings (defaults if None)
            logger: Logger to report to (the glyphspack logger if None)
        """
        self.settings = settings or GlyphspackSettings()
        self.layout = self.settings.layout
        self.logger = logger or get_logger()

    def split(self, document: Slice, path: Path) -> PackedDocument:
        """Split a parsed standalone document into package parts.

        Args:
            document: Root dictionary of the standalone file
            path: File the document was read from, for messages

        Returns:
            Metadata codes, UI state codes and glyph records, each in source order

        Raises:
            SchemaError: If the glyphs or display strings have the wrong shape
        """
        layout = self.layout
        packed = PackedDocument()

        single_entry(document, layout.glyphs_key, path)
        single_entry(document, layout.display_strings_standalone_key, path)

        for entry in document.entries:
            if entry.key == layout.display_strings_standalone_key:
                value = require_array(entry.value, path, entry.key)
                packed.ui_state_codes.append(
                    format_array_entry(layout.display_strings_package_key, value.body)
                )
            elif entry.key == layout.glyphs_key:
                packed.glyphs = self._split_glyphs(entry.value, path)
                packed.has_glyphs = True
            else:
                packed.metadata_codes.append(entry.code)

        return packed

    def _split_glyphs(self, glyphs: Slice, path: Path) -> list[GlyphRecord]:
        require_array(glyphs, path, self.layout.glyphs_key)

        records: list[GlyphRecord] = []
        seen_names: dict[str, int] = {}
        seen_files: dict[str, GlyphRecord] = {}

        for index, glyph in enumerate(glyphs.elements):
            location = f"{self.layout.glyphs_key}[{index}]"
            name = glyph_name_slice(glyph, path, self.layout.glyph_name_key, location)

            if name.text in seen_names:
                first = f"{self.layout.glyphs_key}[{seen_names[name.text]}]"
                raise DuplicateGlyphError(name.text, first, location, path)
            seen_names[name.text] = index

            record = GlyphRecord(
                name=name.text,
                name_code=name.code,
                code=glyph.code,
                file_name=glyph_file_name(name.text, self.layout.glyph_suffix),
            )

            if not name.text or not is_plain_file_name(record.file_name):
                raise SchemaError(
                    path,
                    f"glyph name {name.text!r} in {location} cannot be used as a file name",
                )

            # case-insensitive file systems must not merge two glyph files
            folded = record.file_name.casefold()
            if folded in seen_files:
                other = seen_files[folded]
                raise SchemaError(
                    path,
                    f"glyphs /{other.name} and /{record.name} map to the same "
                    f"file name {record.file_name}",
                )
            seen_files[folded] = record
            records.append(record)

        return records

    def pack(
        self,
        input_path: Path,
        output_path: Path,
        overwrite: bool | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> ConversionStats:
        """Convert a standalone file into a package directory.

        Args:
            input_path: Path to the .glyphs file
            output_path: Path of the package directory to create
            overwrite: Replace an existing output (config default if None)
            progress_callback: Optional callback(completed, total, glyph_name)
                invoked after each glyph file is written

        Returns:
            ConversionStats with counts and timing

        Raises:
            FileReadError: If the input cannot be read
            FileWriteError: If the package cannot be written
            OutputExistsError: If the output exists and overwrite is off
            PlistSyntaxError: If the input is not a property list dictionary
            SchemaError: If the glyphs do not have the required shape
        """
        if overwrite is None:
            overwrite = self.settings.processing.overwrite

        conversion_logger = ConversionLogger(self.logger)
        conversion_logger.log_start("pack", input_path, output_path)

        try:
            check_output(output_path, overwrite)
            document = parse_file(input_path, Root.DICT)
            packed = self.split(document, input_path)

            with staged_directory(output_path, overwrite) as staging:
                self._write_package(staging, packed, conversion_logger, progress_callback)
        except GlyphspackError as e:
            conversion_logger.log_error(e)
            raise

        conversion_logger.stats.has_ui_state = bool(packed.ui_state_codes)
        conversion_logger.log_complete(output_path, len(packed.glyphs))
        return conversion_logger.stats

    def _write_package(
        self,
        staging: Path,
        packed: PackedDocument,
        conversion_logger: ConversionLogger,
        progress_callback: ProgressCallback | None,
    ) -> None:
        writer = PackageWriter(staging, self.layout)
        writer.create_directories()

        conversion_logger.log_file_written(writer.write_fontinfo(packed.metadata_codes))
        if packed.has_glyphs:
            conversion_logger.log_file_written(writer.write_order(packed.order_codes))
        if packed.ui_state_codes:
            conversion_logger.log_file_written(writer.write_ui_state(packed.ui_state_codes))

        paths = run_glyph_tasks(
            lambda record: writer.write_glyph(record.file_name, record.code),
            packed.glyphs,
            describe=lambda record: record.name,
            max_workers=self.settings.processing.max_workers,
            progress_callback=progress_callback,
        )

        for record, path in zip(packed.glyphs, paths):
            conversion_logger.log_glyph_written(record.name, path)
            conversion_logger.log_file_written(path)


def pack(
    input_path: Path,
    output_path: Path,
    overwrite: bool = False,
    settings: GlyphspackSettings | None = None,
) -> ConversionStats:
    """Convert a standalone .glyphs file into a .glyphspackage directory.

    See Packer.pack for the errors raised.
    """
    return Packer(settings).pack(Path(input_path), Path(output_path), overwrite=overwrite)
