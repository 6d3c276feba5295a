"""File I/O layer for glyphspack.

This module handles reading and writing the files of both Glyphs flavors.
It converts file system failures into glyphspack errors that carry the
offending path, and stages every output so it is published only after it
has been written completely.

Key responsibilities:
- Read UTF-8 text without newline translation
- List glyph files of a package
- Format dictionary and array documents from verbatim codes
- Publish outputs atomically
- Derive default output paths

Key classes:
- PackageReader: Locate the files of a package
- PackageWriter: Write the files of a package
- StandaloneWriter: Write a standalone file
"""

from glyphspack.io.reader import PackageReader, read_text
from glyphspack.io.writer import (
    PackageWriter,
    StandaloneWriter,
    check_output,
    format_array_document,
    format_array_entry,
    format_dict_document,
    get_package_path,
    get_standalone_path,
    staged_directory,
    staged_file,
    write_text,
)

__all__ = [
    "PackageReader",
    "PackageWriter",
    "StandaloneWriter",
    "check_output",
    "format_array_document",
    "format_array_entry",
    "format_dict_document",
    "get_package_path",
    "get_standalone_path",
    "read_text",
    "staged_directory",
    "staged_file",
    "write_text",
]
