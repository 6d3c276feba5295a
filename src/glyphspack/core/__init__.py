"""Core conversion algorithms for glyphspack.

This module contains the core algorithms for:

- Parsing property lists while keeping the source text of every value
- Splitting a standalone file into a package
- Merging a package back into a standalone file
- Naming glyph files
- Running glyph file work in parallel

Key functions:
- parse: Parse a property list document into a Slice tree
- parse_file: Read and parse a property list file
- sanitize_glyph_name: Derive a file stem from a glyph name
- run_glyph_tasks: Fan glyph tasks out over a thread pool
- pack: Convert a standalone file into a package
- unpack: Convert a package into a standalone file

Key classes:
- PlistParser: Recursive-descent parser over one buffer
- Packer: Standalone to package conversion
- Unpacker: Package to standalone conversion
- Converter: Direction detection and dispatch
"""

from glyphspack.core.converter import Converter, Operation, detect_operation
from glyphspack.core.packer import GlyphRecord, PackedDocument, Packer, pack
from glyphspack.core.parser import PlistParser, parse, parse_file
from glyphspack.core.pool import run_glyph_tasks
from glyphspack.core.sanitizer import glyph_file_name, sanitize_glyph_name
from glyphspack.core.unpacker import LoadedGlyph, Unpacker, load_glyph, unpack

__all__ = [
    # Converter
    "Converter",
    "Operation",
    "detect_operation",
    # Packer
    "GlyphRecord",
    "PackedDocument",
    "Packer",
    "pack",
    # Parser
    "PlistParser",
    "parse",
    "parse_file",
    # Pool
    "run_glyph_tasks",
    # Sanitizer
    "glyph_file_name",
    "sanitize_glyph_name",
    # Unpacker
    "LoadedGlyph",
    "Unpacker",
    "load_glyph",
    "unpack",
]
