"""Domain models for glyphspack.

The slice tree is the structure shared by both conversion directions. Every
node keeps offsets into the buffer it was parsed from, so untouched values
can be written back exactly as they were read.

Key classes:
- Root: Top-level value kind requested from the parser
- ValueKind: Tag of a parsed value (dict, array, string)
- Slice: A parsed value with its verbatim source text
- DictEntry: A ``key = value;`` entry with its verbatim source text
"""

from glyphspack.domain.slice import DictEntry, Root, Slice, ValueKind

__all__: list[str] = [
    # Enums
    "Root",
    "ValueKind",
    # Core types
    "DictEntry",
    "Slice",
]
