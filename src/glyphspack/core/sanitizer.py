"""Glyph name to file name mapping.

Glyph files are named after their glyph, but glyph names may start with a
dot and may differ from each other only by case. The mapping is one-way; the
real name is always read back from the ``glyphname`` entry of the file.
"""

from pathlib import Path

GLYPH_FILE_SUFFIX = ".glyph"


def sanitize_glyph_name(glyph_name: str) -> str:
    """Derive a file stem from a glyph name.

    A leading dot becomes an underscore so the file is not hidden, and every
    ASCII uppercase letter is followed by an underscore so that names
    differing only by case stay distinct on case-insensitive file systems.

    Examples:
        .notdef -> _notdef
        A       -> A_
        Dcaron  -> D_caron

    Args:
        glyph_name: Glyph name as written in the font source

    Returns:
        File stem without extension
    """
    if glyph_name.startswith("."):
        glyph_name = "_" + glyph_name[1:]

    parts: list[str] = []
    for char in glyph_name:
        parts.append(char)
        if "A" <= char <= "Z":
            parts.append("_")
    return "".join(parts)


def glyph_file_name(glyph_name: str, suffix: str = GLYPH_FILE_SUFFIX) -> str:
    """Return the file name of the glyph file for a glyph name."""
    return sanitize_glyph_name(glyph_name) + suffix


def is_plain_file_name(file_name: str) -> bool:
    """Return True if file_name names an entry directly inside a directory.

    Glyph names may contain path separators, which the sanitizer keeps.
    Such names would place the glyph file outside the glyphs directory.
    """
    if not file_name or "\0" in file_name or "/" in file_name or "\\" in file_name:
        return False
    return Path(file_name).name == file_name
