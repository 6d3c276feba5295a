"""Exception hierarchy for glyphspack."""

from pathlib import Path


class GlyphspackError(Exception):
    """Base exception for all glyphspack errors."""

    pass


class FileAccessError(GlyphspackError):
    """A file or directory could not be read or written."""

    def __init__(self, path: Path | str, reason: str, action: str = "access") -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot {action} '{path}': {reason}")


class FileReadError(FileAccessError):
    """Error reading a file or listing a directory."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(path, reason, action="read")


class FileWriteError(FileAccessError):
    """Error creating or writing a file or directory."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(path, reason, action="write")


class OutputExistsError(GlyphspackError):
    """Output path exists and overwriting was not requested."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Output already exists: '{path}'")


class PlistSyntaxError(GlyphspackError):
    """Text does not match the property list grammar.

    Carries the 1-based line and column of the offending character, its
    0-based offset, and the path of the parsed file when known.
    """

    def __init__(
        self,
        reason: str,
        line: int,
        column: int,
        offset: int,
        path: Path | None = None,
    ) -> None:
        self.reason = reason
        self.line = line
        self.column = column
        self.offset = offset
        self.path = path
        location = f"line {line}, column {column}"
        if path is not None:
            location = f"{path}:{line}:{column}"
        super().__init__(f"Syntax error at {location}: {reason}")

    def with_path(self, path: Path) -> "PlistSyntaxError":
        """Return a copy of this error that names the parsed file."""
        return PlistSyntaxError(self.reason, self.line, self.column, self.offset, path)


class SchemaError(GlyphspackError):
    """Well-formed property list with the wrong shape for a Glyphs file."""

    def __init__(self, path: Path | str, details: str) -> None:
        self.path = Path(path)
        self.details = details
        super().__init__(f"Invalid Glyphs data in '{path}': {details}")


class MissingGlyphError(SchemaError):
    """The order lists a glyph that has no glyph file."""

    def __init__(self, glyph_name: str, order_path: Path, glyphs_path: Path) -> None:
        self.glyph_name = glyph_name
        self.order_path = order_path
        self.glyphs_path = glyphs_path
        super().__init__(
            order_path,
            f"missing glyph /{glyph_name}; glyph appears in {order_path} "
            f"but not in {glyphs_path}",
        )


class DuplicateGlyphError(SchemaError):
    """Two glyphs share a name or a file name."""

    def __init__(self, glyph_name: str, first: str, second: str, path: Path) -> None:
        self.glyph_name = glyph_name
        self.first = first
        self.second = second
        super().__init__(
            path, f"duplicate glyph /{glyph_name} (in {first} and {second})"
        )


class GlyphTaskError(GlyphspackError):
    """Unexpected failure inside a glyph worker task."""

    def __init__(self, glyph_name: str, reason: str) -> None:
        self.glyph_name = glyph_name
        self.reason = reason
        super().__init__(f"Error processing glyph '{glyph_name}': {reason}")
