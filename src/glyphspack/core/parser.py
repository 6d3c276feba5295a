"""Text-preserving parser for the Glyphs property list dialect.

The parser is a single recursive-descent pass over one buffer. Besides the
structured value it records the offsets of every construct it consumes, so
each Slice can hand back the exact text it came from.

```
document := ws (dict | array) ws EOF
dict     := '{' ws (entry ws)* '}'
entry    := string ws '=' ws value ws ';'
array    := '(' ws (value ws (',' ws value ws)* (',' ws)?)? ')'
value    := dict | array | string
string   := quoted | unquoted
quoted   := '"' (escape | [^"\\])* '"'
unquoted := [alnum _ $ + / : . -]+
ws       := (whitespace | '//' comment | '/*' comment '*/')*
```

Escape sequences in quoted strings are skipped over but not decoded.
"""

from pathlib import Path

from glyphspack.domain import DictEntry, Root, Slice, ValueKind
from glyphspack.exceptions import PlistSyntaxError
from glyphspack.io.reader import read_text

UNQUOTED_PUNCTUATION = frozenset("_$+/:.-")


def is_unquoted_char(char: str) -> bool:
    """Return True if the character may appear in an unquoted string."""
    return char.isalnum() or char in UNQUOTED_PUNCTUATION


class PlistParser:
    """Recursive-descent parser over a single source buffer.

    Example:
        parser = PlistParser('{a = 1;}')
        root = parser.parse(Root.DICT)
        root.entries[0].code  # 'a = 1;'
    """

    def __init__(self, source: str, path: Path | None = None) -> None:
        self.source = source
        self.path = path
        self.pos = 0

    def parse(self, root: Root) -> Slice:
        """Parse the whole buffer as a document of the given root kind.

        Raises:
            PlistSyntaxError: If the buffer does not match the grammar
        """
        self._skip_whitespace()
        try:
            if root is Root.DICT:
                result = self._parse_dict()
            else:
                result = self._parse_array()
        except RecursionError:
            raise self._error("nesting too deep") from None
        self._skip_whitespace()
        if self.pos < len(self.source):
            raise self._error(f"unexpected {self._describe()} after {root.value}")
        return result

    # Errors

    def _error(self, reason: str, offset: int | None = None) -> PlistSyntaxError:
        if offset is None:
            offset = self.pos
        line = self.source.count("\n", 0, offset) + 1
        column = offset - (self.source.rfind("\n", 0, offset) + 1) + 1
        return PlistSyntaxError(reason, line, column, offset, self.path)

    def _describe(self) -> str:
        if self.pos >= len(self.source):
            return "end of input"
        return repr(self.source[self.pos])

    def _peek(self) -> str:
        return self.source[self.pos : self.pos + 1]

    def _expect(self, char: str, context: str) -> None:
        if self._peek() != char:
            raise self._error(f"expected '{char}' {context}, found {self._describe()}")
        self.pos += 1

    # Whitespace and comments

    def _skip_whitespace(self) -> None:
        source = self.source
        length = len(source)
        while self.pos < length:
            char = source[self.pos]
            if char.isspace():
                self.pos += 1
            elif source.startswith("//", self.pos):
                newline = source.find("\n", self.pos)
                self.pos = length if newline == -1 else newline + 1
            elif source.startswith("/*", self.pos):
                close = source.find("*/", self.pos + 2)
                if close == -1:
                    raise self._error("unterminated comment")
                self.pos = close + 2
            else:
                break

    # Values

    def _parse_value(self) -> Slice:
        char = self._peek()
        if char == "{":
            return self._parse_dict()
        if char == "(":
            return self._parse_array()
        if char == '"' or (char and is_unquoted_char(char)):
            return self._parse_string()
        raise self._error(f"expected value, found {self._describe()}")

    def _parse_dict(self) -> Slice:
        start = self.pos
        self._expect("{", "to open dictionary")
        entries: list[DictEntry] = []

        while True:
            self._skip_whitespace()
            if self._peek() == "}":
                break
            if not self._peek():
                raise self._error("unterminated dictionary", start)

            entry_start = self.pos
            key = self._parse_string()
            self._skip_whitespace()
            self._expect("=", f"after key {key.text!r}")
            self._skip_whitespace()
            value = self._parse_value()
            self._skip_whitespace()
            self._expect(";", f"after value of {key.text!r}")
            entries.append(
                DictEntry(
                    key=key.text,
                    value=value,
                    source=self.source,
                    start=entry_start,
                    end=self.pos,
                )
            )

        self.pos += 1
        body_start = entries[0].start if entries else start + 1
        body_end = entries[-1].end if entries else start + 1
        return Slice(
            kind=ValueKind.DICT,
            value=entries,
            source=self.source,
            start=start,
            end=self.pos,
            body_start=body_start,
            body_end=body_end,
        )

    def _parse_array(self) -> Slice:
        start = self.pos
        self._expect("(", "to open array")
        elements: list[Slice] = []

        self._skip_whitespace()
        while self._peek() != ")":
            if not self._peek():
                raise self._error("unterminated array", start)
            elements.append(self._parse_value())
            self._skip_whitespace()
            if self._peek() == ",":
                self.pos += 1
                self._skip_whitespace()
            elif not self._peek():
                raise self._error("unterminated array", start)
            elif self._peek() != ")":
                raise self._error(f"expected ',' or ')' in array, found {self._describe()}")

        self.pos += 1
        body_start = elements[0].start if elements else start + 1
        body_end = elements[-1].end if elements else start + 1
        return Slice(
            kind=ValueKind.ARRAY,
            value=elements,
            source=self.source,
            start=start,
            end=self.pos,
            body_start=body_start,
            body_end=body_end,
        )

    def _parse_string(self) -> Slice:
        if self._peek() == '"':
            return self._parse_quoted()

        start = self.pos
        source = self.source
        while self.pos < len(source) and is_unquoted_char(source[self.pos]):
            self.pos += 1
        if self.pos == start:
            raise self._error(f"expected string, found {self._describe()}")
        return Slice(
            kind=ValueKind.STRING,
            value=source[start : self.pos],
            source=source,
            start=start,
            end=self.pos,
        )

    def _parse_quoted(self) -> Slice:
        start = self.pos
        source = self.source
        self.pos += 1

        while True:
            if self.pos >= len(source):
                raise self._error("unterminated quoted string", start)
            char = source[self.pos]
            if char == "\\":
                # escaped character is skipped, not decoded
                self.pos += 2
            elif char == '"':
                break
            else:
                self.pos += 1

        self.pos += 1
        return Slice(
            kind=ValueKind.STRING,
            value=source[start + 1 : self.pos - 1],
            source=source,
            start=start,
            end=self.pos,
        )


def parse(root: Root, text: str, path: Path | None = None) -> Slice:
    """Parse a property list document.

    Args:
        root: Whether the document must be a dictionary or an array
        text: Complete document text
        path: File the text was read from, used in error messages

    Returns:
        Slice spanning the root value

    Raises:
        PlistSyntaxError: If the text does not match the grammar
    """
    return PlistParser(text, path).parse(root)


def parse_file(path: Path, root: Root) -> Slice:
    """Read and parse a property list file.

    Raises:
        FileReadError: If the file cannot be read
        PlistSyntaxError: If the file does not parse as the requested root
    """
    return parse(root, read_text(path), path)
