"""Slice tree produced by the property list parser.

A Slice pairs a parsed value with the exact text it was parsed from. All
slices of one parse share the same source string and only store offsets into
it, so ``code`` is always the verbatim span that produced ``value``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class Root(str, Enum):
    """Kind of value expected at the top of a document."""

    DICT = "dict"
    ARRAY = "array"


class ValueKind(str, Enum):
    """Tag of a parsed value."""

    DICT = "dict"
    ARRAY = "array"
    STRING = "string"


@dataclass(frozen=True)
class DictEntry:
    """A single ``key = value;`` entry of a dictionary.

    Attributes:
        key: Entry key with quotes stripped
        value: Parsed value of the entry
        source: Buffer the entry was parsed from
        start: Offset of the first character of the key
        end: Offset just past the terminating semicolon
    """

    key: str
    value: "Slice"
    source: str = field(repr=False)
    start: int
    end: int

    @property
    def code(self) -> str:
        """Verbatim text of the whole entry."""
        return self.source[self.start : self.end]


Value = Union[list[DictEntry], list["Slice"], str]


@dataclass(frozen=True)
class Slice:
    """A parsed value together with its source span.

    For dictionaries and arrays, ``body_start``/``body_end`` delimit the text
    from the first child to the end of the last child, without the enclosing
    delimiters or a trailing comma.

    Attributes:
        kind: Which variant ``value`` holds
        value: Entries, elements, or string content
        source: Buffer the slice was parsed from
        start: Offset of the first character of the value
        end: Offset just past the value
        body_start: Start of the container body (containers only)
        body_end: End of the container body (containers only)
    """

    kind: ValueKind
    value: Value
    source: str = field(repr=False)
    start: int
    end: int
    body_start: int | None = None
    body_end: int | None = None

    @property
    def code(self) -> str:
        """Verbatim text of the value, delimiters included."""
        return self.source[self.start : self.end]

    @property
    def body(self) -> str:
        """Verbatim text between the delimiters of a container.

        Raises:
            TypeError: If the slice is a string
        """
        if self.body_start is None or self.body_end is None:
            raise TypeError(f"{self.kind.value} slice has no body")
        return self.source[self.body_start : self.body_end]

    @property
    def is_dict(self) -> bool:
        return self.kind is ValueKind.DICT

    @property
    def is_array(self) -> bool:
        return self.kind is ValueKind.ARRAY

    @property
    def is_string(self) -> bool:
        return self.kind is ValueKind.STRING

    @property
    def entries(self) -> list[DictEntry]:
        """Entries of a dictionary slice, in source order."""
        if not self.is_dict:
            raise TypeError(f"expected dict, got {self.kind.value}")
        return self.value  # type: ignore[return-value]

    @property
    def elements(self) -> list["Slice"]:
        """Elements of an array slice, in source order."""
        if not self.is_array:
            raise TypeError(f"expected array, got {self.kind.value}")
        return self.value  # type: ignore[return-value]

    @property
    def text(self) -> str:
        """Content of a string slice, quotes stripped, escapes untouched."""
        if not self.is_string:
            raise TypeError(f"expected string, got {self.kind.value}")
        return self.value  # type: ignore[return-value]

    def find_all(self, key: str) -> list[DictEntry]:
        """Return every entry of a dictionary slice with the given key."""
        return [entry for entry in self.entries if entry.key == key]

    def get(self, key: str) -> "Slice | None":
        """Return the value of the first entry with the given key."""
        for entry in self.entries:
            if entry.key == key:
                return entry.value
        return None
