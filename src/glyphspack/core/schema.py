"""Shape checks for Glyphs property lists.

The parser accepts any nesting of dictionaries, arrays and strings. These
helpers enforce the shape the conversion relies on and raise SchemaError
naming the offending file and location.
"""

from pathlib import Path

from glyphspack.domain import DictEntry, Slice
from glyphspack.exceptions import SchemaError


def require_array(value: Slice, path: Path, what: str) -> Slice:
    """Return value if it is an array, else raise SchemaError."""
    if not value.is_array:
        raise SchemaError(path, f"{what} must be an array, found {value.kind.value}")
    return value


def single_entry(document: Slice, key: str, path: Path) -> DictEntry | None:
    """Return the only entry with the given key, or None if there is none.

    Raises:
        SchemaError: If the key occurs more than once
    """
    entries = document.find_all(key)
    if len(entries) > 1:
        raise SchemaError(path, f"duplicate '{key}' entry")
    return entries[0] if entries else None


def glyph_name_slice(glyph: Slice, path: Path, key: str, location: str) -> Slice:
    """Return the glyph name string slice of a glyph dictionary.

    Args:
        glyph: Glyph value, expected to be a dictionary
        path: File the glyph was read from
        key: Key holding the glyph name
        location: Where the glyph sits in the file, for messages

    Raises:
        SchemaError: If the glyph is not a dictionary, has no glyph name,
            has more than one, or its glyph name is not a string
    """
    if not glyph.is_dict:
        raise SchemaError(path, f"{location} must be a dictionary, found {glyph.kind.value}")

    names = glyph.find_all(key)
    if not names:
        raise SchemaError(path, f"missing {key} in {location}")
    if len(names) > 1:
        raise SchemaError(path, f"duplicate {key} in {location}")

    name = names[0].value
    if not name.is_string:
        raise SchemaError(
            path, f"non-string {key} value in {location}, found {name.kind.value}"
        )
    return name


def string_elements(array: Slice, path: Path, what: str) -> list[str]:
    """Return the contents of an array of strings.

    Raises:
        SchemaError: If an element is not a string
    """
    names: list[str] = []
    for index, element in enumerate(array.elements):
        if not element.is_string:
            raise SchemaError(
                path, f"non-string {what} at index {index}, found {element.kind.value}"
            )
        names.append(element.text)
    return names
