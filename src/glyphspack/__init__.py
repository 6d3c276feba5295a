"""glyphspack - Convert between .glyphs files and .glyphspackage directories.

glyphspack is a CLI tool that converts a Glyphs font source between its
standalone flavor (one .glyphs file) and its package flavor (a
.glyphspackage directory with one file per glyph). Values are copied with
their original source text, so converting back and forth keeps the data
byte for byte.

Example:
    $ glyphspack MyFont.glyphs

This will create MyFont.glyphspackage next to the input. Running glyphspack
on the package directory converts it back into MyFont.glyphs.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
