"""Readers for standalone files and package directories.

All file system errors are converted to FileReadError carrying the offending
path.
"""

from pathlib import Path

from glyphspack.config import PackageLayout
from glyphspack.exceptions import FileReadError


def read_text(path: Path) -> str:
    """Read a UTF-8 text file without newline translation.

    Raises:
        FileReadError: If the file is missing, unreadable or not UTF-8
    """
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except OSError as e:
        raise FileReadError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise FileReadError(path, f"not valid UTF-8 ({e.reason})") from e


class PackageReader:
    """Reads the files of a package directory.

    Example:
        reader = PackageReader(Path("Font.glyphspackage"))
        fontinfo = read_text(reader.fontinfo_path)
        for path in reader.list_glyph_files():
            text = read_text(path)
    """

    def __init__(self, package_path: Path, layout: PackageLayout | None = None) -> None:
        """Initialize the package reader.

        Args:
            package_path: Path to the package directory
            layout: File names of the package (defaults to the Glyphs layout)
        """
        self._package_path = package_path
        self._layout = layout or PackageLayout()

    @property
    def fontinfo_path(self) -> Path:
        return self._package_path / self._layout.fontinfo_file

    @property
    def order_path(self) -> Path:
        return self._package_path / self._layout.order_file

    @property
    def ui_state_path(self) -> Path:
        return self._package_path / self._layout.ui_state_file

    @property
    def glyphs_path(self) -> Path:
        return self._package_path / self._layout.glyphs_dir

    def has_order(self) -> bool:
        """Return True if the package has a glyph order file."""
        return self.order_path.is_file()

    def has_ui_state(self) -> bool:
        """Return True if the package has a UI state file."""
        return self.ui_state_path.is_file()

    def list_glyph_files(self) -> list[Path]:
        """List glyph files in the glyphs directory, sorted by file name.

        Raises:
            FileReadError: If the glyphs directory cannot be listed
        """
        try:
            children = list(self.glyphs_path.iterdir())
        except OSError as e:
            raise FileReadError(self.glyphs_path, e.strerror or str(e)) from e

        return sorted(
            (
                path
                for path in children
                if path.suffix == self._layout.glyph_suffix and path.is_file()
            ),
            key=lambda path: path.name,
        )
