"""Writers for standalone files and package directories.

Outputs are built in a temporary sibling of the destination and moved into
place only once every file has been written, so a failed conversion never
leaves a partial output behind.
"""

import os
import shutil
import tempfile
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

from glyphspack.config import PackageLayout
from glyphspack.exceptions import FileWriteError, OutputExistsError

# mkdtemp and mkstemp create private entries; published outputs get the usual modes
DIRECTORY_MODE = 0o755
FILE_MODE = 0o644


def format_dict_document(codes: Sequence[str]) -> str:
    """Format entry codes as a dictionary document, one entry per line."""
    return "{\n" + "".join(f"{code}\n" for code in codes) + "}\n"


def format_array_document(codes: Sequence[str]) -> str:
    """Format element codes as an array document, one element per line."""
    return "(\n" + ",\n".join(codes) + ("\n" if codes else "") + ")"


def format_array_entry(key: str, body: str) -> str:
    """Format a dictionary entry whose value is an array with the given body.

    Used when an entry is renamed: the array body is kept verbatim and only
    the key and the enclosing parentheses are written anew.
    """
    return f"{key} = (\n{body}\n);"


def write_text(path: Path, text: str) -> None:
    """Write a UTF-8 text file without newline translation.

    Raises:
        FileWriteError: If the file cannot be created or written
    """
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        raise FileWriteError(path, e.strerror or str(e)) from e


def _remove_path(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def check_output(output_path: Path, overwrite: bool) -> None:
    """Raise OutputExistsError if output_path exists and overwrite is False."""
    if not overwrite and (output_path.exists() or output_path.is_symlink()):
        raise OutputExistsError(output_path)


def _publish(staged: Path, output_path: Path, overwrite: bool) -> None:
    check_output(output_path, overwrite)
    try:
        if output_path.exists() or output_path.is_symlink():
            _remove_path(output_path)
        os.replace(staged, output_path)
    except OSError as e:
        raise FileWriteError(output_path, e.strerror or str(e)) from e


@contextmanager
def staged_directory(output_path: Path, overwrite: bool = False) -> Iterator[Path]:
    """Yield a temporary directory that replaces output_path on success.

    Raises:
        OutputExistsError: If output_path exists and overwrite is False
        FileWriteError: If the staging directory cannot be created or moved
    """
    check_output(output_path, overwrite)
    try:
        staged = Path(
            tempfile.mkdtemp(prefix=f".{output_path.name}.", dir=output_path.parent)
        )
    except OSError as e:
        raise FileWriteError(output_path.parent, e.strerror or str(e)) from e
    staged.chmod(DIRECTORY_MODE)

    try:
        yield staged
        _publish(staged, output_path, overwrite)
    finally:
        if staged.exists():
            shutil.rmtree(staged, ignore_errors=True)


@contextmanager
def staged_file(output_path: Path, overwrite: bool = False) -> Iterator[Path]:
    """Yield a temporary file path that replaces output_path on success.

    Raises:
        OutputExistsError: If output_path exists and overwrite is False
        FileWriteError: If the staging file cannot be created or moved
    """
    check_output(output_path, overwrite)
    try:
        fd, name = tempfile.mkstemp(prefix=f".{output_path.name}.", dir=output_path.parent)
    except OSError as e:
        raise FileWriteError(output_path.parent, e.strerror or str(e)) from e
    os.close(fd)
    staged = Path(name)
    staged.chmod(FILE_MODE)

    try:
        yield staged
        _publish(staged, output_path, overwrite)
    finally:
        if staged.exists():
            staged.unlink()


class PackageWriter:
    """Writes the files of a package directory.

    Example:
        writer = PackageWriter(Path("Font.glyphspackage"))
        writer.create_directories()
        writer.write_fontinfo(["familyName = Font;"])
        writer.write_order(["A", "B"])
        writer.write_glyph("A_.glyph", "{\\nglyphname = A;\\n}")
    """

    def __init__(self, package_path: Path, layout: PackageLayout | None = None) -> None:
        """Initialize the package writer.

        Args:
            package_path: Directory to write into
            layout: File names of the package (defaults to the Glyphs layout)
        """
        self._package_path = package_path
        self._layout = layout or PackageLayout()

    @property
    def glyphs_path(self) -> Path:
        return self._package_path / self._layout.glyphs_dir

    def create_directories(self) -> None:
        """Create the package directory and its glyphs subdirectory."""
        try:
            self.glyphs_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileWriteError(self.glyphs_path, e.strerror or str(e)) from e

    def write_fontinfo(self, entry_codes: Sequence[str]) -> Path:
        """Write the font metadata dictionary."""
        path = self._package_path / self._layout.fontinfo_file
        write_text(path, format_dict_document(entry_codes))
        return path

    def write_order(self, name_codes: Sequence[str]) -> Path:
        """Write the glyph order array."""
        path = self._package_path / self._layout.order_file
        write_text(path, format_array_document(name_codes))
        return path

    def write_ui_state(self, entry_codes: Sequence[str]) -> Path:
        """Write the UI state dictionary."""
        path = self._package_path / self._layout.ui_state_file
        write_text(path, format_dict_document(entry_codes))
        return path

    def write_glyph(self, file_name: str, code: str) -> Path:
        """Write one glyph dictionary to its own file in the glyphs directory."""
        path = self.glyphs_path / file_name
        write_text(path, f"{code}\n")
        return path


class StandaloneWriter:
    """Writes a standalone file from entry codes."""

    def __init__(self, output_path: Path) -> None:
        self._output_path = output_path

    def write(self, entry_codes: Sequence[str]) -> Path:
        write_text(self._output_path, format_dict_document(entry_codes))
        return self._output_path


def get_package_path(input_path: Path, layout: PackageLayout | None = None) -> Path:
    """Generate the default package path for a standalone file.

    Converts: Font.glyphs -> Font.glyphspackage
    """
    layout = layout or PackageLayout()
    return input_path.with_suffix(layout.package_suffix)


def get_standalone_path(input_path: Path, layout: PackageLayout | None = None) -> Path:
    """Generate the default standalone path for a package directory.

    Converts: Font.glyphspackage -> Font.glyphs
    """
    layout = layout or PackageLayout()
    return input_path.with_suffix(layout.standalone_suffix)
