"""CLI application entry point for glyphspack.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from glyphspack import __version__
from glyphspack.cli.output import (
    console,
    create_progress,
    print_error,
    print_header,
    print_step,
    print_success,
)
from glyphspack.config import GlyphspackSettings, LoggingConfig, ProcessingConfig
from glyphspack.core import Converter, Operation, detect_operation
from glyphspack.exceptions import (
    FileAccessError,
    GlyphspackError,
    OutputExistsError,
    PlistSyntaxError,
    SchemaError,
)
from glyphspack.utils import ConversionStats, configure_logging

# Create the Typer app
app = typer.Typer(
    name="glyphspack",
    help=(
        "Convert between .glyphs and .glyphspackage files. The conversion direction "
        "is detected from whether FILE is a directory or not."
    ),
    epilog=(
        "See the Glyphs Handbook <https://glyphsapp.com/learn> for details on the "
        "standalone and the package format flavors."
    ),
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]glyphspack[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def convert(
    input_path: Annotated[
        Path,
        typer.Argument(
            metavar="FILE",
            help="The input file (.glyphs) or package directory (.glyphspackage)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--out",
            "-o",
            metavar="OUTFILE",
            help="The output file (default: input with the other extension)",
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrites output file if it already exists",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppresses log messages",
        ),
    ] = False,
    print_path: Annotated[
        bool,
        typer.Option(
            "--print-path",
            "-p",
            help="Prints the path of the exported file to stdout",
        ),
    ] = False,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers for glyph files (default: auto)",
            min=1,
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert between .glyphs and .glyphspackage files.

    Example:
        glyphspack MyFont.glyphs

    This will create MyFont.glyphspackage. Running glyphspack on
    MyFont.glyphspackage converts it back into MyFont.glyphs.
    """
    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    settings = GlyphspackSettings(
        processing=ProcessingConfig(
            max_workers=workers,
            overwrite=force,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level,
        ),
    )

    # Validate input path exists
    try:
        operation = detect_operation(input_path)
    except FileAccessError:
        print_error(f"<FILE> does not exist: {input_path}")
        raise typer.Exit(code=1)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    converter = Converter(settings, logger)

    output_path = output
    if output_path is None:
        # derive from the path as given; "." and similar have no name to swap
        source = input_path if input_path.name else input_path.resolve()
        output_path = converter.default_output_path(source, operation)

    if not force and output_path.exists():
        print_error(
            f"<OUTFILE> already exists: {output_path}",
            details="Use --force to overwrite it.",
        )
        raise typer.Exit(code=1)

    if print_path:
        typer.echo(str(output_path), nl=False)

    if not quiet:
        print_header(__version__)
        verb = "Packing" if operation is Operation.PACK else "Unpacking"
        print_step(verb, str(input_path), str(output_path))

    try:
        stats = _run(converter, input_path, output_path, operation, quiet)
    except OutputExistsError as e:
        print_error(str(e), details="Use --force to overwrite it.")
        raise typer.Exit(code=1)
    except PlistSyntaxError as e:
        print_error(f"Could not parse property list: {e}")
        raise typer.Exit(code=1)
    except SchemaError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except FileAccessError as e:
        print_error(f"{e.reason}: {e.path}")
        raise typer.Exit(code=1)
    except GlyphspackError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_success(
            output_path=str(output_path),
            total_time_s=stats.duration_seconds,
            glyphs=stats.glyph_count,
            files_written=stats.files_written,
            orphans=len(stats.orphan_glyph_files),
        )


def _run(
    converter: Converter,
    input_path: Path,
    output_path: Path,
    operation: Operation,
    quiet: bool,
) -> ConversionStats:
    """Run the conversion, with a progress bar unless quiet."""
    if quiet:
        return converter.convert(input_path, output_path, operation)

    with create_progress() as progress:
        task_id = progress.add_task("Glyphs", total=None)

        def update_progress(completed: int, total: int, *_: object) -> None:
            progress.update(task_id, completed=completed, total=total)

        return converter.convert(
            input_path,
            output_path,
            operation,
            progress_callback=update_progress,
        )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
