"""CLI application entry point for figletkit.

This module provides the main CLI interface using Typer.
"""

import random as random_module
from pathlib import Path
from typing import Annotated

import typer
from rich.text import Text

from figletkit import __version__
from figletkit.cli.output import (
    SYM_OK,
    console,
    print_error,
    print_font_info,
    print_font_table,
    print_glyph,
    print_header,
    print_skipped,
    print_step,
)
from figletkit.config import FigletKitSettings, LoggingConfig, ParserConfig
from figletkit.core import (
    FontLibrary,
    build_font,
    bundled_font_names,
    random_bundled_font,
    read_bundled_contents,
)
from figletkit.domain import FileContents, Font
from figletkit.exceptions import FigletKitError, GlyphNotFoundError
from figletkit.io import FigletFileReader
from figletkit.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="figletkit",
    help="Inspect FIGlet font files and the glyphs they define.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]FigletKit[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Fail on a trailing partial glyph block instead of discarding it",
        ),
    ] = False,
    encoding: Annotated[
        str,
        typer.Option(
            "--encoding",
            help="Text encoding of font files",
        ),
    ] = "utf-8",
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
    """Inspect FIGlet font files and the glyphs they define."""
    settings = FigletKitSettings(
        parser=ParserConfig(strict=strict, encoding=encoding),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )
    ctx.obj = settings


def _load(font: str, settings: FigletKitSettings) -> tuple[FileContents, Font]:
    """Load a font by path, falling back to a bundled font name.

    Args:
        font: Path to a .flf file, or the name of a bundled font
        settings: Application settings

    Returns:
        Parsed file contents and the built font

    Raises:
        FigletKitError: If the font cannot be read or parsed
    """
    path = Path(font)
    if not path.exists() and font in bundled_font_names():
        contents = read_bundled_contents(font, settings.parser.encoding)
    else:
        contents = FigletFileReader(path, encoding=settings.parser.encoding).load()
    return contents, build_font(contents, settings.parser)


@app.command()
def info(
    ctx: typer.Context,
    font: Annotated[
        str,
        typer.Argument(
            help="Path to a .flf font file, or a bundled font name",
            show_default=False,
        ),
    ],
    comments: Annotated[
        bool,
        typer.Option(
            "--comments",
            "-c",
            help="Also print the font's comment lines",
        ),
    ] = False,
) -> None:
    """Show a font's header fields and glyph count."""
    settings: FigletKitSettings = ctx.obj
    print_header(__version__)

    try:
        contents, built = _load(font, settings)
    except FigletKitError as e:
        print_error(f"Could not load font: {e}")
        raise typer.Exit(code=1)

    print_step("Font")
    print_font_info(font, contents.header, len(built))

    if contents.trailing_line_count:
        console.print(
            f"  [yellow]{contents.trailing_line_count}[/yellow] trailing lines discarded"
        )

    if comments and contents.comments:
        print_step("Comments")
        for line in contents.comments:
            console.print(f"  {line}", markup=False, highlight=False)


@app.command()
def show(
    ctx: typer.Context,
    font: Annotated[
        str,
        typer.Argument(
            help="Path to a .flf font file, or a bundled font name",
            show_default=False,
        ),
    ],
    chars: Annotated[
        str,
        typer.Argument(
            help="Characters whose glyphs to print",
            show_default=False,
        ),
    ],
) -> None:
    """Print the glyph design of each character, one below the other."""
    settings: FigletKitSettings = ctx.obj

    try:
        _, built = _load(font, settings)
    except FigletKitError as e:
        print_error(f"Could not load font: {e}")
        raise typer.Exit(code=1)

    missing = []
    for char in chars:
        try:
            print_glyph(char, built.get_glyph(char))
        except GlyphNotFoundError:
            missing.append(char)

    if missing:
        print_error(
            f"{len(missing)} characters have no glyph",
            details=", ".join(repr(char) for char in missing),
        )
        raise typer.Exit(code=1)


@app.command("list")
def list_fonts(
    ctx: typer.Context,
    directory: Annotated[
        Path,
        typer.Argument(
            help="Directory to search for .flf files",
            show_default=False,
        ),
    ],
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of loader threads (default: auto)",
            min=1,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show why fonts were skipped",
        ),
    ] = False,
) -> None:
    """List the loadable fonts in a directory."""
    settings: FigletKitSettings = ctx.obj
    library = FontLibrary(directory, settings.parser, settings.library)

    try:
        fonts = library.load_all(max_workers=workers)
    except FigletKitError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not fonts:
        console.print(Text(f"\nNo loadable fonts in {directory}"))
    else:
        print_font_table(fonts)
    print_skipped(library.stats.errors, verbose)


@app.command()
def random(
    ctx: typer.Context,
    directory: Annotated[
        Path | None,
        typer.Argument(
            help="Directory to pick from (default: bundled fonts)",
            show_default=False,
        ),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option(
            "--seed",
            help="Seed for a repeatable pick",
        ),
    ] = None,
    sample: Annotated[
        str | None,
        typer.Option(
            "--sample",
            "-s",
            help="Characters to print with the picked font",
        ),
    ] = None,
) -> None:
    """Pick a font at random and print its name."""
    settings: FigletKitSettings = ctx.obj
    rng = random_module.Random(seed)

    try:
        if directory is None:
            picked = random_bundled_font(rng)
        else:
            picked = FontLibrary(directory, settings.parser, settings.library).random_font(rng)
    except FigletKitError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if picked is None:
        print_error("No loadable fonts found")
        raise typer.Exit(code=1)

    line = Text(SYM_OK, style="bold green")
    line.append(f" {picked.name}")
    console.print(line)
    for char in sample or "":
        if char in picked:
            print_glyph(char, picked.get_glyph(char))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
