"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""


from rich.console import Console
from rich.table import Table
from rich.text import Text

from figletkit.domain import Font, GlyphDesign, Header

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]FigletKit[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, header: Header, glyph_count: int) -> None:
    """Print font header fields and glyph count.

    Args:
        font_path: Path to the font file
        header: Parsed font header
        glyph_count: Number of glyphs built from the file
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font_path, style="bold")
    line1.append(f" ({header.signature})")
    console.print(line1)
    console.print(
        f"  {glyph_count:,} glyphs {SYM_DOT} height {header.height} "
        f"{SYM_DOT} baseline {header.baseline}"
    )

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="dim")
    table.add_column()
    table.add_row("hard blank", repr(header.hard_blank))
    table.add_row("max length", str(header.max_length))
    table.add_row("old layout", str(header.old_layout))
    table.add_row("full layout", str(header.effective_full_layout))
    table.add_row("comment lines", str(header.comment_lines))
    if header.print_direction is not None:
        table.add_row("print direction", str(header.print_direction))
    if header.codetag_count is not None:
        table.add_row("code tags", str(header.codetag_count))
    console.print(table)


def print_glyph(char: str, design: GlyphDesign) -> None:
    """Print one glyph design under a caption.

    Args:
        char: Character the design belongs to
        design: Rows to print
    """
    # Glyph rows and characters may contain [ and ], print them without markup
    caption = Text(f"{char!r} {SYM_DOT} U+{ord(char):04X} {SYM_DOT} {design.width} wide")
    caption.stylize("dim")
    console.print()
    console.print(caption)
    console.print(Text(design.render()))


def print_font_table(fonts: list[Font]) -> None:
    """Print loaded fonts as a table.

    Args:
        fonts: Fonts to list
    """
    table = Table(show_edge=False)
    table.add_column("Font", style="bold")
    table.add_column("Height", justify="right")
    table.add_column("Glyphs", justify="right")
    for font in fonts:
        table.add_row(Text(font.name or "?"), str(font.height), str(len(font)))
    console.print(table)


def print_skipped(errors: list[tuple[str, str]], verbose: bool) -> None:
    """Print fonts skipped during a bulk load.

    Args:
        errors: (source, message) pairs
        verbose: Whether to show each message
    """
    if not errors:
        return
    console.print(f"\n  [yellow]{len(errors)}[/yellow] fonts skipped")
    if verbose:
        for source, message in errors:
            line = Text(f"  {SYM_ERR} ")
            line.append(source)
            line.append(f" {SYM_DOT} {message}", style="dim")
            console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    # Messages carry paths and font names, print them without markup
    line = Text("\n")
    line.append(f"{SYM_ERR} Error:", style="bold red")
    line.append(f" {message}")
    console.print(line)
    if details:
        console.print(Text(f"  {details}"))
