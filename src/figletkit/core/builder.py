"""Glyph building from a parsed FIGlet file.

This module turns the glyph line table of a FileContents into a Font.
Lines are grouped into blocks of `height` rows, each block becoming the
design of the next character, starting at the space character.

Every row ends with a terminator marker. Inner rows carry one marker and
the last row of a block carries two; the marker character itself is never
checked, only stripped by count.
"""

from pathlib import Path

import structlog

from figletkit.config import ParserConfig
from figletkit.domain import FileContents, Font, GlyphDesign
from figletkit.exceptions import FigletKitError, TruncatedFontError
from figletkit.io.reader import UNKNOWN_SOURCE, FigletFileReader, parse_figlet_text

logger = structlog.get_logger(__name__)

INNER_ROW_MARKERS = 1
LAST_ROW_MARKERS = 2
MAX_CODE_POINT = 0x10FFFF


def strip_row(line: str, is_last_row: bool, hard_blank: str) -> str:
    """Remove terminator markers from a row and replace hard blanks.

    Args:
        line: Raw row from the line table
        is_last_row: Whether the row closes its glyph block
        hard_blank: The font's hard blank character

    Returns:
        Printable row
    """
    count = LAST_ROW_MARKERS if is_last_row else INNER_ROW_MARKERS
    row = line[:-count] if len(line) > count else ""
    return row.replace(hard_blank, " ")


class FontBuilder:
    """Builds a Font from parsed file contents.

    Example:
        contents = FigletFileReader(Path("standard.flf")).load()
        font = FontBuilder().build(contents)
        print(font.get_glyph("A").render())
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        """Initialize the builder.

        Args:
            config: Parser settings (defaults if None)
        """
        self.config = config or ParserConfig()

    def build(self, contents: FileContents) -> Font:
        """Slice the line table into glyphs.

        Args:
            contents: Parsed font file

        Returns:
            Font with one glyph per complete block, up to U+10FFFF

        Raises:
            TruncatedFontError: If the line table ends with a partial block
                and strict mode is enabled
        """
        header = contents.header
        source = contents.source or UNKNOWN_SOURCE

        if self.config.strict and contents.trailing_line_count:
            raise TruncatedFontError(source, len(contents.lines), header.height)

        font = Font(height=header.height, figlet_file=contents)
        if contents.source is not None:
            font.name = Path(contents.source).stem

        next_code_point = self.config.first_code_point
        rows: list[str] = []

        for line in contents.lines:
            is_last_row = len(rows) >= header.height - 1
            rows.append(strip_row(line, is_last_row, header.hard_blank))

            if len(rows) == header.height:
                if next_code_point > MAX_CODE_POINT:
                    break
                font.append_glyph(chr(next_code_point), GlyphDesign(lines=tuple(rows)))
                next_code_point += 1
                rows = []

        if next_code_point > MAX_CODE_POINT and len(font) < contents.glyph_block_count:
            logger.warning(
                "Discarded glyph blocks past the last code point",
                source=source,
                blocks=contents.glyph_block_count - len(font),
            )
        elif rows:
            logger.warning(
                "Discarded partial glyph block",
                source=source,
                lines=len(rows),
                height=header.height,
            )

        logger.debug("Font built", source=source, glyphs=len(font), height=font.height)
        return font


def build_font(contents: FileContents, config: ParserConfig | None = None) -> Font:
    """Build a Font from parsed file contents.

    Args:
        contents: Parsed font file
        config: Parser settings (defaults if None)

    Returns:
        Fully populated Font
    """
    return FontBuilder(config).build(contents)


def load_font(font_path: Path | str, config: ParserConfig | None = None) -> Font | None:
    """Load a font file from disk.

    Args:
        font_path: Path to the .flf file
        config: Parser settings (defaults if None)

    Returns:
        The Font, or None if the file cannot be read or parsed
    """
    config = config or ParserConfig()
    try:
        contents = FigletFileReader(Path(font_path), encoding=config.encoding).load()
        return build_font(contents, config)
    except FigletKitError as e:
        logger.warning("Font not loaded", source=str(font_path), error=str(e))
        return None


def parse_font(
    text: str, source: str | None = None, config: ParserConfig | None = None
) -> Font | None:
    """Parse font text already in memory.

    Args:
        text: Entire content of a font file
        source: Where the text came from
        config: Parser settings (defaults if None)

    Returns:
        The Font, or None if the text cannot be parsed
    """
    try:
        return build_font(parse_figlet_text(text, source), config)
    except FigletKitError as e:
        logger.warning("Font not parsed", source=source or UNKNOWN_SOURCE, error=str(e))
        return None
