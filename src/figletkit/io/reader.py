"""Font file reader for FIGlet fonts.

This module parses the raw text of a FIGlet font file into a FileContents:
the header, the comment lines, and the glyph line table. The line table is
kept verbatim; turning it into glyphs is FontBuilder's job.
"""

import re
from pathlib import Path

import structlog

from figletkit.domain.header import FileContents, Header
from figletkit.exceptions import MalformedHeaderError, ResourceNotFoundError

logger = structlog.get_logger(__name__)

SIGNATURE_RE = re.compile(r"^flf2.$")
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

# height baseline max_length old_layout comment_lines
REQUIRED_FIELDS = 5
OPTIONAL_FIELDS = ("print_direction", "full_layout", "codetag_count")

UNKNOWN_SOURCE = "<text>"
BYTE_ORDER_MARK = "\ufeff"


def _parse_int(value: str, field_name: str, source: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise MalformedHeaderError(
            source, f"{field_name} is not an integer: {value!r}"
        ) from None


def parse_header(line: str, source: str = UNKNOWN_SOURCE) -> Header:
    """Parse a FIGlet header line.

    The first token is the signature ("flf2" plus one character) with the
    hard blank character glued to its end, followed by whitespace-separated
    numeric fields.

    Args:
        line: The first line of the font file
        source: Label used in error messages

    Returns:
        Parsed Header

    Raises:
        MalformedHeaderError: If the line does not follow the header grammar
    """
    tokens = line.split()
    if not tokens:
        raise MalformedHeaderError(source, "header line is empty")

    first = tokens[0]
    signature = first[:5]
    if not SIGNATURE_RE.match(signature):
        raise MalformedHeaderError(source, f"bad signature {first!r}")
    if len(first) != 6:
        raise MalformedHeaderError(
            source, f"expected one hard blank character after {signature!r}"
        )
    hard_blank = first[5]

    fields = tokens[1:]
    if len(fields) < REQUIRED_FIELDS:
        raise MalformedHeaderError(
            source,
            f"expected at least {REQUIRED_FIELDS} numeric fields, got {len(fields)}",
        )

    height, baseline, max_length, old_layout, comment_lines = (
        _parse_int(value, name, source)
        for value, name in zip(
            fields[:REQUIRED_FIELDS],
            ("height", "baseline", "max_length", "old_layout", "comment_lines"),
        )
    )
    if height < 1:
        raise MalformedHeaderError(source, f"height must be positive, got {height}")
    if comment_lines < 0:
        raise MalformedHeaderError(
            source, f"comment_lines must not be negative, got {comment_lines}"
        )

    optional = {
        name: _parse_int(value, name, source)
        for name, value in zip(OPTIONAL_FIELDS, fields[REQUIRED_FIELDS:])
    }

    return Header(
        signature=signature,
        hard_blank=hard_blank,
        height=height,
        baseline=baseline,
        max_length=max_length,
        old_layout=old_layout,
        comment_lines=comment_lines,
        **optional,
    )


def parse_figlet_text(text: str, source: str | None = None) -> FileContents:
    """Split FIGlet font text into header, comments and glyph lines.

    Args:
        text: Entire content of a font file
        source: Where the text came from, kept on the result

    Returns:
        FileContents with the glyph line table in file order

    Raises:
        MalformedHeaderError: If the header is missing or invalid, or the
            file ends inside the comment section
    """
    label = source or UNKNOWN_SOURCE
    lines = LINE_BREAK_RE.split(text.removeprefix(BYTE_ORDER_MARK))
    if lines[-1] == "":
        lines.pop()
    if not lines:
        raise MalformedHeaderError(label, "file is empty")

    header = parse_header(lines[0], label)
    body = lines[1:]
    if len(body) < header.comment_lines:
        raise MalformedHeaderError(
            label,
            f"header announces {header.comment_lines} comment lines, "
            f"file has {len(body)} lines after the header",
        )

    contents = FileContents(
        header=header,
        lines=tuple(body[header.comment_lines :]),
        comments=tuple(body[: header.comment_lines]),
        source=source,
    )
    logger.debug(
        "Header parsed",
        source=label,
        height=header.height,
        hard_blank=header.hard_blank,
        glyph_lines=len(contents.lines),
    )
    return contents


def read_figlet_bytes(
    data: bytes, source: str | None = None, encoding: str = "utf-8"
) -> FileContents:
    """Decode raw font bytes and parse them.

    Args:
        data: Raw file content
        source: Where the bytes came from
        encoding: Text encoding of the font

    Returns:
        Parsed FileContents

    Raises:
        ResourceNotFoundError: If the bytes cannot be decoded
        MalformedHeaderError: If the header is invalid
    """
    label = source or UNKNOWN_SOURCE
    try:
        text = data.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise ResourceNotFoundError(label, f"cannot decode as {encoding}: {e}") from e
    return parse_figlet_text(text, source)


class FigletFileReader:
    """Loads a FIGlet font file from disk.

    Example:
        reader = FigletFileReader(Path("standard.flf"))
        reader.load()
        print(reader.header.height)
    """

    def __init__(self, font_path: Path, encoding: str = "utf-8") -> None:
        """Initialize the file reader.

        Args:
            font_path: Path to the .flf file
            encoding: Text encoding of the file
        """
        self._font_path = Path(font_path)
        self._encoding = encoding
        self._contents: FileContents | None = None

    @property
    def source(self) -> str:
        """Path of the font file as a string."""
        return str(self._font_path)

    def load(self) -> FileContents:
        """Read and parse the font file.

        Returns:
            Parsed FileContents

        Raises:
            ResourceNotFoundError: If the file is missing or unreadable
            MalformedHeaderError: If the header is invalid
        """
        if not self._font_path.exists():
            raise ResourceNotFoundError(self.source, "file does not exist")
        if not self._font_path.is_file():
            raise ResourceNotFoundError(self.source, "not a regular file")

        try:
            data = self._font_path.read_bytes()
        except OSError as e:
            raise ResourceNotFoundError(self.source, str(e)) from e

        self._contents = read_figlet_bytes(data, self.source, self._encoding)
        return self._contents

    @property
    def contents(self) -> FileContents:
        """Parsed file contents.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._contents is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._contents

    @property
    def header(self) -> Header:
        """Parsed header.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        return self.contents.header

    def close(self) -> None:
        """Drop the parsed contents."""
        self._contents = None

    def __enter__(self) -> "FigletFileReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
