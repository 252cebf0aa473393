"""Font file I/O layer for figletkit.

This module handles reading FIGlet font files and splitting them into
header, comments and glyph line table.

Key responsibilities:
- Read .flf files from disk or bytes
- Parse the header grammar
- Separate comment lines from the glyph line table

Key classes:
- FigletFileReader: Load a font file from disk
"""

from figletkit.io.reader import (
    FigletFileReader,
    parse_figlet_text,
    parse_header,
    read_figlet_bytes,
)

__all__ = [
    "FigletFileReader",
    "parse_figlet_text",
    "parse_header",
    "read_figlet_bytes",
]
