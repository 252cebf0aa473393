"""Domain models for figletkit.

This module contains the domain models representing parsed font files,
glyph designs and fonts. Parsed data is immutable (frozen dataclasses);
only Font is mutable, and only through Font.append_glyph.

Key classes:
- Header: Metadata from the FIGlet header line
- FileContents: Header plus comment lines and glyph line table
- GlyphDesign: The text rows drawing one character
- Font: Character to GlyphDesign mapping
"""

from figletkit.domain.font import Font
from figletkit.domain.glyph import GlyphDesign
from figletkit.domain.header import FileContents, Header

__all__: list[str] = [
    "FileContents",
    "Font",
    "GlyphDesign",
    "Header",
]
