"""FigletKit - Parse FIGlet font files into in-memory fonts.

FigletKit reads FIGlet font description files (.flf), the plain-text ASCII-art
font format used by figlet, and exposes their glyphs as a Font object keyed by
character.

Example:
    >>> from figletkit import load_font
    >>> font = load_font("standard.flf")
    >>> print(font.get_glyph("A").render())
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

from figletkit.core.builder import FontBuilder, build_font, load_font, parse_font
from figletkit.domain import FileContents, Font, GlyphDesign, Header
from figletkit.io.reader import FigletFileReader, parse_figlet_text

__all__ = [
    "FigletFileReader",
    "FileContents",
    "Font",
    "FontBuilder",
    "GlyphDesign",
    "Header",
    "__author__",
    "__version__",
    "build_font",
    "load_font",
    "parse_figlet_text",
    "parse_font",
]
