"""Core font building for figletkit.

This module contains:

- Glyph building (line table slicing, terminator stripping, hard blanks)
- Loading facades that return None instead of raising
- Font collections (directories, bundled fonts, random selection)

Key functions:
- build_font: Build a Font from parsed file contents
- load_font: Load a font file, None on failure
- parse_font: Parse font text, None on failure
- iter_font_paths: Find font files under a directory
- bundled_font_names / load_bundled_font / random_bundled_font

Key classes:
- FontBuilder: Slices the glyph line table into GlyphDesigns
- FontLibrary: Loads every font in a directory
"""

from figletkit.core.builder import (
    FontBuilder,
    build_font,
    load_font,
    parse_font,
    strip_row,
)
from figletkit.core.library import (
    FontLibrary,
    bundled_font_names,
    iter_font_paths,
    load_bundled_font,
    random_bundled_font,
    read_bundled_contents,
)

__all__ = [
    # Builder
    "FontBuilder",
    # Library
    "FontLibrary",
    "build_font",
    "bundled_font_names",
    "iter_font_paths",
    "load_bundled_font",
    "load_font",
    "parse_font",
    "random_bundled_font",
    "read_bundled_contents",
    "strip_row",
]
