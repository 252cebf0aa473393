"""Font representation.

A Font maps characters to glyph designs. It is filled one glyph at a
time through append_glyph and is treated as read-only afterwards.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

from figletkit.domain.glyph import GlyphDesign
from figletkit.domain.header import FileContents
from figletkit.exceptions import GlyphNotFoundError


@dataclass
class Font:
    """A set of glyph designs sharing one height.

    Attributes:
        height: Rows per glyph
        glyphs: Character to design mapping, in insertion order
        figlet_file: Parsed file this font was built from, for provenance
        name: Font name, usually the file stem
    """

    height: int = 0
    glyphs: dict[str, GlyphDesign] = field(default_factory=dict)
    figlet_file: FileContents | None = field(default=None, repr=False, compare=False)
    name: str | None = None

    def append_glyph(self, char: str, design: GlyphDesign) -> None:
        """Insert or overwrite the design for a character.

        Args:
            char: Single character key, for instance "A"
            design: Rows drawing that character

        Raises:
            ValueError: If char is not exactly one character
        """
        if len(char) != 1:
            raise ValueError(f"Glyph key must be a single character, got {char!r}")
        self.glyphs[char] = design
        self.height = design.height

    def get_glyph(self, char: str) -> GlyphDesign:
        """Get the design for a character.

        Args:
            char: Character to look up

        Returns:
            The glyph design

        Raises:
            GlyphNotFoundError: If the font has no glyph for char
        """
        try:
            return self.glyphs[char]
        except KeyError:
            raise GlyphNotFoundError(char) from None

    @property
    def characters(self) -> list[str]:
        """Characters with a glyph, in insertion order."""
        return list(self.glyphs)

    def __contains__(self, char: object) -> bool:
        return char in self.glyphs

    def __len__(self) -> int:
        return len(self.glyphs)

    def __iter__(self) -> Iterator[str]:
        return iter(self.glyphs)
