"""Glyph design representation.

This module defines the glyph domain model, which holds the text rows
that draw a single character of a FIGlet font.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GlyphDesign:
    """The rows of one character's visual design.

    Rows have terminator markers removed and hard blanks replaced with
    spaces, so they can be printed as they are.

    Attributes:
        lines: One string per row, top to bottom
    """

    lines: tuple[str, ...]

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple
        object.__setattr__(self, "lines", tuple(self.lines))

    @property
    def height(self) -> int:
        """Number of rows in the design."""
        return len(self.lines)

    @property
    def width(self) -> int:
        """Length of the longest row."""
        return max((len(line) for line in self.lines), default=0)

    def is_blank(self) -> bool:
        """Check if the design draws nothing but spaces.

        Returns:
            True if every row is empty or whitespace, False otherwise
        """
        return all(not line.strip() for line in self.lines)

    def render(self) -> str:
        """Join the rows into a printable block.

        Returns:
            Rows separated by newlines
        """
        return "\n".join(self.lines)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the design
        """
        return {"lines": list(self.lines)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphDesign":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a design

        Returns:
            GlyphDesign instance
        """
        return cls(lines=tuple(data["lines"]))
