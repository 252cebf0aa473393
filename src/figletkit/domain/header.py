"""FIGlet header and parsed file representation.

This module defines the immutable results of reading a font file: the
header metadata and the glyph line table that follows the comments.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Header:
    """Metadata from the first line of a FIGlet font file.

    Attributes:
        signature: Five-character format token (e.g., "flf2a")
        hard_blank: Character standing for a printable blank inside a glyph
        height: Number of text rows per glyph
        baseline: Rows from the top of a glyph to the baseline
        max_length: Longest line in the file, including terminators
        old_layout: Legacy layout mode
        comment_lines: Number of comment lines following the header
        print_direction: 0 for left-to-right, 1 for right-to-left
        full_layout: Full layout bit mask
        codetag_count: Number of code-tagged glyphs after the required ones
    """

    signature: str
    hard_blank: str
    height: int
    baseline: int
    max_length: int
    old_layout: int
    comment_lines: int
    print_direction: int | None = None
    full_layout: int | None = None
    codetag_count: int | None = None

    @property
    def effective_full_layout(self) -> int:
        """Full layout mask, derived from the old layout when absent.

        Returns:
            The declared full layout, or the old layout translated into
            full layout bits
        """
        if self.full_layout is not None:
            return self.full_layout
        if self.old_layout == 0:
            return 64
        if self.old_layout < 0:
            return 0
        return (self.old_layout & 31) | 128

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the header
        """
        return {
            "signature": self.signature,
            "hard_blank": self.hard_blank,
            "height": self.height,
            "baseline": self.baseline,
            "max_length": self.max_length,
            "old_layout": self.old_layout,
            "comment_lines": self.comment_lines,
            "print_direction": self.print_direction,
            "full_layout": self.full_layout,
            "codetag_count": self.codetag_count,
        }


@dataclass(frozen=True)
class FileContents:
    """A FIGlet file split into header, comments and glyph line table.

    Attributes:
        header: Parsed header line
        lines: Raw glyph lines in file order, terminators still attached
        comments: Comment lines announced by the header
        source: Where the text came from (path or label), if known
    """

    header: Header
    lines: tuple[str, ...]
    comments: tuple[str, ...] = ()
    source: str | None = None

    @property
    def glyph_block_count(self) -> int:
        """Number of complete glyph blocks in the line table."""
        return len(self.lines) // self.header.height

    @property
    def trailing_line_count(self) -> int:
        """Number of lines left over after the last complete block."""
        return len(self.lines) % self.header.height
