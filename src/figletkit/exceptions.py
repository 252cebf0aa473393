"""Exception hierarchy for FigletKit."""


class FigletKitError(Exception):
    """Base exception for all FigletKit errors."""

    pass


class FontError(FigletKitError):
    """Errors related to reading or parsing a font."""

    pass


class ResourceNotFoundError(FontError):
    """The font source could not be opened or read."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to read font '{source}': {reason}")


class MalformedHeaderError(FontError):
    """The FIGlet header line is missing or does not follow the grammar."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Malformed header in '{source}': {reason}")


class TruncatedFontError(FontError):
    """The glyph line table ends with an incomplete glyph block."""

    def __init__(self, source: str, line_count: int, height: int) -> None:
        self.source = source
        self.line_count = line_count
        self.height = height
        super().__init__(
            f"Truncated font '{source}': {line_count} glyph lines "
            f"is not a multiple of height {height}"
        )


class GlyphError(FigletKitError):
    """Errors related to glyph lookup."""

    pass


class GlyphNotFoundError(GlyphError):
    """Requested character has no glyph in the font."""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Glyph for {char!r} not found in font")
