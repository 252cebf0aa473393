"""Unit tests for glyph building.

Tests for row stripping, character assignment, partial block handling
and the load/parse facades.
"""

from pathlib import Path

import pytest

from figletkit.config import ParserConfig
from figletkit.core.builder import FontBuilder, build_font, load_font, parse_font, strip_row
from figletkit.domain import GlyphDesign
from figletkit.exceptions import TruncatedFontError
from figletkit.io.reader import parse_figlet_text

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


def font_text(height: int, rows: list[str], hard_blank: str = "$") -> str:
    """Build font text with a minimal header and no comments."""
    header = f"flf2a{hard_blank} {height} {height} 10 0 0"
    return "\n".join([header, *rows]) + "\n"


class TestStripRow:
    """Tests for strip_row function."""

    def test_inner_row_loses_one_marker(self):
        """Test inner rows drop exactly one trailing character."""
        assert strip_row("| |@", is_last_row=False, hard_blank="$") == "| |"

    def test_last_row_loses_two_markers(self):
        """Test the last row drops exactly two trailing characters."""
        assert strip_row("|_|@@", is_last_row=True, hard_blank="$") == "|_|"

    def test_marker_identity_not_checked(self):
        """Test whatever trailing characters are present get stripped."""
        assert strip_row("ab#", is_last_row=False, hard_blank="$") == "ab"
        assert strip_row("ab!?", is_last_row=True, hard_blank="$") == "ab"
        assert strip_row("$$@1", is_last_row=False, hard_blank="$") == "  @"

    def test_hard_blank_replaced_everywhere(self):
        """Test every hard blank becomes a space after stripping."""
        assert strip_row("$a$b$@", is_last_row=False, hard_blank="$") == " a b "

    def test_other_characters_untouched(self):
        """Test only the hard blank character is substituted."""
        assert strip_row("#a$ #@", is_last_row=False, hard_blank="#") == " a$  "

    def test_hard_blank_in_markers_not_substituted(self):
        """Test stripping happens before substitution."""
        assert strip_row("x$$", is_last_row=True, hard_blank="$") == "x"

    def test_short_rows_become_empty(self):
        """Test rows no longer than the marker count become empty."""
        assert strip_row("@", is_last_row=False, hard_blank="$") == ""
        assert strip_row("@@", is_last_row=True, hard_blank="$") == ""
        assert strip_row("@", is_last_row=True, hard_blank="$") == ""
        assert strip_row("", is_last_row=False, hard_blank="$") == ""


class TestFontBuilder:
    """Tests for FontBuilder class."""

    def test_default_config(self):
        """Test builder defaults to the standard parser config."""
        builder = FontBuilder()
        assert builder.config.first_code_point == 32
        assert builder.config.strict is False

    def test_two_glyph_example(self):
        """Test the two-block example with height 2."""
        contents = parse_figlet_text(font_text(2, ["$$@1", "$$@@", "$$@2", "$$@@"]))
        font = FontBuilder().build(contents)

        assert font.height == 2
        assert font.characters == [" ", "!"]
        # "$$@1" is an inner row, so only its final "1" is stripped
        assert font.get_glyph(" ").lines == ("  @", "  ")
        assert font.get_glyph("!").lines == ("  @", "  ")

    def test_height_matches_header(self):
        """Test font height comes from the header and every glyph matches it."""
        contents = parse_figlet_text(
            font_text(3, ["$@", "$@", "$@@", " _ @", "| |@", "|_|@@"])
        )
        font = build_font(contents)

        assert font.height == contents.header.height == 3
        assert all(design.height == 3 for design in font.glyphs.values())
        assert font.get_glyph("!").lines == (" _ ", "| |", "|_|")

    def test_height_one_strips_two(self):
        """Test a single-row glyph is also the last row."""
        font = build_font(parse_figlet_text(font_text(1, ["x@@", "yz@@"])))
        assert font.get_glyph(" ").lines == ("x",)
        assert font.get_glyph("!").lines == ("yz",)

    def test_marker_counts_per_row(self):
        """Test rows 0..h-2 lose one character and row h-1 loses two."""
        rows = ["abc1", "abc2", "abc3", "abc45"]
        font = build_font(parse_figlet_text(font_text(4, rows)))
        assert font.get_glyph(" ").lines == ("abc", "abc", "abc", "abc")

    def test_variant_markers(self):
        """Test fonts using a marker other than @ are stripped by count."""
        font = build_font(parse_figlet_text(font_text(2, ["/\\#", "\\/##"])))
        assert font.get_glyph(" ").lines == ("/\\", "\\/")

    def test_hard_blank_substitution(self):
        """Test the header's hard blank is replaced in every row."""
        font = build_font(
            parse_figlet_text(font_text(2, ["%a%@", "%%b@@"], hard_blank="%"))
        )
        assert font.get_glyph(" ").lines == (" a ", "  b")

    def test_code_point_assignment(self):
        """Test the Nth block maps to code point 31 + N."""
        rows = [f"{n}@@" for n in range(1, 96)]
        font = build_font(parse_figlet_text(font_text(1, rows)))

        assert len(font) == 95
        for n in range(1, 96):
            assert font.get_glyph(chr(31 + n)).lines == (str(n),)
        assert font.characters[0] == " "
        assert font.characters[-1] == "~"

    def test_assignment_continues_past_ascii(self):
        """Test blocks beyond the 95 printable characters keep counting."""
        rows = ["x@@"] * 97
        font = build_font(parse_figlet_text(font_text(1, rows)))
        assert chr(127) in font
        assert chr(128) in font

    def test_first_code_point_config(self):
        """Test the first assigned code point is configurable."""
        config = ParserConfig(first_code_point=ord("A"))
        font = build_font(parse_figlet_text(font_text(1, ["a@@", "b@@"])), config)
        assert font.characters == ["A", "B"]

    def test_assignment_stops_at_last_code_point(self):
        """Test blocks past U+10FFFF are dropped instead of failing."""
        config = ParserConfig(first_code_point=0x10FFFF)
        font = build_font(parse_figlet_text(font_text(1, ["x@@", "y@@"])), config)
        assert font.characters == [chr(0x10FFFF)]
        assert font.get_glyph(chr(0x10FFFF)).lines == ("x",)

    def test_parse_font_near_last_code_point(self):
        """Test parse_font returns a font when blocks run past U+10FFFF."""
        config = ParserConfig(first_code_point=0x10FFFE)
        font = parse_font("flf2a$ 1 1 3 0 0\nx@@\ny@@\nz@@\n", config=config)
        assert font is not None
        assert len(font) == 2

    def test_truncated_block_discarded(self):
        """Test a trailing partial block is silently dropped by default."""
        contents = parse_figlet_text((FIXTURES_DIR / "truncated.flf").read_text())
        font = build_font(contents)

        assert contents.trailing_line_count == 1
        assert font.characters == [" ", "!"]
        assert '"' not in font

    def test_truncated_block_strict(self):
        """Test strict mode rejects a trailing partial block."""
        contents = parse_figlet_text(
            (FIXTURES_DIR / "truncated.flf").read_text(), "truncated.flf"
        )
        with pytest.raises(TruncatedFontError) as exc_info:
            build_font(contents, ParserConfig(strict=True))
        assert exc_info.value.line_count == 5
        assert exc_info.value.height == 2

    def test_strict_accepts_complete_font(self):
        """Test strict mode builds fonts without partial blocks."""
        contents = parse_figlet_text(font_text(1, ["x@@"]))
        font = build_font(contents, ParserConfig(strict=True))
        assert len(font) == 1

    def test_empty_line_table(self):
        """Test a font with no glyph lines builds an empty font."""
        font = build_font(parse_figlet_text(font_text(3, [])))
        assert len(font) == 0
        assert font.height == 3

    def test_input_not_mutated(self):
        """Test the builder leaves the parsed contents untouched."""
        contents = parse_figlet_text(font_text(2, ["$$@1", "$$@@"]))
        lines_before = contents.lines
        build_font(contents)
        assert contents.lines == lines_before == ("$$@1", "$$@@")

    def test_provenance(self):
        """Test the font keeps a reference to its parsed file."""
        contents = parse_figlet_text(font_text(1, ["x@@"]), "fonts/tiny.flf")
        font = build_font(contents)
        assert font.figlet_file is contents
        assert font.name == "tiny"

    def test_idempotent(self):
        """Test parsing the same text twice gives equal fonts."""
        text = (FIXTURES_DIR / "mini.flf").read_text()
        first = build_font(parse_figlet_text(text))
        second = build_font(parse_figlet_text(text))

        assert first == second
        assert first.characters == second.characters
        assert first is not second


class TestFacades:
    """Tests for load_font and parse_font."""

    def test_load_font(self):
        """Test loading a font file from disk."""
        font = load_font(FIXTURES_DIR / "mini.flf")

        assert font is not None
        assert font.name == "mini"
        assert font.height == 3
        assert font.get_glyph(" ") == GlyphDesign(lines=("  ", "  ", "  "))
        assert font.get_glyph("!") == GlyphDesign(lines=(" _ ", "| |", "|_|"))

    def test_load_font_accepts_str(self):
        """Test the path may be given as a string."""
        assert load_font(str(FIXTURES_DIR / "mini.flf")) is not None

    def test_load_missing_file(self, tmp_path):
        """Test a missing file yields no result."""
        assert load_font(tmp_path / "missing.flf") is None

    def test_load_malformed_header(self):
        """Test a malformed header yields no result."""
        assert load_font(FIXTURES_DIR / "malformed.flf") is None

    def test_load_truncated_strict(self):
        """Test strict truncation errors also yield no result."""
        path = FIXTURES_DIR / "truncated.flf"
        assert load_font(path) is not None
        assert load_font(path, ParserConfig(strict=True)) is None

    def test_parse_font(self):
        """Test parsing text already in memory."""
        font = parse_font(font_text(1, ["x@@"]), "inline.flf")
        assert font is not None
        assert font.name == "inline"

    def test_parse_font_missing_height(self):
        """Test a header without a height yields no result."""
        assert parse_font("flf2a$\n$@@\n") is None
