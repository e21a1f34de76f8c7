"""Tests for terminal rendering."""

from io import StringIO

import pytest
from termlife.core.grid import Grid
from termlife.frontends.render import (
    AGE_BUCKETS,
    CLEAR_SCREEN,
    PALETTES,
    Palette,
    TerminalRenderer,
    age_bucket,
    format_grid,
    get_palette,
)


class TtyStringIO(StringIO):
    """StringIO that claims to be a terminal."""

    def isatty(self):
        return True


class TestAgeBuckets:
    """Test cases for age bucketing."""

    def test_dead_has_no_bucket(self):
        """Test that dead cells map to None."""
        assert age_bucket(0) is None

    @pytest.mark.parametrize(
        "age,bucket",
        [(1, 0), (4, 0), (5, 1), (10, 1), (11, 2), (18, 2), (19, 3), (5000, 3)],
    )
    def test_boundaries(self, age, bucket):
        """Test bucket boundaries."""
        assert age_bucket(age) == bucket

    def test_buckets_do_not_overlap(self):
        """Test that each bucket starts right after the previous one ends."""
        for (_, high), (low, _) in zip(AGE_BUCKETS, AGE_BUCKETS[1:]):
            assert low == high + 1


class TestPalette:
    """Test cases for Palette."""

    def test_glyph_for(self):
        """Test glyph lookup by age."""
        palette = Palette("test", ("a", "b", "c", "d"), dead="-")
        assert palette.glyph_for(0) == "-"
        assert palette.glyph_for(3) == "a"
        assert palette.glyph_for(7) == "b"
        assert palette.glyph_for(12) == "c"
        assert palette.glyph_for(40) == "d"

    def test_wrong_glyph_count(self):
        """Test that palettes need exactly four glyphs."""
        with pytest.raises(ValueError):
            Palette("short", ("a", "b"))

    def test_builtin_palettes(self):
        """Test that built-in palettes are available."""
        for name in ["classic", "shades", "ascii", "dots"]:
            assert get_palette(name) is PALETTES[name]

    def test_unknown_palette(self):
        """Test looking up a missing palette."""
        with pytest.raises(KeyError):
            get_palette("neon")


class TestFormatGrid:
    """Test cases for format_grid()."""

    def test_framed_rows(self):
        """Test the default framed layout."""
        grid = Grid(3, 2)
        grid.set_cell(0, 0, 1)
        grid.set_cell(1, 2, 1)

        text = format_grid(grid, get_palette("classic"))
        assert text == "| █ |   |   |\n|   |   | █ |"

    def test_plain_separator(self):
        """Test a plain space separator and age glyphs."""
        grid = Grid(4, 1)
        grid.from_list([[1, 6, 12, 30]])

        text = format_grid(grid, get_palette("ascii"), separator="")
        assert text == ".oO@"

    def test_empty_grid(self):
        """Test formatting a zero-sized grid."""
        assert format_grid(Grid(0, 0), get_palette("ascii")) == ""

    def test_zero_width_rows_are_blank(self):
        """Test that rows without cells are not framed."""
        assert format_grid(Grid(0, 2), get_palette("ascii")) == "\n"


class TestTerminalRenderer:
    """Test cases for TerminalRenderer."""

    def test_render_frame(self):
        """Test that a frame is followed by its iteration line."""
        stream = StringIO()
        renderer = TerminalRenderer(get_palette("ascii"), stream=stream, separator=" ")
        grid = Grid(2, 1)
        grid.set_cell(0, 1, 1)

        renderer.render(grid, 7)

        assert stream.getvalue() == "  .\nIteration: 7\n"

    def test_clear_skipped_when_not_a_terminal(self):
        """Test that clearing degrades gracefully off a terminal."""
        stream = StringIO()
        renderer = TerminalRenderer(get_palette("ascii"), stream=stream)

        assert renderer.clear_screen() is False
        renderer.render(Grid(1, 1), 0)
        assert CLEAR_SCREEN not in stream.getvalue()

    def test_clear_on_terminal(self):
        """Test that frames start with a clear on a terminal."""
        stream = TtyStringIO()
        renderer = TerminalRenderer(get_palette("ascii"), stream=stream)

        renderer.render(Grid(1, 1), 0)
        assert stream.getvalue().startswith(CLEAR_SCREEN)

    def test_clear_disabled(self):
        """Test turning clearing off."""
        stream = TtyStringIO()
        renderer = TerminalRenderer(get_palette("ascii"), stream=stream, clear=False)

        renderer.render(Grid(1, 1), 0)
        assert CLEAR_SCREEN not in stream.getvalue()
