"""Terminal rendering of grid snapshots with age-based glyphs."""

import logging
import sys
from typing import Dict, Optional, Sequence, TextIO, Tuple

from ..core.grid import Grid

logger = logging.getLogger(__name__)

# Inclusive (low, high) ages for newborn, middle-age, old and ancient cells.
AGE_BUCKETS: Tuple[Tuple[int, Optional[int]], ...] = ((1, 4), (5, 10), (11, 18), (19, None))

# ESC c: full terminal reset
CLEAR_SCREEN = "\x1bc"


def age_bucket(age: int) -> Optional[int]:
    """Map a cell age to its bucket index (0-3), or None for a dead cell."""
    if age <= 0:
        return None
    for index, (low, high) in enumerate(AGE_BUCKETS):
        if high is None or low <= age <= high:
            return index
    return len(AGE_BUCKETS) - 1


class Palette:
    """A named set of four glyphs, one per age bucket."""

    def __init__(self, name: str, glyphs: Sequence[str], dead: str = " ", description: str = "") -> None:
        """Initialize a palette.

        Args:
            name: Palette name
            glyphs: Glyphs for newborn, middle-age, old and ancient cells
            dead: Glyph for dead cells
            description: Optional description

        Raises:
            ValueError: If there is not exactly one glyph per age bucket
        """
        if len(glyphs) != len(AGE_BUCKETS):
            raise ValueError(f"Palette '{name}' needs {len(AGE_BUCKETS)} glyphs, got {len(glyphs)}")

        self.name = name
        self.glyphs = tuple(glyphs)
        self.dead = dead
        self.description = description

    def glyph_for(self, age: int) -> str:
        """Glyph for a cell of the given age."""
        bucket = age_bucket(age)
        return self.dead if bucket is None else self.glyphs[bucket]

    def __repr__(self) -> str:
        return f"Palette({self.name!r}, {''.join(self.glyphs)!r})"


PALETTES: Dict[str, Palette] = {
    palette.name: palette
    for palette in (
        Palette("classic", ("█", "█", "█", "█"), description="Solid block for every live cell"),
        Palette("shades", ("░", "▒", "▓", "█"), description="Darker shade as cells age"),
        Palette("ascii", (".", "o", "O", "@"), description="Plain ASCII, grows with age"),
        Palette("dots", ("·", "•", "●", "◉"), description="Dots that swell with age"),
    )
}


def get_palette(name: str) -> Palette:
    """Look up a built-in palette.

    Raises:
        KeyError: If no palette has that name
    """
    try:
        return PALETTES[name]
    except KeyError:
        raise KeyError(f"Unknown palette '{name}', choose from: {', '.join(PALETTES)}") from None


def format_grid(grid: Grid, palette: Palette, separator: str = " | ") -> str:
    """Format a grid snapshot as text, one line per row.

    With a separator containing a bar, each row is framed as
    ``| a | b | c |``.
    """
    lines = []
    for row in grid.cells:
        glyphs = [palette.glyph_for(int(age)) for age in row]
        line = separator.join(glyphs)
        if glyphs and "|" in separator:
            line = f"{separator.lstrip()}{line}{separator.rstrip()}"
        lines.append(line)
    return "\n".join(lines)


class TerminalRenderer:
    """Writes successive frames to a text stream."""

    def __init__(
        self,
        palette: Palette,
        stream: Optional[TextIO] = None,
        clear: bool = True,
        separator: str = " | ",
    ) -> None:
        """Initialize the renderer.

        Args:
            palette: Glyph palette
            stream: Output stream (defaults to stdout)
            clear: Whether to clear the screen before each frame
            separator: Text placed between cells in a row
        """
        self.palette = palette
        self.stream = stream if stream is not None else sys.stdout
        self.clear = clear
        self.separator = separator
        self._warned_clear = False

    def _can_clear(self) -> bool:
        isatty = getattr(self.stream, "isatty", None)
        return bool(isatty and isatty())

    def clear_screen(self) -> bool:
        """Clear the terminal.

        Clearing is skipped when the stream is not a terminal.

        Returns:
            True if the clear sequence was written
        """
        if not self._can_clear():
            if not self._warned_clear:
                logger.debug("Output is not a terminal, skipping screen clearing")
                self._warned_clear = True
            return False

        self.stream.write(CLEAR_SCREEN)
        return True

    def render(self, grid: Grid, generation: int) -> None:
        """Draw one frame followed by its iteration number."""
        if self.clear:
            self.clear_screen()

        self.stream.write(format_grid(grid, self.palette, self.separator))
        self.stream.write(f"\nIteration: {generation}\n")
        self.stream.flush()
