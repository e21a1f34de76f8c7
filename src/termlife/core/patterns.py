"""Common Conway's Game of Life patterns for deterministic seeding."""

from typing import Dict, List, Optional, Tuple

from .grid import Grid


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (row, col) offsets for living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size.

        Returns:
            Tuple of (height, width)
        """
        if not self.cells:
            return (0, 0)

        rows, cols = zip(*self.cells)
        return (max(rows) - min(rows) + 1, max(cols) - min(cols) + 1)

    def centered_on(self, grid: Grid) -> Tuple[int, int]:
        """Offset that places this pattern in the middle of a grid.

        Returns:
            Tuple of (row, col) offsets, never negative
        """
        height, width = self.get_size()
        return (max(0, (grid.height - height) // 2), max(0, (grid.width - width) // 2))

    def stamp(self, grid: Grid, row: int = 0, col: int = 0) -> Grid:
        """Return a copy of a grid with this pattern's cells set alive.

        Args:
            grid: Source grid; it is not modified
            row: Vertical offset
            col: Horizontal offset

        Returns:
            New grid. Cells falling outside the bounds are dropped.
        """
        stamped = grid.copy()
        for dr, dc in self.cells:
            r, c = row + dr, col + dc
            if 0 <= r < stamped.height and 0 <= c < stamped.width:
                stamped.set_cell(r, c, 1)
        return stamped

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, {len(self.cells)} cells)"


class PatternLibrary:
    """Built-in collection of small patterns."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still lifes
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))
        self.add_pattern(
            Pattern(
                "Beehive",
                [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2)],
                "Beehive still life",
            )
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(0, 0), (0, 1), (0, 2)], "Period-2 oscillator"))
        self.add_pattern(
            Pattern(
                "Toad",
                [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)],
                "Period-2 oscillator",
            )
        )
        self.add_pattern(
            Pattern(
                "Beacon",
                [(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)],
                "Period-2 oscillator",
            )
        )

        # Spaceships
        self.add_pattern(
            Pattern(
                "Glider",
                [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)],
                "Moves diagonally, dies against the bounded edge",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name, ignoring case."""
        if name in self._patterns:
            return self._patterns[name]
        for pattern_name, pattern in self._patterns.items():
            if pattern_name.lower() == name.lower():
                return pattern
        return None

    def list_patterns(self) -> List[str]:
        """Get names of all patterns."""
        return list(self._patterns.keys())
