"""Conway's Game of Life generation transition and simulation driver."""

from typing import Callable, Deque, Dict, Optional
from collections import deque
import numpy as np

from .grid import MAX_AGE, Grid


def count_living_neighbors(grid: Grid, row: int, col: int) -> int:
    """Count the living cells among the up to 8 positions around (row, col).

    Positions off the edge of the grid are skipped, so corners see at
    most 3 neighbors and edges at most 5.
    """
    return grid.count_living_neighbors(row, col)


def tick(grid: Grid) -> Grid:
    """Compute the next generation of a grid.

    The input grid is never modified; every cell of the returned grid is
    derived from the same snapshot, so births and deaths take effect
    simultaneously.

    Rules by living-neighbor count:
    - 0 or 1: dead (isolation)
    - 2: a live cell survives and ages by one, a dead cell stays dead
    - 3: alive, aged by one (a newborn has age 1)
    - 4 or more: dead (overcrowding)

    Args:
        grid: Current generation

    Returns:
        New grid of identical dimensions holding the next generation
    """
    if grid.is_empty:
        return Grid(grid.width, grid.height, track_age=grid.track_age)

    counts = grid.count_all_neighbors()
    ages = grid.cells.astype(np.int64)
    aged = np.minimum(ages + 1, MAX_AGE if grid.track_age else 1)

    next_ages = np.select(
        [counts <= 1, counts == 2, counts == 3],
        [np.zeros_like(ages), np.where(ages > 0, aged, 0), aged],
        default=0,
    )
    return Grid.from_array(next_ages, track_age=grid.track_age)


class Simulation:
    """Driver state for a running Game of Life.

    Holds exactly one current generation and replaces it with the result
    of :func:`tick` on every step.
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the simulation with a seeded grid.

        Args:
            grid: Initial generation
        """
        self._grid = grid
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)
        self._static = False

        self._update_population_history()

    @property
    def grid(self) -> Grid:
        """Current generation."""
        return self._grid

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._grid.population

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    @property
    def is_extinct(self) -> bool:
        """Whether every cell is dead."""
        return self.population == 0

    @property
    def is_static(self) -> bool:
        """Whether the last step left the set of live cells unchanged."""
        return self._static

    def step(self) -> Grid:
        """Advance the simulation by one generation.

        Returns:
            The new current generation
        """
        next_grid = tick(self._grid)
        self._static = bool(np.array_equal(next_grid.alive_mask(), self._grid.alive_mask()))
        self._grid = next_grid

        self._generation += 1
        self._update_population_history()
        return next_grid

    def run(self, iterations: int, on_generation: Optional[Callable[[int, Grid], None]] = None) -> Grid:
        """Run a fixed number of generations.

        Args:
            iterations: Number of steps to take
            on_generation: Optional callback invoked with (generation, grid)
                before each step, e.g. to render the frame

        Returns:
            The final generation
        """
        for _ in range(iterations):
            if on_generation is not None:
                on_generation(self._generation, self._grid)
            self.step()
        return self._grid

    def reset(self, grid: Grid) -> None:
        """Start over from a new seeded grid."""
        self._grid = grid
        self._generation = 0
        self._static = False
        self._population_history.clear()
        self._update_population_history()

    def _update_population_history(self) -> None:
        self._population_history.append(self.population)

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with various statistics
        """
        area = self._grid.width * self._grid.height
        return {
            "generation": self._generation,
            "population": self.population,
            "population_density": self.population / area if area else 0.0,
            "oldest_age": self._grid.oldest_age,
            "population_history": list(self._population_history),
            "grid_size": (self._grid.width, self._grid.height),
            "extinct": self.is_extinct,
            "static": self._static,
        }
