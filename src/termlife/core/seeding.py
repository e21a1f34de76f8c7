"""Random initial seeding policies."""

from typing import Callable, Optional, Sequence, Tuple
import numpy as np

from .grid import Grid


SeedPolicy = Callable[[Tuple[int, int], np.random.Generator], np.ndarray]


class WeightedChoice:
    """Seeding policy that samples each cell uniformly from a small outcome table.

    The table doubles as documentation of the distribution: ``(True,
    False, False)`` gives each cell a 1-in-3 chance of starting alive.
    """

    def __init__(self, outcomes: Sequence[bool], name: str = "") -> None:
        """Initialize the policy.

        Args:
            outcomes: Outcome table, each entry equally likely
            name: Optional label used in CLI output

        Raises:
            ValueError: If the table is empty
        """
        if len(outcomes) == 0:
            raise ValueError("Outcome table must not be empty")

        self.outcomes = tuple(bool(outcome) for outcome in outcomes)
        self.name = name or f"{sum(self.outcomes)}-in-{len(self.outcomes)}"

    @property
    def alive_weight(self) -> float:
        """Probability that a cell starts alive."""
        return sum(self.outcomes) / len(self.outcomes)

    def __call__(self, shape: Tuple[int, int], rng: np.random.Generator) -> np.ndarray:
        """Sample a boolean alive mask of the given shape."""
        table = np.array(self.outcomes, dtype=bool)
        return rng.choice(table, size=shape)

    def __repr__(self) -> str:
        return f"WeightedChoice({self.name})"


ONE_IN_THREE = WeightedChoice((True, False, False), name="1-in-3")
TWO_IN_SIX = WeightedChoice((True, True, False, False, False, False), name="2-in-6")


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a random generator, reproducible when a seed is given."""
    return np.random.default_rng(seed)


def randomize(
    grid: Grid,
    policy: SeedPolicy = ONE_IN_THREE,
    rng: Optional[np.random.Generator] = None,
) -> Grid:
    """Return a freshly seeded grid with the same dimensions as ``grid``.

    Args:
        grid: Template grid; it is not modified
        policy: Callable mapping (shape, rng) to a boolean alive mask
        rng: Random generator (a new unseeded one by default)

    Returns:
        New grid whose cells are 1 where the policy chose alive

    Raises:
        ValueError: If the policy returns a mask of the wrong shape
    """
    rng = rng if rng is not None else make_rng()
    seeded = Grid(grid.width, grid.height, track_age=grid.track_age)
    if seeded.is_empty:
        return seeded

    mask = np.asarray(policy(seeded.shape, rng), dtype=bool)
    if mask.shape != seeded.shape:
        raise ValueError(f"Seed policy returned shape {mask.shape}, expected {seeded.shape}")

    return Grid.from_array(mask.astype(np.int32), track_age=grid.track_age)
