"""Terminal Game of Life with age-tracking cells on a bounded board."""

__version__ = "0.1.0"

from .core.grid import Grid, create
from .core.engine import Simulation, count_living_neighbors, tick
from .core.seeding import WeightedChoice, randomize
from .core.patterns import Pattern, PatternLibrary

__all__ = [
    "Grid",
    "create",
    "Simulation",
    "count_living_neighbors",
    "tick",
    "WeightedChoice",
    "randomize",
    "Pattern",
    "PatternLibrary",
]
