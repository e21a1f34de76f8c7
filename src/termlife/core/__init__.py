"""Core Game of Life logic."""

from .grid import Grid, create
from .engine import Simulation, count_living_neighbors, tick
from .seeding import ONE_IN_THREE, TWO_IN_SIX, WeightedChoice, make_rng, randomize
from .patterns import Pattern, PatternLibrary

__all__ = [
    "Grid",
    "create",
    "Simulation",
    "count_living_neighbors",
    "tick",
    "ONE_IN_THREE",
    "TWO_IN_SIX",
    "WeightedChoice",
    "make_rng",
    "randomize",
    "Pattern",
    "PatternLibrary",
]
