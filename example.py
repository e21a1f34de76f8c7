#!/usr/bin/env python3
"""
Example usage of the termlife package.
"""

from termlife import Grid, PatternLibrary, Simulation
from termlife.core.seeding import TWO_IN_SIX, make_rng, randomize
from termlife.frontends.render import format_grid, get_palette


def main():
    """Demonstrate programmatic usage of the termlife package."""
    palette = get_palette("ascii")

    # A blinker on a small boolean board
    library = PatternLibrary()
    blinker = library.get_pattern("Blinker")
    grid = Grid(5, 5, track_age=False)
    grid = blinker.stamp(grid, *blinker.centered_on(grid))

    simulation = Simulation(grid)
    for _ in range(3):
        print(f"Generation {simulation.generation}:")
        print(format_grid(simulation.grid, palette, separator=" "))
        print()
        simulation.step()

    # A seeded aging board
    grid = randomize(Grid(30, 12), TWO_IN_SIX, make_rng(2024))
    simulation = Simulation(grid)
    simulation.run(25)

    print(f"Generation {simulation.generation}:")
    print(format_grid(simulation.grid, palette, separator=""))

    stats = simulation.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        if key != "population_history":
            print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
