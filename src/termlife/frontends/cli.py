"""Command-line interface for running Game of Life animations in a terminal."""

import argparse
import logging
import sys
import time
from typing import Callable, Dict, List, Optional

from ..core.engine import Simulation
from ..core.grid import Grid, create
from ..core.patterns import PatternLibrary
from ..core.seeding import ONE_IN_THREE, TWO_IN_SIX, WeightedChoice, make_rng, randomize
from .render import PALETTES, TerminalRenderer, format_grid, get_palette

logger = logging.getLogger(__name__)


class SimulationConfig:
    """Settings for one terminal run."""

    def __init__(
        self,
        width: int,
        height: int,
        track_age: bool,
        seed_policy: WeightedChoice,
        iterations: int,
        frame_delay_ms: int,
        initial_delay_ms: int,
        palette: str,
        seed: Optional[int] = None,
        pattern: Optional[str] = None,
        clear: bool = True,
    ) -> None:
        self.width = width
        self.height = height
        self.track_age = track_age
        self.seed_policy = seed_policy
        self.iterations = iterations
        self.frame_delay_ms = frame_delay_ms
        self.initial_delay_ms = initial_delay_ms
        self.palette = palette
        self.seed = seed
        self.pattern = pattern
        self.clear = clear

    def copy(self, **overrides) -> "SimulationConfig":
        """Return a copy with some settings replaced."""
        values = dict(vars(self))
        values.update(overrides)
        return SimulationConfig(**values)


PRESETS: Dict[str, SimulationConfig] = {
    "classic": SimulationConfig(
        width=20,
        height=20,
        track_age=False,
        seed_policy=ONE_IN_THREE,
        iterations=1000,
        frame_delay_ms=100,
        initial_delay_ms=4000,
        palette="classic",
    ),
    "aged": SimulationConfig(
        width=80,
        height=40,
        track_age=True,
        seed_policy=TWO_IN_SIX,
        iterations=5000,
        frame_delay_ms=85,
        initial_delay_ms=4000,
        palette="shades",
    ),
}


def seed_grid(config: SimulationConfig, pattern_library: Optional[PatternLibrary] = None) -> Grid:
    """Build the first generation for a configuration.

    A named pattern is stamped in the centre of an empty board; otherwise
    the board is seeded randomly with the configured policy.

    Raises:
        ValueError: If the pattern name is unknown
    """
    grid = create(config.width, config.height, track_age=config.track_age)

    if config.pattern:
        library = pattern_library or PatternLibrary()
        pattern = library.get_pattern(config.pattern)
        if pattern is None:
            raise ValueError(
                f"Pattern '{config.pattern}' not found. Available patterns: {', '.join(library.list_patterns())}"
            )
        row, col = pattern.centered_on(grid)
        logger.debug("Stamping pattern %s at (%d, %d)", pattern.name, row, col)
        return pattern.stamp(grid, row, col)

    return randomize(grid, config.seed_policy, make_rng(config.seed))


def run_animation(
    simulation: Simulation,
    renderer: TerminalRenderer,
    iterations: int,
    frame_delay_ms: int,
    initial_delay_ms: int = 0,
    sleep: Optional[Callable[[float], None]] = None,
) -> Grid:
    """Render and advance a simulation at a fixed pace.

    Each iteration draws the current generation, waits one frame delay,
    then replaces the generation with the next one.

    Args:
        simulation: Simulation to drive
        renderer: Frame renderer
        iterations: Number of frames to draw
        frame_delay_ms: Pause after each frame in milliseconds
        initial_delay_ms: Warm-up pause before the first frame
        sleep: Blocking sleep function taking seconds (defaults to time.sleep)

    Returns:
        The generation after the last frame
    """
    sleep = sleep or time.sleep
    if initial_delay_ms > 0:
        sleep(initial_delay_ms / 1000.0)

    def draw(generation: int, grid: Grid) -> None:
        renderer.render(grid, generation)
        if frame_delay_ms > 0:
            sleep(frame_delay_ms / 1000.0)

    return simulation.run(iterations, on_generation=draw)


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Watch Conway's Game of Life unfold in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Presets:
  classic   20x20 board, on/off cells, 1-in-3 seeding, 1000 frames at 100 ms
  aged      80x40 board, cells shaded by age, 2-in-6 seeding, 5000 frames at 85 ms

Examples:
  # Classic board with default pacing
  termlife

  # Aged board with ASCII glyphs and a reproducible start
  termlife --preset aged --palette ascii --seed 42

  # Quick run without the warm-up pause
  termlife --iterations 50 --initial-delay 0

  # Start from a known pattern
  termlife --pattern Beacon --iterations 10
        """,
    )

    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default="classic",
        help="Board preset (default: classic)",
    )

    parser.add_argument(
        "-n",
        "--iterations",
        type=int,
        help="Number of generations to display (default: from preset)",
    )

    parser.add_argument(
        "-d",
        "--frame-delay",
        type=int,
        dest="frame_delay_ms",
        help="Delay between frames in milliseconds (default: from preset)",
    )

    parser.add_argument(
        "--initial-delay",
        type=int,
        dest="initial_delay_ms",
        help="Delay before the first frame in milliseconds (default: from preset)",
    )

    parser.add_argument(
        "--palette",
        choices=sorted(PALETTES),
        help="Glyph palette for cell ages (default: from preset)",
    )

    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Random seed for a reproducible initial board",
    )

    parser.add_argument(
        "--pattern",
        type=str,
        help="Start from a built-in pattern instead of random seeding",
    )

    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the screen between frames",
    )

    parser.add_argument(
        "--list-palettes",
        action="store_true",
        help="List available palettes and exit",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print setup details and a summary at the end",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors: List[str] = []

    if args.iterations is not None and args.iterations < 0:
        errors.append("Iterations must be non-negative")

    if args.frame_delay_ms is not None and args.frame_delay_ms < 0:
        errors.append("Frame delay must be non-negative")

    if args.initial_delay_ms is not None and args.initial_delay_ms < 0:
        errors.append("Initial delay must be non-negative")

    if args.pattern and PatternLibrary().get_pattern(args.pattern) is None:
        errors.append(f"Unknown pattern '{args.pattern}'")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """Merge parsed arguments over the selected preset."""
    overrides = {
        "iterations": args.iterations,
        "frame_delay_ms": args.frame_delay_ms,
        "initial_delay_ms": args.initial_delay_ms,
        "palette": args.palette,
        "seed": args.seed,
        "pattern": args.pattern,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    overrides["clear"] = not args.no_clear
    return PRESETS[args.preset].copy(**overrides)


def list_palettes() -> None:
    """Print the available palettes."""
    print("Available palettes:")
    for name, palette in PALETTES.items():
        print(f"  {name}: {' '.join(palette.glyphs)}")
        if palette.description:
            print(f"    {palette.description}")


def print_summary(stats: dict) -> None:
    """Print end-of-run statistics."""
    print(f"\nSimulation completed after {stats['generation']} generations")
    print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
    print(f"  Final population: {stats['population']}")
    print(f"  Population density: {stats['population_density']:.2%}")
    print(f"  Oldest cell age: {stats['oldest_age']}")
    if stats["extinct"]:
        print("  All cells died")
    elif stats["static"]:
        print("  Board settled into a still life")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_palettes:
        list_palettes()
        return 0

    if not validate_args(args):
        return 1

    config = build_config(args)
    palette = get_palette(config.palette)

    try:
        grid = seed_grid(config)
        simulation = Simulation(grid)
        initial_population = simulation.population

        renderer = TerminalRenderer(palette, clear=config.clear)
        run_animation(
            simulation,
            renderer,
            iterations=config.iterations,
            frame_delay_ms=config.frame_delay_ms,
            initial_delay_ms=config.initial_delay_ms,
        )

        # Printed after the last frame; every frame clears the screen
        if args.verbose:
            seeding = f"pattern {config.pattern}" if config.pattern else f"{config.seed_policy.name} random seeding"
            print(format_grid(simulation.grid, palette))
            print(f"\nPreset '{args.preset}': {config.width}x{config.height} board, {seeding}")
            print(f"Initial population: {initial_population} cells")
            print(f"Ran {config.iterations} generations, {config.frame_delay_ms} ms per frame")
            print_summary(simulation.get_statistics())

        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
