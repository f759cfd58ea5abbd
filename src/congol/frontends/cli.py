"""Command-line interface for Conway's Game of Life."""

import argparse
import logging
import sys
import time
from typing import Any, Dict, Optional, Tuple

from ..core.game import Game
from ..core.patterns import PatternLibrary
from ..core.render import DEAD_GLYPH, LIVE_GLYPH, render
from ..core.universe import Universe

logger = logging.getLogger(__name__)


class CLIGameOfLife:
    """Command-line interface for watching Game of Life simulations."""

    def __init__(self):
        """Initialize CLI interface."""
        self.pattern_library = PatternLibrary()

    def run_display(
        self,
        width: int,
        height: int,
        generations: int,
        delay: float = 0.1,
        pattern: Optional[str] = None,
        pattern_row: int = 0,
        pattern_col: int = 0,
        population_rate: float = 0.2,
        seed: Optional[int] = None,
        live: str = LIVE_GLYPH,
        dead: str = DEAD_GLYPH,
        verbose: bool = False,
    ) -> Tuple[int, Dict[str, Any]]:
        """Seed a game and print it for a number of generations.

        Each step prints the generation number and the grid, waits ``delay``
        seconds, then advances the game.

        Args:
            width: Grid width
            height: Grid height
            generations: Number of generations to display
            delay: Seconds to pause between generations
            pattern: Optional pattern name to seed with instead of a random fill
            pattern_row: Row offset for pattern placement
            pattern_col: Column offset for pattern placement
            population_rate: Random fill rate (0.0-1.0) when no pattern is given
            seed: Random seed for a reproducible fill
            live: Glyph for living cells
            dead: Glyph for dead cells
            verbose: Print setup details

        Returns:
            Tuple of (final_generation, statistics)

        Raises:
            ValueError: If the pattern is unknown
        """
        game = Game(width, height)

        if verbose:
            print(f"Initializing {width}x{height} universe")

        if pattern:
            loaded_pattern = self.pattern_library.get_pattern(pattern)
            if loaded_pattern is None:
                raise ValueError(f"Pattern '{pattern}' not found")
            if verbose:
                print(f"Loading pattern '{pattern}' at row {pattern_row}, column {pattern_col}")
            loaded_pattern.apply_to_universe(game.universe, pattern_row, pattern_col, clip=True)
        else:
            if verbose:
                print(f"Generating random population (rate: {population_rate:.2%})")
            game.universe.randomize(population_rate, seed=seed)

        initial_population = game.population
        start_time = time.time()

        for _ in range(generations):
            print(f"generation: {game.generation}")
            print(self._format_universe(game.universe, live, dead))
            print()
            if delay > 0:
                time.sleep(delay)

            game.next_generation()

        duration = time.time() - start_time

        stats = game.get_statistics()
        stats["initial_population"] = initial_population
        stats["duration_seconds"] = duration

        logger.debug("Displayed %d generations in %.3fs", game.generation, duration)
        return game.generation, stats

    def _format_universe(
        self, universe: Universe, live: str = LIVE_GLYPH, dead: str = DEAD_GLYPH, max_size: int = 200
    ) -> str:
        """Format a universe for display, refusing ones too large for a terminal.

        Args:
            universe: Universe to format
            live: Glyph for living cells
            dead: Glyph for dead cells
            max_size: Maximum dimension to display

        Returns:
            Formatted universe string
        """
        if universe.width > max_size or universe.height > max_size:
            return f"Universe too large to display ({universe.width}x{universe.height})"

        return render(universe, live, dead)

    def list_patterns(self) -> None:
        """List available patterns by category."""
        categories = self.pattern_library.get_patterns_by_category()

        print("Available patterns:")
        for category, patterns in categories.items():
            if not patterns:
                continue
            print(f"\n{category}:")
            for pattern_name in patterns:
                pattern = self.pattern_library.get_pattern(pattern_name)
                if pattern:
                    height, width = pattern.get_size()
                    print(f"  {pattern_name}: {width}x{height}, {len(pattern.cells)} cells")
                    if pattern.description:
                        print(f"    {pattern.description}")


def print_results(final_generation: int, stats: dict, verbose: bool) -> None:
    """Print a summary of the displayed run.

    Args:
        final_generation: Final generation number
        stats: Statistics dictionary
        verbose: Whether to show detailed statistics
    """
    print(f"Simulation stopped at generation {final_generation}")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population density: {stats['population_density']:.2%}")
        if "duration_seconds" in stats:
            print(f"  Duration: {stats['duration_seconds']:.3f} seconds")

        if stats["bounding_box"]:
            bbox = stats["bounding_box"]
            bbox_size = stats["bounding_box_size"]
            print(f"  Bounding box: ({bbox[0]}, {bbox[1]}) to ({bbox[2]}, {bbox[3]}) [{bbox_size[0]}x{bbox_size[1]}]")
    else:
        print(f"Population: {stats['initial_population']} -> {stats['population']}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Watch Conway's Game of Life evolve in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Random 25x25 universe with 20% population
  congol-cli

  # Glider on a 20x20 universe, 40 generations, no pause
  congol-cli -W 20 -H 20 --pattern Glider -g 40 --delay 0

  # Reproducible random fill
  congol-cli --population 0.3 --seed 42

  # List available patterns
  congol-cli --list-patterns
        """,
    )

    # Universe configuration
    parser.add_argument("-W", "--width", type=int, default=25, help="Universe width (default: 25)")

    parser.add_argument("-H", "--height", type=int, default=25, help="Universe height (default: 25)")

    parser.add_argument(
        "-p",
        "--population",
        type=float,
        default=0.2,
        help="Initial random population rate 0.0-1.0 (default: 0.2)",
    )

    parser.add_argument("--seed", type=int, help="Random seed for the initial population")

    # Pattern configuration
    parser.add_argument(
        "--pattern",
        type=str,
        help="Seed with a named pattern instead of a random population",
    )

    parser.add_argument(
        "--pattern-row",
        type=int,
        default=0,
        help="Row offset for pattern placement (default: centered)",
    )

    parser.add_argument(
        "--pattern-col",
        type=int,
        default=0,
        help="Column offset for pattern placement (default: centered)",
    )

    # Display configuration
    parser.add_argument(
        "-g",
        "--generations",
        type=int,
        default=25,
        help="Number of generations to display (default: 25)",
    )

    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=0.1,
        help="Seconds between generations (default: 0.1)",
    )

    parser.add_argument("--live", type=str, default=LIVE_GLYPH, help=f"Glyph for living cells (default: '{LIVE_GLYPH}')")

    parser.add_argument("--dead", type=str, default=DEAD_GLYPH, help=f"Glyph for dead cells (default: '{DEAD_GLYPH}')")

    # Output configuration
    parser.add_argument("--list-patterns", action="store_true", help="List available patterns and exit")

    parser.add_argument("-v", "--verbose", action="store_true", help="Show setup details and debug logging")

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if not 0.0 <= args.population <= 1.0:
        errors.append("Population rate must be between 0.0 and 1.0")

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if args.pattern_row < 0:
        errors.append("Pattern row offset must be non-negative")

    if args.pattern_col < 0:
        errors.append("Pattern column offset must be non-negative")

    if len(args.live) != 1 or len(args.dead) != 1:
        errors.append("Glyphs must be single characters")
    elif args.live == args.dead:
        errors.append("Live and dead glyphs must differ")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main() -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cli = CLIGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    if args.pattern:
        pattern = cli.pattern_library.get_pattern(args.pattern)
        if not pattern:
            available = cli.pattern_library.list_patterns()
            print(f"Error: Pattern '{args.pattern}' not found")
            print(f"Available patterns: {', '.join(available)}")
            print("Use --list-patterns to see detailed information")
            return 1

        # Auto-center pattern if no offset specified
        if args.pattern_row == 0 and args.pattern_col == 0:
            pattern_height, pattern_width = pattern.get_size()
            args.pattern_row = max(0, (args.height - pattern_height) // 2)
            args.pattern_col = max(0, (args.width - pattern_width) // 2)
            if args.verbose:
                print(f"Auto-centering pattern at row {args.pattern_row}, column {args.pattern_col}")

    try:
        final_generation, stats = cli.run_display(
            width=args.width,
            height=args.height,
            generations=args.generations,
            delay=args.delay,
            pattern=args.pattern,
            pattern_row=args.pattern_row,
            pattern_col=args.pattern_col,
            population_rate=args.population,
            seed=args.seed,
            live=args.live,
            dead=args.dead,
            verbose=args.verbose,
        )

        print_results(final_generation, stats, args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
