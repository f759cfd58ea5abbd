#!/usr/bin/env python3
"""
Example usage of the congol package.
"""

import time

from congol import Game, PatternLibrary


def main():
    """Seed a game by hand, then watch a library pattern."""
    # Create a new game and seed the first generation cell by cell
    game = Game(25, 25)
    for row, column in [(12, 12), (12, 13), (12, 14), (13, 14), (11, 13)]:
        game.universe.set(row, column, True)

    for _ in range(25):
        print(f"generation: {game.generation}")
        print(game)
        print()
        time.sleep(0.1)

        # Apply the four rules to move to the next generation
        game.next_generation()

    # Seed from the pattern library instead
    game = Game(20, 20)
    glider = PatternLibrary().get_pattern("Glider")
    glider.apply_to_universe(game.universe, offset_row=2, offset_column=2)

    game.run(8)
    print(f"Glider after {game.generation} generations:")
    print(game)

    print("Final statistics:")
    for key, value in game.get_statistics().items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
