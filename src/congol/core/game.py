"""Conway's Game of Life implementation."""

import logging
from typing import Any, Dict

from .universe import Universe

logger = logging.getLogger(__name__)


class Game:
    """Conway's Game of Life simulation driver.

    Owns a single Universe and counts the generations that have elapsed.
    Seeding and rendering go through the ``universe`` attribute directly::

        game = Game(25, 25)
        game.universe.set(12, 13, True)
        game.next_generation()
    """

    def __init__(self, width: int, height: int) -> None:
        """Create a game with an all-dead universe.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If width or height is not a positive integer
        """
        self.universe = Universe(width, height)
        self._generation = 0

        logger.debug("Created %dx%d game", height, width)

    @property
    def generation(self) -> int:
        """Number of generations elapsed since creation."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.universe.population

    def next_generation(self) -> None:
        """Replace the universe with its successor and advance the counter."""
        self.universe = self.universe.next()
        self._generation += 1

        logger.debug("Generation %d: population %d", self._generation, self.population)

    def run(self, generations: int) -> None:
        """Advance the simulation by several generations.

        Args:
            generations: Number of generations to run

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"Generations must be non-negative, got {generations}")

        for _ in range(generations):
            self.next_generation()

    def get_statistics(self) -> Dict[str, Any]:
        """Get a summary of the current simulation state.

        Returns:
            Dictionary with generation, population, grid size, density and bounding box
        """
        bbox = self.universe.get_bounding_box()

        stats = {
            "generation": self._generation,
            "population": self.population,
            "grid_size": self.universe.shape,
            "population_density": self.population / len(self.universe),
        }

        if bbox:
            stats["bounding_box"] = bbox
            stats["bounding_box_size"] = (bbox[2] - bbox[0] + 1, bbox[3] - bbox[1] + 1)
        else:
            stats["bounding_box"] = None
            stats["bounding_box_size"] = (0, 0)

        return stats

    def __str__(self) -> str:
        return str(self.universe)
