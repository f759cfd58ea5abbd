"""The universe of the Game of Life: a finite 2D grid of cells."""

import logging
from typing import Iterator, Optional, Tuple

import numpy as np
import torch
import torch.nn.functional as F

from .render import render
from .rules import apply_rules

logger = logging.getLogger(__name__)


class Universe:
    """Represents the finite 2D grid of cells that make up the game.

    Cells are stored row-major in a flat boolean array, so the cell at
    (row, column) lives at index ``row * width + column``. Neighbors that
    fall outside the grid are treated as dead; edges never wrap around.
    """

    def __init__(self, width: int, height: int) -> None:
        """Create an all-dead universe.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If width or height is not a positive integer
        """
        for name, value in (("width", width), ("height", height)):
            if not isinstance(value, (int, np.integer)) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

        self._width = int(width)
        self._height = int(height)
        self._cells = np.zeros(self._width * self._height, dtype=bool)

        # 3x3 neighbor kernel with the center cell excluded
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @classmethod
    def _from_cells(cls, width: int, height: int, cells: np.ndarray) -> "Universe":
        universe = cls(width, height)
        universe._cells[:] = cells.reshape(-1)
        return universe

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions as (width, height)."""
        return (self._width, self._height)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the flat, row-major cell array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def population(self) -> int:
        """Number of living cells."""
        return int(np.count_nonzero(self._cells))

    def _index(self, row: int, column: int) -> int:
        if not (0 <= row < self._height and 0 <= column < self._width):
            raise IndexError(
                f"Coordinates ({row}, {column}) out of bounds for " f"{self._height}x{self._width} universe"
            )
        return row * self._width + column

    def get(self, row: int, column: int) -> bool:
        """Get the state of a cell.

        Args:
            row: Row coordinate
            column: Column coordinate

        Returns:
            True if the cell is alive

        Raises:
            IndexError: If the coordinates are outside the grid
        """
        return bool(self._cells[self._index(row, column)])

    def set(self, row: int, column: int, value: bool) -> None:
        """Set the state of a single cell.

        Args:
            row: Row coordinate
            column: Column coordinate
            value: Whether the cell should be alive

        Raises:
            IndexError: If the coordinates are outside the grid
        """
        self._cells[self._index(row, column)] = bool(value)

    def clear(self) -> None:
        """Kill every cell."""
        self._cells.fill(False)

    def randomize(self, probability: float = 0.2, seed: Optional[int] = None) -> None:
        """Randomly populate the universe.

        Args:
            probability: Chance each cell will be alive (0.0 to 1.0)
            seed: Seed for the random generator, for reproducible fills

        Raises:
            ValueError: If probability is outside [0, 1]
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Probability must be between 0.0 and 1.0, got {probability}")

        rng = np.random.default_rng(seed)
        self._cells[:] = rng.random(self._cells.size) < probability

    def count_neighbors(self, row: int, column: int) -> int:
        """Count living neighbors of a cell.

        Args:
            row: Row coordinate
            column: Column coordinate

        Returns:
            Number of living neighbors (0-8)

        Raises:
            IndexError: If the coordinates are outside the grid
        """
        self._index(row, column)

        count = 0
        for dr in [-1, 0, 1]:
            for dc in [-1, 0, 1]:
                if dr == 0 and dc == 0:
                    continue

                nr, nc = row + dr, column + dc

                # Off-grid neighbors are dead
                if 0 <= nr < self._height and 0 <= nc < self._width:
                    count += int(self._cells[nr * self._width + nc])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a PyTorch convolution.

        Returns:
            Array of shape (height, width) with the neighbor count of each cell
        """
        board = torch.from_numpy(self._cells.reshape(self._height, self._width).astype(np.float32))

        # Zero padding keeps off-grid neighbors dead
        neighbors = F.conv2d(board.view(1, 1, self._height, self._width), self._torch_kernel, padding=1)

        return neighbors[0, 0].numpy().astype(np.int8)

    def next(self) -> "Universe":
        """Compute the next generation.

        Every cell is evaluated against a snapshot of the current state, and
        the receiver is left unmodified.

        Returns:
            A new Universe of the same size holding the successor state
        """
        neighbor_counts = self.count_all_neighbors()
        board = self._cells.reshape(self._height, self._width)
        successor = Universe._from_cells(self._width, self._height, apply_rules(board, neighbor_counts))

        logger.debug(
            "Advanced %dx%d universe: population %d -> %d",
            self._height,
            self._width,
            self.population,
            successor.population,
        )
        return successor

    def copy(self) -> "Universe":
        """Return an independent copy of this universe."""
        return Universe._from_cells(self._width, self._height, self._cells)

    def rows(self) -> Iterator[Tuple[bool, ...]]:
        """Yield the cell states of each row, top to bottom."""
        for row in range(self._height):
            start = row * self._width
            yield tuple(bool(cell) for cell in self._cells[start : start + self._width])

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_row, min_column, max_row, max_column) or None if no living cells
        """
        living = np.flatnonzero(self._cells)
        if living.size == 0:
            return None

        rows, columns = np.divmod(living, self._width)
        return (int(rows.min()), int(columns.min()), int(rows.max()), int(columns.max()))

    def __iter__(self) -> Iterator[Tuple[int, int, bool]]:
        """Iterate over cells as (row, column, alive) in index order."""
        for index, cell in enumerate(self._cells):
            row, column = divmod(index, self._width)
            yield (row, column, bool(cell))

    def __len__(self) -> int:
        return self._cells.size

    def __eq__(self, other: object) -> bool:
        """Check if two universes have the same size and cells."""
        if not isinstance(other, Universe):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"Universe(width={self._width}, height={self._height}, population={self.population})"

    def __str__(self) -> str:
        """Render living cells as '*' and dead cells as '.'."""
        return render(self)
