"""The four standard Game of Life rules.

- Live cell with fewer than 2 neighbors dies (underpopulation)
- Live cell with 2 or 3 neighbors survives
- Live cell with more than 3 neighbors dies (overpopulation)
- Dead cell with exactly 3 neighbors becomes alive (reproduction)
"""

import numpy as np


def determine_new_state(alive: bool, neighbors: int) -> bool:
    """Compute the next state of a single cell.

    Args:
        alive: Current state of the cell
        neighbors: Number of living neighbors (0-8)

    Returns:
        True if the cell is alive in the next generation
    """
    if alive:
        return neighbors in (2, 3)
    return neighbors == 3


def apply_rules(cells: np.ndarray, neighbor_counts: np.ndarray) -> np.ndarray:
    """Vectorized form of determine_new_state.

    Args:
        cells: Boolean array of current cell states
        neighbor_counts: Integer array of the same shape with neighbor counts

    Returns:
        New boolean array with the next cell states
    """
    # Birth: dead cell with exactly 3 neighbors
    birth_mask = ~cells & (neighbor_counts == 3)

    # Survival: live cell with 2 or 3 neighbors, everything else dies
    survival_mask = cells & ((neighbor_counts == 2) | (neighbor_counts == 3))

    return birth_mask | survival_mask
