"""Common Conway's Game of Life patterns for seeding a universe."""

from typing import Dict, List, Optional, Tuple

from .universe import Universe


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (row, column) coordinates for living cells
            description: Optional description
        """
        self.name = name
        self.cells = [(int(row), int(column)) for row, column in cells]
        self.description = description

    def apply_to_universe(
        self, universe: Universe, offset_row: int = 0, offset_column: int = 0, clip: bool = False
    ) -> None:
        """Set the pattern's cells alive in a universe.

        Cells already alive in the universe are left as they are.

        Args:
            universe: Target universe
            offset_row: Vertical offset
            offset_column: Horizontal offset
            clip: Skip cells that fall outside the universe instead of raising

        Raises:
            IndexError: If a cell falls outside the universe and clip is False
        """
        for row, column in self.cells:
            try:
                universe.set(row + offset_row, column + offset_column, True)
            except IndexError:
                if not clip:
                    raise

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_row, min_column, max_row, max_column)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        rows, columns = zip(*self.cells)
        return (min(rows), min(columns), max(rows), max(columns))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size.

        Returns:
            Tuple of (height, width)
        """
        min_row, min_column, max_row, max_column = self.get_bounding_box()
        return (max_row - min_row + 1, max_column - min_column + 1)

    def normalize(self) -> "Pattern":
        """Return a new pattern with coordinates shifted to start at (0, 0)."""
        if not self.cells:
            return Pattern(self.name, [], self.description)

        min_row, min_column, _, _ = self.get_bounding_box()
        normalized_cells = [(row - min_row, column - min_column) for row, column in self.cells]

        return Pattern(self.name, normalized_cells, self.description)

    @classmethod
    def from_universe(cls, universe: Universe, name: str, description: str = "") -> "Pattern":
        """Create a pattern from the living cells of a universe.

        Args:
            universe: Source universe
            name: Pattern name
            description: Optional description

        Returns:
            New Pattern instance
        """
        cells = [(row, column) for row, column, alive in universe if alive]
        return cls(name, cells, description)

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, {len(self.cells)} cells)"


def _pulsar_cells() -> List[Tuple[int, int]]:
    arms = [0, 5, 7, 12]
    span = [2, 3, 4, 8, 9, 10]
    horizontal = [(row, column) for row in arms for column in span]
    vertical = [(row, column) for column in arms for row in span]
    return sorted(horizontal + vertical)


class PatternLibrary:
    """Manages an in-memory collection of patterns."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still life patterns
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))

        self.add_pattern(
            Pattern(
                "Beehive",
                [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2)],
                "Beehive still life",
            )
        )

        self.add_pattern(
            Pattern(
                "Loaf",
                [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 3), (3, 2)],
                "Loaf still life",
            )
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(0, 0), (0, 1), (0, 2)], "Period-2 oscillator"))

        self.add_pattern(
            Pattern(
                "Toad",
                [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)],
                "Period-2 oscillator",
            )
        )

        self.add_pattern(
            Pattern(
                "Beacon",
                [(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)],
                "Period-2 oscillator",
            )
        )

        self.add_pattern(Pattern("Pulsar", _pulsar_cells(), "Period-3 oscillator"))

        # Spaceships
        self.add_pattern(
            Pattern(
                "Glider",
                [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)],
                "Smallest spaceship, moves one cell diagonally every 4 generations",
            )
        )

        self.add_pattern(
            Pattern(
                "Lightweight Spaceship",
                [(0, 0), (0, 3), (1, 4), (2, 0), (2, 4), (3, 1), (3, 2), (3, 3), (3, 4)],
                "LWSS - Period-4 spaceship",
            )
        )

        # Methuselahs
        self.add_pattern(
            Pattern(
                "R-pentomino",
                [(0, 1), (0, 2), (1, 0), (1, 1), (2, 1)],
                "Famous methuselah that stabilizes after 1103 generations",
            )
        )

        self.add_pattern(
            Pattern(
                "Diehard",
                [(0, 6), (1, 0), (1, 1), (2, 1), (2, 5), (2, 6), (2, 7)],
                "Dies after exactly 130 generations",
            )
        )

        self.add_pattern(
            Pattern(
                "Acorn",
                [(0, 1), (1, 3), (2, 0), (2, 1), (2, 4), (2, 5), (2, 6)],
                "Takes 5206 generations to stabilize",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library, replacing any with the same name."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Args:
            name: Pattern name

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Returns:
            Dictionary mapping categories to pattern name lists
        """
        categories: Dict[str, List[str]] = {
            "Still Life": ["Block", "Beehive", "Loaf"],
            "Oscillators": ["Blinker", "Toad", "Beacon", "Pulsar"],
            "Spaceships": ["Glider", "Lightweight Spaceship"],
            "Methuselahs": ["R-pentomino", "Diehard", "Acorn"],
            "Custom": [],
        }

        builtin = {name for names in categories.values() for name in names}
        for name in self._patterns:
            if name not in builtin:
                categories["Custom"].append(name)

        return categories
