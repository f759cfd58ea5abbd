"""Text rendering of a universe, one line per row."""

from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from .universe import Universe

LIVE_GLYPH = "*"
DEAD_GLYPH = "."


def _check_glyphs(live: str, dead: str) -> None:
    if len(live) != 1 or len(dead) != 1:
        raise ValueError(f"Glyphs must be single characters, got {live!r} and {dead!r}")
    if live == dead:
        raise ValueError(f"Live and dead glyphs must differ, both are {live!r}")


def render_lines(universe: "Universe", live: str = LIVE_GLYPH, dead: str = DEAD_GLYPH) -> Iterator[str]:
    """Lazily render a universe as text.

    Args:
        universe: Universe to render
        live: Glyph for living cells
        dead: Glyph for dead cells

    Yields:
        One string per row, with one glyph per cell in column order

    Raises:
        ValueError: If the glyphs are not distinct single characters
    """
    _check_glyphs(live, dead)
    for row in universe.rows():
        yield "".join(live if alive else dead for alive in row)


def render(universe: "Universe", live: str = LIVE_GLYPH, dead: str = DEAD_GLYPH) -> str:
    """Render a universe as a newline-separated string."""
    return "\n".join(render_lines(universe, live, dead))
