"""Conway's Game of Life on a finite, bounded universe."""

__version__ = "0.1.0"

from .core.universe import Universe
from .core.game import Game
from .core.patterns import Pattern, PatternLibrary
from .core.render import render, render_lines

__all__ = ["Universe", "Game", "Pattern", "PatternLibrary", "render", "render_lines"]
