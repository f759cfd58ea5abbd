"""Core cellular automaton logic."""

from .universe import Universe
from .game import Game
from .patterns import Pattern, PatternLibrary
from .render import render_lines
from .rules import apply_rules, determine_new_state

__all__ = [
    "Universe",
    "Game",
    "Pattern",
    "PatternLibrary",
    "render_lines",
    "apply_rules",
    "determine_new_state",
]
