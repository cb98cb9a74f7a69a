"""Two-sided out-and-back race game."""
from .board import RaceRules
from .game import RaceGame, RaceState
from .rendering import render_array, render_text

__all__ = [
    "RaceRules",
    "RaceGame",
    "RaceState",
    "render_array",
    "render_text",
]
