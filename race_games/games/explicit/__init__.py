"""Games declared as explicit position graphs."""
from .graph import ExplicitGraph, ExplicitState, Position

__all__ = [
    "ExplicitGraph",
    "ExplicitState",
    "Position",
]
