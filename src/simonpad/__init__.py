"""SimonPad: the Simon memory game for the terminal, with a static web server."""

__version__ = "0.1.0"

# Core game
from .core import InputDispatcher, RoundController

__all__ = [
    "InputDispatcher",
    "RoundController",
]
