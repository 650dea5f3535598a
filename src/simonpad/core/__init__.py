"""Core game logic: sequence, pacing, round state machine and input."""

from .controller import RoundController
from .input import Debouncer, InputDispatcher
from .pacing import PresentationPacing
from .scheduler import LoopScheduler
from .sequence import SequenceGenerator

__all__ = [
    "RoundController",
    "Debouncer",
    "InputDispatcher",
    "PresentationPacing",
    "LoopScheduler",
    "SequenceGenerator",
]
