"""Protocol definitions for the game's observer pattern and collaborators."""

from .events import GameEvent
from .observers import AudioOutput, GameObserver, ScheduledTask, Scheduler, ScoreStore

__all__ = [
    # Events
    "GameEvent",
    # Observers and collaborators
    "AudioOutput",
    "GameObserver",
    "ScheduledTask",
    "Scheduler",
    "ScoreStore",
]
