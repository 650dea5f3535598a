"""Protocols for the game controller's collaborators.

- GameObserver: reacts to controller events (UI, logging)
- AudioOutput: plays pad sounds and the error cue
- ScoreStore: persists the single high score
- Scheduler / ScheduledTask: cancellable one-shot timers
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from simonpad.models import PadColor

from .events import GameEvent


@runtime_checkable
class GameObserver(Protocol):
    """
    Observer that receives round controller events.

    Any object implementing this protocol can follow the game without
    the controller knowing about it (terminal UI, tests, loggers).
    """

    def on_game_event(self, event: GameEvent, **kwargs: Any) -> None:
        """
        Handle a game event.

        Args:
            event: The type of game event
            **kwargs: Event-specific data (see GameEvent)

        Error Handling:
            Exceptions raised by observers are caught and logged by the
            controller. They never change the game state.
        """
        ...


@runtime_checkable
class AudioOutput(Protocol):
    """
    Fire-and-forget sound output.

    Implementations must return immediately and must never raise:
    a missing sample or device degrades to a fallback tone or silence.
    """

    def play_pad(self, color: "PadColor") -> None:
        """Play the sound of a pad."""
        ...

    def play_error(self) -> None:
        """Play the game-over cue."""
        ...


@runtime_checkable
class ScoreStore(Protocol):
    """Best-effort, synchronous persistence of the high score."""

    def load(self) -> int:
        """Return the stored high score (0 when nothing is stored)."""
        ...

    def save(self, value: int) -> None:
        """Store a new high score."""
        ...


@runtime_checkable
class ScheduledTask(Protocol):
    """Handle of a pending timer."""

    def cancel(self) -> None:
        """Prevent the callback from running (no-op once it ran)."""
        ...


@runtime_checkable
class Scheduler(Protocol):
    """Runs callbacks after a delay on the game's single thread of control."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        """
        Schedule a callback.

        Args:
            delay: Delay in seconds
            callback: Zero-argument callable
        """
        ...
