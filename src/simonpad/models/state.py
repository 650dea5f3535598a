"""Round state values for the game state machine.

These are plain frozen dataclasses rather than Pydantic models: they are
internal to the controller, created on every transition and never
serialized.
"""

from dataclasses import dataclass
from typing import ClassVar, Union

from .enums import PadColor, RoundPhase


@dataclass(frozen=True, slots=True)
class Idle:
    """No game in progress."""

    phase: ClassVar[RoundPhase] = RoundPhase.IDLE

    @property
    def sequence(self) -> tuple[PadColor, ...]:
        return ()


@dataclass(frozen=True, slots=True)
class Presenting:
    """The board is playing the sequence; player input is ignored."""

    phase: ClassVar[RoundPhase] = RoundPhase.PRESENTING

    sequence: tuple[PadColor, ...]
    position: int = 0  # Index of the next step to play


@dataclass(frozen=True, slots=True)
class AwaitingInput:
    """The player is replaying the sequence."""

    phase: ClassVar[RoundPhase] = RoundPhase.AWAITING_INPUT

    sequence: tuple[PadColor, ...]
    expected_index: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.expected_index <= len(self.sequence):
            raise ValueError(
                f"expected_index {self.expected_index} outside [0, {len(self.sequence)}]"
            )

    @property
    def expected(self) -> PadColor:
        """Pad the player must press next."""
        return self.sequence[self.expected_index]


@dataclass(frozen=True, slots=True)
class RoundComplete:
    """Sequence fully replayed; the next round is scheduled."""

    phase: ClassVar[RoundPhase] = RoundPhase.ROUND_COMPLETE

    sequence: tuple[PadColor, ...]


@dataclass(frozen=True, slots=True)
class GameOver:
    """A wrong pad ended the game. The round data is already cleared."""

    phase: ClassVar[RoundPhase] = RoundPhase.GAME_OVER

    final_level: int

    @property
    def sequence(self) -> tuple[PadColor, ...]:
        return ()


RoundState = Union[Idle, Presenting, AwaitingInput, RoundComplete, GameOver]
