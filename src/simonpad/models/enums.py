"""Enumerations for the SimonPad game."""

from enum import Enum


class PadColor(str, Enum):
    """The four pads of the board."""

    GREEN = "green"
    RED = "red"
    YELLOW = "yellow"
    BLUE = "blue"


class RoundPhase(str, Enum):
    """Phase tag of the round state machine."""

    IDLE = "idle"
    PRESENTING = "presenting"  # Board is playing the sequence back
    AWAITING_INPUT = "awaiting_input"  # Player is replaying the sequence
    ROUND_COMPLETE = "round_complete"  # Sequence replayed, next round pending
    GAME_OVER = "game_over"


class InputSource(str, Enum):
    """Where a pad activation came from."""

    POINTER = "pointer"
    KEYBOARD = "keyboard"
