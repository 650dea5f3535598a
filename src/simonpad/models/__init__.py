"""Data models for the SimonPad game."""

from .color import PAD_COLORS, Color
from .config import GameConfig, PacingConfig, ServerConfig
from .enums import InputSource, PadColor, RoundPhase
from .score import HIGH_SCORE_KEY, HighScoreRecord
from .state import AwaitingInput, GameOver, Idle, Presenting, RoundComplete, RoundState

__all__ = [
    # Config
    "GameConfig",
    "PacingConfig",
    "ServerConfig",
    # Models
    "Color",
    "HighScoreRecord",
    "HIGH_SCORE_KEY",
    "PAD_COLORS",
    # Enums
    "InputSource",
    "PadColor",
    "RoundPhase",
    # Round state
    "AwaitingInput",
    "GameOver",
    "Idle",
    "Presenting",
    "RoundComplete",
    "RoundState",
]
