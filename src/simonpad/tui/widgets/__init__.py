"""TUI widgets."""

from .game_over_modal import GameOverModal
from .pad_board import BOARD_ORDER, PadBoard, lit_duration_ms
from .pad_widget import PadWidget
from .rules_modal import RulesModal
from .status_bar import StatusBar

__all__ = [
    "BOARD_ORDER",
    "GameOverModal",
    "PadBoard",
    "PadWidget",
    "RulesModal",
    "StatusBar",
    "lit_duration_ms",
]
