"""Service for keeping the terminal UI in sync with the round controller."""

import logging
from typing import TYPE_CHECKING, Any

from simonpad.models import PadColor
from simonpad.protocols import GameEvent, GameObserver
from simonpad.tui.widgets import PadBoard, StatusBar

if TYPE_CHECKING:
    from simonpad.tui.app import SimonPadApp

logger = logging.getLogger(__name__)

IDLE_MESSAGE = "Press Start or Space to begin."
READY_MESSAGE = "Get ready"
YOUR_TURN_MESSAGE = "Your turn"

PRESS_FLASH_MS = 200


def level_message(level: int) -> str:
    return f"Level {level}"


def game_over_message(final_level: int) -> str:
    return f"Game Over. You reached {final_level}."


class TUIService(GameObserver):
    """
    Observes the RoundController and updates the board, the status bar
    and the live message line.

    Runs on the event loop thread: the controller's timers share Textual's
    loop, so widgets can be touched directly.
    """

    def __init__(self, app: "SimonPadApp"):
        self.app = app
        self._handlers = {
            GameEvent.GAME_STARTED: self._handle_game_started,
            GameEvent.PRESENTATION_STARTED: self._handle_presentation_started,
            GameEvent.PAD_PRESENTED: self._handle_pad_presented,
            GameEvent.AWAITING_INPUT: self._handle_awaiting_input,
            GameEvent.PAD_PRESSED: self._handle_pad_pressed,
            GameEvent.ROUND_COMPLETE: self._handle_round_complete,
            GameEvent.GAME_OVER: self._handle_game_over,
            GameEvent.HIGH_SCORE_CHANGED: self._handle_high_score_changed,
            GameEvent.MUTE_CHANGED: self._handle_mute_changed,
            GameEvent.GAME_RESET: self._handle_game_reset,
        }
        logger.info("TUIService initialized")

    def on_game_event(self, event: GameEvent, **kwargs: Any) -> None:
        handler = self._handlers.get(event)
        if handler is None:
            logger.warning(f"TUIService received unknown game event: {event}")
            return
        try:
            handler(**kwargs)
        except Exception as e:
            logger.error(f"Error handling game event {event}: {e}")

    @property
    def board(self) -> PadBoard:
        return self.app.pad_board

    @property
    def status(self) -> StatusBar:
        return self.app.status_bar

    # =================================================================
    # Handlers
    # =================================================================

    def _handle_game_started(self) -> None:
        self.board.clear()
        self.status.update_state(level=0)
        self.app.set_message(READY_MESSAGE)

    def _handle_presentation_started(self, level: int) -> None:
        self.board.remove_class("awaiting")
        self.status.update_state(level=level)
        self.app.set_message(level_message(level))

    def _handle_pad_presented(self, color: PadColor, index: int, duration_ms: int) -> None:
        self.board.flash(color, duration_ms)

    def _handle_awaiting_input(self, level: int) -> None:
        self.board.add_class("awaiting")
        self.app.set_message(YOUR_TURN_MESSAGE)

    def _handle_pad_pressed(self, color: PadColor, correct: bool) -> None:
        self.board.flash(color, PRESS_FLASH_MS)

    def _handle_round_complete(self, level: int) -> None:
        self.board.remove_class("awaiting")

    def _handle_game_over(self, final_level: int) -> None:
        self.board.remove_class("awaiting")
        self.status.update_state(level=0)
        self.app.set_message(game_over_message(final_level))
        self.app.show_game_over(final_level)

    def _handle_high_score_changed(self, high_score: int) -> None:
        self.status.update_state(high_score=high_score)

    def _handle_mute_changed(self, muted: bool) -> None:
        self.status.update_state(muted=muted)
        self.app.update_mute_button(muted)

    def _handle_game_reset(self) -> None:
        self.board.remove_class("awaiting")
        self.board.clear()
        self.status.update_state(level=0)
        self.app.set_message(IDLE_MESSAGE)
