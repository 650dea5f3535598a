"""Domain events for observer pattern."""

from enum import Enum


class GameEvent(Enum):
    """Events emitted by the round controller.

    Keyword payloads passed alongside each event are listed on the right.
    """

    GAME_STARTED = "game_started"                  # (none)
    PRESENTATION_STARTED = "presentation_started"  # level
    PAD_PRESENTED = "pad_presented"                # color, index, duration_ms
    AWAITING_INPUT = "awaiting_input"              # level
    PAD_PRESSED = "pad_pressed"                    # color, correct
    ROUND_COMPLETE = "round_complete"              # level
    GAME_OVER = "game_over"                        # final_level
    HIGH_SCORE_CHANGED = "high_score_changed"      # high_score
    MUTE_CHANGED = "mute_changed"                  # muted
    GAME_RESET = "game_reset"                      # (none)
