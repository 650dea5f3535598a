"""2x2 board of pad widgets."""

from collections.abc import Mapping

from textual.app import ComposeResult
from textual.containers import Container
from textual.message import Message
from textual.timer import Timer

from simonpad.models import PadColor

from .pad_widget import PadWidget

# Board layout, top-left to bottom-right
BOARD_ORDER = (PadColor.GREEN, PadColor.RED, PadColor.YELLOW, PadColor.BLUE)

MIN_LIT_MS = 80
LIT_TRIM_MS = 40


def lit_duration_ms(flash_ms: int) -> int:
    """How long a pad stays lit for a flash of `flash_ms`.

    The light goes out slightly before the next step so two flashes of
    the same pad read as two.
    """
    return max(flash_ms - LIT_TRIM_MS, MIN_LIT_MS)


class PadBoard(Container):
    """
    Layout container for the four pads.

    Handles lighting pads for a given time and forwards clicks to the
    parent as PadActivated messages.
    """

    DEFAULT_CSS = """
    PadBoard {
        layout: grid;
        grid-size: 2 2;
        grid-gutter: 1 2;
        padding: 1 2;
        height: 1fr;
    }
    """

    class PadActivated(Message):
        """Message posted when any pad is clicked."""

        def __init__(self, color: PadColor):
            super().__init__()
            self.color = color

    def __init__(self, key_hints: Mapping[PadColor, str] | None = None) -> None:
        super().__init__(id="board")
        self._key_hints = dict(key_hints or {})
        self.pad_widgets: dict[PadColor, PadWidget] = {}
        self._timers: dict[PadColor, Timer] = {}

    def compose(self) -> ComposeResult:
        for color in BOARD_ORDER:
            widget = PadWidget(color, self._key_hints.get(color))
            self.pad_widgets[color] = widget
            yield widget

    def flash(self, color: PadColor, duration_ms: int) -> None:
        """
        Light a pad and switch it off again later.

        Re-flashing a lit pad restarts its timer.

        Args:
            color: Pad to light
            duration_ms: Flash duration before trimming
        """
        widget = self.pad_widgets.get(color)
        if widget is None:
            return

        timer = self._timers.pop(color, None)
        if timer is not None:
            timer.stop()

        widget.set_lit(True)
        self._timers[color] = self.set_timer(
            lit_duration_ms(duration_ms) / 1000, lambda: self._unlight(color)
        )

    def clear(self) -> None:
        """Switch every pad off immediately."""
        for timer in self._timers.values():
            timer.stop()
        self._timers.clear()
        for widget in self.pad_widgets.values():
            widget.set_lit(False)

    def _unlight(self, color: PadColor) -> None:
        self._timers.pop(color, None)
        self.pad_widgets[color].set_lit(False)

    def on_pad_widget_pressed(self, message: PadWidget.Pressed) -> None:
        """Forward pad clicks up to the app."""
        message.stop()
        self.post_message(self.PadActivated(message.color))
