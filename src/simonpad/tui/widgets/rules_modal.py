"""Modal dialog explaining how to play."""

from collections.abc import Mapping, Sequence

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label

from simonpad.models import PadColor


class RulesModal(ModalScreen[None]):
    """How-to-play text built from the active key bindings."""

    AUTO_FOCUS = "#got-it-btn"

    BINDINGS = [
        Binding("escape", "close", "Close", show=False),
    ]

    DEFAULT_CSS = """
    RulesModal {
        align: center middle;
    }

    #dialog {
        width: 60;
        height: auto;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }

    #title {
        width: 100%;
        content-align: center middle;
        text-style: bold;
        padding-bottom: 1;
    }

    #rules {
        width: 100%;
    }

    #got-it-btn {
        margin-top: 1;
        width: 100%;
    }
    """

    def __init__(self, key_map: Mapping[str, PadColor], start_keys: Sequence[str]) -> None:
        super().__init__()
        self.key_map = key_map
        self.start_keys = start_keys

    def rules_text(self) -> str:
        keys = ", ".join(f"{key.upper()} = {color.value}" for key, color in self.key_map.items())
        start = " or ".join(key.capitalize() for key in self.start_keys)
        return (
            "Watch the pads light up, then repeat the sequence.\n"
            "Each round adds one more pad, and the playback gets faster.\n"
            "One wrong pad ends the game.\n\n"
            f"Keys: {keys}\n"
            f"Start: {start} or the Start button\n"
            "M toggles sound, ? shows this help."
        )

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Label("How to play", id="title")
            yield Label(self.rules_text(), id="rules")
            yield Button("Got it", variant="primary", id="got-it-btn")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "got-it-btn":
            event.stop()
            self.dismiss(None)

    def action_close(self) -> None:
        self.dismiss(None)
