"""Modal dialog shown when a game ends."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label


class GameOverModal(ModalScreen[bool]):
    """Shows the final level. Dismisses with True for Retry, False for Close."""

    AUTO_FOCUS = "#retry-btn"

    BINDINGS = [
        Binding("escape", "close", "Close", show=False),
    ]

    DEFAULT_CSS = """
    GameOverModal {
        align: center middle;
    }

    #dialog {
        width: 44;
        height: auto;
        background: $surface;
        border: thick $error;
        padding: 1 2;
    }

    #title {
        width: 100%;
        content-align: center middle;
        padding: 1 0;
        text-style: bold;
    }

    #final-score {
        width: 100%;
        content-align: center middle;
        color: $text-muted;
    }

    #button-container {
        width: 100%;
        height: auto;
        align: center middle;
        padding: 1 0;
    }

    #button-container Button {
        margin: 0 1;
        min-width: 12;
    }
    """

    def __init__(self, final_level: int) -> None:
        """
        Initialize the modal.

        Args:
            final_level: Level reached in the game that just ended
        """
        super().__init__()
        self.final_level = final_level

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Label("Game Over", id="title")
            yield Label(f"You reached level {self.final_level}", id="final-score")
            with Horizontal(id="button-container"):
                yield Button("Retry", variant="primary", id="retry-btn")
                yield Button("Close", variant="default", id="close-btn")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "retry-btn":
            event.stop()
            self.dismiss(True)
        elif event.button.id == "close-btn":
            event.stop()
            self.dismiss(False)

    def action_close(self) -> None:
        self.dismiss(False)
