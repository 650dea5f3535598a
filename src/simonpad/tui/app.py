"""Terminal UI for the Simon game."""

import logging
import time
from collections.abc import Callable
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Footer, Header, Static

from simonpad.audio import SampleAudioOutput, SilentAudioOutput, ToneAudioOutput, create_audio_output
from simonpad.core import InputDispatcher, LoopScheduler, RoundController, SequenceGenerator
from simonpad.models import GameConfig
from simonpad.protocols import AudioOutput, Scheduler, ScoreStore
from simonpad.storage import JsonScoreStore

from .decorators import handle_action_errors
from .services import TUIService
from .services.tui_service import IDLE_MESSAGE
from .widgets import GameOverModal, PadBoard, RulesModal, StatusBar

logger = logging.getLogger(__name__)


def describe_audio(audio: AudioOutput) -> str:
    """Short label for the status bar."""
    if isinstance(audio, SampleAudioOutput):
        return f"Samples ({len(audio.loaded)}/4)"
    if isinstance(audio, ToneAudioOutput):
        return "Tones"
    if isinstance(audio, SilentAudioOutput):
        return "No Audio"
    return type(audio).__name__


class ControlButton(Button, can_focus=False):
    """Button that never takes focus, so Space and Enter always reach the game."""


class SimonPadApp(App):
    """
    Textual front end for the RoundController.

    Pure UI layer: game rules live in the controller, input normalization
    in the InputDispatcher, and the TUIService applies controller events
    to the widgets.

    Pad keys and start keys come from the config. Clicking a pad, or
    pressing Enter or Space while it has focus, works like pressing its key.
    """

    TITLE = "Simon Pad"

    # Pads take focus only when clicked or tabbed to
    AUTO_FOCUS = None

    CSS = """
    #message {
        height: 3;
        width: 100%;
        content-align: center middle;
        text-style: bold;
    }

    PadBoard.awaiting {
        background: $boost;
    }

    #controls {
        height: auto;
        align: center middle;
    }

    #controls Button {
        margin: 0 1;
        min-width: 10;
    }
    """

    BINDINGS = [
        Binding("m", "toggle_mute", "Mute", show=True),
        Binding("question_mark", "show_rules", "Rules", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        config: GameConfig,
        audio: Optional[AudioOutput] = None,
        score_store: Optional[ScoreStore] = None,
        scheduler: Optional[Scheduler] = None,
        generator: Optional[SequenceGenerator] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the Textual UI application.

        Collaborators default to the real implementations; tests inject
        fakes for audio, storage, timing and randomness.

        Args:
            config: Application configuration
            audio: Sound output (probed from config if None)
            score_store: High score storage (JSON file from config if None)
            scheduler: Timer source (the running asyncio loop if None)
            generator: Pad sequence source
            clock: Monotonic clock used for debouncing
        """
        super().__init__()
        self.config = config
        self.audio = audio if audio is not None else create_audio_output(config)
        self.score_store = score_store if score_store is not None else JsonScoreStore(config.storage_path)

        self.controller = RoundController.from_config(
            config,
            audio=self.audio,
            score_store=self.score_store,
            scheduler=scheduler or LoopScheduler(),
            generator=generator,
        )
        self.dispatcher = InputDispatcher.from_config(self.controller, config, clock=clock)
        self.tui_service = TUIService(self)
        self.live_message = IDLE_MESSAGE
        logger.info("SimonPadApp created")

    # =================================================================
    # Textual Lifecycle
    # =================================================================

    def compose(self) -> ComposeResult:
        key_hints = {color: key.upper() for key, color in self.config.key_map.items()}

        # App queries only search the active screen, which may be a modal
        self.message_line = Static(IDLE_MESSAGE, id="message")
        self.pad_board = PadBoard(key_hints)
        self.mute_button = ControlButton(self._mute_label(self.controller.muted), id="mute-btn")
        self.status_bar = StatusBar()

        yield Header()
        yield self.message_line
        yield self.pad_board
        with Horizontal(id="controls"):
            yield ControlButton("Start", variant="success", id="start-btn")
            yield ControlButton("Rules", id="rules-btn")
            yield self.mute_button
        yield self.status_bar
        yield Footer()

    def on_mount(self) -> None:
        self.controller.register_observer(self.tui_service)
        self.status_bar.update_state(
            level=self.controller.level,
            high_score=self.controller.high_score,
            muted=self.controller.muted,
            audio=describe_audio(self.audio),
        )
        logger.info("TUI mounted")

    def on_unmount(self) -> None:
        self.controller.destroy()
        logger.info("TUI unmounted")

    # =================================================================
    # View helpers (called by TUIService)
    # =================================================================

    def set_message(self, text: str) -> None:
        """Replace the live message line."""
        self.live_message = text
        self.message_line.update(text)

    def update_mute_button(self, muted: bool) -> None:
        self.mute_button.label = self._mute_label(muted)

    def show_game_over(self, final_level: int) -> None:
        """Open the game-over dialog; Retry starts a new game."""

        def handle_result(retry: bool | None) -> None:
            if retry:
                self.dispatcher.request_start()

        self.push_screen(GameOverModal(final_level), handle_result)

    @staticmethod
    def _mute_label(muted: bool) -> str:
        return "🔇" if muted else "🔊"

    # =================================================================
    # Input
    # =================================================================

    @property
    def modal_open(self) -> bool:
        return isinstance(self.screen, ModalScreen)

    def on_key(self, event: events.Key) -> None:
        """Route pad and start keys to the dispatcher."""
        if self.modal_open:
            return
        if self.dispatcher.handle_key(event.key):
            event.stop()
            event.prevent_default()

    def on_pad_board_pad_activated(self, message: PadBoard.PadActivated) -> None:
        self.dispatcher.on_pad_activated(message.color)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "start-btn":
            self.action_start_game()
        elif event.button.id == "rules-btn":
            self.action_show_rules()
        elif event.button.id == "mute-btn":
            self.action_toggle_mute()

    # =================================================================
    # Actions
    # =================================================================

    @handle_action_errors("start game")
    def action_start_game(self) -> None:
        self.dispatcher.request_start()

    @handle_action_errors("toggle mute")
    def action_toggle_mute(self) -> None:
        self.controller.toggle_mute()

    def action_show_rules(self) -> None:
        if self.modal_open:
            return
        self.push_screen(RulesModal(self.config.key_map, self.config.start_keys))
