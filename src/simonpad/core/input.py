"""Input normalization: debouncing and key mapping in front of the controller."""

import logging
import time
from collections.abc import Callable, Iterable, Mapping

from simonpad.models import GameConfig, InputSource, PadColor

from .controller import RoundController

logger = logging.getLogger(__name__)


class Debouncer:
    """
    Drops inputs arriving within `window_ms` of the previously accepted one.

    Guards against a single physical action being delivered twice, e.g. a
    click reported both as mouse-down and as a keypress.
    """

    def __init__(self, window_ms: int = 100, clock: Callable[[], float] = time.monotonic):
        self.window_ms = window_ms
        self._clock = clock
        self._last_accepted: float | None = None

    def accept(self) -> bool:
        """Return True and remember the time if the input should pass."""
        now = self._clock()
        if self._last_accepted is not None and (now - self._last_accepted) * 1000 < self.window_ms:
            return False
        self._last_accepted = now
        return True

    def reset(self) -> None:
        self._last_accepted = None


class InputDispatcher:
    """
    Turns raw pointer and keyboard input into controller commands.

    Pad keys map to pad activations, start keys request a new game. All pad
    activations, pointer or keyboard, share one debouncer.
    """

    def __init__(
        self,
        controller: RoundController,
        key_map: Mapping[str, PadColor],
        start_keys: Iterable[str] = ("space", "enter"),
        debounce_ms: int = 100,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.controller = controller
        self.key_map = {key.lower(): color for key, color in key_map.items()}
        self.start_keys = frozenset(key.lower() for key in start_keys)
        self.debouncer = Debouncer(debounce_ms, clock)

    @classmethod
    def from_config(
        cls,
        controller: RoundController,
        config: GameConfig,
        clock: Callable[[], float] = time.monotonic,
    ) -> "InputDispatcher":
        return cls(
            controller,
            key_map=config.key_map,
            start_keys=config.start_keys,
            debounce_ms=config.debounce_ms,
            clock=clock,
        )

    def on_pad_activated(self, color: PadColor, source: InputSource = InputSource.POINTER) -> bool:
        """
        Forward a pad activation to the controller unless it is a bounce.

        Returns:
            True if the controller evaluated the press
        """
        if not self.debouncer.accept():
            logger.debug(f"Debounced {source.value} press on {color.value}")
            return False
        return self.controller.press_pad(color)

    def request_start(self) -> bool:
        """Start a game if none is running."""
        return self.controller.start()

    def handle_key(self, key: str) -> bool:
        """
        Dispatch a key name (Textual naming, e.g. "a", "space", "enter").

        Returns:
            True if the key is bound to a game action
        """
        key = key.lower()
        color = self.key_map.get(key)
        if color is not None:
            self.on_pad_activated(color, InputSource.KEYBOARD)
            return True
        if key in self.start_keys:
            self.request_start()
            return True
        return False
