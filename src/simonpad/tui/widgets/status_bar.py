"""Status bar widget showing level, high score and audio state."""

from textual.widgets import Static


class StatusBar(Static):
    """
    Status bar displaying current game state.

    Shows:
    - Current level
    - High score
    - Audio output and mute state
    """

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $panel;
        color: $text;
        padding: 0 1;
    }

    StatusBar.muted {
        background: $warning 30%;
    }
    """

    def __init__(self) -> None:
        super().__init__(id="status")
        self._level = 0
        self._high_score = 0
        self._muted = False
        self._audio = "No Audio"
        self._update_display()

    @property
    def level(self) -> int:
        return self._level

    @property
    def high_score(self) -> int:
        return self._high_score

    def update_state(
        self,
        level: int | None = None,
        high_score: int | None = None,
        muted: bool | None = None,
        audio: str | None = None,
    ) -> None:
        """Update any subset of the displayed values."""
        if level is not None:
            self._level = level
        if high_score is not None:
            self._high_score = high_score
        if muted is not None:
            self._muted = muted
        if audio is not None:
            self._audio = audio
        self._update_display()

    def _update_display(self) -> None:
        self.set_class(self._muted, "muted")
        audio_text = "🔇 Muted" if self._muted else f"🔊 {self._audio}"
        self.update(
            f"Level {self._level} | Best {self._high_score} | {audio_text}"
        )
