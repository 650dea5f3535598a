"""Widget representing a single coloured pad."""

from textual import events
from textual.message import Message
from textual.widgets import Static

from simonpad.models import PAD_COLORS, PadColor


def _generate_pad_css() -> str:
    """Generate per-colour CSS from the pad colour table.

    Each pad is drawn dim at rest and at full strength while lit.
    CSS class names are the PadColor values.
    """
    css_lines = [
        "PadWidget {",
        "    width: 100%;",
        "    height: 100%;",
        "    content-align: center middle;",
        "    text-style: bold;",
        "}",
        "",
        "PadWidget:focus {",
        "    text-style: bold underline;",
        "}",
        "",
    ]

    for color, rgb in PAD_COLORS.items():
        hex_color = rgb.to_hex()
        css_lines.extend([
            f"PadWidget.{color.value} {{",
            f"    background: {hex_color} 25%;",
            f"    border: tall {hex_color} 40%;",
            "}",
            "",
            f"PadWidget.{color.value}.lit {{",
            f"    background: {hex_color};",
            f"    border: tall {hex_color};",
            "    color: $text;",
            "}",
            "",
        ])

    return "\n".join(css_lines)


class PadWidget(Static, can_focus=True):
    """
    One of the four pads (presentation only).

    Posts a Pressed message when clicked, or on Enter or Space while the
    pad has focus; the board decides what to do with it.
    """

    ACTIVATE_KEYS = ("enter", "space")

    DEFAULT_CSS = _generate_pad_css()

    class Pressed(Message):
        """Message posted when the pad is clicked or activated from the keyboard."""

        def __init__(self, color: PadColor):
            super().__init__()
            self.color = color

    def __init__(self, color: PadColor, key_hint: str | None = None) -> None:
        """
        Initialize pad widget.

        Args:
            color: The pad this widget shows
            key_hint: Keyboard key bound to the pad, shown under the name
        """
        super().__init__(id=f"pad-{color.value}", classes=color.value)
        self.color = color
        self.key_hint = key_hint
        self._lit = False
        label = color.value.upper()
        self.update(f"{label}\n[dim]{key_hint}[/dim]" if key_hint else label)

    @property
    def lit(self) -> bool:
        return self._lit

    def set_lit(self, lit: bool) -> None:
        if lit != self._lit:
            self._lit = lit
            self.set_class(lit, "lit")

    def on_click(self) -> None:
        """Handle click event - post message for parent to handle."""
        self.post_message(self.Pressed(self.color))

    def on_key(self, event: events.Key) -> None:
        # The key keeps bubbling so the start keys still reach the app
        if event.key in self.ACTIVATE_KEYS:
            self.post_message(self.Pressed(self.color))
