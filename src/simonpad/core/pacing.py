"""Presentation pacing: how fast the board plays a sequence back."""

from simonpad.models import PacingConfig


class PresentationPacing:
    """
    Per-step timing of a presentation.

    Longer sequences are played faster, and within one sequence each step
    is a little quicker than the previous one. Both effects stop at fixed
    floors so every step stays perceivable.

    For a sequence of length L, step i:
        base(L)  = max(base_delay - L * level_step, base_floor)
        delay    = max(base(L) - i * position_step, min_step_delay)
        flash    = max(base(L) - i * position_step, min_flash)
    """

    def __init__(self, config: PacingConfig | None = None):
        self.config = config or PacingConfig()

    def base_delay_ms(self, length: int) -> int:
        """Base step delay for a sequence of the given length."""
        cfg = self.config
        return max(cfg.base_delay_ms - length * cfg.level_step_ms, cfg.base_floor_ms)

    def step_delay_ms(self, length: int, index: int) -> int:
        """Time between the start of step `index` and the next step."""
        cfg = self.config
        return max(self.base_delay_ms(length) - index * cfg.position_step_ms, cfg.min_step_delay_ms)

    def flash_ms(self, length: int, index: int) -> int:
        """How long the pad of step `index` stays lit."""
        cfg = self.config
        return max(self.base_delay_ms(length) - index * cfg.position_step_ms, cfg.min_flash_ms)
