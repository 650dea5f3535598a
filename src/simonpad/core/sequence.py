"""Random pad sequence generation."""

import random
from typing import Optional

from simonpad.models import PadColor


class SequenceGenerator:
    """
    Produces the next pad to append to the round sequence.

    Each call is an independent uniform draw over all pads; repeats are
    allowed. The random source can be injected for reproducible games.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self._pads = tuple(PadColor)

    def next(self) -> PadColor:
        """Return a uniformly random pad."""
        return self._rng.choice(self._pads)
