"""Pytest fixtures for tests."""

from collections.abc import Callable, Iterable
from pathlib import Path
from tempfile import TemporaryDirectory
from typing import Any

import numpy as np
import pytest
import soundfile as sf

from simonpad.core import InputDispatcher, RoundController, SequenceGenerator
from simonpad.models import GameConfig, PadColor
from simonpad.protocols import GameEvent
from simonpad.storage import MemoryScoreStore


class ManualTask:
    """Handle returned by ManualScheduler.call_later."""

    def __init__(self, when: float, seq: int, callback: Callable[[], None]):
        self.when = when
        self.seq = seq
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """
    Scheduler driven by a virtual clock.

    Nothing runs until the test advances time, which makes presentation
    timing fully deterministic.
    """

    def __init__(self):
        self.now = 0.0
        self._tasks: list[ManualTask] = []
        self._seq = 0

    def time(self) -> float:
        return self.now

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualTask:
        task = ManualTask(self.now + max(delay, 0.0), self._seq, callback)
        self._seq += 1
        self._tasks.append(task)
        return task

    @property
    def pending(self) -> list[ManualTask]:
        return [t for t in self._tasks if not t.cancelled]

    def _pop_next(self, until: float | None = None) -> ManualTask | None:
        due = [t for t in self.pending if until is None or t.when <= until + 1e-9]
        if not due:
            return None
        task = min(due, key=lambda t: (t.when, t.seq))
        self._tasks.remove(task)
        return task

    def advance(self, seconds: float) -> None:
        """Move the clock forward, running every callback that falls due."""
        target = self.now + seconds
        while (task := self._pop_next(target)) is not None:
            self.now = max(self.now, task.when)
            task.callback()
        self.now = target

    def advance_ms(self, ms: float) -> None:
        self.advance(ms / 1000)

    def run_until_idle(self, limit: int = 10_000) -> None:
        """Run callbacks in time order until nothing is pending."""
        for _ in range(limit):
            task = self._pop_next()
            if task is None:
                return
            self.now = max(self.now, task.when)
            task.callback()
        raise RuntimeError("Scheduler did not become idle")


class RecordingAudio:
    """AudioOutput that records what would have been played."""

    def __init__(self):
        self.calls: list[tuple[str, PadColor | None]] = []

    def play_pad(self, color: PadColor) -> None:
        self.calls.append(("pad", color))

    def play_error(self) -> None:
        self.calls.append(("error", None))


class ScriptedGenerator(SequenceGenerator):
    """Returns pads from a fixed script, cycling when exhausted."""

    def __init__(self, script: Iterable[PadColor]):
        super().__init__()
        self.script = list(script)
        self._index = 0

    def next(self) -> PadColor:
        color = self.script[self._index % len(self.script)]
        self._index += 1
        return color


class EventRecorder:
    """GameObserver that keeps every event with its payload."""

    def __init__(self, scheduler: ManualScheduler | None = None):
        self.scheduler = scheduler
        self.events: list[tuple[GameEvent, dict[str, Any]]] = []
        self.times: list[float] = []

    def on_game_event(self, event: GameEvent, **kwargs: Any) -> None:
        self.events.append((event, kwargs))
        self.times.append(self.scheduler.now if self.scheduler else 0.0)

    def of(self, event: GameEvent) -> list[dict[str, Any]]:
        return [kwargs for e, kwargs in self.events if e == event]

    def names(self) -> list[GameEvent]:
        return [e for e, _ in self.events]


SCRIPT = [PadColor.GREEN, PadColor.RED, PadColor.YELLOW, PadColor.BLUE, PadColor.GREEN, PadColor.BLUE]


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def score_store():
    return MemoryScoreStore()


@pytest.fixture
def generator():
    return ScriptedGenerator(SCRIPT)


@pytest.fixture
def config(temp_dir):
    """Default config with storage redirected to a temp dir."""
    return GameConfig(storage_path=temp_dir / "storage.json")


@pytest.fixture
def controller(config, audio, score_store, scheduler, generator):
    ctrl = RoundController.from_config(config, audio, score_store, scheduler, generator)
    yield ctrl
    ctrl.destroy()


@pytest.fixture
def recorder(controller, scheduler):
    rec = EventRecorder(scheduler)
    controller.register_observer(rec)
    return rec


@pytest.fixture
def dispatcher(controller, config, scheduler):
    return InputDispatcher.from_config(controller, config, clock=scheduler.time)


def replay_sequence(controller: RoundController, scheduler: ManualScheduler) -> None:
    """Press every pad of the current sequence, 200 ms apart."""
    for color in controller.sequence:
        scheduler.advance_ms(200)
        controller.press_pad(color)


def wrong_pad(color: PadColor) -> PadColor:
    """Any pad other than `color`."""
    return next(c for c in PadColor if c != color)


@pytest.fixture
def sample_audio_array():
    """Generate sample audio data as NumPy array."""
    sample_rate = 44100
    duration = 0.1
    t = np.linspace(0, duration, int(sample_rate * duration), dtype=np.float32)
    return np.sin(2 * np.pi * 440 * t).astype(np.float32)


@pytest.fixture
def sounds_dir(temp_dir, sample_audio_array):
    """Sounds directory with samples for green and red only."""
    directory = temp_dir / "sounds"
    directory.mkdir()
    for color in (PadColor.GREEN, PadColor.RED):
        sf.write(str(directory / f"piano-{color.value}.wav"), sample_audio_array, 44100)
    return directory
