"""
Round controller - the game state machine.

UI-agnostic: the terminal UI, tests and any other front end drive it
through `start()` and `press_pad()` and follow it as GameObservers.

States:

    Idle ──start──▶ Presenting ──last step──▶ AwaitingInput
                        ▲                         │ │
                        │ round delay             │ └─wrong pad──▶ GameOver ──start──▶ …
                        └──── RoundComplete ◀─────┘ all pads matched

Timing lives in a list of scheduled tasks owned by the controller. Every
reset cancels that list and bumps a generation counter, so a callback
scheduled for an earlier game can never touch the current one.
"""

import logging
from collections.abc import Callable
from typing import Any, Optional

from simonpad.model_manager import ObserverManager
from simonpad.models import (
    AwaitingInput,
    GameConfig,
    GameOver,
    Idle,
    PadColor,
    Presenting,
    RoundComplete,
    RoundPhase,
    RoundState,
)
from simonpad.protocols import AudioOutput, GameEvent, GameObserver, ScheduledTask, Scheduler, ScoreStore

from .pacing import PresentationPacing
from .sequence import SequenceGenerator

logger = logging.getLogger(__name__)


class RoundController:
    """
    Owns the round state, the target sequence and the high score.

    Responsibilities:
    - State transitions (start, present, replay, advance, game over)
    - Presentation timing through the injected Scheduler
    - High score bookkeeping through the injected ScoreStore
    - Sound cues through the injected AudioOutput (unless muted)
    - Event notification to registered GameObservers

    NOT responsible for:
    - Debouncing or mapping raw input (see InputDispatcher)
    - Rendering
    """

    def __init__(
        self,
        audio: AudioOutput,
        score_store: ScoreStore,
        scheduler: Scheduler,
        generator: Optional[SequenceGenerator] = None,
        pacing: Optional[PresentationPacing] = None,
        lead_in_ms: int = 350,
        round_delay_ms: int = 450,
        muted: bool = False,
    ):
        """
        Initialize the controller in the Idle state.

        Args:
            audio: Sound output for pad tones and the error cue
            score_store: Persistence for the high score
            scheduler: Timer source for presentation pacing
            generator: Source of new pads (random by default)
            pacing: Presentation speed curve
            lead_in_ms: Pause before the first step of a new game
            round_delay_ms: Pause between a completed round and the next presentation
            muted: Initial mute state
        """
        self._audio = audio
        self._score_store = score_store
        self._scheduler = scheduler
        self._generator = generator or SequenceGenerator()
        self._pacing = pacing or PresentationPacing()
        self._lead_in_ms = lead_in_ms
        self._round_delay_ms = round_delay_ms
        self._muted = muted

        self._state: RoundState = Idle()
        self._pending: list[ScheduledTask] = []
        self._generation = 0
        self._destroyed = False
        self._observers = ObserverManager[GameObserver](observer_type_name="game")

        self._high_score = self._score_store.load()
        logger.info(f"RoundController initialized (high score {self._high_score})")

    @classmethod
    def from_config(
        cls,
        config: GameConfig,
        audio: AudioOutput,
        score_store: ScoreStore,
        scheduler: Scheduler,
        generator: Optional[SequenceGenerator] = None,
    ) -> "RoundController":
        """Create a controller using the timing settings of a GameConfig."""
        return cls(
            audio=audio,
            score_store=score_store,
            scheduler=scheduler,
            generator=generator,
            pacing=PresentationPacing(config.pacing),
            lead_in_ms=config.lead_in_ms,
            round_delay_ms=config.round_delay_ms,
            muted=config.muted,
        )

    # =================================================================
    # Observers
    # =================================================================

    def register_observer(self, observer: GameObserver) -> None:
        """Register an observer to receive game events."""
        self._observers.register(observer)

    def unregister_observer(self, observer: GameObserver) -> None:
        """Unregister an observer."""
        self._observers.unregister(observer)

    def _notify(self, event: GameEvent, **kwargs: Any) -> None:
        self._observers.notify("on_game_event", event, **kwargs)

    # =================================================================
    # Query
    # =================================================================

    @property
    def state(self) -> RoundState:
        return self._state

    @property
    def phase(self) -> RoundPhase:
        return self._state.phase

    @property
    def sequence(self) -> tuple[PadColor, ...]:
        return self._state.sequence

    @property
    def level(self) -> int:
        """Current level, i.e. the length of the target sequence."""
        return len(self._state.sequence)

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def muted(self) -> bool:
        return self._muted

    @property
    def can_start(self) -> bool:
        """True when no game is running (Idle or GameOver)."""
        return not self._destroyed and isinstance(self._state, (Idle, GameOver))

    @property
    def pending_tasks(self) -> int:
        """Number of scheduled callbacks not yet run or cancelled."""
        return len(self._pending)

    # =================================================================
    # Commands
    # =================================================================

    def start(self) -> bool:
        """
        Start a new game (also used to retry after game over).

        Returns:
            True if a game was started, False if one is already running
        """
        if not self.can_start:
            logger.debug(f"Start ignored in phase {self.phase.value}")
            return False

        self._reset_round()
        logger.info("Game started")
        self._notify(GameEvent.GAME_STARTED)
        self._begin_presentation((self._generator.next(),), self._lead_in_ms)
        return True

    def press_pad(self, color: PadColor) -> bool:
        """
        Handle one logical pad press (already debounced).

        Presses outside AwaitingInput are ignored.

        Returns:
            True if the press was evaluated against the sequence
        """
        state = self._state
        if not isinstance(state, AwaitingInput):
            logger.debug(f"Pad {color.value} ignored in phase {self.phase.value}")
            return False

        self._play_pad(color)
        if color != state.expected:
            logger.info(f"Wrong pad {color.value}, expected {state.expected.value}")
            self._notify(GameEvent.PAD_PRESSED, color=color, correct=False)
            self._game_over()
            return True

        self._notify(GameEvent.PAD_PRESSED, color=color, correct=True)
        expected_index = state.expected_index + 1
        if expected_index == len(state.sequence):
            self._complete_round(state.sequence)
        else:
            self._state = AwaitingInput(state.sequence, expected_index)
        return True

    def set_muted(self, muted: bool) -> None:
        """Enable or disable all sound output. Game state is not affected."""
        if muted == self._muted:
            return
        self._muted = muted
        logger.info(f"Audio {'muted' if muted else 'unmuted'}")
        self._notify(GameEvent.MUTE_CHANGED, muted=muted)

    def toggle_mute(self) -> bool:
        """Flip the mute state and return the new value."""
        self.set_muted(not self._muted)
        return self._muted

    def reset(self) -> None:
        """Abandon any game in progress and return to Idle."""
        self._reset_round()
        self._notify(GameEvent.GAME_RESET)

    def destroy(self) -> None:
        """Cancel all timers and drop observers. The controller is unusable afterwards."""
        if self._destroyed:
            return
        self._reset_round()
        self._observers.clear()
        self._destroyed = True
        logger.info("RoundController destroyed")

    # =================================================================
    # Transitions
    # =================================================================

    def _reset_round(self) -> None:
        """Cancel pending timers and clear sequence/level/index (Idle entry)."""
        self._cancel_pending()
        self._generation += 1
        self._state = Idle()

    def _begin_presentation(self, sequence: tuple[PadColor, ...], delay_ms: int) -> None:
        # Input is locked from here on, even during the lead-in
        self._state = Presenting(sequence, 0)
        self._schedule(delay_ms, self._present_step)

    def _present_step(self) -> None:
        state = self._state
        if not isinstance(state, Presenting):
            return

        sequence, index = state.sequence, state.position
        if index == 0:
            logger.debug(f"Presenting level {len(sequence)}")
            self._notify(GameEvent.PRESENTATION_STARTED, level=len(sequence))
        if index >= len(sequence):
            self._state = AwaitingInput(sequence, 0)
            self._notify(GameEvent.AWAITING_INPUT, level=len(sequence))
            return

        color = sequence[index]
        self._play_pad(color)
        self._notify(
            GameEvent.PAD_PRESENTED,
            color=color,
            index=index,
            duration_ms=self._pacing.flash_ms(len(sequence), index),
        )
        self._state = Presenting(sequence, index + 1)
        self._schedule(self._pacing.step_delay_ms(len(sequence), index), self._present_step)

    def _complete_round(self, sequence: tuple[PadColor, ...]) -> None:
        self._state = RoundComplete(sequence)
        level = len(sequence)
        logger.info(f"Level {level} complete")
        self._record_score(level)
        self._notify(GameEvent.ROUND_COMPLETE, level=level)
        self._schedule(self._round_delay_ms, self._advance_round)

    def _advance_round(self) -> None:
        state = self._state
        if not isinstance(state, RoundComplete):
            return
        self._begin_presentation(state.sequence + (self._generator.next(),), 0)

    def _game_over(self) -> None:
        final_level = self.level
        self._cancel_pending()
        self._play_error()
        self._record_score(final_level)
        self._state = GameOver(final_level)
        logger.info(f"Game over at level {final_level}")
        self._notify(GameEvent.GAME_OVER, final_level=final_level)

    # =================================================================
    # Side effects
    # =================================================================

    def _record_score(self, level: int) -> None:
        if level <= self._high_score:
            return
        self._high_score = level
        self._score_store.save(level)
        self._notify(GameEvent.HIGH_SCORE_CHANGED, high_score=level)

    def _play_pad(self, color: PadColor) -> None:
        if not self._muted:
            self._audio.play_pad(color)

    def _play_error(self) -> None:
        if not self._muted:
            self._audio.play_error()

    # =================================================================
    # Scheduling
    # =================================================================

    def _schedule(self, delay_ms: int, callback: Callable[[], None]) -> None:
        generation = self._generation
        task: Optional[ScheduledTask] = None

        def run() -> None:
            if task in self._pending:
                self._pending.remove(task)
            if generation != self._generation or self._destroyed:
                logger.debug("Dropped stale timer callback")
                return
            callback()

        task = self._scheduler.call_later(delay_ms / 1000, run)
        self._pending.append(task)

    def _cancel_pending(self) -> None:
        for task in self._pending:
            task.cancel()
        self._pending.clear()
