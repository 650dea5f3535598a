"""Tests for the RoundController state machine."""

from unittest.mock import Mock

import pytest

from conftest import SCRIPT, EventRecorder, ManualScheduler, RecordingAudio, ScriptedGenerator, replay_sequence, wrong_pad
from simonpad.core import RoundController
from simonpad.models import AwaitingInput, GameOver, Idle, PadColor, Presenting, RoundComplete, RoundPhase
from simonpad.protocols import GameEvent, GameObserver
from simonpad.storage import JsonScoreStore, MemoryScoreStore


def run_presentation(scheduler: ManualScheduler) -> None:
    scheduler.run_until_idle()


def complete_rounds(controller: RoundController, scheduler: ManualScheduler, rounds: int) -> None:
    """Start a game and play `rounds` rounds without mistakes."""
    controller.start()
    for i in range(rounds):
        run_presentation(scheduler)
        assert controller.phase == RoundPhase.AWAITING_INPUT
        replay_sequence(controller, scheduler)
        assert controller.phase == RoundPhase.ROUND_COMPLETE
        if i < rounds - 1:
            scheduler.advance_ms(450)


@pytest.mark.unit
class TestInitialState:
    """Controller state before any game."""

    def test_starts_idle(self, controller):
        assert isinstance(controller.state, Idle)
        assert controller.phase == RoundPhase.IDLE
        assert controller.sequence == ()
        assert controller.level == 0
        assert controller.can_start

    def test_loads_high_score_from_store(self, config, audio, scheduler, generator):
        controller = RoundController.from_config(config, audio, MemoryScoreStore(7), scheduler, generator)
        assert controller.high_score == 7

    def test_muted_from_config(self, config, audio, score_store, scheduler, generator):
        config = config.model_copy(update={"muted": True})
        controller = RoundController.from_config(config, audio, score_store, scheduler, generator)
        assert controller.muted


@pytest.mark.unit
class TestStart:
    """Starting a game."""

    def test_start_enters_presenting_with_one_pad(self, controller, recorder):
        assert controller.start() is True

        assert isinstance(controller.state, Presenting)
        assert controller.sequence == (SCRIPT[0],)
        assert controller.level == 1
        assert recorder.names() == [GameEvent.GAME_STARTED]

    def test_first_step_waits_for_lead_in(self, controller, scheduler, audio, recorder):
        controller.start()

        scheduler.advance_ms(349)
        assert recorder.of(GameEvent.PAD_PRESENTED) == []
        assert audio.calls == []

        scheduler.advance_ms(1)
        assert recorder.of(GameEvent.PRESENTATION_STARTED) == [{"level": 1}]
        assert recorder.of(GameEvent.PAD_PRESENTED) == [
            {"color": SCRIPT[0], "index": 0, "duration_ms": 492}
        ]
        assert audio.calls == [("pad", SCRIPT[0])]

    def test_presentation_ends_in_awaiting_input(self, controller, scheduler, recorder):
        controller.start()
        scheduler.advance_ms(350 + 491)
        assert controller.phase == RoundPhase.PRESENTING

        scheduler.advance_ms(1)
        assert isinstance(controller.state, AwaitingInput)
        assert controller.state.expected_index == 0
        assert recorder.of(GameEvent.AWAITING_INPUT) == [{"level": 1}]

    @pytest.mark.parametrize("phase_setup", ["presenting", "awaiting", "round_complete"])
    def test_start_ignored_while_game_running(self, controller, scheduler, phase_setup):
        controller.start()
        if phase_setup in ("awaiting", "round_complete"):
            run_presentation(scheduler)
        if phase_setup == "round_complete":
            replay_sequence(controller, scheduler)
        state = controller.state

        assert controller.start() is False
        assert controller.state is state

    def test_start_from_game_over(self, controller, scheduler, recorder):
        controller.start()
        run_presentation(scheduler)
        controller.press_pad(wrong_pad(controller.sequence[0]))
        assert controller.phase == RoundPhase.GAME_OVER

        assert controller.start() is True
        assert controller.phase == RoundPhase.PRESENTING
        assert controller.level == 1


@pytest.mark.unit
class TestRounds:
    """Replaying sequences and advancing rounds."""

    @pytest.mark.parametrize("rounds", [1, 2, 3, 5, 8])
    def test_sequence_length_equals_rounds_completed(self, controller, scheduler, rounds):
        complete_rounds(controller, scheduler, rounds)

        assert isinstance(controller.state, RoundComplete)
        assert len(controller.sequence) == rounds
        assert controller.sequence == tuple(SCRIPT[i % len(SCRIPT)] for i in range(rounds))

    def test_correct_press_advances_expected_index(self, controller, scheduler):
        complete_rounds(controller, scheduler, 1)
        scheduler.advance_ms(450)
        run_presentation(scheduler)

        controller.press_pad(controller.sequence[0])

        assert isinstance(controller.state, AwaitingInput)
        assert controller.state.expected_index == 1

    def test_round_complete_waits_before_next_presentation(self, controller, scheduler, recorder):
        complete_rounds(controller, scheduler, 1)
        assert recorder.of(GameEvent.ROUND_COMPLETE) == [{"level": 1}]

        scheduler.advance_ms(449)
        assert controller.phase == RoundPhase.ROUND_COMPLETE

        scheduler.advance_ms(1)
        assert controller.phase == RoundPhase.PRESENTING
        assert controller.sequence == (SCRIPT[0], SCRIPT[1])
        # No lead-in after the first round
        assert len(recorder.of(GameEvent.PAD_PRESENTED)) == 2

    def test_next_sequence_extends_previous(self, controller, scheduler):
        complete_rounds(controller, scheduler, 3)
        previous = controller.sequence
        scheduler.advance_ms(450)

        assert controller.sequence[:-1] == previous
        assert len(controller.sequence) == len(previous) + 1

    def test_presentation_pacing(self, controller, scheduler, recorder):
        complete_rounds(controller, scheduler, 2)
        recorder.events.clear()
        recorder.times.clear()
        start = scheduler.now + 0.45
        scheduler.advance_ms(450)
        run_presentation(scheduler)

        presented = [
            (round((t - start) * 1000), kwargs["duration_ms"])
            for (event, kwargs), t in zip(recorder.events, recorder.times)
            if event == GameEvent.PAD_PRESENTED
        ]
        # Level 3: base 476, each later step 8 ms quicker
        assert presented == [(0, 476), (476, 468), (944, 460)]

    def test_every_presented_step_plays_sound(self, controller, scheduler, audio):
        complete_rounds(controller, scheduler, 1)
        scheduler.advance_ms(450)
        audio.calls.clear()
        run_presentation(scheduler)

        assert audio.calls == [("pad", c) for c in controller.sequence]


@pytest.mark.unit
class TestGameOver:
    """Wrong presses."""

    @pytest.mark.parametrize("wrong_at", [0, 1, 2])
    def test_mismatch_goes_to_game_over(self, controller, scheduler, recorder, wrong_at):
        complete_rounds(controller, scheduler, 2)
        scheduler.advance_ms(450)
        run_presentation(scheduler)
        sequence = controller.sequence

        for color in sequence[:wrong_at]:
            scheduler.advance_ms(200)
            controller.press_pad(color)
        controller.press_pad(wrong_pad(sequence[wrong_at]))

        assert isinstance(controller.state, GameOver)
        assert controller.state.final_level == 3
        assert controller.sequence == ()
        assert controller.level == 0
        assert recorder.of(GameEvent.GAME_OVER) == [{"final_level": 3}]

    def test_wrong_press_plays_pad_then_error(self, controller, scheduler, audio):
        controller.start()
        run_presentation(scheduler)
        audio.calls.clear()
        wrong = wrong_pad(controller.sequence[0])

        controller.press_pad(wrong)

        assert audio.calls == [("pad", wrong), ("error", None)]

    def test_wrong_press_event_order(self, controller, scheduler, recorder):
        controller.start()
        run_presentation(scheduler)
        recorder.events.clear()
        wrong = wrong_pad(controller.sequence[0])

        controller.press_pad(wrong)

        assert recorder.events[0] == (GameEvent.PAD_PRESSED, {"color": wrong, "correct": False})
        assert recorder.names()[-1] == GameEvent.GAME_OVER

    def test_nothing_scheduled_after_game_over(self, controller, scheduler):
        controller.start()
        run_presentation(scheduler)
        controller.press_pad(wrong_pad(controller.sequence[0]))

        assert controller.pending_tasks == 0
        assert scheduler.pending == []


@pytest.mark.unit
class TestIgnoredInput:
    """Presses outside AwaitingInput change nothing."""

    def test_press_while_idle(self, controller, audio):
        assert controller.press_pad(PadColor.GREEN) is False
        assert controller.phase == RoundPhase.IDLE
        assert audio.calls == []

    def test_press_during_lead_in(self, controller, audio):
        controller.start()
        assert controller.press_pad(SCRIPT[0]) is False
        assert controller.phase == RoundPhase.PRESENTING
        assert audio.calls == []

    def test_press_during_presentation(self, controller, scheduler, recorder):
        complete_rounds(controller, scheduler, 1)
        scheduler.advance_ms(450)
        state = controller.state

        assert controller.press_pad(wrong_pad(controller.sequence[0])) is False
        assert controller.state is state
        assert recorder.of(GameEvent.GAME_OVER) == []

    def test_press_during_round_complete(self, controller, scheduler):
        complete_rounds(controller, scheduler, 1)
        assert controller.press_pad(PadColor.BLUE) is False
        assert controller.phase == RoundPhase.ROUND_COMPLETE

    def test_press_after_game_over(self, controller, scheduler, audio):
        controller.start()
        run_presentation(scheduler)
        controller.press_pad(wrong_pad(controller.sequence[0]))
        audio.calls.clear()

        assert controller.press_pad(PadColor.GREEN) is False
        assert audio.calls == []


@pytest.mark.unit
class TestHighScore:
    """High score bookkeeping."""

    def test_round_complete_raises_high_score(self, controller, scheduler, score_store, recorder):
        complete_rounds(controller, scheduler, 2)

        assert controller.high_score == 2
        assert score_store.load() == 2
        assert recorder.of(GameEvent.HIGH_SCORE_CHANGED) == [{"high_score": 1}, {"high_score": 2}]

    def test_game_over_records_final_level(self, controller, scheduler):
        complete_rounds(controller, scheduler, 2)
        scheduler.advance_ms(450)
        run_presentation(scheduler)
        controller.press_pad(wrong_pad(controller.sequence[0]))

        assert controller.high_score == 3

    def test_high_score_never_decreases(self, config, audio, scheduler, generator):
        store = MemoryScoreStore(5)
        store.save = Mock(wraps=store.save)
        controller = RoundController.from_config(config, audio, store, scheduler, generator)
        recorder = EventRecorder(scheduler)
        controller.register_observer(recorder)

        complete_rounds(controller, scheduler, 2)
        scheduler.advance_ms(450)
        run_presentation(scheduler)
        controller.press_pad(wrong_pad(controller.sequence[0]))

        assert controller.high_score == 5
        store.save.assert_not_called()
        assert recorder.of(GameEvent.HIGH_SCORE_CHANGED) == []

    def test_high_score_survives_new_controller(self, config, audio, scheduler, generator):
        store = MemoryScoreStore()
        first = RoundController.from_config(config, audio, store, scheduler, generator)
        complete_rounds(first, scheduler, 3)
        first.destroy()

        second = RoundController.from_config(config, audio, store, ManualScheduler(), generator)
        assert second.high_score == 3

    def test_undecodable_score_file_starts_from_zero(self, config, audio, scheduler, generator):
        config.storage_path.write_bytes(b"\xff\xfe garbage")
        store = JsonScoreStore(config.storage_path)

        controller = RoundController.from_config(config, audio, store, scheduler, generator)
        assert controller.high_score == 0

        complete_rounds(controller, scheduler, 1)
        assert JsonScoreStore(config.storage_path).load() == 1


@pytest.mark.unit
class TestResetAndDestroy:
    """Timer cancellation."""

    def test_reset_returns_to_idle(self, controller, scheduler, recorder):
        complete_rounds(controller, scheduler, 2)
        controller.reset()

        assert isinstance(controller.state, Idle)
        assert controller.sequence == ()
        assert recorder.names()[-1] == GameEvent.GAME_RESET

    def test_reset_cancels_pending_presentation(self, controller, scheduler, recorder, audio):
        controller.start()
        controller.reset()
        scheduler.advance(10)

        assert recorder.of(GameEvent.PAD_PRESENTED) == []
        assert audio.calls == []
        assert controller.pending_tasks == 0

    def test_reset_cancels_round_advance(self, controller, scheduler):
        complete_rounds(controller, scheduler, 1)
        controller.reset()
        scheduler.advance(10)

        assert controller.phase == RoundPhase.IDLE

    def test_restart_runs_only_one_presentation(self, controller, scheduler, recorder):
        controller.start()
        scheduler.advance_ms(100)
        controller.reset()
        controller.start()
        scheduler.advance(10)

        assert len(recorder.of(GameEvent.PAD_PRESENTED)) == 1
        assert controller.phase == RoundPhase.AWAITING_INPUT

    def test_stale_callback_is_ignored(self, config, audio, score_store, generator):
        """A timer that fires after a reset (e.g. cancel raced) does nothing."""
        scheduler = Mock()
        callbacks = []
        scheduler.call_later.side_effect = lambda delay, cb: callbacks.append(cb) or Mock()
        controller = RoundController.from_config(config, audio, score_store, scheduler, generator)

        controller.start()
        controller.reset()
        callbacks[0]()

        assert controller.phase == RoundPhase.IDLE
        assert audio.calls == []

    def test_destroy(self, controller, scheduler, recorder):
        controller.start()
        controller.destroy()
        scheduler.advance(10)

        assert controller.start() is False
        assert recorder.of(GameEvent.PAD_PRESENTED) == []
        assert scheduler.pending == []


@pytest.mark.unit
class TestMute:
    """Mute suppresses sound only."""

    def test_muted_game_plays_no_sound(self, controller, scheduler, audio):
        controller.set_muted(True)
        complete_rounds(controller, scheduler, 3)
        scheduler.advance_ms(450)
        run_presentation(scheduler)
        controller.press_pad(wrong_pad(controller.sequence[0]))

        assert audio.calls == []
        assert controller.phase == RoundPhase.GAME_OVER

    def test_mute_does_not_change_state(self, controller, scheduler):
        controller.start()
        state = controller.state
        controller.toggle_mute()
        assert controller.state is state

    def test_toggle_mute_notifies(self, controller, recorder):
        assert controller.toggle_mute() is True
        assert controller.toggle_mute() is False
        assert recorder.of(GameEvent.MUTE_CHANGED) == [{"muted": True}, {"muted": False}]

    def test_set_same_value_is_silent(self, controller, recorder):
        controller.set_muted(False)
        assert recorder.of(GameEvent.MUTE_CHANGED) == []


@pytest.mark.unit
class TestObservers:
    """Observer registration and isolation."""

    def test_failing_observer_does_not_break_game(self, controller, scheduler):
        broken = Mock(spec=GameObserver)
        broken.on_game_event.side_effect = RuntimeError("boom")
        controller.register_observer(broken)

        complete_rounds(controller, scheduler, 2)

        assert controller.level == 2
        assert broken.on_game_event.called

    def test_unregistered_observer_gets_nothing(self, controller):
        observer = Mock(spec=GameObserver)
        controller.register_observer(observer)
        controller.unregister_observer(observer)

        controller.start()

        observer.on_game_event.assert_not_called()


@pytest.mark.unit
def test_random_generator_by_default(config, score_store):
    scheduler = ManualScheduler()
    controller = RoundController.from_config(config, RecordingAudio(), score_store, scheduler)
    controller.start()
    assert controller.sequence[0] in PadColor


@pytest.mark.unit
def test_scripted_generator_cycles():
    generator = ScriptedGenerator([PadColor.RED, PadColor.BLUE])
    assert [generator.next() for _ in range(3)] == [PadColor.RED, PadColor.BLUE, PadColor.RED]
