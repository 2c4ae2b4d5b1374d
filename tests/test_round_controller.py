import random
import threading

import pytest

from wikidle.models import (
    CandidateWord, EmptyCandidateSet, HintKind, LengthMismatch, LetterStatus, NotPlaying, RoundStatus
)
from wikidle.services.round_controller import RoundController

from .conftest import make_word


def started(lemma="crane", max_attempts=6):
    controller = RoundController(rng=random.Random(7))
    result = controller.start_round([make_word(lemma)], max_attempts)
    assert result.success
    return controller


class TestStartRound:
    def test_starts_playing_and_hides_target(self):
        controller = RoundController()
        result = controller.start_round([make_word("crane")])

        assert result.success
        info = result.value
        assert info.status is RoundStatus.PLAYING
        assert info.target_length == 5
        assert info.attempts_remaining == 6
        assert info.revealed_word is None
        assert "crane" not in str(info.to_dict())

    def test_empty_candidates_fail(self):
        controller = RoundController()
        result = controller.start_round([])

        assert not result.success
        assert isinstance(result.error, EmptyCandidateSet)
        assert controller.status is RoundStatus.ERROR
        assert controller.get_state().status is not RoundStatus.PLAYING

    def test_blank_lemmas_are_not_usable(self):
        controller = RoundController()
        result = controller.start_round([CandidateWord(lemma=""), CandidateWord(lemma="   ")])

        assert isinstance(result.error, EmptyCandidateSet)

    def test_no_guesses_after_failed_start(self):
        controller = RoundController()
        controller.start_round([])

        result = controller.submit_guess("crane")
        assert isinstance(result.error, NotPlaying)
        assert result.error.status == "error"

    def test_selection_is_from_candidates(self):
        words = [make_word(lemma) for lemma in ("crane", "robot", "abbey", "tiger")]
        seen = set()
        controller = RoundController(rng=random.Random(1))
        for _ in range(40):
            controller.start_round(words)
            controller.submit_guess("zzzzz")
            seen.add(controller.get_state().target_length)
            # force the round to end to read the word
            while controller.status is RoundStatus.PLAYING:
                controller.submit_guess("zzzzz")
            assert controller.get_state().revealed_word in {"crane", "robot", "abbey", "tiger"}
        assert seen == {5}

    def test_invalid_max_attempts_raises(self):
        with pytest.raises(ValueError):
            RoundController().start_round([make_word()], max_attempts=0)

    def test_new_round_discards_previous_state(self):
        controller = started("crane")
        controller.submit_guess("trace")
        controller.request_hint(HintKind.DEFINITION)

        controller.start_round([make_word("robot")])
        info = controller.get_state()

        assert info.guesses == ()
        assert info.revealed_hints == ()
        assert info.attempts_remaining == 6

    def test_start_round_after_win_resets_to_playing(self):
        controller = started("crane")
        controller.submit_guess("crane")
        assert controller.status is RoundStatus.WON

        controller.start_round([make_word("robot")])
        assert controller.status is RoundStatus.PLAYING


class TestSubmitGuess:
    def test_not_playing_before_start(self):
        result = RoundController().submit_guess("crane")

        assert isinstance(result.error, NotPlaying)
        assert result.error.status == "idle"

    def test_winning_guess(self):
        controller = started("crane")
        result = controller.submit_guess("crane")

        outcome = result.value
        assert all(r.status is LetterStatus.CORRECT for r in outcome.evaluation)
        assert outcome.terminal.won is True
        assert outcome.terminal.revealed_word == "crane"
        assert outcome.attempts_remaining == 5
        assert controller.get_state().revealed_word == "crane"
        assert controller.status is RoundStatus.WON

    def test_win_on_last_attempt(self):
        controller = started("crane", max_attempts=2)
        controller.submit_guess("trace")
        outcome = controller.submit_guess("crane").value

        assert outcome.terminal.won is True
        assert outcome.attempts_remaining == 0
        assert controller.status is RoundStatus.WON

    def test_guess_is_normalized(self):
        controller = started("crane")
        outcome = controller.submit_guess("  CRANE ").value

        assert outcome.terminal.won
        assert controller.get_state().guesses[0].text == "crane"

    def test_decomposed_accents_match_composed_lemma(self):
        controller = started("caf\u00e9")

        outcome = controller.submit_guess("CAFE\u0301").value

        assert outcome.terminal.won
        assert controller.get_state().guesses[0].text == "caf\u00e9"

    def test_wrong_length_does_not_consume_attempt(self):
        controller = started("crane")
        before = controller.get_state().attempts_remaining

        result = controller.submit_guess("cranes")

        assert result.error == LengthMismatch(expected=5, actual=6)
        state = controller.get_state()
        assert state.guesses == ()
        assert state.attempts_remaining == before
        assert state.status is RoundStatus.PLAYING

    def test_exhaustion_loses_then_rejects(self):
        controller = started("crane", max_attempts=6)

        for i in range(6):
            result = controller.submit_guess("trace")
            assert result.success
            if i < 5:
                assert result.value.terminal is None

        assert result.value.terminal.won is False
        assert result.value.terminal.revealed_word == "crane"
        assert controller.status is RoundStatus.LOST

        seventh = controller.submit_guess("crane")
        assert isinstance(seventh.error, NotPlaying)
        assert seventh.error.status == "lost"
        assert len(controller.get_state().guesses) == 6

    def test_guess_after_win_is_rejected(self):
        controller = started("crane")
        controller.submit_guess("crane")

        result = controller.submit_guess("crane")
        assert isinstance(result.error, NotPlaying)
        assert result.error.status == "won"

    def test_state_tracks_guesses_and_letters(self):
        controller = started("crane")
        controller.submit_guess("trace")

        state = controller.get_state()
        assert [g.text for g in state.guesses] == ["trace"]
        assert state.letter_status == {
            "t": "absent", "r": "correct", "a": "correct", "c": "present", "e": "correct"
        }
        assert state.attempts_remaining == 5

    def test_concurrent_guesses_never_exceed_max_attempts(self):
        controller = started("crane", max_attempts=6)
        results = []

        def worker():
            results.append(controller.submit_guess("trace"))

        threads = [threading.Thread(target=worker) for _ in range(20)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sum(1 for r in results if r.success) == 6
        assert sum(1 for r in results if isinstance(r.error, NotPlaying)) == 14
        assert len(controller.get_state().guesses) == 6


class TestHints:
    def test_hint_requires_playing(self):
        result = RoundController().request_hint(HintKind.DEFINITION)
        assert isinstance(result.error, NotPlaying)

    def test_hint_once_per_round(self):
        controller = started("crane")

        first = controller.request_hint(HintKind.DEFINITION)
        second = controller.request_hint(HintKind.DEFINITION)

        assert first.value.payload is not None
        assert first.value.already_revealed is False
        assert second.value.payload is None
        assert second.value.already_revealed is True
        assert controller.get_state().revealed_hints == ("definition",)

    def test_missing_data_is_not_reported_as_already_revealed(self):
        controller = RoundController()
        controller.start_round([make_word("crane", image_ref=None)])

        outcome = controller.request_hint(HintKind.IMAGE).value

        assert outcome.payload is None
        assert outcome.already_revealed is False

    def test_concurrent_requests_reveal_once(self):
        controller = started("crane")
        barrier = threading.Barrier(12)
        outcomes = []

        def worker():
            barrier.wait()
            outcomes.append(controller.request_hint(HintKind.IMAGE).value)

        threads = [threading.Thread(target=worker) for _ in range(12)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        fresh = [o for o in outcomes if not o.already_revealed]
        assert len(fresh) == 1
        assert fresh[0].payload is not None
        assert all(o.payload is None for o in outcomes if o.already_revealed)


class TestLoading:
    def test_loading_then_start(self):
        controller = started("crane")
        controller.begin_loading()

        assert controller.status is RoundStatus.LOADING
        assert controller.get_state().target_length is None
        assert isinstance(controller.submit_guess("crane").error, NotPlaying)

        controller.start_round([make_word("robot")])
        assert controller.status is RoundStatus.PLAYING

    def test_fail_loading(self):
        controller = RoundController()
        assert controller.fail_loading() is False

        controller.begin_loading()
        assert controller.fail_loading() is True
        assert controller.status is RoundStatus.ERROR
