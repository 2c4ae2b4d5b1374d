"""
Round Controller

Owns the lifecycle of one guessing round: target selection, guess
acceptance, attempt tracking and win/loss detection.
"""

import random
import threading
import unicodedata
from typing import Optional, Sequence

from ..config.game_settings import MAX_ATTEMPTS
from ..models.errors import EmptyCandidateSet, LengthMismatch, NotPlaying, Result
from ..models.hints import HintKind, HintOutcome
from ..models.round import (
    CandidateWord, Guess, GuessOutcome, Round, RoundInfo, RoundStatus, TerminalInfo
)
from .evaluator import evaluate, summarize_letters
from .hint_ledger import HintLedger


def normalize_guess(text: str) -> str:
    """Strips, lower-cases and composes accents (NFC)."""
    return unicodedata.normalize('NFC', text.strip().lower())


class RoundController:
    """
    State machine for a single round.

    idle -> loading -> playing -> won | lost, with error reachable from
    start_round or fail_loading. Every terminal state is left only through
    begin_loading or start_round, which discard the previous round.

    Operations are serialized with a lock so concurrent callers queue up
    instead of interleaving updates to the attempts list.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._status = RoundStatus.IDLE
        self._round: Optional[Round] = None
        self.hints = HintLedger()

    @property
    def status(self) -> RoundStatus:
        return self._status

    def begin_loading(self) -> None:
        """Marks that candidates are being fetched; abandons any current round."""
        with self._lock:
            self._round = None
            self.hints.reset()
            self._status = RoundStatus.LOADING

    def fail_loading(self) -> bool:
        """
        Moves a loading round to error after a failed fetch.

        Returns:
            bool: True if the controller was loading
        """
        with self._lock:
            if self._status is not RoundStatus.LOADING:
                return False
            self._status = RoundStatus.ERROR
            return True

    def start_round(self, candidates: Sequence[CandidateWord],
                    max_attempts: int = MAX_ATTEMPTS) -> Result[RoundInfo]:
        """
        Starts a new round from the supplied candidates.

        Args:
            candidates: Words offered by the word source
            max_attempts: Number of guesses allowed in this round

        Returns:
            Result with the round snapshot (target length only), or
            EmptyCandidateSet when no candidate has a usable lemma

        Raises:
            ValueError: If max_attempts is less than 1
        """
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

        usable = [candidate for candidate in candidates if candidate.lemma and candidate.lemma.strip()]

        with self._lock:
            self.hints.reset()
            if not usable:
                self._round = None
                self._status = RoundStatus.ERROR
                return Result.fail(EmptyCandidateSet())

            target = self._rng.choice(usable)
            lemma = normalize_guess(target.lemma)
            self._round = Round(
                target=target,
                target_length=len(lemma),
                max_attempts=max_attempts,
            )
            self._status = RoundStatus.PLAYING
            return Result.ok(self._snapshot())

    def submit_guess(self, text: str) -> Result[GuessOutcome]:
        """
        Scores a guess and advances the round.

        The guess is stripped and lower-cased before it is compared and
        scored. A rejected guess never consumes an attempt.

        Returns:
            Result with the GuessOutcome, or NotPlaying / LengthMismatch
        """
        normalized = normalize_guess(text)

        with self._lock:
            if self._status is not RoundStatus.PLAYING:
                return Result.fail(NotPlaying(status=self._status.value))

            current = self._round
            if len(normalized) != current.target_length:
                return Result.fail(LengthMismatch(expected=current.target_length, actual=len(normalized)))

            lemma = normalize_guess(current.target.lemma)
            evaluation = tuple(evaluate(normalized, lemma))
            current.attempts_made.append(Guess(text=normalized, evaluation=evaluation))

            terminal = None
            if normalized == lemma:
                current.status = RoundStatus.WON
                terminal = TerminalInfo(won=True, revealed_word=lemma)
            elif len(current.attempts_made) >= current.max_attempts:
                current.status = RoundStatus.LOST
                terminal = TerminalInfo(won=False, revealed_word=lemma)
            self._status = current.status

            return Result.ok(GuessOutcome(
                evaluation=evaluation,
                attempts_remaining=current.attempts_remaining,
                terminal=terminal,
            ))

    def request_hint(self, kind: HintKind) -> Result[HintOutcome]:
        """
        Reveals a hint about the target while the round is being played.

        Returns:
            Result with a HintOutcome whose payload is None when there is
            nothing new to show; already_revealed tells whether the kind
            had been shown before this call
        """
        with self._lock:
            if self._status is not RoundStatus.PLAYING:
                return Result.fail(NotPlaying(status=self._status.value))
            already_revealed = self.hints.is_revealed(kind)
            payload = self.hints.request_hint(kind, self._round.target)
            return Result.ok(HintOutcome(kind=kind, payload=payload, already_revealed=already_revealed))

    def get_state(self) -> RoundInfo:
        with self._lock:
            return self._snapshot()

    def _snapshot(self) -> RoundInfo:
        current = self._round
        if current is None:
            return RoundInfo(status=self._status, max_attempts=0)

        revealed_word = None
        if self._status.is_terminal:
            revealed_word = normalize_guess(current.target.lemma)

        return RoundInfo(
            status=self._status,
            target_length=current.target_length,
            max_attempts=current.max_attempts,
            attempts_remaining=current.attempts_remaining,
            guesses=tuple(current.attempts_made),
            letter_status=summarize_letters(current.attempts_made),
            revealed_hints=tuple(self.hints.revealed_kinds()),
            revealed_word=revealed_word,
        )
