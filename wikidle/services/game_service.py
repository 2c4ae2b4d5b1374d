"""
Game Service

Manages game sessions: fetching candidates, starting rounds, filtering
hints by difficulty, awarding points and expiring idle sessions.
"""

import threading
import time
import uuid
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from ..config.game_settings import (
    DEFAULT_DIFFICULTY, DIFFICULTY_LEVELS, MAX_ATTEMPTS, MAX_ATTEMPTS_LIMIT, calculate_points,
    get_allowed_hints
)
from ..config.languages import DEFAULT_WORD_KIND, SUPPORTED_LANGUAGES, WORD_KINDS
from ..data.wikidata_client import WordSourceError
from ..models.errors import GameNotFound, HintUnavailable, Result, WordSourceFailure
from ..models.hints import HintKind, HintOutcome
from ..models.round import GuessOutcome, RoundInfo
from ..utils.game_logger import game_logger
from .round_controller import RoundController
from .settings_service import SettingsService


# Player settings that shape a session
SESSION_SETTINGS = ('difficulty', 'max_attempts', 'min_length', 'max_length', 'enable_hints')


@dataclass
class GameSession:
    """A game: one controller plus the options its rounds are started with."""
    game_id: str
    controller: RoundController
    language: str
    word_kind: str = DEFAULT_WORD_KIND
    difficulty: str = DEFAULT_DIFFICULTY
    max_attempts: int = MAX_ATTEMPTS
    min_length: int = 3
    max_length: int = 12
    enable_hints: bool = True
    player_id: Optional[str] = None
    points: int = 0
    rounds_played: int = 0
    created_at: float = field(default_factory=time.time)
    last_activity: float = field(default_factory=time.time)

    def touch(self) -> None:
        self.last_activity = time.time()

    def describe(self) -> Dict:
        return {
            'game_id': self.game_id,
            'language': self.language,
            'word_kind': self.word_kind,
            'difficulty': self.difficulty,
            'available_hints': [kind.value for kind in get_allowed_hints(self.difficulty)] if self.enable_hints else [],
            'points': self.points,
            'rounds_played': self.rounds_played,
            'player_id': self.player_id
        }


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Session management with unique game IDs
    - Fetching candidates from the word source before each round
    - Guess submission and hint requests through each session's controller
    - Scoring and player statistics when a round ends
    """

    def __init__(self, word_source, settings_service: Optional[SettingsService] = None,
                 candidate_limit: int = 50, default_max_attempts: int = MAX_ATTEMPTS):
        """
        Args:
            word_source: Object with fetch_candidates(language, word_kind, limit, min_length, max_length)
            settings_service: Optional persistence for player settings and stats
            candidate_limit: Number of candidates requested per round
            default_max_attempts: Attempts per round when neither request nor player sets one
        """
        self.word_source = word_source
        self.settings_service = settings_service
        self.candidate_limit = candidate_limit
        self.default_max_attempts = default_max_attempts
        self.games: Dict[str, GameSession] = {}
        self._lock = threading.Lock()

    def create_new_game(self, language: str, word_kind: Optional[str] = None,
                        difficulty: Optional[str] = None, max_attempts: Optional[int] = None,
                        player_id: Optional[str] = None) -> Tuple[str, Result[RoundInfo]]:
        """
        Creates a session and starts its first round.

        Options not given explicitly come from the player's saved settings
        when a settings service is available, otherwise from the defaults.
        The session is kept even if the first round fails so the client
        can restart it.

        Returns:
            Tuple of (game_id, round start result)

        Raises:
            ValueError: If language, word kind or difficulty is unknown, or
                max_attempts is out of range
        """
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language: {language}")
        if word_kind is not None and word_kind not in WORD_KINDS:
            raise ValueError(f"Unsupported word kind: {word_kind}")
        if difficulty is not None and difficulty not in DIFFICULTY_LEVELS:
            raise ValueError(f"Unsupported difficulty: {difficulty}")
        if max_attempts is not None and not 1 <= max_attempts <= MAX_ATTEMPTS_LIMIT:
            raise ValueError(f"max_attempts must be between 1 and {MAX_ATTEMPTS_LIMIT}")

        session = GameSession(
            game_id=str(uuid.uuid4()),
            controller=RoundController(),
            language=language,
            word_kind=word_kind or DEFAULT_WORD_KIND,
            max_attempts=self.default_max_attempts,
            player_id=player_id
        )

        if player_id and self.settings_service:
            saved = self.settings_service.get_saved_settings(player_id)
            # Only values the player stored; server defaults stay in place otherwise
            for key in SESSION_SETTINGS:
                if key in saved:
                    setattr(session, key, saved[key])

        if difficulty is not None:
            session.difficulty = difficulty
        if max_attempts is not None:
            session.max_attempts = max_attempts

        with self._lock:
            self.games[session.game_id] = session

        return session.game_id, self._start_round(session)

    def restart_game(self, game_id: str) -> Result[RoundInfo]:
        """Abandons the current round of a session and starts a new one."""
        session = self.get_session(game_id)
        if session is None:
            return Result.fail(GameNotFound(game_id=game_id))
        return self._start_round(session)

    def _start_round(self, session: GameSession) -> Result[RoundInfo]:
        session.touch()
        session.controller.begin_loading()

        try:
            candidates = self.word_source.fetch_candidates(
                session.language,
                session.word_kind,
                limit=self.candidate_limit,
                min_length=session.min_length,
                max_length=session.max_length
            )
        except WordSourceError as e:
            session.controller.fail_loading()
            game_logger.log_game_event(session.game_id, 'word_fetch_failed', session.player_id, error=str(e))
            return Result.fail(WordSourceFailure(message=str(e)))
        except Exception as e:
            session.controller.fail_loading()
            game_logger.log_game_event(
                session.game_id, 'word_fetch_failed', session.player_id,
                error=str(e), error_type=type(e).__name__
            )
            raise

        result = session.controller.start_round(candidates, session.max_attempts)
        if result.success:
            game_logger.log_game_event(
                session.game_id, 'round_started', session.player_id,
                language=session.language, word_kind=session.word_kind,
                target_length=result.value.target_length, candidates=len(candidates)
            )
        else:
            game_logger.log_game_event(
                session.game_id, 'round_failed', session.player_id,
                error_kind=result.error.kind.value
            )
        return result

    def get_session(self, game_id: str) -> Optional[GameSession]:
        with self._lock:
            return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[RoundInfo]:
        """
        Returns the current round snapshot for a session (without the answer
        while the round is being played).
        """
        session = self.get_session(game_id)
        if session is None:
            return None
        return session.controller.get_state()

    def make_guess(self, game_id: str, guess: str) -> Result[GuessOutcome]:
        """
        Submits a guess to the session's current round.

        When the round ends, points are added to the session and, for a
        known player, to their persisted statistics.
        """
        session = self.get_session(game_id)
        if session is None:
            return Result.fail(GameNotFound(game_id=game_id))

        session.touch()
        result = session.controller.submit_guess(guess)
        if not result.success or result.value.terminal is None:
            return result

        outcome = result.value
        points = calculate_points(outcome.terminal.won, outcome.attempts_remaining)
        session.points += points
        session.rounds_played += 1

        game_logger.log_game_event(
            game_id, 'round_won' if outcome.terminal.won else 'round_lost', session.player_id,
            target_word=outcome.terminal.revealed_word, attempts_remaining=outcome.attempts_remaining,
            points=points
        )

        if session.player_id and self.settings_service:
            try:
                self.settings_service.record_result(session.player_id, outcome.terminal.won, points)
            except Exception as e:
                game_logger.logger.error(f"Failed to record result for player {session.player_id}: {e}")

        return result

    def request_hint(self, game_id: str, kind: str) -> Result[HintOutcome]:
        """
        Reveals a hint if the session's difficulty offers that kind.

        Returns:
            Result with a HintOutcome, or GameNotFound / HintUnavailable /
            NotPlaying
        """
        session = self.get_session(game_id)
        if session is None:
            return Result.fail(GameNotFound(game_id=game_id))

        try:
            hint_kind = HintKind(kind)
        except ValueError:
            return Result.fail(HintUnavailable(hint_kind=str(kind), difficulty=session.difficulty))

        if not session.enable_hints or hint_kind not in get_allowed_hints(session.difficulty):
            return Result.fail(HintUnavailable(hint_kind=hint_kind.value, difficulty=session.difficulty))

        session.touch()
        result = session.controller.request_hint(hint_kind)
        if result.success and not result.value.already_revealed:
            game_logger.log_game_event(
                game_id, 'hint_revealed', session.player_id,
                hint_kind=hint_kind.value, has_data=result.value.payload is not None
            )

        return result

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            return self.games.pop(game_id, None) is not None

    def cleanup_stale_games(self, max_age_seconds: int) -> Dict:
        """
        Removes sessions with no activity for max_age_seconds.

        Returns:
            Dictionary with count and ids of the removed sessions
        """
        cutoff = time.time() - max_age_seconds
        with self._lock:
            stale_ids = [game_id for game_id, session in self.games.items() if session.last_activity < cutoff]
            for game_id in stale_ids:
                del self.games[game_id]

        return {
            'games_removed': len(stale_ids),
            'removed_game_ids': stale_ids
        }


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_source, settings_service: Optional[SettingsService] = None,
                            **kwargs) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_source, settings_service, **kwargs)
    return _game_service
