"""
Game Logger Module for the Wikidle Server

Structured logging for player requests, server replies and round events.
Each entry is one JSON object per line in logs/game_log_<date>.log;
warnings and errors are echoed to the console.
"""

import json
import logging
import threading
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from ..config.app_config import Config
from .helpers import get_user_identity

USER_ACTION = 'USER_ACTION'
RESPONSE_OK = 'SERVER_RESPONSE_SUCCESS'
RESPONSE_FAILED = 'SERVER_RESPONSE_ERROR'
GAME_EVENT = 'GAME_EVENT'
ERROR = 'ERROR'


class JsonLineFormatter(logging.Formatter):
    """Renders records carrying an `entry` attribute as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = getattr(record, 'entry', None)
        if entry is None:
            entry = {'event_type': 'LOG', 'action': record.getMessage()}
        return json.dumps({
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            **entry
        }, ensure_ascii=False, default=str)


class GameLogger:
    """
    Logging front-end for the controllers, services and socket handlers.

    `logger` is the underlying logging.Logger for free-form messages; the
    log_* methods write structured entries and keep per-type counters
    that the health endpoint reports.
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO", name: str = "wikidle"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = self.log_dir / f"game_log_{datetime.now():%Y-%m-%d}.log"
        self.name = name
        self.level = logging.getLevelName(str(level).upper())
        if not isinstance(self.level, int):
            self.level = logging.INFO

        self._counts = Counter()
        self._counts_lock = threading.Lock()
        self.logger = self._build_logger()

    def _build_logger(self) -> logging.Logger:
        logger = logging.getLogger(self.name)
        logger.setLevel(self.level)
        logger.propagate = False
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        to_file = logging.FileHandler(self.log_file, encoding='utf-8')
        to_file.setLevel(self.level)
        to_file.setFormatter(JsonLineFormatter())

        to_console = logging.StreamHandler()
        to_console.setLevel(logging.WARNING)
        to_console.setFormatter(logging.Formatter('%(levelname)s [wikidle] %(message)s'))

        logger.addHandler(to_file)
        logger.addHandler(to_console)
        return logger

    def _write(self, level: int, event_type: str, action: str,
               user: Dict[str, Optional[str]], details: Dict[str, Any]) -> None:
        with self._counts_lock:
            self._counts[event_type] += 1
        entry = {'event_type': event_type, 'action': action, 'user': user, 'details': details}
        self.logger.log(level, f"{event_type} {action}", extra={'entry': entry})

    def log_user_action(self, request, action: str, game_id: Optional[str] = None, **kwargs):
        """
        Record an incoming player request.

        Args:
            request: Flask request object
            action: e.g. 'new_game', 'submit_guess', 'request_hint'
            game_id: Game identifier if applicable
            **kwargs: Extra request details
        """
        details = {
            'game_id': game_id,
            'endpoint': getattr(request, 'endpoint', None),
            'method': getattr(request, 'method', None),
            **kwargs
        }
        self._write(logging.INFO, USER_ACTION, action, get_user_identity(request), details)

    def log_server_response(self, request, action: str, success: bool, response_data: Dict[str, Any],
                            game_id: Optional[str] = None, **kwargs):
        """Record the reply to a request; failed replies are logged as warnings."""
        details = {
            'game_id': game_id,
            'success': success,
            'response_data': self._condense(response_data),
            **kwargs
        }
        self._write(
            logging.INFO if success else logging.WARNING,
            RESPONSE_OK if success else RESPONSE_FAILED,
            action, get_user_identity(request), details
        )

    def log_game_event(self, game_id: Optional[str], event: str, player_id: Optional[str] = None, **kwargs):
        """Record something that happened to a game outside a request (round won, hint revealed...)."""
        self._write(
            logging.INFO, GAME_EVENT, event,
            {'user_ip': None, 'player_id': player_id},
            {'game_id': game_id, **kwargs}
        )

    def log_error(self, request, error: Exception, action: str, game_id: Optional[str] = None):
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error)
        }
        self._write(logging.ERROR, ERROR, action, get_user_identity(request), details)

    @staticmethod
    def _condense(data: Any) -> Dict[str, Any]:
        """Replace the round snapshot in a reply with a short summary."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        condensed = dict(data)
        state = condensed.get('state')
        if isinstance(state, dict):
            condensed['state'] = {
                'status': state.get('status'),
                'target_length': state.get('target_length'),
                'attempts_remaining': state.get('attempts_remaining'),
                'guesses_count': len(state.get('guesses', [])),
                'answer_revealed': state.get('revealed_word') is not None
            }
        return condensed

    def get_log_stats(self) -> Dict[str, Any]:
        """Entry counts since start-up and the size of today's log file."""
        with self._counts_lock:
            counts = dict(self._counts)

        log_file = self.log_file
        return {
            'log_file': str(log_file),
            'file_size_kb': round(log_file.stat().st_size / 1024, 1) if log_file.exists() else 0,
            'total_entries': sum(counts.values()),
            'user_actions': counts.get(USER_ACTION, 0),
            'server_responses': counts.get(RESPONSE_OK, 0) + counts.get(RESPONSE_FAILED, 0),
            'failed_responses': counts.get(RESPONSE_FAILED, 0),
            'game_events': counts.get(GAME_EVENT, 0),
            'errors': counts.get(ERROR, 0)
        }


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
