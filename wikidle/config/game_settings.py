"""
Game Configuration Constants Module

This module defines the game rules: attempt limits, word length bounds,
difficulty tiers and scoring. All game parameters are centralized here
so they can be tuned in one place.
"""

from typing import Dict, Final, List, Tuple

from ..models.hints import HintKind

MAX_ATTEMPTS: Final[int] = 6
"""
Default number of guess attempts per round.
"""

MAX_ATTEMPTS_LIMIT: Final[int] = 10

WORD_LENGTH_MIN: Final[int] = 3
WORD_LENGTH_MAX: Final[int] = 12

# Scoring
POINTS_PER_WORD: Final[int] = 100
POINTS_BONUS_PER_ATTEMPT: Final[int] = 10

DIFFICULTY_LEVELS: Final[Dict[str, List[HintKind]]] = {
    'easy': [HintKind.GRAMMATICAL_FEATURES, HintKind.DEFINITION],
    'medium': [HintKind.IMAGE, HintKind.TRANSLATIONS],
    'hard': [HintKind.PRONUNCIATION],
}

DEFAULT_DIFFICULTY: Final[str] = 'medium'

DEFAULT_SETTINGS: Final[Dict] = {
    'difficulty': DEFAULT_DIFFICULTY,
    'enable_hints': True,
    'enable_audio': True,
    'max_attempts': MAX_ATTEMPTS,
    'min_length': WORD_LENGTH_MIN,
    'max_length': WORD_LENGTH_MAX,
}


def get_allowed_hints(difficulty: str) -> List[HintKind]:
    """
    Returns the hint kinds offered at a difficulty tier.

    Unknown labels fall back to the default tier.
    """
    return list(DIFFICULTY_LEVELS.get(difficulty, DIFFICULTY_LEVELS[DEFAULT_DIFFICULTY]))


def calculate_points(won: bool, attempts_remaining: int) -> int:
    """
    Points awarded for a finished round.

    A win earns the base word points plus a bonus for every attempt left
    unused. A loss earns nothing.
    """
    if not won:
        return 0
    return POINTS_PER_WORD + attempts_remaining * POINTS_BONUS_PER_ATTEMPT


def validate_settings(settings: Dict) -> Tuple[bool, str]:
    """
    Validates a (partial) settings update.

    Checks performed:
    1. Only known setting keys are accepted
    2. Difficulty must be a configured tier
    3. Boolean flags must be booleans
    4. max_attempts must be within 1..MAX_ATTEMPTS_LIMIT
    5. Word lengths must satisfy WORD_LENGTH_MIN <= min <= max <= WORD_LENGTH_MAX

    Args:
        settings: Mapping of setting name to new value. Missing length
            bounds are taken from the defaults for the range check.

    Returns:
        Tuple of (is_valid, error_message)
    """
    unknown = sorted(set(settings) - set(DEFAULT_SETTINGS))
    if unknown:
        return False, f"Unknown settings: {', '.join(unknown)}"

    if 'difficulty' in settings and settings['difficulty'] not in DIFFICULTY_LEVELS:
        return False, f"Difficulty must be one of: {', '.join(DIFFICULTY_LEVELS)}"

    for flag in ('enable_hints', 'enable_audio'):
        if flag in settings and not isinstance(settings[flag], bool):
            return False, f"{flag} must be true or false"

    for key in ('max_attempts', 'min_length', 'max_length'):
        if key in settings and (isinstance(settings[key], bool) or not isinstance(settings[key], int)):
            return False, f"{key} must be an integer"

    if 'max_attempts' in settings and not 1 <= settings['max_attempts'] <= MAX_ATTEMPTS_LIMIT:
        return False, f"max_attempts must be between 1 and {MAX_ATTEMPTS_LIMIT}"

    min_length = settings.get('min_length', WORD_LENGTH_MIN)
    max_length = settings.get('max_length', WORD_LENGTH_MAX)
    if not WORD_LENGTH_MIN <= min_length <= max_length <= WORD_LENGTH_MAX:
        return False, f"Word lengths must satisfy {WORD_LENGTH_MIN} <= min_length <= max_length <= {WORD_LENGTH_MAX}"

    return True, ""
