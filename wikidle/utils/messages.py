"""
Error Messages

Turns error kinds into user-visible text and HTTP status codes.
"""

from typing import Dict, Tuple

from ..models.errors import (
    EmptyCandidateSet, ErrorKind, GameNotFound, HintUnavailable, LengthMismatch,
    NotPlaying, RoundError, WordSourceFailure
)

STATUS_CODES = {
    ErrorKind.LENGTH_MISMATCH: 400,
    ErrorKind.HINT_UNAVAILABLE: 400,
    ErrorKind.GAME_NOT_FOUND: 404,
    ErrorKind.NOT_PLAYING: 409,
    ErrorKind.WORD_SOURCE_FAILURE: 502,
    ErrorKind.EMPTY_CANDIDATE_SET: 503,
}


def describe_error(error: RoundError) -> str:
    if isinstance(error, LengthMismatch):
        return f"Guess must be exactly {error.expected} letters (got {error.actual})"
    if isinstance(error, NotPlaying):
        return f"No round in progress (round is {error.status})"
    if isinstance(error, EmptyCandidateSet):
        return "No words are available for this language and word type"
    if isinstance(error, HintUnavailable):
        return f"Hint '{error.hint_kind}' is not available at {error.difficulty} difficulty"
    if isinstance(error, WordSourceFailure):
        return "Failed to load a new word. Please try again."
    if isinstance(error, GameNotFound):
        return "Game not found"
    return "Request failed"


def error_response(error: RoundError) -> Tuple[Dict, int]:
    """JSON body and status code for a failed result."""
    body = {
        'success': False,
        'error': describe_error(error),
        **error.to_dict()
    }
    return body, STATUS_CODES.get(error.kind, 400)
