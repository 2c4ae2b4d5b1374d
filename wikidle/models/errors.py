"""
Error and Result Models

Core operations never raise for expected failures; they return a Result
carrying one of the error kinds below together with its context.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Generic, Optional, TypeVar

T = TypeVar('T')


class ErrorKind(Enum):
    EMPTY_CANDIDATE_SET = "empty_candidate_set"
    NOT_PLAYING = "not_playing"
    LENGTH_MISMATCH = "length_mismatch"
    HINT_UNAVAILABLE = "hint_unavailable"
    WORD_SOURCE_FAILURE = "word_source_failure"
    GAME_NOT_FOUND = "game_not_found"


@dataclass(frozen=True)
class RoundError:
    """Base class for all error kinds."""
    kind: ClassVar[ErrorKind]

    def to_dict(self) -> Dict[str, Any]:
        context = asdict(self)
        context['error_kind'] = self.kind.value
        return context


@dataclass(frozen=True)
class EmptyCandidateSet(RoundError):
    kind: ClassVar[ErrorKind] = ErrorKind.EMPTY_CANDIDATE_SET


@dataclass(frozen=True)
class NotPlaying(RoundError):
    kind: ClassVar[ErrorKind] = ErrorKind.NOT_PLAYING
    status: str = "idle"


@dataclass(frozen=True)
class LengthMismatch(RoundError):
    kind: ClassVar[ErrorKind] = ErrorKind.LENGTH_MISMATCH
    expected: int = 0
    actual: int = 0


@dataclass(frozen=True)
class HintUnavailable(RoundError):
    kind: ClassVar[ErrorKind] = ErrorKind.HINT_UNAVAILABLE
    hint_kind: str = ""
    difficulty: str = ""


@dataclass(frozen=True)
class WordSourceFailure(RoundError):
    kind: ClassVar[ErrorKind] = ErrorKind.WORD_SOURCE_FAILURE
    message: str = ""


@dataclass(frozen=True)
class GameNotFound(RoundError):
    kind: ClassVar[ErrorKind] = ErrorKind.GAME_NOT_FOUND
    game_id: str = ""


@dataclass(frozen=True)
class Result(Generic[T]):
    """Success/failure union returned by controller and service operations."""
    value: Optional[T] = None
    error: Optional[RoundError] = None

    @property
    def success(self) -> bool:
        return self.error is None

    @classmethod
    def ok(cls, value: Optional[T] = None) -> 'Result[T]':
        return cls(value=value)

    @classmethod
    def fail(cls, error: RoundError) -> 'Result[T]':
        return cls(error=error)
