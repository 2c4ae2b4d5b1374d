"""
Round Data Models

Contains the data structures for candidate words, scored guesses and
round snapshots.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Per-letter evaluation status."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


class RoundStatus(Enum):
    """Lifecycle states of a guessing round."""
    IDLE = "idle"
    LOADING = "loading"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self in (RoundStatus.WON, RoundStatus.LOST, RoundStatus.ERROR)


@dataclass(frozen=True)
class GrammaticalFeatures:
    """Structured grammatical tag of a lexeme."""
    gender: Optional[str] = None
    plurals: Tuple[str, ...] = ()

    def to_dict(self) -> Dict:
        return {'gender': self.gender, 'plurals': list(self.plurals)}


@dataclass(frozen=True)
class CandidateWord:
    """A lexeme offered by the word source as a possible target."""
    lemma: str
    grammatical_features: Optional[GrammaticalFeatures] = None
    description: Optional[str] = None
    image_ref: Optional[str] = None
    audio_ref: Optional[str] = None
    translations: Tuple[str, ...] = ()
    lexeme_id: Optional[str] = None

    def to_dict(self) -> Dict:
        return {
            'lemma': self.lemma,
            'grammatical_features': self.grammatical_features.to_dict() if self.grammatical_features else None,
            'description': self.description,
            'image_ref': self.image_ref,
            'audio_ref': self.audio_ref,
            'translations': list(self.translations),
            'lexeme_id': self.lexeme_id
        }


@dataclass(frozen=True)
class LetterResult:
    letter: str
    status: LetterStatus

    def to_dict(self) -> Dict[str, str]:
        return {'letter': self.letter, 'status': self.status.value}


@dataclass(frozen=True)
class Guess:
    """A guess together with its evaluation. Immutable once scored."""
    text: str
    evaluation: Tuple[LetterResult, ...]

    def to_dict(self) -> Dict:
        return {
            'text': self.text,
            'evaluation': [result.to_dict() for result in self.evaluation]
        }


@dataclass
class Round:
    """Mutable state of the round currently owned by a controller."""
    target: CandidateWord
    target_length: int
    max_attempts: int = 6
    attempts_made: List[Guess] = field(default_factory=list)
    status: RoundStatus = RoundStatus.PLAYING

    @property
    def attempts_remaining(self) -> int:
        return self.max_attempts - len(self.attempts_made)


@dataclass(frozen=True)
class TerminalInfo:
    won: bool
    revealed_word: str

    def to_dict(self) -> Dict:
        return {'won': self.won, 'revealed_word': self.revealed_word}


@dataclass(frozen=True)
class GuessOutcome:
    """Result of one accepted guess."""
    evaluation: Tuple[LetterResult, ...]
    attempts_remaining: int
    terminal: Optional[TerminalInfo] = None

    def to_dict(self) -> Dict:
        return {
            'evaluation': [result.to_dict() for result in self.evaluation],
            'attempts_remaining': self.attempts_remaining,
            'terminal': self.terminal.to_dict() if self.terminal else None
        }


@dataclass(frozen=True)
class RoundInfo:
    """
    Read-only snapshot of a round.

    The target word is only included once the round is won or lost.
    """
    status: RoundStatus
    target_length: Optional[int] = None
    max_attempts: int = 6
    attempts_remaining: int = 0
    guesses: Tuple[Guess, ...] = ()
    letter_status: Dict[str, str] = field(default_factory=dict)
    revealed_hints: Tuple[str, ...] = ()
    revealed_word: Optional[str] = None

    def to_dict(self) -> Dict:
        return {
            'status': self.status.value,
            'target_length': self.target_length,
            'max_attempts': self.max_attempts,
            'attempts_remaining': self.attempts_remaining,
            'guesses': [guess.to_dict() for guess in self.guesses],
            'letter_status': dict(self.letter_status),
            'revealed_hints': list(self.revealed_hints),
            'revealed_word': self.revealed_word
        }
