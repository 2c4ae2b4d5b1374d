"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .round import (
    CandidateWord, GrammaticalFeatures, Guess, GuessOutcome, LetterResult,
    LetterStatus, Round, RoundInfo, RoundStatus, TerminalInfo
)
from .hints import (
    DefinitionHint, GrammaticalFeaturesHint, HintKind, HintOutcome, HintPayload,
    ImageHint, PronunciationHint, TranslationsHint
)
from .errors import (
    EmptyCandidateSet, ErrorKind, GameNotFound, HintUnavailable, LengthMismatch,
    NotPlaying, Result, RoundError, WordSourceFailure
)
from .player import PlayerSettings, PlayerStats

__all__ = [
    'CandidateWord', 'GrammaticalFeatures', 'Guess', 'GuessOutcome', 'LetterResult',
    'LetterStatus', 'Round', 'RoundInfo', 'RoundStatus', 'TerminalInfo',
    'DefinitionHint', 'GrammaticalFeaturesHint', 'HintKind', 'HintOutcome', 'HintPayload', 'ImageHint',
    'PronunciationHint', 'TranslationsHint',
    'EmptyCandidateSet', 'ErrorKind', 'GameNotFound', 'HintUnavailable', 'LengthMismatch',
    'NotPlaying', 'Result', 'RoundError', 'WordSourceFailure',
    'PlayerSettings', 'PlayerStats'
]
