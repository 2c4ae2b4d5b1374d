"""
Hint Data Models

Each hint kind has its own payload type carrying only the fields that
kind needs.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, Optional, Tuple, Union

from .round import GrammaticalFeatures


class HintKind(Enum):
    """Categories of auxiliary information about the target word."""
    GRAMMATICAL_FEATURES = "grammatical_features"
    DEFINITION = "definition"
    IMAGE = "image"
    TRANSLATIONS = "translations"
    PRONUNCIATION = "pronunciation"


NOT_SPECIFIED: str = "not specified"
DEFINITION_NOT_AVAILABLE: str = "definition not available"


@dataclass(frozen=True)
class GrammaticalFeaturesHint:
    kind: ClassVar[HintKind] = HintKind.GRAMMATICAL_FEATURES
    features: Optional[GrammaticalFeatures] = None

    def to_dict(self) -> Dict:
        return {
            'kind': self.kind.value,
            'features': self.features.to_dict() if self.features else NOT_SPECIFIED
        }


@dataclass(frozen=True)
class DefinitionHint:
    kind: ClassVar[HintKind] = HintKind.DEFINITION
    description: Optional[str] = None

    @property
    def available(self) -> bool:
        return self.description is not None

    def to_dict(self) -> Dict:
        return {
            'kind': self.kind.value,
            'definition': self.description if self.available else DEFINITION_NOT_AVAILABLE,
            'available': self.available
        }


@dataclass(frozen=True)
class ImageHint:
    kind: ClassVar[HintKind] = HintKind.IMAGE
    image_ref: str = ""

    def to_dict(self) -> Dict:
        return {'kind': self.kind.value, 'image_ref': self.image_ref}


@dataclass(frozen=True)
class PronunciationHint:
    kind: ClassVar[HintKind] = HintKind.PRONUNCIATION
    audio_ref: str = ""

    def to_dict(self) -> Dict:
        return {'kind': self.kind.value, 'audio_ref': self.audio_ref}


@dataclass(frozen=True)
class TranslationsHint:
    kind: ClassVar[HintKind] = HintKind.TRANSLATIONS
    translations: Tuple[str, ...] = ()

    def to_dict(self) -> Dict:
        return {'kind': self.kind.value, 'translations': list(self.translations)}


HintPayload = Union[
    GrammaticalFeaturesHint,
    DefinitionHint,
    ImageHint,
    PronunciationHint,
    TranslationsHint,
]


@dataclass(frozen=True)
class HintOutcome:
    """
    What a hint request produced.

    payload is None both when the kind was already revealed and when the
    target has no data for it; already_revealed tells the two apart.
    """
    kind: HintKind
    payload: Optional[HintPayload] = None
    already_revealed: bool = False

    def to_dict(self) -> Dict:
        return {
            'kind': self.kind.value,
            'hint': self.payload.to_dict() if self.payload else None,
            'already_revealed': self.already_revealed
        }
