"""
Hint Ledger

Tracks which hint kinds have been revealed in the current round and
builds the payload for each kind the first time it is requested.
"""

from typing import List, Optional, Set

from ..models.hints import (
    DefinitionHint, GrammaticalFeaturesHint, HintKind, HintPayload, ImageHint,
    PronunciationHint, TranslationsHint
)
from ..models.round import CandidateWord


class HintLedger:
    """
    At-most-once disclosure of hints per round.

    The ledger knows nothing about difficulty tiers; callers decide which
    kinds to offer.
    """

    def __init__(self):
        self.revealed: Set[HintKind] = set()

    def is_revealed(self, kind: HintKind) -> bool:
        return kind in self.revealed

    def revealed_kinds(self) -> List[str]:
        return sorted(kind.value for kind in self.revealed)

    def request_hint(self, kind: HintKind, lexeme: CandidateWord) -> Optional[HintPayload]:
        """
        Reveals a hint about the lexeme.

        Args:
            kind: Hint kind to reveal
            lexeme: The round's target

        Returns:
            The payload, or None when the kind was already revealed or the
            lexeme has no data for a media or translation hint. The kind is
            marked revealed in both of the latter cases.
        """
        if kind in self.revealed:
            return None

        self.revealed.add(kind)

        if kind is HintKind.GRAMMATICAL_FEATURES:
            return GrammaticalFeaturesHint(features=lexeme.grammatical_features)
        if kind is HintKind.DEFINITION:
            return DefinitionHint(description=lexeme.description or None)
        if kind is HintKind.IMAGE:
            return ImageHint(image_ref=lexeme.image_ref) if lexeme.image_ref else None
        if kind is HintKind.PRONUNCIATION:
            return PronunciationHint(audio_ref=lexeme.audio_ref) if lexeme.audio_ref else None
        if kind is HintKind.TRANSLATIONS:
            return TranslationsHint(translations=lexeme.translations) if lexeme.translations else None

        raise ValueError(f"Unknown hint kind: {kind}")

    def reset(self) -> None:
        """Clears all revealed hints; called when a new round starts."""
        self.revealed.clear()
