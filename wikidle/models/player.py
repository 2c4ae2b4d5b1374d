"""
Player Data Models

Contains the persisted player preferences and statistics.
"""

from dataclasses import asdict, dataclass
from typing import Dict


@dataclass
class PlayerSettings:
    """Player preferences applied when a new game starts."""
    difficulty: str = "medium"
    enable_hints: bool = True
    enable_audio: bool = True
    max_attempts: int = 6
    min_length: int = 3
    max_length: int = 12

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass
class PlayerStats:
    """Player statistics data model."""
    games_played: int = 0
    games_won: int = 0
    score: int = 0

    @property
    def win_rate(self) -> int:
        if self.games_played == 0:
            return 0
        return round(self.games_won / self.games_played * 100)

    def to_dict(self) -> Dict:
        stats = asdict(self)
        stats['win_rate'] = self.win_rate
        return stats
