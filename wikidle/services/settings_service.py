"""
Settings Service

Persists player preferences and statistics in MongoDB.
"""

import datetime
from typing import Any, Dict, Optional

from pymongo.collection import Collection
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..config.game_settings import DEFAULT_SETTINGS, validate_settings
from ..models.player import PlayerSettings, PlayerStats
from ..utils.game_logger import game_logger


class SettingsService:
    """
    Player settings and statistics store.

    Documents in the players collection look like
    {player_id, settings: {...}, stats: {...}, updated_at}.
    """

    def __init__(self, players_collection: Collection):
        self.players_collection = players_collection
        self.players_collection.create_index("player_id", unique=True)

    @classmethod
    def from_uri(cls, mongo_uri: str) -> 'SettingsService':
        """
        Connect to MongoDB and build the service.

        Args:
            mongo_uri: MongoDB connection string

        Raises:
            pymongo.errors.PyMongoError: If the server cannot be reached
        """
        client = MongoClient(mongo_uri, server_api=ServerApi('1'))
        client.admin.command('ping')
        game_logger.logger.info("Successfully connected to MongoDB")
        return cls(client.wikidle.players)

    @staticmethod
    def _normalize_player_id(player_id: str) -> str:
        return player_id.strip().lower()

    def get_saved_settings(self, player_id: str) -> Dict[str, Any]:
        """Only the settings the player has stored, without defaults."""
        doc = self.players_collection.find_one(
            {"player_id": self._normalize_player_id(player_id)},
            {"settings": 1}
        )
        stored = (doc or {}).get("settings") or {}
        return {key: value for key, value in stored.items() if key in DEFAULT_SETTINGS}

    def get_settings(self, player_id: str) -> PlayerSettings:
        """Stored settings merged over the defaults."""
        return PlayerSettings(**{**DEFAULT_SETTINGS, **self.get_saved_settings(player_id)})

    def save_settings(self, player_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate and store a settings update.

        Args:
            player_id: Player identifier
            updates: Partial settings mapping

        Returns:
            Dictionary with success status and the merged settings or error
        """
        if not player_id or not player_id.strip():
            return {"success": False, "error": "Player id is required"}

        if not isinstance(updates, dict) or not updates:
            return {"success": False, "error": "No settings provided"}

        current = self.get_settings(player_id).to_dict()
        merged = {**current, **updates}

        # Validate the merged view so length bounds are checked together
        is_valid, error = validate_settings(merged)
        if not is_valid:
            return {"success": False, "error": error}

        self.players_collection.update_one(
            {"player_id": self._normalize_player_id(player_id)},
            {
                "$set": {
                    **{f"settings.{key}": value for key, value in updates.items()},
                    "updated_at": datetime.datetime.now(datetime.timezone.utc)
                }
            },
            upsert=True
        )

        return {"success": True, "settings": merged}

    def record_result(self, player_id: str, won: bool, points: int) -> None:
        """Add one finished round to the player's statistics."""
        self.players_collection.update_one(
            {"player_id": self._normalize_player_id(player_id)},
            {
                "$inc": {
                    "stats.games_played": 1,
                    "stats.games_won": 1 if won else 0,
                    "stats.score": points
                },
                "$set": {"updated_at": datetime.datetime.now(datetime.timezone.utc)}
            },
            upsert=True
        )

    def get_stats(self, player_id: str) -> PlayerStats:
        doc = self.players_collection.find_one(
            {"player_id": self._normalize_player_id(player_id)},
            {"stats": 1}
        )
        stats = (doc or {}).get("stats") or {}
        return PlayerStats(
            games_played=stats.get("games_played", 0),
            games_won=stats.get("games_won", 0),
            score=stats.get("score", 0)
        )


# Global service instance
_settings_service = None


def get_settings_service() -> Optional[SettingsService]:
    """Get the global settings service instance."""
    return _settings_service


def initialize_settings_service(mongo_uri: Optional[str] = None,
                                players_collection: Optional[Collection] = None) -> Optional[SettingsService]:
    """
    Initialize the global settings service instance.

    Returns None when neither a URI nor a collection is supplied or the
    database is unreachable; the game then runs without persistence.
    """
    global _settings_service
    if players_collection is not None:
        _settings_service = SettingsService(players_collection)
    elif mongo_uri:
        try:
            _settings_service = SettingsService.from_uri(mongo_uri)
        except Exception as e:
            game_logger.logger.error(f"MongoDB connection error: {e}")
            _settings_service = None
    else:
        _settings_service = None
    return _settings_service
