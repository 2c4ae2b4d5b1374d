"""
Services Package

Contains the round core (evaluator, hint ledger, round controller) and the
services built on it.
"""

from .evaluator import evaluate, summarize_letters
from .hint_ledger import HintLedger
from .round_controller import RoundController
from .game_service import GameService, GameSession, get_game_service, initialize_game_service
from .settings_service import SettingsService, get_settings_service, initialize_settings_service

__all__ = [
    'evaluate', 'summarize_letters', 'HintLedger', 'RoundController',
    'GameService', 'GameSession', 'get_game_service', 'initialize_game_service',
    'SettingsService', 'get_settings_service', 'initialize_settings_service'
]
