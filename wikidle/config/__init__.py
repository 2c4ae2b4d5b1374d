"""
Configuration Package

Contains all configuration-related files and settings.

This package separates three types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants (business logic)
- languages.py: Wikidata identifiers for languages and word kinds
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    DEFAULT_SETTINGS, DIFFICULTY_LEVELS, MAX_ATTEMPTS, calculate_points,
    get_allowed_hints, validate_settings
)
from .languages import SUPPORTED_LANGUAGES, WORD_KINDS, get_language, get_language_name

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'DEFAULT_SETTINGS', 'DIFFICULTY_LEVELS', 'MAX_ATTEMPTS', 'calculate_points',
    'get_allowed_hints', 'validate_settings',
    # Languages
    'SUPPORTED_LANGUAGES', 'WORD_KINDS', 'get_language', 'get_language_name'
]
