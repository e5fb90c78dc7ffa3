"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and the word list (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, resolve_config
from .game_settings import WORD_LIST, WORD_LENGTH, MAX_GUESSES, validate_word_list_integrity

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'resolve_config',
    # Game rules
    'WORD_LIST', 'WORD_LENGTH', 'MAX_GUESSES', 'validate_word_list_integrity'
]
