"""
Services Package

Contains all business logic and service classes.
"""

from .evaluator import evaluate, invalid_matches, is_winning
from .game_service import GameService, classify_outcome, get_game_service, initialize_game_service
from .game_store import GameStore, InMemoryGameStore, MongoGameStore, build_game_store
from .word_catalog import WordCatalog

__all__ = [
    'evaluate', 'invalid_matches', 'is_winning',
    'GameService', 'classify_outcome', 'get_game_service', 'initialize_game_service',
    'GameStore', 'InMemoryGameStore', 'MongoGameStore', 'build_game_store',
    'WordCatalog'
]
