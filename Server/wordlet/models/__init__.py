"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import CharacterMatchResult, Game, GameStatus, GuessOutcome, GuessRecord, MatchStatus

__all__ = ['CharacterMatchResult', 'Game', 'GameStatus', 'GuessOutcome', 'GuessRecord', 'MatchStatus']
