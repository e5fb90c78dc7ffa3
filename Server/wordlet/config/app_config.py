"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _optional_int(value: Optional[str]) -> Optional[int]:
    """Parse an optional integer environment value; blank means unset."""
    if value is None or not value.strip():
        return None
    return int(value)


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Server Settings
    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = int(os.getenv('PORT', 3030))

    # Storage Settings ("mongo" or "memory")
    GAME_STORE = os.getenv('GAME_STORE', 'mongo')
    MONGO_URI = os.getenv('MONGO_URI', 'mongodb://localhost:27017')
    MONGO_DB_NAME = os.getenv('MONGO_DB_NAME', 'wordlet')
    GAMES_COLLECTION = os.getenv('GAMES_COLLECTION', 'games')

    # Game Settings
    WORD_SEED = _optional_int(os.getenv('WORD_SEED'))

    # Request Limits
    MAX_NEW_GAME_BODY_BYTES = 10
    MAX_GUESS_BODY_BYTES = 1024

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    GAME_STORE = 'memory'
    WORD_SEED = 7


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': Config
}


def resolve_config(env_name: Optional[str] = None):
    """
    Look up the configuration class for an environment name.

    Unset means the base Config, whose DEBUG comes from the environment.

    Raises:
        ValueError: If the name is not a known environment
    """
    try:
        return config[env_name or 'default']
    except KeyError:
        raise ValueError(
            f"Unknown WORDLET_ENV {env_name!r}; expected one of {sorted(config)}"
        ) from None
