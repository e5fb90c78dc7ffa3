"""
Wordlet Game Server Application Package

Backend for a daily word-guessing game: players start a game, submit guesses
scored letter by letter against a secret word, and the game is persisted
between requests until it is won or the guesses run out.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config, WORD_LIST
from .services.game_service import initialize_game_service
from .services.game_store import build_game_store
from .services.word_catalog import WordCatalog


def create_app(config_class=Config, store=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        store: GameStore to use instead of the one named by GAME_STORE

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    # Initialize services
    if store is None:
        store = build_game_store(app.config)
    catalog = WordCatalog(WORD_LIST, seed=app.config.get('WORD_SEED'))
    initialize_game_service(store, catalog)

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp)

    return app
