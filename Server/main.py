"""
Wordlet Game Server - Main Entry Point

This is the main entry point for the Wordlet game server.
It picks the configuration, builds the Flask application and starts serving.
"""

import os
from wordlet import create_app
from wordlet.config import resolve_config
from wordlet.errors import StorageError
from wordlet.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        config_class = resolve_config(os.getenv('WORDLET_ENV'))

        print("Creating Flask application...")
        app = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordlet Server Starting")

        print(f"\nStarting Wordlet Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print(f"Game store: {config_class.GAME_STORE}")
        print("=" * 50)

        app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG, threaded=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordlet Server shutting down (KeyboardInterrupt)")
    except StorageError as e:
        print(f"✗ Failed to connect to the game store: {e}")
        game_logger.logger.error(f"Failed to connect to the game store: {e}")
        raise
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
