"""
Word Guess Server - Main Entry Point

This is the main entry point for the word guess server.
It builds the game service and starts the Flask-SocketIO application.
"""

import os
import threading
import time
from wordguess import create_app
from wordguess.config import config
from wordguess.services.game_service import GameService
from wordguess.services.history_store import MongoHistoryStore, create_history_store
from wordguess.utils.game_logger import game_logger


def session_cleanup_worker(game_service, interval_seconds):
    """
    Background worker that drops sessions abandoned without a DELETE.
    Runs every interval_seconds.
    """
    print("Session cleanup worker started")
    while True:
        try:
            expired = game_service.cleanup_idle_sessions()
            if expired:
                game_logger.logger.info(f"Session cleanup: removed {len(expired)} idle sessions")
        except Exception as e:
            game_logger.logger.error(f"Error in session cleanup worker: {e}")

        time.sleep(interval_seconds)


def main():
    """Main function to initialize services and start the server."""
    config_class = config.get(os.getenv('FLASK_ENV', 'default'), config['default'])

    try:
        print("Initializing services...")

        history_store = create_history_store(config_class)
        if isinstance(history_store, MongoHistoryStore):
            print("✓ Guess history stored in MongoDB")
        else:
            print("✓ Guess history kept in memory")

        game_service = GameService(config_class, history_store=history_store)
        print("✓ Game service initialized successfully")
        if not game_service.remote_available:
            print("✗ API_ENDPOINT not configured - remote mode disabled")

        print("Creating Flask application...")
        app, socketio = create_app(config_class, game_service=game_service)
        print("✓ Flask application created successfully")

        cleanup_thread = threading.Thread(
            target=session_cleanup_worker,
            args=(game_service, config_class.SESSION_CLEANUP_INTERVAL_SECONDS),
            daemon=True
        )
        cleanup_thread.start()
        print(f"✓ Session cleanup worker started - checking every {config_class.SESSION_CLEANUP_INTERVAL_SECONDS} seconds")

        game_logger.logger.info("Word Guess Server starting")

        print(f"\nStarting Word Guess Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print(f"Remote mode available: {game_service.remote_available}")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word Guess Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
