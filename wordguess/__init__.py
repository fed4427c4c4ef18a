"""
Word Guess Server Application Package

Flask application serving the word guessing game: the session API used by
the browser client and the stateless scoring endpoint used in remote mode.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config, validate_target_word


def create_app(config_class=Config, game_service=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        game_service: GameService to serve; built from the configuration when omitted

    Returns:
        Tuple of (Flask application, SocketIO instance)
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.config['TARGET_WORD'] = validate_target_word(app.config['TARGET_WORD'])

    # Initialize extensions
    CORS(app, origins='*', methods=['GET', 'POST', 'DELETE', 'OPTIONS'], allow_headers=['Content-Type'])
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    if game_service is None:
        from .services.game_service import GameService
        from .services.history_store import create_history_store
        game_service = GameService(config_class, history_store=create_history_store(config_class))

    # Register blueprints
    from .controllers.game_controller import game_bp
    from .controllers.score_controller import score_bp

    app.register_blueprint(game_bp, url_prefix='/api')
    app.register_blueprint(score_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store shared instances for use in other modules
    app.game_service = game_service
    app.socketio = socketio

    return app, socketio
