"""
WebSocket Event Handlers

Real-time version of the session API for browser clients that keep a
Socket.IO connection open.
"""

from dataclasses import asdict
from flask import current_app, request
from flask_socketio import emit
from ..exceptions import WordGuessError
from ..utils.game_logger import game_logger


def _emit_error(error: Exception, action: str, game_id=None):
    if isinstance(error, WordGuessError):
        message = error.message
    else:
        game_logger.log_error(request, error, action, game_id)
        message = str(error)
    emit('error', {'action': action, 'game_id': game_id, 'error': message})


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('new_game')
    def handle_new_game(data=None):
        """Create a session for this connection's page."""
        data = data if isinstance(data, dict) else {}
        mode = data.get('mode', 'local')
        try:
            game_service = current_app.game_service
            game_id = game_service.create_new_game(mode)
            state = game_service.get_game_state(game_id)
            game_logger.log_game_event(game_id, 'game_created', request.remote_addr, mode=mode)
            emit('game_created', {'game_id': game_id, 'state': asdict(state)})
        except Exception as e:
            _emit_error(e, 'new_game')

    @socketio.on('submit_guess')
    def handle_submit_guess(data=None):
        """Score a guess and push the result back to the sender."""
        data = data if isinstance(data, dict) else {}
        game_id = data.get('game_id')
        try:
            game_service = current_app.game_service
            result = game_service.make_guess(game_id, data.get('guess'))
            state = game_service.get_game_state(game_id)
            emit('guess_result', {
                'game_id': game_id,
                'result': result.to_dict(),
                'state': asdict(state)
            })
        except Exception as e:
            _emit_error(e, 'submit_guess', game_id)

    @socketio.on('switch_mode')
    def handle_switch_mode(data=None):
        """Change scoring mode; the session restarts."""
        data = data if isinstance(data, dict) else {}
        game_id = data.get('game_id')
        try:
            state = current_app.game_service.switch_mode(game_id, data.get('mode'))
            emit('mode_switched', {'game_id': game_id, 'state': asdict(state)})
        except Exception as e:
            _emit_error(e, 'switch_mode', game_id)
