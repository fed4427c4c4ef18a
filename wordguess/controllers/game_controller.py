"""
Game Controller

Handles all game session HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, current_app, jsonify, request
from ..exceptions import WordGuessError
from ..utils.decorators import json_body, require_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_limit

game_bp = Blueprint('game', __name__)


def _error_response(error: Exception, action: str, game_id=None):
    """Turns an exception into the JSON error reply and logs both."""
    if isinstance(error, WordGuessError):
        status_code = error.status_code
        message = error.message
    else:
        game_logger.log_error(request, error, action, game_id)
        status_code = 500
        message = str(error)

    error_response = {
        'success': False,
        'error': message
    }
    game_logger.log_server_response(
        request, action, False, error_response, game_id,
        error_type=type(error).__name__
    )
    return jsonify(error_response), status_code


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
@json_body
def new_game(game_service, data):
    """Create a new game session."""
    try:
        mode = data.get('mode', 'local')

        game_logger.log_user_action(request, 'new_game', mode=mode)

        game_id = game_service.create_new_game(mode)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            max_attempts=state.max_attempts
        )

        return jsonify(response_data), 201

    except Exception as e:
        return _error_response(e, 'new_game')


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service
def get_state(game_id, game_service):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            attempt_count=state.attempt_count, game_over=state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        return _error_response(e, 'get_state', game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game_service
@json_body
def make_guess(game_id, game_service, data):
    """Submit a guess for scoring."""
    try:
        guess = data.get('guess')
        if not isinstance(guess, str):
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=guess, guess_length=len(guess)
        )

        result = game_service.make_guess(game_id, guess)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'result': result.to_dict(),
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=result.guess, attempt=result.attempt_count, game_over=result.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        return _error_response(e, 'submit_guess', game_id)


@game_bp.route('/game/<game_id>/mode', methods=['POST'])
@require_game_service
@json_body
def switch_mode(game_id, game_service, data):
    """Switch a session between local and remote scoring. Always resets it."""
    try:
        mode = data.get('mode')

        game_logger.log_user_action(request, 'switch_mode', game_id, mode=mode)

        state = game_service.switch_mode(game_id, mode)
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'switch_mode', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        return _error_response(e, 'switch_mode', game_id)


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
@require_game_service
def reset_game(game_id, game_service):
    """Start a session over in its current mode."""
    try:
        game_logger.log_user_action(request, 'reset_game', game_id)

        state = game_service.reset_game(game_id)
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'reset_game', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        return _error_response(e, 'reset_game', game_id)


@game_bp.route('/game/<game_id>/history', methods=['GET'])
@require_game_service
def get_history(game_id, game_service):
    """Mirrored guess history, newest first."""
    try:
        try:
            limit = parse_limit(request.args.get('limit'))
        except ValueError as e:
            error_response = {
                'success': False,
                'error': str(e)
            }
            game_logger.log_server_response(request, 'get_history', False, error_response, game_id)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'get_history', game_id, limit=limit)

        records = game_service.get_history(game_id, limit)
        response_data = {
            'success': True,
            'history': [record.to_dict() for record in records]
        }

        game_logger.log_server_response(request, 'get_history', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        return _error_response(e, 'get_history', game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service
def delete_game(game_id, game_service):
    """End a session and clear its history."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)
        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if not success:
            response_data['error'] = 'Game not found'
            return jsonify(response_data), 404

        game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
        return jsonify(response_data)

    except Exception as e:
        return _error_response(e, 'delete_game', game_id)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = getattr(current_app, 'game_service', None)

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'remote_mode_available': game_service.remote_available if game_service else False,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
