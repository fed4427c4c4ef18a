"""
Controller Decorators

Contains decorators shared by the HTTP endpoints.
"""

from functools import wraps
from flask import current_app, jsonify, request


def require_game_service(f):
    """
    Decorator that injects the app's GameService as ``game_service``.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        game_service = getattr(current_app, 'game_service', None)
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function


def json_body(f):
    """Decorator that passes the parsed JSON object body as ``data`` ({} when absent)."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        data = request.get_json(silent=True)
        kwargs['data'] = data if isinstance(data, dict) else {}
        return f(*args, **kwargs)

    return decorated_function
