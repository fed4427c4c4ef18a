"""
Score Controller

HTTP form of the stateless scoring endpoint used by sessions in remote mode.
"""

from flask import Blueprint, current_app, jsonify, request
from ..services.score_endpoint import CORS_HEADERS, handle_score_request
from ..utils.game_logger import game_logger

score_bp = Blueprint('score', __name__)


@score_bp.route('/score', methods=['POST', 'OPTIONS'])
def score_word():
    """Score a single word against the configured target."""
    if request.method == 'OPTIONS':
        return '', 204, CORS_HEADERS

    # Simple CORS requests arrive as text/plain, so parse regardless of content type
    body = request.get_json(force=True, silent=True)
    if body is None:
        body = {} if not request.get_data() else None

    game_logger.log_user_action(
        request, 'score',
        word=body.get('word') if isinstance(body, dict) else None
    )

    try:
        status_code, payload = handle_score_request(body, current_app.config['TARGET_WORD'])
    except Exception as e:
        game_logger.log_error(request, e, 'score')
        error_response = {'error': str(e)}
        game_logger.log_server_response(request, 'score', False, error_response)
        return jsonify(error_response), 500, CORS_HEADERS

    success = status_code == 200
    game_logger.log_server_response(
        request, 'score', success,
        {'isCorrect': payload.get('isCorrect')} if success else payload
    )

    return jsonify(payload), status_code, CORS_HEADERS
