"""
Scoring Endpoint

Request handling shared by the Flask scoring route and the serverless
handler. Stateless: the target comes from configuration on every call.
"""

import json
from typing import Any, Dict, Tuple

from ..config.game_settings import validate_target_word
from ..exceptions import InvalidLength, MalformedRequest
from .scorer import normalize_guess, score, validate_guess

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'POST, OPTIONS',
    'Access-Control-Allow-Headers': 'Content-Type'
}


def parse_event_body(event: Any) -> Dict[str, Any]:
    """
    Extracts the request body from an API Gateway event or a direct test event.

    A string ``body`` is decoded as JSON; any other event is used as-is.

    Raises:
        MalformedRequest: If the body is not a JSON object
    """
    if isinstance(event, dict) and isinstance(event.get('body'), str):
        try:
            body = json.loads(event['body'])
        except ValueError:
            raise MalformedRequest()
    else:
        body = event

    if not isinstance(body, dict):
        raise MalformedRequest()
    return body


def extract_word(body: Dict[str, Any]) -> str:
    """Finds the guessed word at the top level or under a nested ``body``."""
    word = body.get('word')
    if not word and isinstance(body.get('body'), dict):
        word = body['body'].get('word')
    return normalize_guess(word or "")


def handle_score_request(body: Any, target: str) -> Tuple[int, Dict[str, Any]]:
    """
    Scores one request body.

    Returns:
        Tuple of (status_code, response_payload)
    """
    if not isinstance(body, dict):
        return 400, {'error': MalformedRequest.default_message}

    guess = extract_word(body)
    try:
        validate_guess(guess)
    except InvalidLength as e:
        return 400, {'error': e.message}

    outcome = score(guess, validate_target_word(target))
    return 200, outcome.to_dict()
