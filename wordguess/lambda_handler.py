"""
Serverless Scoring Handler

AWS Lambda entry point (behind API Gateway) exposing the same scoring
contract as the Flask ``/api/score`` route.
"""

import json
import logging
import os

from .config.game_settings import DEFAULT_TARGET_WORD, validate_target_word
from .exceptions import MalformedRequest
from .services.score_endpoint import CORS_HEADERS, handle_score_request, parse_event_body

logger = logging.getLogger(__name__)
logger.setLevel(os.getenv('LOG_LEVEL', 'INFO'))


def format_response(status_code, body):
    """Wraps a payload in an API Gateway proxy response."""
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json', **CORS_HEADERS},
        'body': json.dumps(body, ensure_ascii=False)
    }


def handler(event, context=None):
    logger.info("Event received: %s", json.dumps(event, default=str))

    try:
        target = validate_target_word(os.getenv('TARGET_WORD') or DEFAULT_TARGET_WORD)
    except ValueError as e:
        logger.error("Invalid TARGET_WORD configuration: %s", e)
        return format_response(500, {'error': 'Scoring service misconfigured'})

    try:
        body = parse_event_body(event)
    except MalformedRequest as e:
        logger.error("Error parsing request body: %s", e.message)
        return format_response(400, {'error': e.message})

    status_code, payload = handle_score_request(body, target)
    logger.info("Response: %s", json.dumps(payload, ensure_ascii=False))
    return format_response(status_code, payload)
