"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional
from flask import request


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None)  # Socket.IO connections only
    }


def parse_limit(value) -> Optional[int]:
    """Parses an optional positive ``limit`` query parameter."""
    if value in (None, ''):
        return None
    try:
        limit = int(value)
    except (TypeError, ValueError):
        raise ValueError("limit must be a positive integer")
    if limit <= 0:
        raise ValueError("limit must be a positive integer")
    return limit
