"""
Game Configuration Constants Module

Defines the fixed rules of the word guessing game. Values that operators may
change per deployment (target words, endpoints) live in app_config.py.
"""

from typing import Final

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts allowed per session.
Type: Final[int] - Immutable to prevent accidental modification
"""

WORD_LENGTH: Final[int] = 5

DEFAULT_TARGET_WORD: Final[str] = "CLOUD"
"""Target used by both local mode and the scoring endpoint when unset."""


def validate_target_word(word: str) -> str:
    """
    Normalizes and validates a configured target word.

    Args:
        word: Target word as configured (any case)

    Returns:
        str: The upper-cased target word

    Raises:
        ValueError: If the word is not exactly WORD_LENGTH alphabetic characters
    """
    if not isinstance(word, str):
        raise ValueError("Target word must be a string")

    normalized = word.strip().upper()

    if len(normalized) != WORD_LENGTH:
        raise ValueError(f"Target word '{word}' is not {WORD_LENGTH} characters long")

    if not normalized.isalpha():
        raise ValueError(f"Target word '{word}' contains non-alphabetic characters")

    return normalized
