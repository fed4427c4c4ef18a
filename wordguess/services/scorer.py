"""
Scorer

The single letter-scoring implementation shared by local sessions, the Flask
scoring route and the serverless handler.
"""

from typing import List, Optional

from ..config.game_settings import WORD_LENGTH
from ..exceptions import InvalidLength
from ..models.game import (
    CONTINUE_MESSAGE, CORRECT_MESSAGE, GuessOutcome, LetterResult, LetterStatus
)


def normalize_guess(raw) -> str:
    """Upper-case a raw guess. Non-string input normalizes to ''."""
    if not isinstance(raw, str):
        return ""
    return raw.upper()


def validate_guess(word: str) -> str:
    """
    Checks a normalized guess is scoreable.

    Raises:
        InvalidLength: If the word is not exactly WORD_LENGTH characters
    """
    if len(word) != WORD_LENGTH:
        raise InvalidLength()
    return word


def score(guess: str, target: str) -> GuessOutcome:
    """
    Implements the two-pass Wordle letter evaluation.

    Exact matches consume their target letter first; remaining guess letters
    then claim the first unconsumed occurrence, left to right. Both words are
    assumed to be WORD_LENGTH upper-case letters.
    """
    target_chars: List[Optional[str]] = list(target)
    result: List[LetterResult] = []

    # First pass: exact positions
    for i in range(WORD_LENGTH):
        if guess[i] == target_chars[i]:
            result.append(LetterResult(guess[i], LetterStatus.CORRECT))
            target_chars[i] = None
        else:
            result.append(LetterResult(guess[i], LetterStatus.UNKNOWN))

    # Second pass: letters elsewhere in the target
    for i in range(WORD_LENGTH):
        if result[i].status is not LetterStatus.UNKNOWN:
            continue
        letter = guess[i]
        if letter in target_chars:
            result[i] = LetterResult(letter, LetterStatus.PRESENT)
            target_chars[target_chars.index(letter)] = None
        else:
            result[i] = LetterResult(letter, LetterStatus.ABSENT)

    is_correct = guess == target

    return GuessOutcome(
        results=tuple(result),
        is_correct=is_correct,
        message=CORRECT_MESSAGE if is_correct else CONTINUE_MESSAGE
    )
