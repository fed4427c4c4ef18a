"""
Scoring Backends

A session scores guesses through one of these. The local backend knows the
target; the remote backend only ever sees the scoring endpoint's verdict.
"""

import logging
from typing import Optional

import requests

from ..config.game_settings import validate_target_word
from ..exceptions import RemoteUnavailable
from ..models.game import GameMode, GuessOutcome
from .scorer import score

logger = logging.getLogger(__name__)


class LocalScoringBackend:
    """Scores guesses in-process against a fixed target."""

    mode = GameMode.LOCAL

    def __init__(self, target: str):
        self._target = validate_target_word(target)

    def score(self, guess: str) -> GuessOutcome:
        return score(guess, self._target)

    def reveal_target(self) -> Optional[str]:
        return self._target


class RemoteScoringBackend:
    """
    Scores guesses by calling the remote scoring endpoint.

    Any transport failure, non-success status or malformed body is reported
    as RemoteUnavailable so the caller can leave the session untouched.
    """

    mode = GameMode.REMOTE

    def __init__(self, endpoint: str, timeout: float = 5.0,
                 session: Optional[requests.Session] = None):
        if not endpoint:
            raise ValueError("Remote scoring endpoint is required")
        self.endpoint = endpoint
        self.timeout = timeout
        self.session = session or requests.Session()

    def score(self, guess: str) -> GuessOutcome:
        try:
            response = self.session.post(
                self.endpoint,
                json={'word': guess},
                headers={'Content-Type': 'application/json'},
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.warning("Scoring endpoint request failed: %s", e)
            raise RemoteUnavailable(f"Scoring service unavailable: {e}")

        if not response.ok:
            logger.warning("Scoring endpoint returned HTTP %s", response.status_code)
            raise RemoteUnavailable(f"Scoring service returned HTTP {response.status_code}")

        try:
            outcome = GuessOutcome.from_dict(response.json())
        except ValueError as e:
            # requests raises a ValueError subclass for undecodable JSON too
            logger.warning("Malformed scoring response: %s", e)
            raise RemoteUnavailable("Scoring service sent a malformed response")

        if outcome.word != guess:
            logger.warning("Scoring response was for %r, expected %r", outcome.word, guess)
            raise RemoteUnavailable("Scoring service sent a malformed response")

        return outcome

    def reveal_target(self) -> Optional[str]:
        return None
