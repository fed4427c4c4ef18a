"""
Game Service

Owns the live game sessions, one per client page load, and builds the
scoring backend each session uses.
"""

import threading
import time
from typing import Dict, List, Optional

import requests

from ..config import Config
from ..exceptions import GameNotFound, MalformedRequest, ModeUnavailable
from ..models.game import GameMode, GameState, GuessSubmissionResult
from ..models.history import HistoryRecord
from ..utils.game_logger import game_logger
from .game_session import GameSession
from .history_store import InMemoryHistoryStore
from .scoring_backends import LocalScoringBackend, RemoteScoringBackend


def parse_mode(mode) -> GameMode:
    """Turns a client-supplied mode name into a GameMode."""
    try:
        return GameMode(mode)
    except ValueError:
        raise MalformedRequest('Invalid game mode. Must be "local" or "remote"')


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Session creation with unique game IDs
    - Backend selection per session (local target or remote endpoint)
    - Mode switches, which always start the session over
    - Session teardown together with its history mirror
    """

    def __init__(self, config=Config, history_store=None,
                 http_session: Optional[requests.Session] = None):
        self.config = config
        self.history_store = history_store if history_store is not None else InMemoryHistoryStore()
        self.http_session = http_session
        self.games: Dict[str, GameSession] = {}
        self._lock = threading.Lock()

    @property
    def remote_available(self) -> bool:
        return bool(self.config.API_ENDPOINT)

    def _build_backend(self, mode: GameMode):
        if mode is GameMode.REMOTE:
            if not self.remote_available:
                raise ModeUnavailable()
            return RemoteScoringBackend(
                self.config.API_ENDPOINT,
                timeout=self.config.REMOTE_TIMEOUT_SECONDS,
                session=self.http_session
            )
        return LocalScoringBackend(self.config.LOCAL_TARGET_WORD)

    def _get_session(self, game_id: str) -> GameSession:
        with self._lock:
            session = self.games.get(game_id)
        if session is None:
            raise GameNotFound()
        return session

    def create_new_game(self, mode: str = "local") -> str:
        """
        Creates a new game session.

        Args:
            mode: "local" or "remote"

        Returns:
            str: Unique game ID for this session

        Raises:
            MalformedRequest: Unknown mode
            ModeUnavailable: Remote mode requested without an endpoint
        """
        backend = self._build_backend(parse_mode(mode))
        session = GameSession(
            backend,
            history_store=self.history_store,
            max_attempts=self.config.MAX_ATTEMPTS
        )
        self.cleanup_idle_sessions()
        with self._lock:
            self.games[session.session_id] = session
        return session.session_id

    def get_game_state(self, game_id: str) -> GameState:
        """Returns the current state of a session (without revealing the answer)."""
        return self._get_session(game_id).snapshot()

    def make_guess(self, game_id: str, guess: str) -> GuessSubmissionResult:
        """
        Submits a guess to a session.

        Errors from the session propagate unchanged; see GameSession.submit_guess.
        """
        session = self._get_session(game_id)
        result = session.submit_guess(guess)

        if result.game_over:
            game_logger.log_game_event(
                game_id, 'game_won' if result.outcome.is_correct else 'game_lost', 'system',
                mode=session.mode.value, attempts_used=result.attempt_count,
                final_guess=result.guess
            )
        return result

    def switch_mode(self, game_id: str, mode: str) -> GameState:
        """
        Moves a session to another scoring mode and starts it over.

        The target is never carried across modes. On error the session is
        left exactly as it was.
        """
        session = self._get_session(game_id)
        backend = self._build_backend(parse_mode(mode))
        previous = session.mode
        session.reset(backend)
        game_logger.log_game_event(
            game_id, 'mode_switched', 'system',
            from_mode=previous.value, to_mode=session.mode.value
        )
        return session.snapshot()

    def reset_game(self, game_id: str) -> GameState:
        """Starts a session over in its current mode."""
        session = self._get_session(game_id)
        session.reset()
        return session.snapshot()

    def get_history(self, game_id: str, limit: Optional[int] = None) -> List[HistoryRecord]:
        """Mirrored guesses for a session, newest first."""
        return self._get_session(game_id).recent_history(limit)

    def cleanup_idle_sessions(self, now: Optional[float] = None) -> List[str]:
        """
        Drops sessions with no guess or reset for SESSION_IDLE_SECONDS.

        Returns:
            List of removed game IDs
        """
        idle_seconds = getattr(self.config, 'SESSION_IDLE_SECONDS', None)
        if not idle_seconds or idle_seconds <= 0:
            return []

        cutoff = (now if now is not None else time.time()) - idle_seconds
        with self._lock:
            expired = [game_id for game_id, session in self.games.items()
                       if session.last_activity < cutoff]
            for game_id in expired:
                del self.games[game_id]

        for game_id in expired:
            self.history_store.clear(game_id)
            game_logger.log_game_event(game_id, 'game_expired', 'system')
        return expired

    def delete_game(self, game_id: str) -> bool:
        """
        Ends a session and clears its history mirror.

        Returns:
            bool: True if the game was deleted, False if not found
        """
        with self._lock:
            session = self.games.pop(game_id, None)
        if session is None:
            return False
        session.reset()
        return True

