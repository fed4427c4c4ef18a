"""
Game Session

State machine for a single game: attempt counting, win/loss detection and
dispatch of each guess to the session's scoring backend.
"""

import logging
import threading
import time
import uuid
from typing import List, Optional, Tuple

from ..config.game_settings import MAX_ATTEMPTS
from ..exceptions import AttemptsExhausted, GameOver, SubmissionPending
from ..models.game import GameMode, GameState, GameStatus, GuessOutcome, GuessSubmissionResult
from ..models.history import HistoryRecord
from .scorer import normalize_guess, validate_guess

logger = logging.getLogger(__name__)

WIN_MESSAGE = "Congratulations! You got it!"
HIDDEN_ANSWER = "???"


class GameSession:
    """
    One game from first guess to win, loss or reset.

    The in-memory attempt count and history are canonical. The history store,
    when given, only mirrors accepted guesses for display.
    """

    def __init__(self, backend, history_store=None, max_attempts: int = MAX_ATTEMPTS,
                 session_id: Optional[str] = None):
        self.session_id = session_id or str(uuid.uuid4())
        self.backend = backend
        self.history_store = history_store
        self.max_attempts = max_attempts

        self.attempt_count = 0
        self.status = GameStatus.ACTIVE
        self.history: List[Tuple[str, GuessOutcome]] = []

        self._lock = threading.Lock()
        self._pending = False
        self._generation = 0
        self.last_activity = time.time()

    @property
    def mode(self) -> GameMode:
        return self.backend.mode

    @property
    def game_over(self) -> bool:
        return self.status.is_terminal

    def submit_guess(self, raw) -> GuessSubmissionResult:
        """
        Scores a guess and advances the game.

        Raises:
            GameOver: The session already ended
            InvalidLength: The guess is not 5 letters
            AttemptsExhausted: Attempts used up without a terminal state
            SubmissionPending: Another guess is still being scored
            RemoteUnavailable: The remote backend failed; nothing changed
        """
        guess = normalize_guess(raw)

        with self._lock:
            if self.game_over:
                raise GameOver()
            validate_guess(guess)
            if self.attempt_count >= self.max_attempts:
                logger.error("Session %s is active with %d/%d attempts used",
                             self.session_id, self.attempt_count, self.max_attempts)
                raise AttemptsExhausted()
            if self._pending:
                raise SubmissionPending()
            self._pending = True
            generation = self._generation

        try:
            outcome = self.backend.score(guess)
        except Exception:
            with self._lock:
                self._pending = False
            raise

        with self._lock:
            self._pending = False
            if generation != self._generation:
                raise GameOver("The game was reset while the guess was being scored")
            self.history.append((guess, outcome))
            self.attempt_count += 1

            if outcome.is_correct:
                self.status = GameStatus.WON
                message = WIN_MESSAGE
            elif self.attempt_count >= self.max_attempts:
                self.status = GameStatus.LOST
                answer = self.backend.reveal_target() or HIDDEN_ANSWER
                message = f"Game over! The answer was {answer}."
            else:
                message = outcome.message

            result = GuessSubmissionResult(
                guess=guess,
                outcome=outcome,
                status=self.status,
                attempt_count=self.attempt_count,
                message=message
            )

            # reset() clears the store under the same lock
            self._mirror(guess, outcome)
            self.last_activity = time.time()

        return result

    def _mirror(self, guess: str, outcome: GuessOutcome) -> None:
        if self.history_store is None:
            return
        try:
            self.history_store.append(self.session_id, guess, outcome)
        except Exception as e:
            logger.warning("History mirror failed for session %s: %s", self.session_id, e)

    def reset(self, backend=None) -> None:
        """Start over, optionally with a different scoring backend."""
        with self._lock:
            if backend is not None:
                self.backend = backend
            self.attempt_count = 0
            self.status = GameStatus.ACTIVE
            self.history = []
            self._generation += 1
            self.last_activity = time.time()

            if self.history_store is not None:
                try:
                    self.history_store.clear(self.session_id)
                except Exception as e:
                    logger.warning("History clear failed for session %s: %s", self.session_id, e)

    def recent_history(self, limit: Optional[int] = None) -> List[HistoryRecord]:
        """Mirrored records, newest first. Empty when no store is attached."""
        if self.history_store is None:
            return []
        try:
            return self.history_store.recent(self.session_id, limit)
        except Exception as e:
            logger.warning("History load failed for session %s: %s", self.session_id, e)
            return []

    def snapshot(self) -> GameState:
        """Current state without revealing the answer while the game is live."""
        with self._lock:
            answer = None
            if self.game_over and self.mode is GameMode.LOCAL:
                answer = self.backend.reveal_target()

            return GameState(
                game_id=self.session_id,
                mode=self.mode.value,
                status=self.status.value,
                attempt_count=self.attempt_count,
                max_attempts=self.max_attempts,
                game_over=self.game_over,
                won=self.status is GameStatus.WON,
                guesses=[guess for guess, _ in self.history],
                guess_results=[[r.to_dict() for r in outcome.results] for _, outcome in self.history],
                answer=answer
            )
