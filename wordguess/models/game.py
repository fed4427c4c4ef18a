"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..config.game_settings import WORD_LENGTH

CORRECT_MESSAGE = "Correct!"
CONTINUE_MESSAGE = "Keep going"


class LetterStatus(Enum):
    """Per-letter classification of a guess."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"
    UNKNOWN = "unknown"  # Staging value during scoring, never returned


FINAL_STATUSES = (LetterStatus.CORRECT, LetterStatus.PRESENT, LetterStatus.ABSENT)


class GameStatus(Enum):
    """Lifecycle state of a game session."""
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.ACTIVE


class GameMode(Enum):
    """Where a session's guesses are scored."""
    LOCAL = "local"
    REMOTE = "remote"


@dataclass(frozen=True)
class LetterResult:
    """A single scored letter."""
    letter: str
    status: LetterStatus

    def to_dict(self) -> Dict[str, str]:
        return {'letter': self.letter, 'status': self.status.value}


@dataclass(frozen=True)
class GuessOutcome:
    """Scored guess: one LetterResult per position plus the win flag."""
    results: Tuple[LetterResult, ...]
    is_correct: bool
    message: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the scoring endpoint's wire format."""
        return {
            'result': [letter_result.to_dict() for letter_result in self.results],
            'isCorrect': self.is_correct,
            'message': self.message
        }

    @classmethod
    def from_dict(cls, data: Any) -> "GuessOutcome":
        """
        Parses a scoring endpoint payload.

        Args:
            data: Decoded JSON body of a successful scoring response

        Returns:
            GuessOutcome built from the payload

        Raises:
            ValueError: If the payload does not have the expected shape
        """
        if not isinstance(data, dict):
            raise ValueError("Scoring payload must be an object")

        raw_results = data.get('result')
        if not isinstance(raw_results, list) or len(raw_results) != WORD_LENGTH:
            raise ValueError(f"Scoring payload must contain {WORD_LENGTH} letter results")

        results = []
        for entry in raw_results:
            if not isinstance(entry, dict):
                raise ValueError("Letter result must be an object")
            letter = entry.get('letter')
            if not isinstance(letter, str) or len(letter) != 1:
                raise ValueError(f"Invalid letter in scoring payload: {letter!r}")
            try:
                status = LetterStatus(entry.get('status'))
            except ValueError:
                raise ValueError(f"Invalid status in scoring payload: {entry.get('status')!r}")
            if status not in FINAL_STATUSES:
                raise ValueError(f"Invalid status in scoring payload: {status.value!r}")
            results.append(LetterResult(letter.upper(), status))

        is_correct = data.get('isCorrect')
        if not isinstance(is_correct, bool):
            raise ValueError("isCorrect must be a boolean")

        all_correct = all(r.status == LetterStatus.CORRECT for r in results)
        if is_correct != all_correct:
            raise ValueError("isCorrect disagrees with the letter statuses")

        message = data.get('message') or ""
        if not isinstance(message, str):
            raise ValueError("message must be a string")

        return cls(results=tuple(results), is_correct=is_correct, message=message)

    @property
    def word(self) -> str:
        return ''.join(r.letter for r in self.results)

    @property
    def statuses(self) -> List[LetterStatus]:
        return [r.status for r in self.results]


@dataclass(frozen=True)
class GuessSubmissionResult:
    """What a caller gets back after an accepted guess."""
    guess: str
    outcome: GuessOutcome
    status: GameStatus
    attempt_count: int
    message: str

    @property
    def game_over(self) -> bool:
        return self.status.is_terminal

    def to_dict(self) -> Dict[str, Any]:
        return {
            'guess': self.guess,
            'outcome': self.outcome.to_dict(),
            'status': self.status.value,
            'attempt_count': self.attempt_count,
            'game_over': self.game_over,
            'message': self.message
        }


@dataclass
class GameState:
    """Session snapshot returned to clients (answer hidden until the end)."""
    game_id: str
    mode: str
    status: str
    attempt_count: int
    max_attempts: int
    game_over: bool
    won: bool
    guesses: List[str] = field(default_factory=list)
    guess_results: List[List[Dict[str, str]]] = field(default_factory=list)
    answer: Optional[str] = None  # Only included when the game is over in local mode
