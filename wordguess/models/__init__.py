"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    GameMode, GameState, GameStatus, GuessOutcome, GuessSubmissionResult,
    LetterResult, LetterStatus
)
from .history import HistoryRecord

__all__ = [
    'GameMode', 'GameState', 'GameStatus', 'GuessOutcome', 'GuessSubmissionResult',
    'LetterResult', 'LetterStatus', 'HistoryRecord'
]
