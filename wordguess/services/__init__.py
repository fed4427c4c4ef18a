"""
Services Package

Contains all business logic and service classes.
"""

from .game_service import GameService
from .game_session import GameSession
from .history_store import InMemoryHistoryStore, MongoHistoryStore, create_history_store
from .scorer import score
from .scoring_backends import LocalScoringBackend, RemoteScoringBackend

__all__ = [
    'GameService', 'GameSession',
    'InMemoryHistoryStore', 'MongoHistoryStore', 'create_history_store',
    'score', 'LocalScoringBackend', 'RemoteScoringBackend'
]
