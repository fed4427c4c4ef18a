"""
History Store

Best-effort mirror of submitted guesses, used to redraw a board on reload.
Game logic never reads it back; a broken store must not interrupt play.
"""

import logging
import threading
import time
from typing import Dict, List, Optional

from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError
from pymongo.mongo_client import MongoClient

from ..models.game import GuessOutcome
from ..models.history import HistoryRecord

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class InMemoryHistoryStore:
    """Process-local history, the default when no database is configured."""

    def __init__(self):
        self._records: Dict[str, List[HistoryRecord]] = {}
        self._lock = threading.Lock()

    def append(self, session_id: str, guess: str, outcome: GuessOutcome) -> Optional[HistoryRecord]:
        record = HistoryRecord(
            session_id=session_id,
            guess=guess,
            result=[r.to_dict() for r in outcome.results],
            timestamp=_now_ms()
        )
        with self._lock:
            self._records.setdefault(session_id, []).append(record)
        return record

    def recent(self, session_id: str, limit: Optional[int] = None) -> List[HistoryRecord]:
        """
        Records newest first. Equal timestamps keep reverse insertion order.
        A missing or non-positive limit returns every record.
        """
        with self._lock:
            records = list(self._records.get(session_id, []))
        # sorted() is stable, so reversing first keeps later inserts ahead on ties
        records = sorted(reversed(records), key=lambda r: r.timestamp, reverse=True)
        if limit is not None and limit > 0:
            records = records[:limit]
        return records

    def clear(self, session_id: str) -> None:
        with self._lock:
            self._records.pop(session_id, None)


class MongoHistoryStore:
    """
    History kept in a MongoDB collection.

    Every database error is logged and swallowed: append returns None,
    recent returns an empty list and clear does nothing.
    """

    def __init__(self, collection):
        self.collection = collection
        try:
            self.collection.create_index([("session_id", ASCENDING), ("timestamp", DESCENDING)])
        except PyMongoError as e:
            logger.warning("Could not create history index: %s", e)

    def append(self, session_id: str, guess: str, outcome: GuessOutcome) -> Optional[HistoryRecord]:
        record = HistoryRecord(
            session_id=session_id,
            guess=guess,
            result=[r.to_dict() for r in outcome.results],
            timestamp=_now_ms()
        )
        try:
            self.collection.insert_one(record.to_dict())
        except PyMongoError as e:
            logger.warning("Failed to save guess %s for session %s: %s", guess, session_id, e)
            return None
        return record

    def recent(self, session_id: str, limit: Optional[int] = None) -> List[HistoryRecord]:
        try:
            cursor = self.collection.find({'session_id': session_id}).sort(
                [("timestamp", DESCENDING), ("_id", DESCENDING)]
            )
            if limit is not None and limit > 0:
                cursor = cursor.limit(limit)
            return [HistoryRecord.from_document(doc) for doc in cursor]
        except PyMongoError as e:
            logger.warning("Failed to load history for session %s: %s", session_id, e)
            return []

    def clear(self, session_id: str) -> None:
        try:
            self.collection.delete_many({'session_id': session_id})
        except PyMongoError as e:
            logger.warning("Failed to clear history for session %s: %s", session_id, e)


def create_history_store(config):
    """
    Builds the history store described by the configuration.

    Falls back to the in-memory store when MONGO_URI is unset or the server
    does not answer a ping.
    """
    mongo_uri = getattr(config, 'MONGO_URI', None)
    if not mongo_uri:
        return InMemoryHistoryStore()

    try:
        client = MongoClient(mongo_uri, serverSelectionTimeoutMS=3000)
        client.admin.command('ping')
    except PyMongoError as e:
        logger.warning("MongoDB unavailable, keeping history in memory: %s", e)
        return InMemoryHistoryStore()

    db = client[getattr(config, 'MONGO_DB', 'word_guess')]
    return MongoHistoryStore(db.guess_history)
