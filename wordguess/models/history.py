"""
History Data Models

Records mirrored to the guess history store.
"""

from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass(frozen=True)
class HistoryRecord:
    """One stored guess. timestamp is epoch milliseconds."""
    session_id: str
    guess: str
    result: List[Dict[str, str]]
    timestamp: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'session_id': self.session_id,
            'guess': self.guess,
            'result': [dict(entry) for entry in self.result],
            'timestamp': self.timestamp
        }

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "HistoryRecord":
        return cls(
            session_id=document['session_id'],
            guess=document['guess'],
            result=list(document.get('result') or []),
            timestamp=int(document['timestamp'])
        )
