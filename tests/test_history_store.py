"""
Guess history stores.
"""

import mongomock
import pytest
from pymongo.errors import PyMongoError

from wordguess.config import TestingConfig
from wordguess.services import history_store as history_module
from wordguess.services.history_store import (
    InMemoryHistoryStore, MongoHistoryStore, create_history_store
)
from wordguess.services.scorer import score


@pytest.fixture(params=['memory', 'mongo'])
def store(request):
    if request.param == 'memory':
        return InMemoryHistoryStore()
    return MongoHistoryStore(mongomock.MongoClient().word_guess.guess_history)


@pytest.fixture
def frozen_clock(monkeypatch):
    now = {'ms': 1_700_000_000_000}
    monkeypatch.setattr(history_module, '_now_ms', lambda: now['ms'])
    return now


def test_append_returns_record(store):
    record = store.append('s1', 'COULD', score('COULD', 'CLOUD'))

    assert record.session_id == 's1'
    assert record.guess == 'COULD'
    assert record.result[1] == {'letter': 'O', 'status': 'present'}
    assert isinstance(record.timestamp, int)


def test_recent_is_newest_first(store, frozen_clock):
    for guess in ('AAAAA', 'BBBBB', 'COULD'):
        store.append('s1', guess, score(guess, 'CLOUD'))
        frozen_clock['ms'] += 10

    assert [r.guess for r in store.recent('s1')] == ['COULD', 'BBBBB', 'AAAAA']
    assert [r.guess for r in store.recent('s1', limit=2)] == ['COULD', 'BBBBB']


def test_equal_timestamps_keep_reverse_insertion_order(store, frozen_clock):
    for guess in ('AAAAA', 'BBBBB', 'COULD'):
        store.append('s1', guess, score(guess, 'CLOUD'))

    assert [r.guess for r in store.recent('s1')] == ['COULD', 'BBBBB', 'AAAAA']


def test_sessions_are_isolated_and_clear_is_scoped(store):
    store.append('s1', 'AAAAA', score('AAAAA', 'CLOUD'))
    store.append('s2', 'BBBBB', score('BBBBB', 'CLOUD'))

    store.clear('s1')

    assert store.recent('s1') == []
    assert [r.guess for r in store.recent('s2')] == ['BBBBB']


class FailingCollection:
    def create_index(self, *args, **kwargs):
        raise PyMongoError("no server")

    def insert_one(self, document):
        raise PyMongoError("no server")

    def find(self, *args, **kwargs):
        raise PyMongoError("no server")

    def delete_many(self, *args, **kwargs):
        raise PyMongoError("no server")


def test_mongo_errors_are_swallowed():
    store = MongoHistoryStore(FailingCollection())

    assert store.append('s1', 'CLOUD', score('CLOUD', 'CLOUD')) is None
    assert store.recent('s1') == []
    store.clear('s1')


def test_factory_defaults_to_memory():
    assert isinstance(create_history_store(TestingConfig), InMemoryHistoryStore)


def test_factory_falls_back_when_mongo_unreachable(monkeypatch):
    class UnreachableClient:
        def __init__(self, *args, **kwargs):
            self.admin = self

        def command(self, name):
            raise PyMongoError("server selection timeout")

    class Config(TestingConfig):
        MONGO_URI = 'mongodb://nowhere.invalid:27017'

    monkeypatch.setattr(history_module, 'MongoClient', UnreachableClient)

    assert isinstance(create_history_store(Config), InMemoryHistoryStore)


def test_factory_uses_mongo_when_reachable(monkeypatch):
    class Config(TestingConfig):
        MONGO_URI = 'mongodb://db.test:27017'
        MONGO_DB = 'history_test'

    monkeypatch.setattr(history_module, 'MongoClient', mongomock.MongoClient)

    store = create_history_store(Config)

    assert isinstance(store, MongoHistoryStore)
    assert store.collection.database.name == 'history_test'


@pytest.mark.parametrize("limit", [0, -3])
def test_non_positive_limit_returns_everything(store, limit):
    for guess in ('AAAAA', 'BBBBB'):
        store.append('s1', guess, score(guess, 'CLOUD'))

    assert len(store.recent('s1', limit=limit)) == 2
