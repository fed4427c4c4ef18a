import pytest
import requests

from wordguess import create_app
from wordguess.config import TestingConfig
from wordguess.services.game_service import GameService
from wordguess.services.history_store import InMemoryHistoryStore

SCORING_URL = 'http://scoring.test/api/score'


class RemoteTestingConfig(TestingConfig):
    API_ENDPOINT = SCORING_URL


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self._text = text

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._text is not None:
            raise requests.exceptions.JSONDecodeError("Expecting value", self._text, 0)
        return self._payload


class FakeHttpSession:
    """Stands in for requests.Session; routes POSTs to a handler or raises."""

    def __init__(self, handler=None, error=None):
        self.handler = handler
        self.error = error
        self.calls = []

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({'url': url, 'json': json, 'headers': headers, 'timeout': timeout})
        if self.error is not None:
            raise self.error
        return self.handler(json)


@pytest.fixture
def scoring_app():
    """App serving only as the remote scoring endpoint."""
    app, _ = create_app(TestingConfig, game_service=GameService(TestingConfig))
    return app


@pytest.fixture
def endpoint_session(scoring_app):
    """HTTP session whose POSTs land on the Flask scoring route."""
    client = scoring_app.test_client()

    def handler(body):
        response = client.post('/api/score', json=body)
        return FakeResponse(response.status_code, response.get_json())

    return FakeHttpSession(handler)


@pytest.fixture
def history_store():
    return InMemoryHistoryStore()


@pytest.fixture
def game_service(history_store, endpoint_session):
    return GameService(RemoteTestingConfig, history_store=history_store, http_session=endpoint_session)


@pytest.fixture
def app(game_service):
    app, _ = create_app(RemoteTestingConfig, game_service=game_service)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socketio_client(app):
    return app.socketio.test_client(app)
