"""
Session API over HTTP.
"""

import pytest
import requests

from wordguess import create_app
from wordguess.config import TestingConfig
from wordguess.services.game_service import GameService


def new_game(client, mode='local'):
    response = client.post('/api/new_game', json={'mode': mode})
    assert response.status_code == 201
    return response.get_json()['game_id']


def guess(client, game_id, word):
    return client.post(f'/api/game/{game_id}/guess', json={'guess': word})


def test_new_game_defaults_to_local(client):
    response = client.post('/api/new_game')

    assert response.status_code == 201
    state = response.get_json()['state']
    assert state['mode'] == 'local'
    assert state['status'] == 'active'
    assert state['attempt_count'] == 0
    assert state['max_attempts'] == 6
    assert state['answer'] is None


def test_new_game_rejects_unknown_mode(client):
    response = client.post('/api/new_game', json={'mode': 'hard'})

    assert response.status_code == 400
    assert response.get_json()['success'] is False


def test_guess_flow_until_win(client):
    game_id = new_game(client)

    first = guess(client, game_id, 'could').get_json()
    assert first['result']['outcome']['result'][1] == {'letter': 'O', 'status': 'present'}
    assert first['result']['message'] == 'Keep going'
    assert first['state']['attempt_count'] == 1

    final = guess(client, game_id, 'cloud').get_json()
    assert final['result']['status'] == 'won'
    assert final['result']['game_over'] is True
    assert final['state']['answer'] == 'CLOUD'

    response = guess(client, game_id, 'cloud')
    assert response.status_code == 400
    assert 'over' in response.get_json()['error']


def test_six_misses_lose(client):
    game_id = new_game(client)
    for word in ('AAAAA', 'BBBBB', 'EEEEE', 'FFFFF', 'GGGGG'):
        assert guess(client, game_id, word).status_code == 200

    body = guess(client, game_id, 'HHHHH').get_json()

    assert body['result']['status'] == 'lost'
    assert body['result']['message'] == 'Game over! The answer was CLOUD.'


def test_invalid_length_is_rejected_without_state_change(client):
    game_id = new_game(client)

    response = guess(client, game_id, 'abc')

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Please enter a 5-letter word'
    state = client.get(f'/api/game/{game_id}/state').get_json()['state']
    assert state['attempt_count'] == 0


def test_missing_guess_field(client):
    game_id = new_game(client)

    response = client.post(f'/api/game/{game_id}/guess', json={})

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Guess is required'


def test_unknown_game_is_404(client):
    assert client.get('/api/game/nope/state').status_code == 404
    assert guess(client, 'nope', 'CLOUD').status_code == 404
    assert client.delete('/api/game/nope').status_code == 404


def test_remote_mode_scores_through_endpoint(client, endpoint_session):
    game_id = new_game(client, 'remote')

    body = guess(client, game_id, 'cloud').get_json()

    assert endpoint_session.calls[-1]['json'] == {'word': 'CLOUD'}
    assert body['result']['status'] == 'won'
    assert body['state']['answer'] is None


def test_remote_failure_returns_502_and_keeps_state(client, endpoint_session):
    game_id = new_game(client, 'remote')
    endpoint_session.error = requests.ConnectionError("down")

    response = guess(client, game_id, 'cloud')

    assert response.status_code == 502
    state = client.get(f'/api/game/{game_id}/state').get_json()['state']
    assert state['attempt_count'] == 0

    endpoint_session.error = None
    assert guess(client, game_id, 'cloud').get_json()['result']['status'] == 'won'


def test_mode_switch_resets_session_and_history(client):
    game_id = new_game(client)
    guess(client, game_id, 'could')

    response = client.post(f'/api/game/{game_id}/mode', json={'mode': 'remote'})

    assert response.status_code == 200
    state = response.get_json()['state']
    assert state['mode'] == 'remote'
    assert state['attempt_count'] == 0
    assert state['guesses'] == []
    assert client.get(f'/api/game/{game_id}/history').get_json()['history'] == []


def test_mode_switch_rejects_unknown_mode(client):
    game_id = new_game(client)
    guess(client, game_id, 'could')

    response = client.post(f'/api/game/{game_id}/mode', json={'mode': 'hard'})

    assert response.status_code == 400
    state = client.get(f'/api/game/{game_id}/state').get_json()['state']
    assert state['attempt_count'] == 1


def test_remote_mode_unavailable_without_endpoint():
    app, _ = create_app(TestingConfig, game_service=GameService(TestingConfig))
    client = app.test_client()
    game_id = new_game(client)
    guess(client, game_id, 'could')

    assert client.post('/api/new_game', json={'mode': 'remote'}).status_code == 400

    response = client.post(f'/api/game/{game_id}/mode', json={'mode': 'remote'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Remote mode is not configured'
    state = client.get(f'/api/game/{game_id}/state').get_json()['state']
    assert state['mode'] == 'local'
    assert state['attempt_count'] == 1


def test_reset_starts_over(client):
    game_id = new_game(client)
    guess(client, game_id, 'cloud')

    state = client.post(f'/api/game/{game_id}/reset').get_json()['state']

    assert state['status'] == 'active'
    assert state['attempt_count'] == 0


def test_history_newest_first_with_limit(client):
    game_id = new_game(client)
    for word in ('AAAAA', 'BBBBB', 'COULD'):
        guess(client, game_id, word)

    history = client.get(f'/api/game/{game_id}/history?limit=2').get_json()['history']

    assert [h['guess'] for h in history] == ['COULD', 'BBBBB']
    assert set(history[0]) == {'session_id', 'guess', 'result', 'timestamp'}


@pytest.mark.parametrize("limit", ['0', '-1', 'abc'])
def test_history_rejects_bad_limit(client, limit):
    game_id = new_game(client)

    assert client.get(f'/api/game/{game_id}/history?limit={limit}').status_code == 400


def test_delete_game_clears_history(client, history_store):
    game_id = new_game(client)
    guess(client, game_id, 'could')

    response = client.delete(f'/api/game/{game_id}')

    assert response.get_json() == {'success': True}
    assert history_store.recent(game_id) == []
    assert client.get(f'/api/game/{game_id}/state').status_code == 404


def test_health(client):
    new_game(client)

    body = client.get('/api/health').get_json()

    assert body['status'] == 'healthy'
    assert body['active_games'] == 1
    assert body['remote_mode_available'] is True


def test_idle_sessions_are_dropped(game_service, history_store):
    stale_id = game_service.create_new_game()
    fresh_id = game_service.create_new_game()
    game_service.make_guess(stale_id, 'could')
    game_service.games[stale_id].last_activity -= 7200

    expired = game_service.cleanup_idle_sessions()

    assert expired == [stale_id]
    assert set(game_service.games) == {fresh_id}
    assert history_store.recent(stale_id) == []


def test_creating_a_game_sweeps_idle_sessions(client, game_service):
    stale_id = new_game(client)
    game_service.games[stale_id].last_activity -= 7200

    new_game(client)

    assert client.get(f'/api/game/{stale_id}/state').status_code == 404


def test_idle_cleanup_disabled_when_zero(history_store):
    class NoExpiryConfig(TestingConfig):
        SESSION_IDLE_SECONDS = 0

    service = GameService(NoExpiryConfig, history_store=history_store)
    game_id = service.create_new_game()
    service.games[game_id].last_activity = 0

    assert service.cleanup_idle_sessions() == []
    assert game_id in service.games
