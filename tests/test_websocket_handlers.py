import pytest


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()


def events(client, name):
    return [event['args'][0] for event in client.get_received() if event['name'] == name]


def create_game(client, **body):
    return client.post('/api/new_game', json=body).get_json()['game_id']


def test_join_game_sends_state(client, socket_client):
    game_id = create_game(client)

    socket_client.emit('join_game', {'game_id': game_id})

    [payload] = events(socket_client, 'game_state')
    assert payload['state']['status'] == 'playing'
    assert payload['game']['game_id'] == game_id


def test_join_unknown_game(socket_client):
    socket_client.emit('join_game', {'game_id': 'nope'})

    [payload] = events(socket_client, 'error')
    assert payload['error_kind'] == 'game_not_found'


def test_missing_game_id(socket_client):
    socket_client.emit('submit_guess', {'guess': 'crane'})

    [payload] = events(socket_client, 'error')
    assert payload['error'] == 'Game ID is required'


def test_guess_is_scored_and_broadcast(client, socket_client):
    game_id = create_game(client)
    socket_client.emit('join_game', {'game_id': game_id})
    socket_client.get_received()

    socket_client.emit('submit_guess', {'game_id': game_id, 'guess': 'crane'})

    received = socket_client.get_received()
    [result] = [e['args'][0] for e in received if e['name'] == 'guess_result']
    [state] = [e['args'][0] for e in received if e['name'] == 'game_state']
    assert result['outcome']['terminal']['won'] is True
    assert state['state']['revealed_word'] == 'crane'


def test_guess_failure(client, socket_client):
    game_id = create_game(client)

    socket_client.emit('submit_guess', {'game_id': game_id, 'guess': 'toolong'})

    [payload] = events(socket_client, 'guess_result')
    assert payload['success'] is False
    assert payload['error_kind'] == 'length_mismatch'


def test_hint(client, socket_client):
    game_id = create_game(client, difficulty='easy')

    socket_client.emit('request_hint', {'game_id': game_id, 'kind': 'definition'})

    [payload] = events(socket_client, 'hint_result')
    assert payload['hint']['definition'] == 'a large long-necked bird'


def test_restart_round(client, socket_client):
    game_id = create_game(client)
    socket_client.emit('submit_guess', {'game_id': game_id, 'guess': 'trace'})
    socket_client.get_received()

    socket_client.emit('restart_round', {'game_id': game_id})

    [payload] = events(socket_client, 'round_started')
    assert payload['state']['guesses'] == []


def test_leave_game(client, socket_client):
    game_id = create_game(client)
    socket_client.emit('join_game', {'game_id': game_id})
    socket_client.get_received()

    socket_client.emit('leave_game', {'game_id': game_id})

    [payload] = events(socket_client, 'left_game')
    assert payload == {'success': True, 'game_id': game_id}
