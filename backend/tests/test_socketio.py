import time


def test_socket_connect_and_join(sio_client):
    # Ensure we are connected to /ws
    if not sio_client.is_connected('/ws'):
        sio_client.connect(namespace='/ws')
    assert sio_client.is_connected('/ws')

    # Flush any initial events
    try:
        sio_client.get_received('/ws')
    except Exception:
        pass

    # Join a room and expect a joined ack
    sio_client.emit('join_game', {'game_code': 'ABCD'}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] in ('connected', 'joined') for pkt in received)


def test_ping_pong(sio_client):
    sio_client.get_received('/ws')
    sio_client.emit('ping', {'n': 1}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] == 'pong' and pkt['args'][0] == {'n': 1} for pkt in received)


def test_state_updates_reach_room(client, sio_client):
    code = client.post('/api/games/create').get_json()['game_code']
    sio_client.emit('join_game', {'game_code': code}, namespace='/ws')
    sio_client.get_received('/ws')  # flush

    client.post(f'/api/games/{code}/players', json={'name': 'Alice'})
    events = sio_client.get_received('/ws')
    updates = [e for e in events if e['name'] == 'state_update']
    assert updates
    assert updates[-1]['args'][0] == {'game_code': code, 'event': 'player_joined'}


def test_host_disconnect_ends_session(flask_app, sio_client, client):
    # Create a game via HTTP
    res = client.post('/api/games/create')
    code = res.get_json()['game_code']

    if not sio_client.is_connected('/ws'):
        sio_client.connect(namespace='/ws')
    # A separate client to simulate host
    from blankparty import socketio as _sio
    host_client = _sio.test_client(flask_app, namespace='/ws')
    host_client.emit('join_game', {'game_code': code, 'is_session_owner': True}, namespace='/ws')

    # Guest joins
    sio_client.emit('join_game', {'game_code': code}, namespace='/ws')
    sio_client.get_received('/ws')  # flush

    # Disconnect host -> expect session_ended for guest
    host_client.disconnect(namespace='/ws')
    deadline = time.time() + 3.0
    got = False
    while time.time() < deadline and not got:
        events = sio_client.get_received('/ws')
        got = any(e['name'] == 'session_ended' for e in events)
        if not got:
            time.sleep(0.1)
    assert got

    # The lobby is gone with the session
    assert client.get(f'/api/games/{code}/state').status_code == 404
