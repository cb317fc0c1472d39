from quordle.config.game_settings import GUESS_WORDS
from quordle.engine import daily_targets
from quordle.models import Alphabet

DATE_KEY = '2026-02-07'


def new_game(client, **body):
    response = client.post('/api/new_game', json=body)
    assert response.status_code == 200
    return response.get_json()['game_id']


def targets_of(game_service, game_id):
    return [board.target_word for board in game_service.get_game(game_id).boards]


class TestGameEndpoints:

    def test_new_game_hides_targets(self, client):
        response = client.post('/api/new_game', json={})
        data = response.get_json()
        assert response.status_code == 200
        assert data['success']
        assert data['state']['alphabet'] == 'en'
        assert data['state']['maxGuesses'] == 9
        assert all(board['targetWord'] is None for board in data['state']['boards'])

    def test_new_game_rejects_bad_options(self, client):
        assert client.post('/api/new_game', json={'alphabet': 'xx'}).status_code == 400
        assert client.post('/api/new_game', json={'mode': 'ranked'}).status_code == 400
        assert client.post('/api/new_game', json={'max_guesses': 0}).status_code == 400
        assert client.post('/api/new_game', json={'max_guesses': 'nine'}).status_code == 400

    def test_daily_game_uses_the_day_puzzle(self, client, game_service):
        game_id = new_game(client, alphabet='ko', mode='daily', date_key=DATE_KEY)
        assert targets_of(game_service, game_id) == daily_targets(DATE_KEY, 'ko')
        state = client.get(f'/api/game/{game_id}/state').get_json()['state']
        assert state['dateKey'] == DATE_KEY
        assert state['maxGuesses'] == 7

    def test_unknown_game(self, client):
        assert client.get('/api/game/missing/state').status_code == 404
        assert client.post('/api/game/missing/guess', json={'guess': 'crane'}).status_code == 404
        assert client.get('/api/game/missing/keyboard').status_code == 404
        assert client.post('/api/game/missing/input', json={'input': 'a'}).status_code == 404
        assert client.delete('/api/game/missing').status_code == 404

    def test_guess_validation_errors(self, client):
        game_id = new_game(client)
        response = client.post(f'/api/game/{game_id}/guess', json={})
        assert response.status_code == 400
        assert response.get_json()['error'] == 'Guess is required'

        response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'zzzzz'})
        assert response.status_code == 400
        assert response.get_json()['error'] == 'Word not in word list'

        response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'abc'})
        assert response.get_json()['error'] == 'Guess must be 5 letters'

    def test_play_to_a_win(self, client, game_service):
        game_id = new_game(client)
        targets = targets_of(game_service, game_id)

        data = None
        for target in targets:
            response = client.post(f'/api/game/{game_id}/guess', json={'guess': target})
            assert response.status_code == 200
            data = response.get_json()

        assert data['state']['won'] and data['state']['gameOver']
        assert data['answers'] == targets
        assert set(data['keyboard'].values()) == {'correct'}

        response = client.post(f'/api/game/{game_id}/guess', json={'guess': targets[0]})
        assert response.status_code == 400
        assert response.get_json()['error'] == 'Game is already over'

    def test_state_reveals_answers_only_when_over(self, client, game_service):
        game_id = new_game(client, max_guesses=1)
        assert client.get(f'/api/game/{game_id}/state').get_json()['answers'] is None

        targets = targets_of(game_service, game_id)
        wrong = next(word for word in sorted(GUESS_WORDS[Alphabet.LATIN]) if word not in targets)
        data = client.post(f'/api/game/{game_id}/guess', json={'guess': wrong}).get_json()
        assert data['state']['gameOver'] and not data['state']['won']
        assert client.get(f'/api/game/{game_id}/state').get_json()['answers'] == targets

    def test_keyboard_endpoint(self, client, game_service):
        game_id = new_game(client)
        client.post(f'/api/game/{game_id}/guess', json={'guess': targets_of(game_service, game_id)[0]})

        merged = client.get(f'/api/game/{game_id}/keyboard').get_json()
        assert not merged['per_board']
        assert 'correct' in merged['keyboard'].values()

        per_board = client.get(f'/api/game/{game_id}/keyboard?per_board=1').get_json()
        assert per_board['per_board']
        assert all(len(statuses) == 4 for statuses in per_board['keyboard'].values())

    def test_input_endpoint(self, client):
        game_id = new_game(client)
        data = client.post(f'/api/game/{game_id}/input', json={'input': 'Cr4aneS'}).get_json()
        assert data['current_input'] == 'crane'

    def test_input_endpoint_handles_null_and_rejects_non_strings(self, client):
        game_id = new_game(client)
        client.post(f'/api/game/{game_id}/input', json={'input': 'cra'})

        cleared = client.post(f'/api/game/{game_id}/input', json={'input': None})
        assert cleared.status_code == 200
        assert cleared.get_json()['current_input'] == ''

        rejected = client.post(f'/api/game/{game_id}/input', json={'input': 123})
        assert rejected.status_code == 400
        assert rejected.get_json() == {'success': False, 'error': 'input must be a string'}

        state = client.get(f'/api/game/{game_id}/state').get_json()['state']
        assert state['currentInput'] == ''

    def test_validate_endpoint(self, client):
        ok = client.post('/api/validate', json={'guess': '바다', 'alphabet': 'ko'}).get_json()
        assert ok['valid'] and ok['error'] is None

        short = client.post('/api/validate', json={'guess': '바', 'alphabet': 'ko'}).get_json()
        assert short == {'success': True, 'valid': False, 'error': 'Guess must be 2 syllables'}

        unknown = client.post('/api/validate', json={'guess': 'zzzzz'}).get_json()
        assert unknown['error'] == 'Word not in word list'

        assert client.post('/api/validate', json={'alphabet': 'en'}).status_code == 400

    def test_delete_game(self, client):
        game_id = new_game(client)
        assert client.delete(f'/api/game/{game_id}').status_code == 200
        assert client.get(f'/api/game/{game_id}/state').status_code == 404

    def test_health(self, client):
        new_game(client)
        data = client.get('/api/health').get_json()
        assert data['status'] == 'healthy'
        assert data['active_games'] == 1
        assert data['active_rooms'] == 0


class TestRoomEndpoints:

    def test_join_guess_leave(self, client):
        body = {'room_id': 'r1', 'user_id': 'alice', 'date_key': DATE_KEY}
        joined = client.post('/api/room/join', json=body).get_json()
        assert joined['success'] and joined['created']
        assert joined['player']['gameState']['boards'][0]['targetWord'] is None

        target = daily_targets(DATE_KEY)[0]
        guessed = client.post('/api/room/guess', json={**body, 'guess': target}).get_json()
        assert guessed['success']
        assert guessed['leaderboard'][0]['solvedCount'] == 1

        board = client.get(f'/api/room/r1/leaderboard?date_key={DATE_KEY}').get_json()
        assert [entry['userId'] for entry in board['leaderboard']] == ['alice']

        assert client.post('/api/room/leave', json=body).status_code == 200
        assert client.get(f'/api/room/r1/leaderboard?date_key={DATE_KEY}').get_json()['leaderboard'] == []

    def test_room_error_statuses(self, client):
        body = {'room_id': 'r1', 'user_id': 'alice', 'date_key': DATE_KEY}
        assert client.post('/api/room/join', json={'room_id': 'r1'}).status_code == 400
        assert client.post('/api/room/join', json={**body, 'alphabet': 'xx'}).status_code == 400

        response = client.post('/api/room/guess', json={**body, 'guess': 'crane'})
        assert response.status_code == 404
        assert response.get_json()['code'] == 'ROOM_NOT_FOUND'

        client.post('/api/room/join', json=body)
        assert client.post('/api/room/join', json={**body, 'alphabet': 'ko'}).status_code == 400
        response = client.post('/api/room/guess', json={**body, 'guess': 'zzzzz'})
        assert response.status_code == 400
        assert response.get_json()['code'] == 'INVALID_GUESS'

        assert client.post('/api/room/guess', json=body).status_code == 400
        assert client.post('/api/room/leave', json={**body, 'user_id': 'bob'}).status_code == 404


class TestRoomSocket:

    def test_join_and_guess_broadcast(self, socket_client):
        socket_client.emit('join_room', {'room_id': 'r1', 'user_id': 'alice', 'date_key': DATE_KEY})
        received = socket_client.get_received()
        names = [message['name'] for message in received]
        assert 'state' in names and 'leaderboard' in names

        target = daily_targets(DATE_KEY)[0]
        socket_client.emit('submit_guess', {'guess': target})
        received = socket_client.get_received()
        state = next(m['args'][0] for m in received if m['name'] == 'state')
        assert state['gameState']['guessNumber'] == 1
        leaderboard = next(m['args'][0] for m in received if m['name'] == 'leaderboard')
        assert leaderboard['leaderboard'][0]['solvedCount'] == 1

    def test_errors_carry_codes(self, socket_client):
        socket_client.emit('submit_guess', {'room_id': 'nowhere', 'user_id': 'alice', 'guess': 'crane'})
        errors = [m['args'][0] for m in socket_client.get_received() if m['name'] == 'error']
        assert errors and errors[0]['code'] == 'ROOM_NOT_FOUND'

        socket_client.emit('join_room', {'room_id': 'r1', 'user_id': 'alice', 'alphabet': 'xx'})
        errors = [m['args'][0] for m in socket_client.get_received() if m['name'] == 'error']
        assert errors[0]['code'] == 'INVALID_MESSAGE'

    def test_leave_room(self, socket_client, room_service):
        socket_client.emit('join_room', {'room_id': 'r1', 'user_id': 'alice', 'date_key': DATE_KEY})
        socket_client.get_received()
        socket_client.emit('leave_room', {})
        assert not [m for m in socket_client.get_received() if m['name'] == 'error']
        assert room_service.get_room('r1', DATE_KEY) is None
