"""
Game Controller

Handles all single-player game HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..config.game_settings import is_acceptable_guess
from ..engine import validate
from ..services.game_service import get_game_service, GameService
from ..services.room_service import get_room_service
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_alphabet

game_bp = Blueprint('game', __name__)


def _fail(action, message, status, game_id=None, **kwargs):
    """Log a failed response and build it."""
    error_response = {'success': False, 'error': message}
    game_logger.log_server_response(request, action, False, error_response, game_id, **kwargs)
    return jsonify(error_response), status


def _crashed(action, error, game_id=None):
    game_logger.log_error(request, error, action, game_id)
    return _fail(action, str(error), 500, game_id)


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new practice or daily game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _fail('new_game', 'Game service unavailable', 500)

        data = request.get_json(silent=True) or {}
        mode = data.get('mode', 'practice')
        alphabet = parse_alphabet(data.get('alphabet'))
        date_key = data.get('date_key')
        max_guesses = data.get('max_guesses')

        if alphabet is None:
            return _fail('new_game', 'Invalid alphabet. Must be "en" or "ko"', 400)
        if mode not in ('practice', 'daily'):
            return _fail('new_game', 'Invalid game mode. Must be "practice" or "daily"', 400)
        if max_guesses is not None and (isinstance(max_guesses, bool) or not isinstance(max_guesses, int) or max_guesses < 1):
            return _fail('new_game', 'max_guesses must be a positive integer', 400)

        game_logger.log_user_action(request, 'new_game', mode=mode, alphabet=alphabet.value, date_key=date_key)

        game_id = game_service.create_new_game(alphabet, mode, date_key, max_guesses)
        state = game_service.get_game_state(game_id)
        response_data = {'success': True, 'game_id': game_id, 'state': state}

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            board_count=len(state['boards']), max_guesses=state['maxGuesses']
        )
        return jsonify(response_data)

    except ValueError as e:
        game_logger.log_error(request, e, 'new_game')
        return _fail('new_game', str(e), 400)
    except Exception as e:
        return _crashed('new_game', e)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state; answers are included once the game is over."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _fail('get_state', 'Game service unavailable', 500, game_id)

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _fail('get_state', 'Game not found', 404, game_id)

        response_data = {
            'success': True,
            'state': state,
            'answers': game_service.get_answers(game_id)
        }
        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            guess_number=state['guessNumber'], game_over=state['gameOver']
        )
        return jsonify(response_data)

    except Exception as e:
        return _crashed('get_state', e, game_id)


@game_bp.route('/game/<game_id>/input', methods=['POST'])
def set_input(game_id):
    """Update the in-progress input; strings are normalized, other values rejected."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _fail('set_input', 'Game service unavailable', 500, game_id)

        data = request.get_json(silent=True) or {}
        raw = data.get('input') or ''
        if not isinstance(raw, str):
            return _fail('set_input', 'input must be a string', 400, game_id)

        state = game_service.set_current_input(game_id, raw)
        if state is None:
            return _fail('set_input', 'Game not found', 404, game_id)

        return jsonify({'success': True, 'current_input': state['currentInput']})

    except Exception as e:
        return _crashed('set_input', e, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """
    Submit a guess.

    The guess is checked for format and against the word list before it
    reaches the game; rejected guesses do not use up a turn.
    """
    try:
        game_service = get_game_service()
        if not game_service:
            return _fail('submit_guess', 'Game service unavailable', 500, game_id)

        data = request.get_json(silent=True)
        if not data or 'guess' not in data:
            return _fail('submit_guess', 'Guess is required', 400, game_id)

        guess = data['guess']
        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=guess, guess_length=len(guess) if isinstance(guess, str) else None
        )

        is_valid, error = game_service.is_valid_guess(game_id, guess)
        if not is_valid:
            return _fail(
                'submit_guess', error, 404 if error == 'Game not found' else 400, game_id,
                validation_error=error, attempted_guess=guess
            )

        before = game_service.get_game_state(game_id)
        state = game_service.make_guess(game_id, guess)
        if state is None:
            return _fail('submit_guess', 'Failed to process guess', 500, game_id)

        response_data = {
            'success': True,
            'state': state,
            'keyboard': game_service.get_keyboard(game_id),
            'answers': game_service.get_answers(game_id)
        }
        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, guess_number=state['guessNumber'], game_over=state['gameOver']
        )

        for board_index in GameService.newly_solved_boards(before, state):
            game_logger.log_game_event(
                game_id, 'board_solved', request.remote_addr,
                board=board_index, guess_number=state['guessNumber']
            )

        if state['gameOver']:
            game_logger.log_game_event(
                game_id, 'game_won' if state['won'] else 'game_lost', request.remote_addr,
                guesses_used=state['guessNumber'], solved_count=state['solvedCount'],
                target_words=response_data['answers'], final_guess=guess
            )

        return jsonify(response_data)

    except Exception as e:
        return _crashed('submit_guess', e, game_id)


@game_bp.route('/game/<game_id>/keyboard', methods=['GET'])
def get_keyboard(game_id):
    """Keyboard hints; ?per_board=1 returns one status per board for each key."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _fail('get_keyboard', 'Game service unavailable', 500, game_id)

        per_board = request.args.get('per_board', '').lower() in ('1', 'true', 'yes')
        keyboard = game_service.get_keyboard(game_id, per_board=per_board)
        if keyboard is None:
            return _fail('get_keyboard', 'Game not found', 404, game_id)

        return jsonify({'success': True, 'per_board': per_board, 'keyboard': keyboard})

    except Exception as e:
        return _crashed('get_keyboard', e, game_id)


@game_bp.route('/validate', methods=['POST'])
def validate_guess():
    """Check a guess without submitting it: format first, then dictionary."""
    try:
        data = request.get_json(silent=True) or {}
        alphabet = parse_alphabet(data.get('alphabet'))
        guess = data.get('guess')
        if alphabet is None or not isinstance(guess, str):
            return _fail('validate', 'guess and a valid alphabet are required', 400)

        normalized = GameService.normalize_guess(guess, alphabet)
        result = validate(normalized, alphabet)
        if result.valid and not is_acceptable_guess(normalized, alphabet):
            result.valid, result.error = False, 'Word not in word list'

        return jsonify({'success': True, 'valid': result.valid, 'error': result.error})

    except Exception as e:
        return _crashed('validate', e)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _fail('delete_game', 'Game service unavailable', 500, game_id)

        game_logger.log_user_action(request, 'delete_game', game_id)

        if not game_service.delete_game(game_id):
            return _fail('delete_game', 'Game not found', 404, game_id)

        response_data = {'success': True}
        game_logger.log_server_response(request, 'delete_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
        return jsonify(response_data)

    except Exception as e:
        return _crashed('delete_game', e, game_id)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()
        room_service = get_room_service()

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'active_rooms': len(room_service.rooms) if room_service else 0,
            'log_stats': game_logger.get_log_stats()
        }
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        return jsonify({'status': 'error', 'error': str(e)}), 500
