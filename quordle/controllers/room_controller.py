"""
Room Controller

Handles daily room HTTP endpoints: joining, guessing, leaving and the leaderboard.
"""

from flask import Blueprint, request, jsonify
from ..services.room_service import (
    get_room_service, GAME_OVER, INVALID_GUESS, INVALID_MESSAGE, PLAYER_NOT_FOUND, ROOM_NOT_FOUND,
)
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_alphabet

room_bp = Blueprint('room', __name__)

ERROR_STATUS = {
    INVALID_MESSAGE: 400,
    INVALID_GUESS: 400,
    GAME_OVER: 409,
    ROOM_NOT_FOUND: 404,
    PLAYER_NOT_FOUND: 404,
}


def _room_result(action, result, room_id):
    """Turn a room service result into a response with a matching status."""
    if result.get('success'):
        game_logger.log_server_response(request, action, True, result, room_id=room_id)
        return jsonify(result)

    game_logger.log_server_response(
        request, action, False, result, room_id=room_id, code=result.get('code')
    )
    return jsonify(result), ERROR_STATUS.get(result.get('code'), 500)


@room_bp.route('/room/join', methods=['POST'])
def join_room():
    """Join a daily room, creating the caller's game for the day on first join."""
    try:
        room_service = get_room_service()
        if not room_service:
            return jsonify({
                'success': False,
                'error': 'Room service unavailable'
            }), 500

        data = request.get_json(silent=True) or {}
        room_id = data.get('room_id')
        user_id = data.get('user_id')
        alphabet = parse_alphabet(data.get('alphabet'))

        if alphabet is None:
            return jsonify({
                'success': False,
                'code': INVALID_MESSAGE,
                'error': 'Invalid alphabet. Must be "en" or "ko"'
            }), 400

        game_logger.log_user_action(
            request, 'join_room', room_id=room_id, user_id=user_id, alphabet=alphabet.value
        )

        result = room_service.join(room_id, user_id, data.get('date_key'), alphabet)
        if result.get('success') and result['created']:
            game_logger.log_game_event(
                None, 'room_joined', request.remote_addr,
                room_id=room_id, user_id=user_id, date_key=result['player']['dateKey']
            )
        return _room_result('join_room', result, room_id)

    except Exception as e:
        game_logger.log_error(request, e, 'join_room')
        return jsonify({'success': False, 'error': str(e)}), 500


@room_bp.route('/room/guess', methods=['POST'])
def make_room_guess():
    """Submit a guess to the caller's daily game in a room."""
    try:
        room_service = get_room_service()
        if not room_service:
            return jsonify({
                'success': False,
                'error': 'Room service unavailable'
            }), 500

        data = request.get_json(silent=True) or {}
        room_id = data.get('room_id')
        user_id = data.get('user_id')
        guess = data.get('guess')

        if not room_id or not user_id or guess is None:
            error_response = {
                'success': False,
                'code': INVALID_MESSAGE,
                'error': 'room_id, user_id and guess are required'
            }
            game_logger.log_server_response(request, 'room_guess', False, error_response)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'room_guess', room_id=room_id, user_id=user_id, guess=guess)

        result = room_service.submit_guess(room_id, user_id, guess, data.get('date_key'))
        if result.get('success'):
            game_state = result['player']['gameState']
            if game_state['gameOver']:
                game_logger.log_game_event(
                    None, 'game_won' if game_state['won'] else 'game_lost', request.remote_addr,
                    room_id=room_id, user_id=user_id, guesses_used=game_state['guessNumber']
                )
        return _room_result('room_guess', result, room_id)

    except Exception as e:
        game_logger.log_error(request, e, 'room_guess')
        return jsonify({'success': False, 'error': str(e)}), 500


@room_bp.route('/room/leave', methods=['POST'])
def leave_room():
    """Leave a daily room."""
    try:
        room_service = get_room_service()
        if not room_service:
            return jsonify({
                'success': False,
                'error': 'Room service unavailable'
            }), 500

        data = request.get_json(silent=True) or {}
        room_id = data.get('room_id')
        user_id = data.get('user_id')

        game_logger.log_user_action(request, 'leave_room', room_id=room_id, user_id=user_id)

        result = room_service.leave(room_id, user_id, data.get('date_key'))
        if result.get('success'):
            game_logger.log_game_event(None, 'room_left', request.remote_addr, room_id=room_id, user_id=user_id)
        return _room_result('leave_room', result, room_id)

    except Exception as e:
        game_logger.log_error(request, e, 'leave_room')
        return jsonify({'success': False, 'error': str(e)}), 500


@room_bp.route('/room/<room_id>/leaderboard', methods=['GET'])
def get_leaderboard(room_id):
    """Current leaderboard for a room on a given day (today by default)."""
    try:
        room_service = get_room_service()
        if not room_service:
            return jsonify({
                'success': False,
                'error': 'Room service unavailable'
            }), 500

        leaderboard = room_service.get_leaderboard(room_id, request.args.get('date_key'))
        return jsonify({'success': True, 'room_id': room_id, 'leaderboard': leaderboard})

    except Exception as e:
        game_logger.log_error(request, e, 'get_leaderboard')
        return jsonify({'success': False, 'error': str(e)}), 500
