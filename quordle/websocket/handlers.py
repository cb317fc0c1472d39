"""
WebSocket Event Handlers

Handles the real-time daily room channel: players join a room, submit guesses
and receive leaderboard broadcasts as everyone's progress changes.
"""

from flask import request
from flask_socketio import emit, join_room, leave_room
from ..engine import current_date_key
from ..services.room_service import (
    get_room_service, make_room_key, INTERNAL_ERROR, INVALID_MESSAGE,
)
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_alphabet

# Simple tracking of connected sockets
connected_users = {}  # socket_id -> (room_id, user_id, date_key)


def _channel(room_id, date_key):
    return f"room_{make_room_key(room_id, date_key)}"


def _emit_error(code, message):
    emit('error', {'code': code, 'error': message})


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        pass

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Forget the socket; the player's daily progress stays in the room."""
        membership = connected_users.pop(request.sid, None)
        if membership is None:
            return

        room_id, user_id, date_key = membership
        game_logger.log_game_event(
            None, 'socket_disconnected', 'system', room_id=room_id, user_id=user_id
        )
        socketio.emit('room_event', {
            'event': 'player_disconnected',
            'userId': user_id,
        }, room=_channel(room_id, date_key))

    @socketio.on('join_room')
    def handle_join_room(data):
        """Join a daily room and receive the player's state plus the leaderboard."""
        try:
            room_service = get_room_service()
            if not room_service:
                _emit_error(INTERNAL_ERROR, 'Room service unavailable')
                return

            if not isinstance(data, dict):
                _emit_error(INVALID_MESSAGE, 'Expected an object payload')
                return

            alphabet = parse_alphabet(data.get('alphabet'))
            if alphabet is None:
                _emit_error(INVALID_MESSAGE, 'Invalid alphabet. Must be "en" or "ko"')
                return

            room_id = data.get('room_id')
            user_id = data.get('user_id')
            result = room_service.join(room_id, user_id, data.get('date_key'), alphabet)
            if not result.get('success'):
                _emit_error(result['code'], result['error'])
                return

            date_key = result['player']['dateKey']
            channel = _channel(room_id, date_key)
            join_room(channel)
            connected_users[request.sid] = (room_id, user_id, date_key)

            game_logger.log_game_event(
                None, 'room_joined', request.remote_addr,
                room_id=room_id, user_id=user_id, date_key=date_key, created=result['created']
            )

            emit('state', result['player'])

            # Notify everyone else in the room
            emit('room_event', {
                'event': 'player_joined',
                'userId': user_id,
            }, room=channel, include_self=False)

            socketio.emit('leaderboard', {
                'roomId': room_id,
                'dateKey': date_key,
                'leaderboard': result['leaderboard'],
            }, room=channel)

        except Exception as e:
            game_logger.logger.error(f"Error joining room: {e}")
            _emit_error(INTERNAL_ERROR, str(e))

    @socketio.on('submit_guess')
    def handle_submit_guess(data):
        """Submit a guess for the player's daily game and broadcast the new standings."""
        try:
            room_service = get_room_service()
            if not room_service:
                _emit_error(INTERNAL_ERROR, 'Room service unavailable')
                return

            if not isinstance(data, dict) or data.get('guess') is None:
                _emit_error(INVALID_MESSAGE, 'room_id, user_id and guess are required')
                return

            membership = connected_users.get(request.sid)
            room_id = data.get('room_id') or (membership[0] if membership else None)
            user_id = data.get('user_id') or (membership[1] if membership else None)
            date_key = data.get('date_key') or (membership[2] if membership else None)

            result = room_service.submit_guess(room_id, user_id, data['guess'], date_key)
            if not result.get('success'):
                _emit_error(result['code'], result['error'])
                return

            player = result['player']
            emit('state', player)

            channel = _channel(room_id, player['dateKey'])
            game_state = player['gameState']
            if game_state['gameOver']:
                game_logger.log_game_event(
                    None, 'game_won' if game_state['won'] else 'game_lost', request.remote_addr,
                    room_id=room_id, user_id=user_id, guesses_used=game_state['guessNumber']
                )
                socketio.emit('room_event', {
                    'event': 'player_finished',
                    'userId': user_id,
                    'won': game_state['won'],
                }, room=channel)

            socketio.emit('leaderboard', {
                'roomId': room_id,
                'dateKey': player['dateKey'],
                'leaderboard': result['leaderboard'],
            }, room=channel)

        except Exception as e:
            game_logger.logger.error(f"Error submitting room guess: {e}")
            _emit_error(INTERNAL_ERROR, str(e))

    @socketio.on('leave_room')
    def handle_leave_room(data=None):
        """Leave the current daily room."""
        try:
            room_service = get_room_service()
            if not room_service:
                return

            membership = connected_users.pop(request.sid, None)
            data = data if isinstance(data, dict) else {}
            room_id = data.get('room_id') or (membership[0] if membership else None)
            user_id = data.get('user_id') or (membership[1] if membership else None)
            date_key = data.get('date_key') or (membership[2] if membership else current_date_key(room_service.timezone))

            result = room_service.leave(room_id, user_id, date_key)
            if not result.get('success'):
                _emit_error(result['code'], result['error'])
                return

            channel = _channel(room_id, date_key)
            leave_room(channel)
            socketio.emit('room_event', {'event': 'player_left', 'userId': user_id}, room=channel)
            socketio.emit('leaderboard', {
                'roomId': room_id,
                'dateKey': date_key,
                'leaderboard': result['leaderboard'],
            }, room=channel)

            game_logger.log_game_event(None, 'room_left', request.remote_addr, room_id=room_id, user_id=user_id)

        except Exception as e:
            game_logger.logger.error(f"Error leaving room: {e}")
            _emit_error(INTERNAL_ERROR, str(e))
