"""
Room Service

Manages daily rooms: every player in a room plays the same day's puzzle, and
the room keeps a leaderboard of everyone's progress. Rooms are keyed by
room id and date key, so each day starts a fresh room.
"""

import time
from typing import Dict, List, Optional

from ..config.game_settings import BOARD_COUNT, DAILY_TIMEZONE, is_acceptable_guess
from ..engine import create_game, current_date_key, daily_targets, get_rules, solved_count, submit_guess, validate
from ..models.game import Alphabet, Game

# Error codes shared with the socket protocol
INVALID_MESSAGE = 'INVALID_MESSAGE'
INVALID_GUESS = 'INVALID_GUESS'
GAME_OVER = 'GAME_OVER'
ROOM_NOT_FOUND = 'ROOM_NOT_FOUND'
PLAYER_NOT_FOUND = 'PLAYER_NOT_FOUND'
INTERNAL_ERROR = 'INTERNAL_ERROR'


def _now_ms() -> int:
    return int(time.time() * 1000)


def make_room_key(room_id: str, date_key: str) -> str:
    return f"{room_id}:{date_key}"


def to_leaderboard_entry(player: Dict) -> Dict:
    game: Game = player["game"]
    return {
        "userId": player["user_id"],
        "solvedCount": solved_count(game),
        "guessCount": game.guess_number,
        "gameOver": game.game_over,
        "won": game.won,
        "finishedAt": player["finished_at"],
    }


def sort_leaderboard(entries: List[Dict]) -> List[Dict]:
    """Finished players first, then most boards solved, fewest guesses, earliest finish."""
    return sorted(entries, key=lambda e: (
        not e["gameOver"],
        -e["solvedCount"],
        e["guessCount"],
        e["finishedAt"] if e["finishedAt"] is not None else float('inf'),
    ))


class RoomService:
    """
    In-memory daily room manager.
    Uses simple in-memory state without persistence.
    """

    def __init__(self, board_count: int = BOARD_COUNT, timezone: str = DAILY_TIMEZONE):
        self.rooms: Dict[str, Dict] = {}  # room_key -> room
        self.board_count = board_count
        self.timezone = timezone

    def _get_or_create_room(self, room_id: str, date_key: str) -> Dict:
        key = make_room_key(room_id, date_key)
        room = self.rooms.get(key)
        if room is None:
            room = {
                'room_id': room_id,
                'date_key': date_key,
                'players': {},
                'leaderboard': [],
                'last_update_at': _now_ms(),
            }
            self.rooms[key] = room
        return room

    def get_room(self, room_id: str, date_key: str) -> Optional[Dict]:
        return self.rooms.get(make_room_key(room_id, date_key))

    def _update_leaderboard(self, room: Dict) -> None:
        entries = [to_leaderboard_entry(player) for player in room['players'].values()]
        room['leaderboard'] = sort_leaderboard(entries)
        room['last_update_at'] = _now_ms()

    @staticmethod
    def serialize_player(player: Dict) -> Dict:
        game: Game = player['game']
        return {
            'userId': player['user_id'],
            'roomId': player['room_id'],
            'dateKey': player['date_key'],
            'mode': 'daily',
            'alphabet': game.alphabet.value,
            'gameState': game.without_answers(),
            'createdAt': player['created_at'],
            'updatedAt': player['updated_at'],
            'finishedAt': player['finished_at'],
        }

    def join(self, room_id: str, user_id: str, date_key: Optional[str] = None,
             alphabet=Alphabet.LATIN) -> Dict:
        """Join a room, creating the player's daily game on first join."""
        if not room_id or not user_id:
            return {'success': False, 'code': INVALID_MESSAGE, 'error': 'room_id and user_id required'}

        alphabet = Alphabet(alphabet)
        date_key = date_key or current_date_key(self.timezone)
        room = self._get_or_create_room(room_id, date_key)

        player = room['players'].get(user_id)
        if player is not None and player['game'].alphabet is not alphabet:
            return {
                'success': False,
                'code': INVALID_MESSAGE,
                'error': f"Player already has a '{player['game'].alphabet.value}' game in this room today",
            }
        created = player is None
        if created:
            targets = daily_targets(date_key, alphabet, count=self.board_count)
            now = _now_ms()
            player = {
                'user_id': user_id,
                'room_id': room_id,
                'date_key': date_key,
                'game': create_game(targets, alphabet=alphabet),
                'created_at': now,
                'updated_at': now,
                'finished_at': None,
            }
            room['players'][user_id] = player
            self._update_leaderboard(room)

        return {
            'success': True,
            'created': created,
            'player': self.serialize_player(player),
            'leaderboard': list(room['leaderboard']),
        }

    def submit_guess(self, room_id: str, user_id: str, guess: str,
                     date_key: Optional[str] = None) -> Dict:
        """Apply a guess to a player's daily game and refresh the leaderboard."""
        date_key = date_key or current_date_key(self.timezone)
        room = self.get_room(room_id, date_key)
        if room is None:
            return {'success': False, 'code': ROOM_NOT_FOUND, 'error': 'Room not found'}

        player = room['players'].get(user_id)
        if player is None:
            return {'success': False, 'code': PLAYER_NOT_FOUND, 'error': 'Join the room first'}

        game: Game = player['game']
        if game.game_over:
            return {'success': False, 'code': GAME_OVER, 'error': 'Game is already over',
                    'player': self.serialize_player(player)}

        if not isinstance(guess, str):
            return {'success': False, 'code': INVALID_MESSAGE, 'error': 'Guess must be a string'}

        normalized = guess.strip()
        if get_rules(game.alphabet).fold_case:
            normalized = normalized.lower()

        validation = validate(normalized, game.alphabet)
        if not validation.valid:
            return {'success': False, 'code': INVALID_GUESS, 'error': validation.error}
        if not is_acceptable_guess(normalized, game.alphabet):
            return {'success': False, 'code': INVALID_GUESS, 'error': 'Word not in word list'}

        updated = submit_guess(game, normalized)
        now = _now_ms()
        player['game'] = updated
        player['updated_at'] = now
        if updated.game_over and player['finished_at'] is None:
            player['finished_at'] = now
        self._update_leaderboard(room)

        return {
            'success': True,
            'player': self.serialize_player(player),
            'leaderboard': list(room['leaderboard']),
        }

    def leave(self, room_id: str, user_id: str, date_key: Optional[str] = None) -> Dict:
        """Remove a player from a room; empty rooms are dropped."""
        date_key = date_key or current_date_key(self.timezone)
        room = self.get_room(room_id, date_key)
        if room is None:
            return {'success': False, 'code': ROOM_NOT_FOUND, 'error': 'Room not found'}

        if room['players'].pop(user_id, None) is None:
            return {'success': False, 'code': PLAYER_NOT_FOUND, 'error': 'Not in this room'}

        self._update_leaderboard(room)
        if not room['players']:
            del self.rooms[make_room_key(room_id, date_key)]
        return {'success': True, 'leaderboard': list(room['leaderboard'])}

    def get_leaderboard(self, room_id: str, date_key: Optional[str] = None) -> List[Dict]:
        room = self.get_room(room_id, date_key or current_date_key(self.timezone))
        return list(room['leaderboard']) if room else []


# Global service instance
_room_service = None


def get_room_service() -> Optional[RoomService]:
    """Get the global room service instance."""
    return _room_service


def initialize_room_service(board_count: int = BOARD_COUNT, timezone: str = DAILY_TIMEZONE) -> RoomService:
    """Initialize the global room service instance."""
    global _room_service
    _room_service = RoomService(board_count, timezone)
    return _room_service
