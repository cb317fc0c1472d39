"""
Game Logger Module for the Quordle Server

Structured logging for requests, responses, game and room events. Each entry
is a JSON object written on one line of a per-day log file; warnings and
errors are echoed to the console. The engine itself never logs; services and
controllers report through the shared game_logger instance.
"""

import logging
import json
from collections import Counter
from datetime import datetime
from typing import Any, Dict, Optional
from pathlib import Path

from ..config.app_config import Config
from .helpers import get_user_identity

# event_type prefix -> get_log_stats() counter name
_STAT_BUCKETS = {
    'USER_ACTION': 'user_actions',
    'SERVER_RESPONSE': 'server_responses',
    'GAME_EVENT': 'game_events',
    'ERROR': 'errors',
}


class GameLogger:
    """
    Centralized logging system for the game server.

    Entry types:
    - USER_ACTION: an incoming HTTP request, tagged with the caller's IP
    - SERVER_RESPONSE_SUCCESS / SERVER_RESPONSE_ERROR: what was sent back,
      with game state reduced to a summary so hidden targets never reach the log
    - GAME_EVENT: boards solved, games won or lost, room joins and leaves
    - ERROR: exceptions caught at the controller boundary
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO", name: str = 'quordle_game'):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = getattr(logging, str(level).upper(), logging.INFO)
        self.name = name
        self.logger = self._setup_logger()

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger(self.name)
        logger.setLevel(self.level)
        logger.propagate = False

        # Re-initialising replaces the previous handlers instead of stacking them
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
        file_handler.setLevel(self.level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        return logger

    @staticmethod
    def _entry(event_type: str, action: str, user: Dict[str, Any], details: Dict[str, Any]) -> str:
        return json.dumps({
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user,
            'details': details,
        }, ensure_ascii=False, default=str)

    def log_user_action(self, request, action: str, game_id: Optional[str] = None, **kwargs):
        """
        Record an incoming request.

        Args:
            request: Flask request object
            action: e.g. 'new_game', 'submit_guess', 'join_room'
            game_id: Game the request targets, if any
            **kwargs: Request fields worth keeping (guess, alphabet, room_id...)
        """
        details = {
            'game_id': game_id,
            'endpoint': getattr(request, 'endpoint', None),
            'method': getattr(request, 'method', None),
            'url': getattr(request, 'url', None),
            **kwargs
        }
        self.logger.info(self._entry('USER_ACTION', action, get_user_identity(request), details))

    def log_server_response(self, request, action: str, success: bool,
                            response_data: Dict[str, Any], game_id: Optional[str] = None, **kwargs):
        """Record a response; failures are logged at ERROR level."""
        details = {
            'game_id': game_id,
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }
        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        entry = self._entry(event_type, action, get_user_identity(request), details)
        self.logger.log(logging.INFO if success else logging.ERROR, entry)

    def log_game_event(self, game_id: Optional[str], event: str, user_ip: str, **kwargs):
        """
        Record a game or room event.

        Args:
            game_id: Single-player game id, None for room events
            event: e.g. 'board_solved', 'game_won', 'game_lost', 'room_joined'
            user_ip: Caller's address, or 'system' for server-initiated events
            **kwargs: Event details; a user_id is lifted into the user block
        """
        user = {'user_ip': user_ip, 'session_id': None, 'username': kwargs.get('user_id')}
        details = {'game_id': game_id, **kwargs}
        self.logger.info(self._entry('GAME_EVENT', event, user, details))

    def log_error(self, request, error: Exception, action: str, game_id: Optional[str] = None):
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        self.logger.error(self._entry('ERROR', action, get_user_identity(request), details))

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Reduce game state payloads to a summary and never log hidden answers."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = dict(data)

        state = sanitized.get('state')
        if isinstance(state, dict):
            boards = state.get('boards', [])
            sanitized['state'] = {
                'guess_number': state.get('guessNumber'),
                'max_guesses': state.get('maxGuesses'),
                'game_over': state.get('gameOver'),
                'won': state.get('won'),
                'alphabet': state.get('alphabet'),
                'boards_solved': sum(1 for board in boards if board.get('solved')),
                'board_count': len(boards),
            }

        player = sanitized.get('player')
        if isinstance(player, dict):
            sanitized['player'] = {
                'user_id': player.get('userId'),
                'date_key': player.get('dateKey'),
                'finished_at': player.get('finishedAt'),
            }

        if isinstance(sanitized.get('keyboard'), dict):
            sanitized['keyboard'] = {'keys': len(sanitized['keyboard'])}

        if isinstance(sanitized.get('leaderboard'), list):
            sanitized['leaderboard'] = {'entries': len(sanitized['leaderboard'])}

        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Counts of today's entries per type, plus per-action counts of game events."""
        log_file = self._log_file()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        buckets: Counter = Counter()
        game_events: Counter = Counter()
        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    message = line.rstrip('\n').split(' | ', 2)[-1]
                    try:
                        entry = json.loads(message)
                    except ValueError:
                        continue
                    event_type = entry.get('event_type', '')
                    for prefix, bucket in _STAT_BUCKETS.items():
                        if event_type.startswith(prefix):
                            buckets[bucket] += 1
                            break
                    if event_type == 'GAME_EVENT':
                        game_events[entry.get('action')] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': sum(buckets.values()),
            **{bucket: buckets[bucket] for bucket in _STAT_BUCKETS.values()},
            'game_events_by_action': dict(game_events),
        }


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
