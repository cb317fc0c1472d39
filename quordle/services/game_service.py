"""
Game Service

Manages single-player game sessions on top of the pure engine: word
selection, dictionary checks, guess submission and keyboard views.
"""

import time
import uuid
from typing import Dict, Optional, Tuple

from ..config.game_settings import BOARD_COUNT, DAILY_TIMEZONE, is_acceptable_guess
from ..engine import (
    compute_keyboard_board_map, compute_keyboard_map, create_game, current_date_key,
    daily_targets, get_rules, random_targets, remaining_guesses, set_current_input,
    solved_count, submit_guess, validate,
)
from ..engine.keyboard import serialize_keyboard
from ..models.game import Alphabet, Game

GAME_MODES = ("practice", "daily")


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Daily and practice target selection
    - Guess validation (format and dictionary) and submission
    - Serialized state that hides unsolved targets until the game is over
    """

    def __init__(self, board_count: int = BOARD_COUNT, timezone: str = DAILY_TIMEZONE):
        self.games: Dict[str, Dict] = {}  # Store active sessions by game_id
        self.board_count = board_count
        self.timezone = timezone

    def create_new_game(self, alphabet=Alphabet.LATIN, mode: str = "practice",
                        date_key: Optional[str] = None,
                        max_guesses: Optional[int] = None) -> str:
        """
        Creates a new game session.

        Args:
            alphabet: Alphabet member or tag ('en' / 'ko')
            mode: "practice" for random targets, "daily" for the date's puzzle
            date_key: Day key for daily games, today's key when omitted
            max_guesses: Guess budget override

        Returns:
            str: Unique game ID for this session

        Raises:
            ValueError: For an unknown mode or alphabet
        """
        if mode not in GAME_MODES:
            raise ValueError(f"Invalid game mode '{mode}'. Must be one of {', '.join(GAME_MODES)}")
        alphabet = Alphabet(alphabet)

        if mode == "daily":
            date_key = date_key or current_date_key(self.timezone)
            targets = daily_targets(date_key, alphabet, count=self.board_count)
        else:
            date_key = None
            targets = random_targets(alphabet, count=self.board_count)

        game_id = str(uuid.uuid4())
        self.games[game_id] = {
            "game": create_game(targets, max_guesses, alphabet),
            "mode": mode,
            "date_key": date_key,
            "created_at": time.time(),
        }
        return game_id

    def get_game(self, game_id: str) -> Optional[Game]:
        session = self.games.get(game_id)
        return session["game"] if session else None

    def get_game_state(self, game_id: str) -> Optional[Dict]:
        """
        Returns the serialized state for a session (unsolved targets hidden while running).

        Args:
            game_id: Unique game identifier

        Returns:
            State dict or None if game not found
        """
        session = self.games.get(game_id)
        if session is None:
            return None

        game: Game = session["game"]
        state = game.without_answers()
        state.update({
            "gameId": game_id,
            "mode": session["mode"],
            "dateKey": session["date_key"],
            "remainingGuesses": remaining_guesses(game),
            "solvedCount": solved_count(game),
        })
        return state

    def is_valid_guess(self, game_id: str, guess: str) -> Tuple[bool, str]:
        """
        Validates a guess for a specific game session.

        Args:
            game_id: Unique game identifier
            guess: The word to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        game = self.get_game(game_id)
        if game is None:
            return False, "Game not found"

        if game.game_over:
            return False, "Game is already over"

        if not guess or not isinstance(guess, str):
            return False, "Guess must be a valid string"

        normalized_guess = self.normalize_guess(guess, game.alphabet)

        validation = validate(normalized_guess, game.alphabet)
        if not validation.valid:
            return False, validation.error

        if not is_acceptable_guess(normalized_guess, game.alphabet):
            return False, "Word not in word list"

        return True, ""

    @staticmethod
    def normalize_guess(guess: str, alphabet) -> str:
        normalized = guess.strip()
        return normalized.lower() if get_rules(alphabet).fold_case else normalized

    def make_guess(self, game_id: str, guess: str) -> Optional[Dict]:
        """
        Processes a guess and updates the stored game.

        Args:
            game_id: Unique game identifier
            guess: Raw guess string

        Returns:
            Updated state dict, or None if the guess was rejected
        """
        is_valid, _ = self.is_valid_guess(game_id, guess)
        if not is_valid:
            return None

        session = self.games[game_id]
        game: Game = session["game"]
        session["game"] = submit_guess(game, self.normalize_guess(guess, game.alphabet))
        return self.get_game_state(game_id)

    @staticmethod
    def newly_solved_boards(before: Dict, after: Dict):
        """Indices of boards solved between two state snapshots."""
        return [
            index for index, (old, new) in enumerate(zip(before["boards"], after["boards"]))
            if new["solved"] and not old["solved"]
        ]

    def set_current_input(self, game_id: str, raw: str) -> Optional[Dict]:
        session = self.games.get(game_id)
        if session is None:
            return None
        session["game"] = set_current_input(session["game"], raw or "")
        return self.get_game_state(game_id)

    def get_keyboard(self, game_id: str, per_board: bool = False) -> Optional[Dict]:
        """Serialized keyboard hints, merged or per board."""
        game = self.get_game(game_id)
        if game is None:
            return None
        if per_board:
            return serialize_keyboard(compute_keyboard_board_map(game))
        return serialize_keyboard(compute_keyboard_map(game))

    def get_answers(self, game_id: str):
        """Target words, only once the game is over."""
        game = self.get_game(game_id)
        if game is None or not game.game_over:
            return None
        return [board.target_word for board in game.boards]

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(board_count: int = BOARD_COUNT, timezone: str = DAILY_TIMEZONE) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(board_count, timezone)
    return _game_service
