"""
Keyboard Hints

Derived, never stored: letter (or jamo) statuses folded from every scored
board row with max precedence correct > present > absent. Rows recorded on a
board after it was solved only repeat the solving row for display and are
left out of the fold.
"""

from typing import Dict, Iterator, List, Optional, Tuple

from ..models.game import Alphabet, Board, Game, LetterResult
from .classifier import is_composed_syllable
from .hangul import decompose


def merge_result(current: Optional[LetterResult], new: LetterResult) -> LetterResult:
    if current is None or new.rank > current.rank:
        return new
    return current


def _latin_keys(board: Board, row: int) -> Iterator[Tuple[str, LetterResult]]:
    for letter, status in zip(board.guesses[row], board.results[row]):
        yield letter, status


def _hangul_keys(board: Board, row: int) -> Iterator[Tuple[str, LetterResult]]:
    guess = board.guesses[row]
    statuses = board.results[row]
    hints = board.jamo_results[row] if board.jamo_results else ()

    for i, syllable in enumerate(guess):
        if not is_composed_syllable(syllable):
            continue
        onset, vowel, final = decompose(syllable)
        hint = hints[i] if i < len(hints) else None

        if statuses[i] is LetterResult.CORRECT or hint is None:
            # Whole-syllable hit, or no jamo row stored: the syllable status covers every jamo
            status = statuses[i]
            yield onset, status
            yield vowel, status
            if final:
                yield final, status
            continue

        yield onset, hint.onset
        yield vowel, hint.vowel
        if final and hint.final is not None:
            yield final, hint.final


def _board_statuses(board: Board, alphabet: Alphabet) -> Dict[str, LetterResult]:
    keys = _hangul_keys if alphabet is Alphabet.HANGUL else _latin_keys
    statuses: Dict[str, LetterResult] = {}
    for row in range(board.scored_rows):
        for key, status in keys(board, row):
            statuses[key] = merge_result(statuses.get(key), status)
    return statuses


def compute_keyboard_map(game: Game) -> Dict[str, LetterResult]:
    """
    Best known status per key across all boards.

    Latin keys are letters; Hangul keys are jamo taken from the jamo-level
    hints, so a syllable scored absent can still surface a present consonant.
    Only keys that appear in a scored guess are present in the map.
    """
    statuses: Dict[str, LetterResult] = {}
    for board in game.boards:
        for key, status in _board_statuses(board, game.alphabet).items():
            statuses[key] = merge_result(statuses.get(key), status)
    return statuses


def compute_keyboard_board_map(game: Game) -> Dict[str, List[Optional[LetterResult]]]:
    """Per-board variant: each key maps to one status per board, None where the board has nothing."""
    per_board = [_board_statuses(board, game.alphabet) for board in game.boards]
    keys: Dict[str, None] = {}
    for statuses in per_board:
        keys.update(dict.fromkeys(statuses))
    return {key: [statuses.get(key) for statuses in per_board] for key in keys}


def serialize_keyboard(keyboard: Dict) -> Dict:
    """Enum-free copy of either keyboard map for JSON responses."""
    serialized = {}
    for key, value in keyboard.items():
        if isinstance(value, list):
            serialized[key] = [v.value if v is not None else None for v in value]
        else:
            serialized[key] = value.value
    return serialized
