"""
Engine Package

Pure, side-effect-free game core: symbol classification, the Hangul codec,
guess evaluation, the board state machine, keyboard hints and daily puzzle
selection. Nothing in here performs I/O or holds mutable module state.
"""

from .alphabets import AlphabetRules, get_rules, normalize
from .daily import current_date_key, daily_targets, random_targets
from .errors import InvalidSymbol, LengthMismatch, NotEnoughAnswers, QuordleError
from .evaluator import evaluate, is_solved
from .evaluator_ko import evaluate_hangul, evaluate_jamo, evaluate_syllables
from .game import (
    create_game, remaining_guesses, set_current_input, solved_count,
    submit_guess, validate,
)
from .hangul import (
    combine_finals, combine_vowels, compose, decompose, extract_jamo,
    split_compound_final, split_compound_vowel,
)
from .keyboard import compute_keyboard_board_map, compute_keyboard_map

__all__ = [
    'AlphabetRules', 'get_rules', 'normalize',
    'current_date_key', 'daily_targets', 'random_targets',
    'InvalidSymbol', 'LengthMismatch', 'NotEnoughAnswers', 'QuordleError',
    'evaluate', 'is_solved',
    'evaluate_hangul', 'evaluate_jamo', 'evaluate_syllables',
    'create_game', 'remaining_guesses', 'set_current_input', 'solved_count',
    'submit_guess', 'validate',
    'combine_finals', 'combine_vowels', 'compose', 'decompose', 'extract_jamo',
    'split_compound_final', 'split_compound_vowel',
    'compute_keyboard_board_map', 'compute_keyboard_map',
]
