"""
Guess Evaluator

Implements the authentic Wordle letter evaluation algorithm for Latin words,
and the shared two-pass counting routine the Hangul syllable layer reuses.
"""

from collections import Counter
from typing import Hashable, List, Sequence

from ..models.game import LetterResult
from .errors import LengthMismatch


def evaluate_symbols(guess: Sequence[Hashable], target: Sequence[Hashable]) -> List[LetterResult]:
    """
    Two-pass, multiset-bounded comparison of two equal-length symbol sequences.

    Raises:
        LengthMismatch: If the sequences differ in length
    """
    if len(guess) != len(target):
        raise LengthMismatch(len(guess), len(target))

    result = [LetterResult.ABSENT] * len(guess)
    remaining = Counter(target)

    # First pass: exact position matches consume their symbol first
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            result[i] = LetterResult.CORRECT
            remaining[g] -= 1

    # Second pass: right symbol, wrong position, bounded by what is left
    for i, g in enumerate(guess):
        if result[i] is LetterResult.CORRECT:
            continue
        if remaining[g] > 0:
            result[i] = LetterResult.PRESENT
            remaining[g] -= 1

    return result


def evaluate(guess: str, target: str) -> List[LetterResult]:
    """Evaluate a Latin guess against a target word, ignoring case."""
    return evaluate_symbols(guess.lower(), target.lower())


def is_solved(result: Sequence[LetterResult]) -> bool:
    return all(r is LetterResult.CORRECT for r in result)
