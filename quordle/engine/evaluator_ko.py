"""
Hangul Guess Evaluator

Two layers, always computed together:

1. Syllable layer: the regular two-pass algorithm over whole syllable blocks.
   This decides whether a board is solved.
2. Jamo layer: for every syllable that is not a whole-syllable hit, per-slot
   hints drawn from two pools built over the entire target word. Consonants
   share one pool regardless of slot, so an onset in the guess can light up
   against a final in the target and vice versa. Compound finals are expanded
   into their two components on both sides.
"""

from collections import Counter
from typing import List, Optional, Sequence

from ..models.game import HangulEvaluation, JamoHint, LetterResult
from .classifier import is_composed_syllable
from .errors import LengthMismatch
from .evaluator import evaluate_symbols
from .hangul import decompose, expand_final, split_compound_final


def evaluate_syllables(guess: str, target: str) -> List[LetterResult]:
    """Syllable-level evaluation; identical to the Latin algorithm minus case folding."""
    return evaluate_symbols(guess, target)


def _build_pools(target: str):
    consonants: Counter = Counter()
    vowels: Counter = Counter()
    for ch in target:
        if is_composed_syllable(ch):
            parts = decompose(ch)
            consonants[parts.onset] += 1
            vowels[parts.vowel] += 1
            for consonant in expand_final(parts.final):
                consonants[consonant] += 1
    return consonants, vowels


def _take(pool: Counter, jamo: str) -> bool:
    if pool[jamo] > 0:
        pool[jamo] -= 1
        return True
    return False


def evaluate_jamo(guess: str, target: str,
                  syllable_results: Optional[Sequence[LetterResult]] = None) -> List[Optional[JamoHint]]:
    """
    Jamo hints for every position whose syllable result is not correct.

    Args:
        guess: Guess word, one composed syllable per position
        target: Target word of the same length
        syllable_results: Precomputed syllable layer, evaluated here if omitted

    Returns:
        One entry per position: None for whole-syllable hits, otherwise a JamoHint.
        The final hint is None only when neither side has a final at that position.

    Raises:
        LengthMismatch: If guess and target differ in length
    """
    if len(guess) != len(target):
        raise LengthMismatch(len(guess), len(target))
    if syllable_results is None:
        syllable_results = evaluate_syllables(guess, target)

    consonants, vowels = _build_pools(target)

    # A fully matched syllable must not lend its jamo to other positions
    for i, ch in enumerate(target):
        if syllable_results[i] is LetterResult.CORRECT and is_composed_syllable(ch):
            parts = decompose(ch)
            consonants[parts.onset] -= 1
            vowels[parts.vowel] -= 1
            for consonant in expand_final(parts.final):
                consonants[consonant] -= 1

    # Slots per position as mutable [onset, vowel, final] lists while the passes run
    slots: List[Optional[list]] = []
    decomposed = []
    for i, (g, t) in enumerate(zip(guess, target)):
        if syllable_results[i] is LetterResult.CORRECT:
            slots.append(None)
            decomposed.append(None)
        elif is_composed_syllable(g) and is_composed_syllable(t):
            g_parts, t_parts = decompose(g), decompose(t)
            has_final = g_parts.final is not None or t_parts.final is not None
            slots.append([LetterResult.ABSENT, LetterResult.ABSENT,
                          LetterResult.ABSENT if has_final else None])
            decomposed.append((g_parts, t_parts))
        else:
            slots.append([LetterResult.ABSENT, LetterResult.ABSENT, None])
            decomposed.append(None)

    # Green pass: same slot, same position
    for hint, pair in zip(slots, decomposed):
        if hint is None or pair is None:
            continue
        g_parts, t_parts = pair
        if g_parts.onset == t_parts.onset:
            hint[0] = LetterResult.CORRECT
            consonants[g_parts.onset] -= 1
        if g_parts.vowel == t_parts.vowel:
            hint[1] = LetterResult.CORRECT
            vowels[g_parts.vowel] -= 1
        if g_parts.final is not None and g_parts.final == t_parts.final:
            hint[2] = LetterResult.CORRECT
            for consonant in expand_final(g_parts.final):
                consonants[consonant] -= 1

    # Yellow pass: anything still left in the pools
    for hint, pair in zip(slots, decomposed):
        if hint is None or pair is None:
            continue
        g_parts = pair[0]
        if hint[0] is not LetterResult.CORRECT and _take(consonants, g_parts.onset):
            hint[0] = LetterResult.PRESENT
        if hint[1] is not LetterResult.CORRECT and _take(vowels, g_parts.vowel):
            hint[1] = LetterResult.PRESENT
        if hint[2] is LetterResult.ABSENT and g_parts.final is not None:
            if _take(consonants, g_parts.final):
                hint[2] = LetterResult.PRESENT
            else:
                components = split_compound_final(g_parts.final)
                if components:
                    matched = [_take(consonants, c) for c in components]
                    if any(matched):
                        hint[2] = LetterResult.PRESENT

    return [JamoHint(*hint) if hint is not None else None for hint in slots]


def evaluate_hangul(guess: str, target: str) -> HangulEvaluation:
    """Evaluate both layers of a Hangul guess."""
    syllables = evaluate_syllables(guess, target)
    return HangulEvaluation(syllables=syllables, jamo=evaluate_jamo(guess, target, syllables))
