"""
Daily Puzzle Selection

The daily targets are a pure function of the date key and the alphabet: the
key is hashed to a 32-bit seed, the seed drives a mulberry32 stream, and
distinct answer indices are drawn by rejection sampling. Reproducibility is
the requirement here, not unpredictability.
"""

import random
from datetime import datetime
from typing import Callable, List, Optional, Sequence
from zoneinfo import ZoneInfo

from ..config.game_settings import ANSWER_WORDS, BOARD_COUNT, DAILY_TIMEZONE
from ..models.game import Alphabet
from .errors import NotEnoughAnswers

_MASK = 0xFFFFFFFF

# Seed prefix per alphabet. Latin keeps the bare key so existing daily
# puzzles do not change.
SEED_SALTS = {
    Alphabet.LATIN: '',
    Alphabet.HANGUL: 'ko:',
}


def _to_int32(value: int) -> int:
    value &= _MASK
    return value - 0x100000000 if value & 0x80000000 else value


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK


def _utf16_units(text: str):
    data = text.encode('utf-16-le')
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def date_key_to_seed(date_key: str) -> int:
    """djb2-style xor hash of the key, computed with 32-bit signed wraparound."""
    seed = 5381
    for unit in _utf16_units(date_key):
        seed = _to_int32(_to_int32(seed << 5) + seed) ^ unit
    return seed & _MASK


def mulberry32(seed: int) -> Callable[[], float]:
    """Seeded generator function returning floats in [0, 1)."""
    state = seed & _MASK

    def next_random() -> float:
        nonlocal state
        state = (state + 0x6D2B79F5) & _MASK
        t = state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK
        return ((t ^ (t >> 14)) & _MASK) / 4294967296

    return next_random


def select_distinct_indices(length: int, count: int, next_random: Callable[[], float]) -> List[int]:
    """Draw count distinct indices below length, redrawing on collision."""
    if count > length:
        raise NotEnoughAnswers(length, count)
    indices: List[int] = []
    used = set()
    while len(indices) < count:
        index = int(next_random() * length)
        if index in used:
            continue
        used.add(index)
        indices.append(index)
    return indices


def daily_targets(date_key: str, alphabet=Alphabet.LATIN, count: int = BOARD_COUNT,
                  answers: Optional[Sequence[str]] = None) -> List[str]:
    """
    Deterministic targets for a calendar day.

    Args:
        date_key: Opaque day key, e.g. "2026-02-07"
        alphabet: Alphabet member or tag; salts the seed so alphabets stay independent
        count: Number of distinct words (one per board)
        answers: Answer list override, the alphabet's configured list by default

    Raises:
        NotEnoughAnswers: If the answer list is shorter than count
    """
    alphabet = Alphabet(alphabet)
    words = ANSWER_WORDS[alphabet] if answers is None else answers
    if len(words) < count:
        raise NotEnoughAnswers(len(words), count)

    next_random = mulberry32(date_key_to_seed(SEED_SALTS[alphabet] + date_key))
    return [words[i] for i in select_distinct_indices(len(words), count, next_random)]


def random_targets(alphabet=Alphabet.LATIN, count: int = BOARD_COUNT,
                   rng: Optional[random.Random] = None) -> List[str]:
    """Random distinct targets for practice games."""
    words = ANSWER_WORDS[Alphabet(alphabet)]
    if len(words) < count:
        raise NotEnoughAnswers(len(words), count)
    return (rng or random).sample(list(words), count)


def current_date_key(timezone: str = DAILY_TIMEZONE) -> str:
    """Today's key (YYYY-MM-DD) in the reference timezone."""
    return datetime.now(ZoneInfo(timezone)).strftime('%Y-%m-%d')
