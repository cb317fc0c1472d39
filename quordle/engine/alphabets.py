"""
Alphabet Rules

Word length, default guess budget, and the character rules used to validate
and normalize raw input for each supported alphabet.
"""

import re
from dataclasses import dataclass
from typing import Dict, Final

from ..config.game_settings import DEFAULT_MAX_GUESSES, WORD_LENGTHS
from ..models.game import Alphabet


@dataclass(frozen=True)
class AlphabetRules:
    """Fixed per-alphabet game parameters."""
    alphabet: Alphabet
    word_length: int
    default_max_guesses: int
    valid_pattern: re.Pattern
    strip_pattern: re.Pattern
    fold_case: bool
    unit_name: str

    def normalize(self, raw: str) -> str:
        """Case fold, drop characters outside the alphabet, truncate to word length."""
        if not isinstance(raw, str):
            return ''
        text = raw.lower() if self.fold_case else raw
        return self.strip_pattern.sub('', text)[:self.word_length]


LATIN_RULES: Final[AlphabetRules] = AlphabetRules(
    alphabet=Alphabet.LATIN,
    word_length=WORD_LENGTHS[Alphabet.LATIN],
    default_max_guesses=DEFAULT_MAX_GUESSES[Alphabet.LATIN],
    valid_pattern=re.compile(r'^[a-zA-Z]+$'),
    strip_pattern=re.compile(r'[^a-z]'),
    fold_case=True,
    unit_name='letters',
)

HANGUL_RULES: Final[AlphabetRules] = AlphabetRules(
    alphabet=Alphabet.HANGUL,
    word_length=WORD_LENGTHS[Alphabet.HANGUL],
    default_max_guesses=DEFAULT_MAX_GUESSES[Alphabet.HANGUL],
    valid_pattern=re.compile('^[가-힣]+$'),
    strip_pattern=re.compile('[^가-힣]'),
    fold_case=False,
    unit_name='syllables',
)

_RULES: Dict[Alphabet, AlphabetRules] = {
    Alphabet.LATIN: LATIN_RULES,
    Alphabet.HANGUL: HANGUL_RULES,
}


def get_rules(alphabet) -> AlphabetRules:
    """Look up rules by Alphabet member or wire tag ('en' / 'ko')."""
    return _RULES[Alphabet(alphabet)]


def normalize(raw: str, alphabet) -> str:
    return get_rules(alphabet).normalize(raw or '')
