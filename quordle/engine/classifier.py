"""
Symbol Classifier

Code point range predicates for Hangul syllables and compatibility jamo, and
the ordered slot tables the codec indexes into.

Every predicate is total: anything that is not a non-empty string answers
False, and only the first character of longer strings is inspected.
"""

from typing import Final, Tuple

SYLLABLE_FIRST: Final[int] = 0xAC00  # 가
SYLLABLE_LAST: Final[int] = 0xD7A3   # 힣
JAMO_FIRST: Final[int] = 0x3131      # ㄱ
CONSONANT_LAST: Final[int] = 0x314E  # ㅎ
VOWEL_FIRST: Final[int] = 0x314F     # ㅏ
JAMO_LAST: Final[int] = 0x3163       # ㅣ

ONSETS: Final[Tuple[str, ...]] = (
    'ㄱ', 'ㄲ', 'ㄴ', 'ㄷ', 'ㄸ', 'ㄹ', 'ㅁ', 'ㅂ', 'ㅃ', 'ㅅ',
    'ㅆ', 'ㅇ', 'ㅈ', 'ㅉ', 'ㅊ', 'ㅋ', 'ㅌ', 'ㅍ', 'ㅎ',
)

VOWELS: Final[Tuple[str, ...]] = (
    'ㅏ', 'ㅐ', 'ㅑ', 'ㅒ', 'ㅓ', 'ㅔ', 'ㅕ', 'ㅖ', 'ㅗ', 'ㅘ',
    'ㅙ', 'ㅚ', 'ㅛ', 'ㅜ', 'ㅝ', 'ㅞ', 'ㅟ', 'ㅠ', 'ㅡ', 'ㅢ',
    'ㅣ',
)

# Index 0 is "no final"
FINALS: Final[Tuple[str, ...]] = (
    '', 'ㄱ', 'ㄲ', 'ㄳ', 'ㄴ', 'ㄵ', 'ㄶ', 'ㄷ', 'ㄹ', 'ㄺ',
    'ㄻ', 'ㄼ', 'ㄽ', 'ㄾ', 'ㄿ', 'ㅀ', 'ㅁ', 'ㅂ', 'ㅄ', 'ㅅ',
    'ㅆ', 'ㅇ', 'ㅈ', 'ㅊ', 'ㅋ', 'ㅌ', 'ㅍ', 'ㅎ',
)

_ONSET_SET = frozenset(ONSETS)
_FINAL_SET = frozenset(FINALS[1:])


def _code_point(ch) -> int:
    if not isinstance(ch, str) or not ch:
        return -1
    return ord(ch[0])


def is_composed_syllable(ch) -> bool:
    """True for a precomposed Hangul syllable block (가-힣)."""
    return SYLLABLE_FIRST <= _code_point(ch) <= SYLLABLE_LAST


def is_atomic_phoneme(ch) -> bool:
    """True for a compatibility jamo, consonant or vowel (ㄱ-ㅣ)."""
    return JAMO_FIRST <= _code_point(ch) <= JAMO_LAST


def is_consonant_phoneme(ch) -> bool:
    return JAMO_FIRST <= _code_point(ch) <= CONSONANT_LAST


def is_vowel_phoneme(ch) -> bool:
    return VOWEL_FIRST <= _code_point(ch) <= JAMO_LAST


def is_latin_letter(ch) -> bool:
    code = _code_point(ch)
    return ord('a') <= code <= ord('z') or ord('A') <= code <= ord('Z')


def can_be_onset(ch) -> bool:
    """Whether a consonant jamo may open a syllable (ㄳ, ㄺ and friends may not)."""
    return isinstance(ch, str) and ch in _ONSET_SET


def can_be_final(ch) -> bool:
    """Whether a consonant jamo may close a syllable (ㄸ, ㅃ, ㅉ may not)."""
    return isinstance(ch, str) and ch in _FINAL_SET
