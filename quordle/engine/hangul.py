"""
Hangul Codec

Decomposition of precomposed syllable blocks into (onset, vowel, final) and
composition back, plus the compound final and compound vowel tables used by
the jamo evaluator and by input composition.

Block layout: syllable = 0xAC00 + (onset * 21 + vowel) * 28 + final
"""

from typing import Dict, Final, List, Optional, Tuple

from ..models.game import DecomposedSyllable
from .classifier import FINALS, ONSETS, SYLLABLE_FIRST, VOWELS, is_composed_syllable
from .errors import InvalidSymbol

VOWEL_COUNT: Final[int] = len(VOWELS)   # 21
FINAL_COUNT: Final[int] = len(FINALS)   # 28, including "no final"
ONSET_BLOCK: Final[int] = VOWEL_COUNT * FINAL_COUNT

_ONSET_INDEX = {jamo: index for index, jamo in enumerate(ONSETS)}
_VOWEL_INDEX = {jamo: index for index, jamo in enumerate(VOWELS)}
_FINAL_INDEX = {jamo: index for index, jamo in enumerate(FINALS) if jamo}

# Two-consonant clusters that only exist in the final slot
COMPOUND_FINALS: Final[Dict[str, Tuple[str, str]]] = {
    'ㄳ': ('ㄱ', 'ㅅ'),
    'ㄵ': ('ㄴ', 'ㅈ'),
    'ㄶ': ('ㄴ', 'ㅎ'),
    'ㄺ': ('ㄹ', 'ㄱ'),
    'ㄻ': ('ㄹ', 'ㅁ'),
    'ㄼ': ('ㄹ', 'ㅂ'),
    'ㄽ': ('ㄹ', 'ㅅ'),
    'ㄾ': ('ㄹ', 'ㅌ'),
    'ㄿ': ('ㄹ', 'ㅍ'),
    'ㅀ': ('ㄹ', 'ㅎ'),
    'ㅄ': ('ㅂ', 'ㅅ'),
}
_FINAL_COMBINATIONS = {parts: compound for compound, parts in COMPOUND_FINALS.items()}

COMPOUND_VOWELS: Final[Dict[str, Tuple[str, str]]] = {
    'ㅘ': ('ㅗ', 'ㅏ'),
    'ㅙ': ('ㅗ', 'ㅐ'),
    'ㅚ': ('ㅗ', 'ㅣ'),
    'ㅝ': ('ㅜ', 'ㅓ'),
    'ㅞ': ('ㅜ', 'ㅔ'),
    'ㅟ': ('ㅜ', 'ㅣ'),
    'ㅢ': ('ㅡ', 'ㅣ'),
}
_VOWEL_COMBINATIONS = {parts: compound for compound, parts in COMPOUND_VOWELS.items()}


def decompose(syllable: str) -> DecomposedSyllable:
    """
    Split a composed syllable into its jamo slots.

    '한' -> DecomposedSyllable('ㅎ', 'ㅏ', 'ㄴ'), '가' -> DecomposedSyllable('ㄱ', 'ㅏ', None)

    Raises:
        InvalidSymbol: If the input is not a single composed syllable block
    """
    if not isinstance(syllable, str) or len(syllable) != 1 or not is_composed_syllable(syllable):
        raise InvalidSymbol(f"Not a Hangul syllable: {syllable!r}")

    offset = ord(syllable) - SYLLABLE_FIRST
    onset_index = offset // ONSET_BLOCK
    vowel_index = (offset % ONSET_BLOCK) // FINAL_COUNT
    final_index = offset % FINAL_COUNT

    return DecomposedSyllable(
        onset=ONSETS[onset_index],
        vowel=VOWELS[vowel_index],
        final=FINALS[final_index] if final_index else None,
    )


def compose(onset: str, vowel: str, final: Optional[str] = None) -> str:
    """
    Build a syllable block from its slots. An empty or None final means no final.

    Raises:
        InvalidSymbol: If any slot value is not in its table
    """
    if onset not in _ONSET_INDEX:
        raise InvalidSymbol(f"Invalid onset: {onset!r}")
    if vowel not in _VOWEL_INDEX:
        raise InvalidSymbol(f"Invalid vowel: {vowel!r}")
    final_index = 0
    if final:
        if final not in _FINAL_INDEX:
            raise InvalidSymbol(f"Invalid final: {final!r}")
        final_index = _FINAL_INDEX[final]

    code = SYLLABLE_FIRST + (_ONSET_INDEX[onset] * VOWEL_COUNT + _VOWEL_INDEX[vowel]) * FINAL_COUNT + final_index
    return chr(code)


def split_compound_final(final: Optional[str]) -> Optional[Tuple[str, str]]:
    """Components of a compound final in fixed order, or None for a simple final."""
    return COMPOUND_FINALS.get(final) if final else None


def combine_finals(first: str, second: str) -> Optional[str]:
    """Compound final formed by two consonants, or None if they do not combine."""
    return _FINAL_COMBINATIONS.get((first, second))


def split_compound_vowel(vowel: str) -> Optional[Tuple[str, str]]:
    return COMPOUND_VOWELS.get(vowel)


def combine_vowels(first: str, second: str) -> Optional[str]:
    return _VOWEL_COMBINATIONS.get((first, second))


def expand_final(final: Optional[str]) -> Tuple[str, ...]:
    """Consonants a final contributes: none, itself, or its two compound components."""
    if not final:
        return ()
    return split_compound_final(final) or (final,)


def extract_jamo(word: str) -> List[str]:
    """
    Flat jamo sequence of a word, onset/vowel/final per syllable.

    Characters that are not composed syllables are skipped.
    """
    jamo: List[str] = []
    for ch in word:
        if is_composed_syllable(ch):
            onset, vowel, final = decompose(ch)
            jamo.append(onset)
            jamo.append(vowel)
            if final:
                jamo.append(final)
    return jamo
