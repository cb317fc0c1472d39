import pytest

from quordle.engine.classifier import (
    FINALS, ONSETS, VOWELS, can_be_final, can_be_onset, is_atomic_phoneme,
    is_composed_syllable, is_consonant_phoneme, is_latin_letter, is_vowel_phoneme,
)


def test_slot_table_sizes():
    assert len(ONSETS) == 19
    assert len(VOWELS) == 21
    assert len(FINALS) == 28
    assert FINALS[0] == ''


@pytest.mark.parametrize('ch', ['가', '힣', '한', '닭'])
def test_composed_syllables(ch):
    assert is_composed_syllable(ch)
    assert not is_atomic_phoneme(ch)


@pytest.mark.parametrize('ch', ['ㄱ', 'ㅎ', 'ㄳ', 'ㅄ'])
def test_consonant_jamo(ch):
    assert is_atomic_phoneme(ch)
    assert is_consonant_phoneme(ch)
    assert not is_vowel_phoneme(ch)
    assert not is_composed_syllable(ch)


@pytest.mark.parametrize('ch', ['ㅏ', 'ㅣ', 'ㅘ', 'ㅢ'])
def test_vowel_jamo(ch):
    assert is_atomic_phoneme(ch)
    assert is_vowel_phoneme(ch)
    assert not is_consonant_phoneme(ch)


@pytest.mark.parametrize('value', ['', None, 5, 'a', '1', ' ', '㄰', 'ㅤ', '꯿', '힤'])
def test_predicates_are_total(value):
    assert not is_composed_syllable(value)
    assert not is_atomic_phoneme(value)
    assert not is_consonant_phoneme(value)
    assert not is_vowel_phoneme(value)


def test_latin_letters():
    assert is_latin_letter('a')
    assert is_latin_letter('Z')
    assert not is_latin_letter('1')
    assert not is_latin_letter('가')
    assert not is_latin_letter('')


def test_slot_eligibility():
    assert can_be_onset('ㄲ')
    assert not can_be_onset('ㄳ')
    assert can_be_final('ㄳ')
    assert not can_be_final('ㄸ')
    assert not can_be_final('')
    assert not can_be_onset(None)
