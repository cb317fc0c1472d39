"""
Game Configuration Constants Module

This module defines all game configuration constants and loads the word
databases. Answer lists (daily and practice targets) and guess lists
(dictionary check for submitted guesses) are kept per alphabet in JSON
files next to this module.
"""

import json
import os
from typing import Dict, Final, FrozenSet, List

from ..models.game import Alphabet

# Core Game Configuration Constants
BOARD_COUNT: Final[int] = 4
"""Boards per game; each board gets its own target word."""

WORD_LENGTHS: Final[Dict[Alphabet, int]] = {
    Alphabet.LATIN: 5,
    Alphabet.HANGUL: 2,
}

DEFAULT_MAX_GUESSES: Final[Dict[Alphabet, int]] = {
    Alphabet.LATIN: 9,
    Alphabet.HANGUL: 7,
}

DAILY_TIMEZONE: Final[str] = "America/Chicago"
"""Reference timezone the daily date key is computed in."""

WORDS_DIR: Final[str] = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'words')


def _is_word_for(word: str, alphabet: Alphabet) -> bool:
    if len(word) != WORD_LENGTHS[alphabet]:
        return False
    if alphabet is Alphabet.HANGUL:
        return all('가' <= ch <= '힣' for ch in word)
    return word.isascii() and word.isalpha()


# Load word list from JSON file
def _load_word_list(filename: str, alphabet: Alphabet) -> List[str]:
    """
    Load a word list from the words directory.

    Returns:
        List[str]: Words in file order, Latin words lower-cased

    Raises:
        FileNotFoundError: If the JSON file is not found
        ValueError: If the JSON is malformed, the list is empty or contains invalid words
    """
    json_file_path = os.path.join(WORDS_DIR, filename)

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {filename}: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError(f"{filename} must contain an array of words")

    if not word_list:
        raise ValueError(f"Word list {filename} cannot be empty")

    words = [word.strip().lower() if alphabet is Alphabet.LATIN else word.strip() for word in word_list]

    for word in words:
        if not _is_word_for(word, alphabet):
            raise ValueError(f"Word '{word}' in {filename} is not a valid {alphabet.value} word")

    return words


# Answer lists, in file order (daily selection indexes into them)
ANSWER_WORDS: Final[Dict[Alphabet, List[str]]] = {
    Alphabet.LATIN: _load_word_list('en_answers.json', Alphabet.LATIN),
    Alphabet.HANGUL: _load_word_list('ko_answers.json', Alphabet.HANGUL),
}

# Acceptable guesses always include the answers
GUESS_WORDS: Final[Dict[Alphabet, FrozenSet[str]]] = {
    Alphabet.LATIN: frozenset(_load_word_list('en_guesses.json', Alphabet.LATIN)) | frozenset(ANSWER_WORDS[Alphabet.LATIN]),
    Alphabet.HANGUL: frozenset(_load_word_list('ko_guesses.json', Alphabet.HANGUL)) | frozenset(ANSWER_WORDS[Alphabet.HANGUL]),
}


def is_acceptable_guess(word: str, alphabet=Alphabet.LATIN) -> bool:
    """Dictionary check for a normalized guess."""
    return word in GUESS_WORDS[Alphabet(alphabet)]


def validate_word_list_integrity() -> bool:
    """
    Validates the integrity and consistency of the answer databases.

    This function performs validation to ensure:
    1. Length and character validation for every word of every alphabet
    2. Uniqueness validation: No duplicate entries
    3. Enough answers to fill every board of a game

    Returns:
        bool: True if all word lists pass the checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    for alphabet, words in ANSWER_WORDS.items():
        if len(words) < BOARD_COUNT:
            raise ValueError(f"{alphabet.value} answer list needs at least {BOARD_COUNT} words")

        for index, word in enumerate(words):
            if not _is_word_for(word, alphabet):
                raise ValueError(f"Word at index {index} '{word}' is not a valid {alphabet.value} word")

        if len(words) != len(set(words)):
            duplicates = sorted({word for word in words if words.count(word) > 1})
            raise ValueError(f"Duplicate words found in {alphabet.value} answer list: {duplicates}")

    return True


def get_word_statistics() -> dict:
    """
    Summarizes the word databases for game balancing.

    Returns:
        dict: Per alphabet tag:
            - total_answers / total_guesses: Sizes of the two lists
            - symbol_frequency: How often each letter (or syllable) appears in answers
            - most_common: The five most frequent symbols
    """
    stats = {}
    for alphabet, words in ANSWER_WORDS.items():
        frequency: Dict[str, int] = {}
        for word in words:
            for ch in word:
                frequency[ch] = frequency.get(ch, 0) + 1

        stats[alphabet.value] = {
            "total_answers": len(words),
            "total_guesses": len(GUESS_WORDS[alphabet]),
            "symbol_frequency": frequency,
            "most_common": sorted(frequency.items(), key=lambda x: x[1], reverse=True)[:5],
        }
    return stats


# Module initialization: Validate configuration when run directly
if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        for tag, summary in get_word_statistics().items():
            print(f" {tag}: {summary['total_answers']} answers, {summary['total_guesses']} guesses")

        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
