import random
import re

import pytest

from quordle.config.game_settings import ANSWER_WORDS
from quordle.engine import NotEnoughAnswers, current_date_key, daily_targets, random_targets
from quordle.engine.daily import SEED_SALTS, date_key_to_seed, mulberry32, select_distinct_indices
from quordle.models import Alphabet


def test_seed_hash_values():
    assert date_key_to_seed('') == 5381
    assert date_key_to_seed('a') == 177604
    assert date_key_to_seed('2026-02-07') != date_key_to_seed('2026-02-08')


def test_seed_is_unsigned_32_bit():
    seed = date_key_to_seed('2026-02-07' * 20)
    assert 0 <= seed <= 0xFFFFFFFF


def test_mulberry32_is_deterministic():
    first, second = mulberry32(42), mulberry32(42)
    values = [first() for _ in range(100)]
    assert values == [second() for _ in range(100)]
    assert all(0 <= value < 1 for value in values)
    assert mulberry32(43)() != values[0]


def test_rejection_sampling_redraws_collisions():
    draws = iter([0.0, 0.0, 0.5, 0.9])
    assert select_distinct_indices(4, 3, lambda: next(draws)) == [0, 2, 3]


def test_daily_targets_are_deterministic():
    assert daily_targets('2026-02-07') == daily_targets('2026-02-07')
    assert daily_targets('2026-02-07', 'ko') == daily_targets('2026-02-07', Alphabet.HANGUL)


@pytest.mark.parametrize('alphabet', list(Alphabet))
def test_daily_targets_are_distinct_answers(alphabet):
    for day in range(1, 29):
        targets = daily_targets(f'2026-02-{day:02d}', alphabet)
        assert len(targets) == 4
        assert len(set(targets)) == 4
        assert all(word in ANSWER_WORDS[alphabet] for word in targets)


def test_alphabets_use_distinct_seeds():
    assert SEED_SALTS[Alphabet.LATIN] != SEED_SALTS[Alphabet.HANGUL]
    assert date_key_to_seed(SEED_SALTS[Alphabet.LATIN] + '2026-02-07') != \
        date_key_to_seed(SEED_SALTS[Alphabet.HANGUL] + '2026-02-07')


def test_days_differ():
    days = {tuple(daily_targets(f'2026-03-{day:02d}')) for day in range(1, 11)}
    assert len(days) > 1


def test_answer_override():
    answers = ['aaaaa', 'bbbbb', 'ccccc', 'ddddd']
    assert sorted(daily_targets('2026-02-07', answers=answers)) == answers


def test_not_enough_answers():
    with pytest.raises(NotEnoughAnswers):
        daily_targets('2026-02-07', answers=['aaaaa'], count=4)
    with pytest.raises(NotEnoughAnswers):
        select_distinct_indices(2, 3, random.random)


def test_random_targets():
    targets = random_targets('en', 4, random.Random(7))
    assert len(set(targets)) == 4
    assert all(word in ANSWER_WORDS[Alphabet.LATIN] for word in targets)


def test_current_date_key_format():
    assert re.fullmatch(r'\d{4}-\d{2}-\d{2}', current_date_key())
    assert re.fullmatch(r'\d{4}-\d{2}-\d{2}', current_date_key('Asia/Seoul'))
