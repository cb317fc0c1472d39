import pytest

from quordle.engine import (
    compute_keyboard_map, create_game, normalize, remaining_guesses,
    set_current_input, solved_count, submit_guess, validate,
)
from quordle.models import Alphabet, Game, LetterResult

TARGETS = ['plate', 'crane', 'sloth', 'bring']


@pytest.fixture
def game():
    return create_game(TARGETS)


def test_new_game_defaults(game):
    assert len(game.boards) == 4
    assert game.max_guesses == 9
    assert game.guess_number == 0
    assert game.current_input == ''
    assert not game.game_over and not game.won
    assert all(not board.solved and board.guesses == () for board in game.boards)
    assert all(board.jamo_results is None for board in game.boards)


def test_hangul_defaults():
    game = create_game(['바다', '하늘', '나무', '사과'], alphabet='ko')
    assert game.alphabet is Alphabet.HANGUL
    assert game.max_guesses == 7
    assert all(board.jamo_results == () for board in game.boards)


def test_create_game_rejects_bad_input():
    with pytest.raises(ValueError):
        create_game([])
    with pytest.raises(ValueError):
        create_game(['toolong'])
    with pytest.raises(ValueError):
        create_game(TARGETS, max_guesses=0)
    with pytest.raises(ValueError):
        create_game(['바다'], alphabet='xx')


def test_submit_returns_new_value(game):
    updated = submit_guess(game, 'crumb')
    assert updated is not game
    assert game.guess_number == 0
    assert game.boards[0].guesses == ()
    assert updated.guess_number == 1
    assert all(board.guesses == ('crumb',) for board in updated.boards)


def test_guess_is_case_folded(game):
    updated = submit_guess(game, 'PLATE')
    assert updated.boards[0].guesses == ('plate',)
    assert updated.boards[0].solved


def test_invalid_guess_is_a_no_op(game):
    assert submit_guess(game, 'abc') is game
    assert submit_guess(game, 'abcd1') is game


def test_solved_board_keeps_its_guess_number(game):
    state = game
    for guess in ('crumb', 'plate', 'fuzzy', 'jumps'):
        state = submit_guess(state, guess)

    board = state.boards[0]
    assert board.solved
    assert board.solved_on_guess_number == 2
    assert len(board.guesses) == 4
    assert board.results[2] == board.results[1]
    assert board.results[3] == board.results[1]
    assert board.scored_rows == 2

    keyboard = compute_keyboard_map(state)
    assert keyboard['f'] is LetterResult.ABSENT
    assert keyboard['j'] is LetterResult.ABSENT
    assert keyboard['p'] is LetterResult.CORRECT


def test_loss_after_guess_budget():
    game = create_game(TARGETS, max_guesses=2)
    game = submit_guess(game, 'fuzzy')
    assert not game.game_over
    game = submit_guess(game, 'jumps')
    assert game.game_over
    assert not game.won
    assert remaining_guesses(game) == 0
    assert submit_guess(game, 'plate') is game
    assert set_current_input(game, 'abc') is game


def test_win_when_every_board_solved(game):
    state = game
    for guess in TARGETS:
        state = submit_guess(state, guess)
    assert state.won and state.game_over
    assert solved_count(state) == 4
    assert [board.solved_on_guess_number for board in state.boards] == [1, 2, 3, 4]


def test_current_input_is_normalized(game):
    updated = set_current_input(game, 'Ab1cDefG')
    assert updated.current_input == 'abcde'
    assert game.current_input == ''
    assert submit_guess(set_current_input(game, 'cr'), 'crumb').current_input == ''


def test_non_string_input_clears_instead_of_raising(game):
    typed = set_current_input(game, 'cra')
    assert set_current_input(typed, 123).current_input == ''
    assert set_current_input(typed, None).current_input == ''
    assert normalize(['c', 'r'], 'en') == ''


def test_hangul_input_drops_loose_jamo_and_latin():
    game = create_game(['바다'], alphabet=Alphabet.HANGUL)
    assert set_current_input(game, '바aㅏ나').current_input == '바나'
    assert normalize('바나나', 'ko') == '바나'


@pytest.mark.parametrize('guess,alphabet,error', [
    ('abc', 'en', 'Guess must be 5 letters'),
    ('abcd1', 'en', 'Guess must contain only letters'),
    ('바', 'ko', 'Guess must be 2 syllables'),
    ('바a', 'ko', 'Guess must contain only Hangul syllables'),
    ('ㅂㅏ', 'ko', 'Guess must contain only Hangul syllables'),
])
def test_validate_errors(guess, alphabet, error):
    result = validate(guess, alphabet)
    assert not result.valid
    assert result.error == error


def test_validate_accepts_well_formed_input():
    assert validate('CRANE', 'en').valid
    assert validate('바다', 'ko').valid
    assert not validate('crane\n', 'en').valid


def test_hangul_game_records_jamo_rows():
    game = create_game(['삶다'], alphabet='ko')
    game = submit_guess(game, '기감')
    board = game.boards[0]
    assert len(board.jamo_results) == 1
    assert board.jamo_results[0][1].final is LetterResult.PRESENT
    game = submit_guess(game, '삶다')
    assert game.won
    assert game.boards[0].jamo_results[1] == (None, None)


def test_serialization_round_trip():
    game = create_game(['삶다', '바다'], alphabet='ko')
    game = submit_guess(game, '바다')
    game = submit_guess(game, '기감')
    data = game.to_dict()
    assert data['alphabet'] == 'ko'
    assert data['boards'][1]['solvedOnGuessNumber'] == 1
    assert data['boards'][0]['jamoResults'][0][0] == {'onset': 'absent', 'vowel': 'correct', 'final': 'absent'}
    assert data['boards'][0]['jamoResults'][0][1] is None
    assert Game.from_dict(data) == game


def test_running_game_hides_unsolved_targets(game):
    game = submit_guess(game, 'plate')
    data = game.without_answers()
    assert data['boards'][0]['targetWord'] == 'plate'
    assert data['boards'][1]['targetWord'] is None
