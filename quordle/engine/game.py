"""
Game State Machine

Pure transitions over the multi-board Game value. Every function returns a
new Game and leaves its argument untouched; once a game is over every
transition returns the game unchanged.
"""

from dataclasses import replace
from typing import Iterable, Optional

from ..models.game import Alphabet, Board, Game, ValidationResult
from .alphabets import get_rules
from .evaluator import evaluate, is_solved
from .evaluator_ko import evaluate_hangul


def _create_board(target_word: str, alphabet: Alphabet) -> Board:
    rules = get_rules(alphabet)
    target = target_word.lower() if rules.fold_case else target_word
    if len(target) != rules.word_length or not rules.valid_pattern.fullmatch(target):
        raise ValueError(
            f"Target '{target_word}' is not a {rules.word_length}-{rules.unit_name[:-1]} word"
        )
    return Board(
        target_word=target,
        jamo_results=() if alphabet is Alphabet.HANGUL else None,
    )


def create_game(target_words: Iterable[str], max_guesses: Optional[int] = None,
                alphabet=Alphabet.LATIN) -> Game:
    """
    Creates a new game with one board per target word.

    Args:
        target_words: Target words, one per board (four in a regular game)
        max_guesses: Guess budget, the alphabet default when omitted
        alphabet: Alphabet member or tag ('en' / 'ko')

    Raises:
        ValueError: If there are no targets or a target does not fit the alphabet
    """
    alphabet = Alphabet(alphabet)
    rules = get_rules(alphabet)
    boards = tuple(_create_board(word, alphabet) for word in target_words)
    if not boards:
        raise ValueError("A game needs at least one target word")
    if max_guesses is None:
        max_guesses = rules.default_max_guesses
    if max_guesses < 1:
        raise ValueError("max_guesses must be at least 1")

    return Game(boards=boards, max_guesses=max_guesses, alphabet=alphabet)


def validate(guess: str, alphabet=Alphabet.LATIN) -> ValidationResult:
    """
    Checks length and character class of raw input. Dictionary membership is
    the caller's concern.
    """
    rules = get_rules(alphabet)
    if not isinstance(guess, str) or len(guess) != rules.word_length:
        return ValidationResult(False, f"Guess must be {rules.word_length} {rules.unit_name}")
    if not rules.valid_pattern.fullmatch(guess):
        if rules.alphabet is Alphabet.HANGUL:
            return ValidationResult(False, "Guess must contain only Hangul syllables")
        return ValidationResult(False, "Guess must contain only letters")
    return ValidationResult(True)


def set_current_input(game: Game, raw: str) -> Game:
    """
    Updates the in-progress input, normalized and truncated for the game's alphabet.

    Never raises: anything that is not a string clears the input.
    """
    if game.game_over:
        return game
    return replace(game, current_input=get_rules(game.alphabet).normalize(raw or ''))


def _advance_board(board: Board, guess: str, guess_number: int, alphabet: Alphabet) -> Board:
    if board.solved:
        # Cosmetic row: repeat the last outcome so the board history stays complete
        jamo_results = board.jamo_results
        if jamo_results:
            jamo_results = jamo_results + (jamo_results[-1],)
        return replace(
            board,
            guesses=board.guesses + (guess,),
            results=board.results + (board.results[-1],),
            jamo_results=jamo_results,
        )

    if alphabet is Alphabet.HANGUL:
        evaluation = evaluate_hangul(guess, board.target_word)
        result = tuple(evaluation.syllables)
        jamo_results = (board.jamo_results or ()) + (tuple(evaluation.jamo),)
    else:
        result = tuple(evaluate(guess, board.target_word))
        jamo_results = board.jamo_results

    solved = is_solved(result)
    return replace(
        board,
        guesses=board.guesses + (guess,),
        results=board.results + (result,),
        jamo_results=jamo_results,
        solved=solved,
        solved_on_guess_number=guess_number if solved else None,
    )


def submit_guess(game: Game, guess: str) -> Game:
    """
    Applies a guess to every board and returns the updated game.

    Invalid input and finished games leave the game unchanged.
    """
    if game.game_over:
        return game
    if not validate(guess, game.alphabet).valid:
        return game

    rules = get_rules(game.alphabet)
    normalized = guess.lower() if rules.fold_case else guess
    guess_number = game.guess_number + 1

    boards = tuple(
        _advance_board(board, normalized, guess_number, game.alphabet)
        for board in game.boards
    )
    won = all(board.solved for board in boards)

    return replace(
        game,
        boards=boards,
        current_input='',
        guess_number=guess_number,
        won=won,
        game_over=won or guess_number >= game.max_guesses,
    )


def remaining_guesses(game: Game) -> int:
    return game.max_guesses - game.guess_number


def solved_count(game: Game) -> int:
    return sum(1 for board in game.boards if board.solved)
