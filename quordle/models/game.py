"""
Game Data Models

Contains all game-related data structures and enums. Board and game values
are frozen: engine transitions build new values with dataclasses.replace
instead of mutating the existing ones.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class LetterResult(str, Enum):
    """Per-position evaluation outcome."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    @property
    def rank(self) -> int:
        """Merge precedence: correct > present > absent."""
        return _RANKS[self]


_RANKS = {
    LetterResult.ABSENT: 0,
    LetterResult.PRESENT: 1,
    LetterResult.CORRECT: 2,
}


class Alphabet(str, Enum):
    """Alphabet a game is played in. Values double as wire tags."""
    LATIN = "en"
    HANGUL = "ko"


@dataclass(frozen=True)
class DecomposedSyllable:
    """A composed Hangul syllable split into its three slots."""
    onset: str
    vowel: str
    final: Optional[str] = None

    def __iter__(self):
        return iter((self.onset, self.vowel, self.final))


@dataclass(frozen=True)
class JamoHint:
    """Jamo-level feedback for a Hangul syllable that was not a whole-syllable hit."""
    onset: LetterResult = LetterResult.ABSENT
    vowel: LetterResult = LetterResult.ABSENT
    final: Optional[LetterResult] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "onset": self.onset.value,
            "vowel": self.vowel.value,
            "final": self.final.value if self.final is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Optional[str]]) -> "JamoHint":
        final = data.get("final")
        return cls(
            onset=LetterResult(data["onset"]),
            vowel=LetterResult(data["vowel"]),
            final=LetterResult(final) if final is not None else None,
        )


ResultRow = Tuple[LetterResult, ...]
JamoRow = Tuple[Optional[JamoHint], ...]


@dataclass(frozen=True)
class Board:
    """One target word and the guess history recorded against it."""
    target_word: str
    guesses: Tuple[str, ...] = ()
    results: Tuple[ResultRow, ...] = ()
    jamo_results: Optional[Tuple[JamoRow, ...]] = None
    solved: bool = False
    solved_on_guess_number: Optional[int] = None

    @property
    def scored_rows(self) -> int:
        """Number of rows that came from a real evaluation (cosmetic repeats excluded)."""
        if self.solved_on_guess_number is not None:
            return self.solved_on_guess_number
        return len(self.results)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "targetWord": self.target_word,
            "guesses": list(self.guesses),
            "results": [[r.value for r in row] for row in self.results],
            "solved": self.solved,
            "solvedOnGuessNumber": self.solved_on_guess_number,
        }
        if self.jamo_results is not None:
            data["jamoResults"] = [
                [hint.to_dict() if hint is not None else None for hint in row]
                for row in self.jamo_results
            ]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Board":
        jamo_results = None
        if data.get("jamoResults") is not None:
            jamo_results = tuple(
                tuple(JamoHint.from_dict(h) if h is not None else None for h in row)
                for row in data["jamoResults"]
            )
        return cls(
            target_word=data["targetWord"],
            guesses=tuple(data.get("guesses", [])),
            results=tuple(tuple(LetterResult(r) for r in row) for row in data.get("results", [])),
            jamo_results=jamo_results,
            solved=bool(data.get("solved", False)),
            solved_on_guess_number=data.get("solvedOnGuessNumber"),
        )


@dataclass(frozen=True)
class Game:
    """Full multi-board game state."""
    boards: Tuple[Board, ...]
    max_guesses: int
    alphabet: Alphabet = Alphabet.LATIN
    current_input: str = ""
    guess_number: int = 0
    game_over: bool = False
    won: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Plain nested record shape used by the HTTP and socket layers."""
        return {
            "boards": [board.to_dict() for board in self.boards],
            "currentInput": self.current_input,
            "guessNumber": self.guess_number,
            "maxGuesses": self.max_guesses,
            "gameOver": self.game_over,
            "won": self.won,
            "alphabet": self.alphabet.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Game":
        return cls(
            boards=tuple(Board.from_dict(b) for b in data["boards"]),
            max_guesses=int(data["maxGuesses"]),
            alphabet=Alphabet(data.get("alphabet", Alphabet.LATIN.value)),
            current_input=data.get("currentInput", ""),
            guess_number=int(data.get("guessNumber", 0)),
            game_over=bool(data.get("gameOver", False)),
            won=bool(data.get("won", False)),
        )

    def without_answers(self) -> Dict[str, Any]:
        """Serialized state with unsolved target words hidden while the game is running."""
        data = self.to_dict()
        if not self.game_over:
            for board, board_data in zip(self.boards, data["boards"]):
                if not board.solved:
                    board_data["targetWord"] = None
        return data


@dataclass
class ValidationResult:
    """Outcome of checking raw input before it is submitted."""
    valid: bool
    error: Optional[str] = None


@dataclass
class HangulEvaluation:
    """Both evaluation layers for a Hangul guess."""
    syllables: List[LetterResult] = field(default_factory=list)
    jamo: List[Optional[JamoHint]] = field(default_factory=list)
