"""
Engine Errors

Hard invariant violations raised by the engine. Ordinary bad user input is
never raised; it comes back from validate() as a ValidationResult.
"""


class QuordleError(ValueError):
    """Base class for engine failures."""


class InvalidSymbol(QuordleError):
    """A value is outside the syllable range or the jamo slot tables."""


class LengthMismatch(QuordleError):
    """Guess and target have different lengths."""

    def __init__(self, guess_length: int, target_length: int):
        super().__init__(
            f"Guess length ({guess_length}) must match target length ({target_length})"
        )
        self.guess_length = guess_length
        self.target_length = target_length


class NotEnoughAnswers(QuordleError):
    """The answer list cannot supply the requested number of distinct targets."""

    def __init__(self, available: int, requested: int):
        super().__init__(
            f"Answer list has {available} words, {requested} distinct targets requested"
        )
        self.available = available
        self.requested = requested
