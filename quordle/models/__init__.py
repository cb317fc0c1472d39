"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    Alphabet, Board, DecomposedSyllable, Game, HangulEvaluation,
    JamoHint, LetterResult, ValidationResult,
)

__all__ = [
    'Alphabet', 'Board', 'DecomposedSyllable', 'Game', 'HangulEvaluation',
    'JamoHint', 'LetterResult', 'ValidationResult',
]
