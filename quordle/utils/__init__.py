"""
Utilities Package

Contains utility functions and helper modules.
"""

from .helpers import get_user_identity, parse_alphabet
from .game_logger import game_logger

__all__ = ['get_user_identity', 'parse_alphabet', 'game_logger']
