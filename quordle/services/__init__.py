"""
Services Package

Contains all business logic and service classes.
"""

from .game_service import GameService, get_game_service, initialize_game_service
from .room_service import RoomService, get_room_service, initialize_room_service

__all__ = [
    'GameService', 'get_game_service', 'initialize_game_service',
    'RoomService', 'get_room_service', 'initialize_room_service',
]
