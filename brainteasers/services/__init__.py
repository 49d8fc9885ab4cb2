"""
Services Package

Contains all business logic and service classes.
"""

from .storage_service import MemoryStorage, get_storage_service, initialize_storage_service
from .game_service import GameService, GameSession, get_game_service, initialize_game_service

__all__ = [
    'MemoryStorage', 'get_storage_service', 'initialize_storage_service',
    'GameService', 'GameSession', 'get_game_service', 'initialize_game_service'
]
