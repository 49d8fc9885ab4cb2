"""
Utilities Package

Contains the error taxonomy, decorators, logging and helper functions.
"""

from .errors import GameError, ValidationError, NotFoundError, UnexpectedError, InvalidTransitionError
from .decorators import api_endpoint, socket_event
from .helpers import get_user_identity, parse_body, parse_category_id, parse_count
from .game_logger import game_logger

__all__ = [
    'GameError', 'ValidationError', 'NotFoundError', 'UnexpectedError', 'InvalidTransitionError',
    'api_endpoint', 'socket_event',
    'get_user_identity', 'parse_body', 'parse_category_id', 'parse_count', 'game_logger'
]
