"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .catalog import Category, MemoryCard, UserScore, Word
from .game import CardState, Cell, Clue, ClueDirection, GameStatus
from .schemas import (
    ScoreUpdateRequest, ScorePatchRequest, StartGameRequest, StartMemoryRequest,
    StartNumberRequest, StartCrosswordRequest, SessionActionRequest
)

__all__ = [
    'Category', 'MemoryCard', 'UserScore', 'Word',
    'CardState', 'Cell', 'Clue', 'ClueDirection', 'GameStatus',
    'ScoreUpdateRequest', 'ScorePatchRequest', 'StartGameRequest', 'StartMemoryRequest',
    'StartNumberRequest', 'StartCrosswordRequest', 'SessionActionRequest'
]
