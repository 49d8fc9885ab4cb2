"""Mini-game engines - one instance per play session."""

from .base_game import BaseGame, TERMINAL_STATUSES
from .game_registry import GameRegistry
from .word_guess import WordGuessEngine
from .memory_match import MemoryMatchEngine
from .number_sequence import NumberSequenceEngine
from .crossword import CrosswordEngine

# All available engines in registration order
ALL_GAMES = [
    WordGuessEngine,
    MemoryMatchEngine,
    NumberSequenceEngine,
    CrosswordEngine,
]

__all__ = [
    'BaseGame', 'TERMINAL_STATUSES', 'GameRegistry', 'ALL_GAMES',
    'WordGuessEngine', 'MemoryMatchEngine', 'NumberSequenceEngine', 'CrosswordEngine',
]
