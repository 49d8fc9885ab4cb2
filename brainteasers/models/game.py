"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class GameStatus(Enum):
    """Lifecycle phase of a mini-game round."""
    IDLE = "idle"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    TIMEUP = "timeup"
    SUCCESS = "success"
    FAILURE = "failure"


class ClueDirection(Enum):
    """Crossword clue orientation."""
    ACROSS = "across"
    DOWN = "down"

    @property
    def step(self):
        """(row, col) offset from one cell of a clue to the next."""
        return (0, 1) if self is ClueDirection.ACROSS else (1, 0)

    def toggled(self) -> 'ClueDirection':
        return ClueDirection.DOWN if self is ClueDirection.ACROSS else ClueDirection.ACROSS


@dataclass
class CardState:
    """One face of a memory pair as laid out on the table."""
    id: int
    value: str
    position: int
    image: Optional[str] = None
    flipped: bool = False
    matched: bool = False

    def to_dict(self) -> Dict:
        return {
            'id': self.id,
            'value': self.value,
            'image': self.image,
            'flipped': self.flipped,
            'matched': self.matched,
            'position': self.position
        }


@dataclass
class Cell:
    """A single crossword grid square."""
    row: int
    col: int
    letter: str = ""
    is_black: bool = True
    number: Optional[int] = None
    filled: bool = False
    is_revealed: bool = False

    def to_dict(self) -> Dict:
        return {
            'letter': self.letter,
            'isBlack': self.is_black,
            'number': self.number,
            'filled': self.filled,
            'isRevealed': self.is_revealed,
            'row': self.row,
            'col': self.col
        }


@dataclass
class Clue:
    """A crossword clue and the span of cells holding its answer."""
    number: int
    clue: str
    answer: str
    row: int
    col: int
    length: int
    solved: bool = False

    def to_dict(self) -> Dict:
        return {
            'number': self.number,
            'clue': self.clue,
            'answer': self.answer,
            'row': self.row,
            'col': self.col,
            'length': self.length,
            'solved': self.solved
        }
