"""
Catalog Data Models

Contains the seed catalog records and the persisted user score record.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class Category:
    """A puzzle theme; its game type selects the engine a session routes to."""
    id: int
    name: str
    icon: str
    color: str
    word_count: int
    game_type: str = "word"

    def to_dict(self) -> Dict:
        return {
            'id': self.id,
            'name': self.name,
            'icon': self.icon,
            'color': self.color,
            'wordCount': self.word_count,
            'gameType': self.game_type
        }


@dataclass
class Word:
    """A word to guess together with its ordered clues."""
    id: int
    word: str
    category_id: int
    hints: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            'id': self.id,
            'word': self.word,
            'categoryId': self.category_id,
            'hints': list(self.hints)
        }


@dataclass
class MemoryCard:
    """A single card glyph; sessions duplicate it into a pair."""
    id: int
    value: str
    category_id: int
    difficulty: int = 1
    image: Optional[str] = None

    def to_dict(self) -> Dict:
        return {
            'id': self.id,
            'value': self.value,
            'image': self.image,
            'categoryId': self.category_id,
            'difficulty': self.difficulty
        }


@dataclass
class UserScore:
    """The single mutable score record shared by every game."""
    id: int = 1
    best_score: int = 0
    words_solved: int = 0
    memory_sets_completed: int = 0
    number_sequences_solved: int = 0
    crosswords_completed: int = 0
    category_progress: Dict[str, int] = field(default_factory=dict)

    # camelCase API field -> dataclass attribute
    FIELD_NAMES = {
        'bestScore': 'best_score',
        'wordsSolved': 'words_solved',
        'memorySetsCompleted': 'memory_sets_completed',
        'numberSequencesSolved': 'number_sequences_solved',
        'crosswordsCompleted': 'crosswords_completed',
        'categoryProgress': 'category_progress'
    }

    def to_dict(self) -> Dict:
        data = {'id': self.id}
        for api_name, attribute in self.FIELD_NAMES.items():
            data[api_name] = getattr(self, attribute)
        data['categoryProgress'] = dict(self.category_progress)
        return data
