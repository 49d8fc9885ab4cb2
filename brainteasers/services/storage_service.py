"""
Storage Service

In-memory repository for the seed catalog (categories, words, memory cards)
and the single user score record. Nothing survives a restart.
"""

import itertools
import random
import threading
from dataclasses import replace
from typing import Dict, List, Optional

from ..config.game_settings import SEED_DATA
from ..models.catalog import Category, MemoryCard, UserScore, Word
from ..utils.errors import ValidationError


class MemoryStorage:
    """
    Map-backed store keyed by integer id.

    Capabilities:
    - list / get categories
    - random word and memory card selection per category
    - read and merge-update the user score record
    """

    def __init__(self, seed: bool = True):
        self.categories: Dict[int, Category] = {}
        self.words: Dict[int, Word] = {}
        self.memory_cards: Dict[int, MemoryCard] = {}
        self.user_score = UserScore()

        self._category_ids = itertools.count(1)
        self._word_ids = itertools.count(1)
        self._memory_card_ids = itertools.count(1)
        self._score_lock = threading.Lock()

        if seed:
            self.seed_data(SEED_DATA)

    # Category methods
    def get_all_categories(self) -> List[Category]:
        return list(self.categories.values())

    def get_category_by_id(self, category_id: int) -> Optional[Category]:
        return self.categories.get(category_id)

    # Word methods
    def get_words_by_category_id(self, category_id: int) -> List[Word]:
        return [word for word in self.words.values() if word.category_id == category_id]

    def get_random_words_by_category_id(self, category_id: int, count: int,
                                        rng: Optional[random.Random] = None) -> List[Word]:
        """Random subset of the category's words, without replacement."""
        category_words = self.get_words_by_category_id(category_id)
        rng = rng or random
        return rng.sample(category_words, min(count, len(category_words)))

    # Memory card methods
    def get_memory_cards_by_category_id(self, category_id: int) -> List[MemoryCard]:
        return [card for card in self.memory_cards.values() if card.category_id == category_id]

    def get_random_memory_cards_by_category_id(self, category_id: int, count: int, difficulty: int = 1,
                                               rng: Optional[random.Random] = None) -> List[MemoryCard]:
        """
        Picks up to `count` cards with distinct values.

        Cards of the requested difficulty are drawn first; the rest of the
        category tops up the selection when there are not enough of them.
        """
        rng = rng or random
        preferred = [card for card in self.get_memory_cards_by_category_id(category_id)
                     if card.difficulty == difficulty]
        others = [card for card in self.get_memory_cards_by_category_id(category_id)
                  if card.difficulty != difficulty]
        rng.shuffle(preferred)
        rng.shuffle(others)

        selected: List[MemoryCard] = []
        seen_values = set()
        for card in preferred + others:
            if len(selected) >= count:
                break
            if card.value in seen_values:
                continue
            seen_values.add(card.value)
            selected.append(card)
        return selected

    # Score methods
    def get_user_score(self) -> UserScore:
        return replace(self.user_score, category_progress=dict(self.user_score.category_progress))

    def update_user_score(self, changes: Dict) -> UserScore:
        """
        Merge a partial update keyed by API field names.

        Supplied fields overwrite, all others keep their value.
        """
        unknown = [name for name in changes if name not in UserScore.FIELD_NAMES]
        if unknown:
            raise ValidationError(f"Unknown score fields: {', '.join(unknown)}")

        with self._score_lock:
            updates = {UserScore.FIELD_NAMES[name]: value for name, value in changes.items()}
            if 'category_progress' in updates:
                updates['category_progress'] = dict(updates['category_progress'])
            self.user_score = replace(self.user_score, **updates)
            return self.get_user_score()

    def record_category_progress(self, category_id: int, amount: int = 1) -> UserScore:
        """Bump the completed-round counter kept for one category."""
        with self._score_lock:
            progress = dict(self.user_score.category_progress)
            key = str(category_id)
            progress[key] = progress.get(key, 0) + amount
            self.user_score = replace(self.user_score, category_progress=progress)
            return self.get_user_score()

    # Seeding helpers
    def add_category(self, name: str, icon: str, color: str, word_count: int, game_type: str = 'word') -> Category:
        category = Category(id=next(self._category_ids), name=name, icon=icon, color=color,
                            word_count=word_count, game_type=game_type or 'word')
        self.categories[category.id] = category
        return category

    def add_word(self, word: str, category_id: int, hints: Optional[List[str]] = None) -> Word:
        new_word = Word(id=next(self._word_ids), word=word.upper(), category_id=category_id,
                        hints=list(hints) if isinstance(hints, list) else [])
        self.words[new_word.id] = new_word
        return new_word

    def add_memory_card(self, value: str, category_id: int, difficulty: int = 1,
                        image: Optional[str] = None) -> MemoryCard:
        card = MemoryCard(id=next(self._memory_card_ids), value=value, category_id=category_id,
                          difficulty=difficulty or 1, image=image)
        self.memory_cards[card.id] = card
        return card

    def seed_data(self, data: Dict) -> None:
        """Load categories, words and memory cards from the seed catalog."""
        category_ids = {}
        for entry in data.get('categories', []):
            category = self.add_category(entry['name'], entry['icon'], entry['color'],
                                         entry['wordCount'], entry.get('gameType', 'word'))
            category_ids[entry['key']] = category.id

        for entry in data.get('words', []):
            self.add_word(entry['word'], category_ids[entry['category']], entry.get('hints'))

        for entry in data.get('memory_cards', []):
            self.add_memory_card(entry['value'], category_ids[entry['category']],
                                 entry.get('difficulty', 1), entry.get('image'))


# Global service instance
_storage_service = None


def get_storage_service() -> Optional[MemoryStorage]:
    """Get the global storage service instance."""
    return _storage_service


def initialize_storage_service(seed: bool = True) -> MemoryStorage:
    """Initialize the global storage service instance."""
    global _storage_service
    _storage_service = MemoryStorage(seed=seed)
    return _storage_service
