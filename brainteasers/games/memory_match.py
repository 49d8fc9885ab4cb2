"""
Memory-Match Engine

Pairs of face-down cards are flipped two at a time. A match scores points
scaled by difficulty plus a bonus for the time still on the clock; a
mismatch stays face up until a short settle delay has passed.
"""

import time
from typing import Any, Callable, Dict, List, Optional

from ..config.game_settings import MATCH_POINTS, MEMORY_TIME_LIMITS, TIME_BONUS_DIVISOR
from ..models.game import CardState, GameStatus
from ..utils.errors import NotFoundError, ValidationError
from .base_game import BaseGame

DEFAULT_SETTLE_DELAY = 0.8


class MemoryMatchEngine(BaseGame):
    """Pairwise card-flip matching with move counting and time-decay scoring."""

    GAME_TYPE = "memory"
    TRANSITIONS = {
        GameStatus.IDLE: frozenset({GameStatus.PLAYING}),
        GameStatus.PLAYING: frozenset({GameStatus.WON, GameStatus.TIMEUP}),
    }
    ACTIONS = {
        'flip': ('flip', ('cardId',)),
        'settle': ('settle', ()),
        'restart': ('restart', ()),
    }

    def __init__(self, storage, rng=None, clock: Callable[[], float] = time.monotonic,
                 settle_delay: float = DEFAULT_SETTLE_DELAY):
        super().__init__(storage, rng)
        self.clock = clock
        self.settle_delay = settle_delay
        self.difficulty = 1
        self.card_count = 12
        self.cards: List[CardState] = []
        self.pairs = 0
        self._reset_round()

    def _reset_round(self) -> None:
        self.moves = 0
        self.remaining_pairs = self.pairs
        self.time_elapsed = 0
        self.time_limit = MEMORY_TIME_LIMITS.get(self.difficulty, MEMORY_TIME_LIMITS[1])
        self.score = 0
        self.flipped_cards: List[int] = []
        self.checking = False
        self.settle_deadline: Optional[float] = None

    @property
    def time_left(self) -> int:
        return max(0, self.time_limit - self.time_elapsed)

    @property
    def matched_cards(self) -> List[int]:
        return [card.id for card in self.cards if card.matched]

    def start(self, category_id: int, difficulty: int = 1, card_count: int = 12) -> None:
        if difficulty not in MEMORY_TIME_LIMITS:
            raise ValidationError("Difficulty must be 1, 2 or 3")

        self._reset_status()
        self._load_category(category_id)
        seed_cards = self.storage.get_random_memory_cards_by_category_id(
            category_id, card_count // 2, difficulty=difficulty, rng=self.rng
        )
        if not seed_cards:
            raise NotFoundError("No memory cards found for this category")

        # Each glyph is laid out twice; every copy gets its own id
        deck = []
        for seed_card in seed_cards:
            for _ in range(2):
                deck.append((seed_card.value, seed_card.image))
        self.rng.shuffle(deck)
        self.cards = [
            CardState(id=index + 1, value=value, image=image, position=index)
            for index, (value, image) in enumerate(deck)
        ]

        self.difficulty = difficulty
        self.card_count = card_count
        self.pairs = len(seed_cards)
        self._reset_round()
        self._transition(GameStatus.PLAYING)

    def restart(self) -> bool:
        self.start(self.category_id, self.difficulty, self.card_count)
        return True

    def _find_card(self, card_id) -> CardState:
        try:
            card_id = int(card_id)
        except (TypeError, ValueError):
            raise ValidationError("cardId must be an integer")
        for card in self.cards:
            if card.id == card_id:
                return card
        raise NotFoundError("Card not found")

    def flip(self, card_id) -> bool:
        card = self._find_card(card_id)
        self._settle_if_due()

        if (self.checking or card.flipped or card.matched
                or len(self.flipped_cards) >= 2 or not self.is_playing):
            return False

        card.flipped = True
        self.flipped_cards.append(card.id)
        if len(self.flipped_cards) == 2:
            self.moves += 1
            self._check_pair()
        return True

    def _check_pair(self) -> None:
        first, second = (self._find_card(card_id) for card_id in self.flipped_cards)

        if first.value != second.value:
            self.checking = True
            self.settle_deadline = self.clock() + self.settle_delay
            return

        first.matched = second.matched = True
        self.flipped_cards = []
        self.remaining_pairs -= 1
        self.score += MATCH_POINTS * self.difficulty + self.time_left // TIME_BONUS_DIVISOR

        if self.remaining_pairs <= 0:
            self._session_won()

    def settle(self) -> bool:
        """Turn a mismatched pair face down once the settle delay has passed."""
        return self._settle_if_due()

    def _settle_if_due(self) -> bool:
        if not self.checking or self.clock() < self.settle_deadline:
            return False
        for card_id in self.flipped_cards:
            self._find_card(card_id).flipped = False
        self.flipped_cards = []
        self.checking = False
        self.settle_deadline = None
        return True

    def tick(self) -> bool:
        if not self.is_playing:
            return False

        self._settle_if_due()
        self.time_elapsed += 1
        if self.time_elapsed >= self.time_limit:
            self.time_elapsed = self.time_limit
            self.checking = False
            self.settle_deadline = None
            self._transition(GameStatus.TIMEUP)
        return True

    def _session_won(self) -> None:
        self._transition(GameStatus.WON)
        user_score = self.storage.get_user_score()
        self.storage.update_user_score({'memorySetsCompleted': user_score.memory_sets_completed + 1})
        self.storage.record_category_progress(self.category_id)

    def to_dict(self) -> Dict[str, Any]:
        state = self.base_state()
        state.update({
            'cards': [card.to_dict() for card in self.cards],
            'difficulty': self.difficulty,
            'moves': self.moves,
            'pairs': self.pairs,
            'remainingPairs': self.remaining_pairs,
            'timeElapsed': self.time_elapsed,
            'timeLimit': self.time_limit,
            'timeLeft': self.time_left,
            'score': self.score,
            'flippedCards': list(self.flipped_cards),
            'matchedCards': self.matched_cards,
            'checking': self.checking
        })
        return state
