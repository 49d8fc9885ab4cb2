"""
Base game interface for the mini-game engines.

Every engine owns the complete state of one play session and is driven by
user actions plus an optional one-second timer tick. Engines share the
same lifecycle (idle -> playing -> terminal) and declare which status
transitions they allow.
"""

import random
from abc import ABC, abstractmethod
from typing import Any, Dict, FrozenSet, Optional, Tuple

from ..models.catalog import Category
from ..models.game import GameStatus
from ..utils.errors import InvalidTransitionError, NotFoundError, ValidationError

TERMINAL_STATUSES = frozenset({
    GameStatus.WON, GameStatus.LOST, GameStatus.TIMEUP, GameStatus.SUCCESS, GameStatus.FAILURE
})


class BaseGame(ABC):
    """
    Abstract base class for all mini-game engines.

    Class Attributes:
        GAME_TYPE: Category game type this engine serves (e.g., 'word')
        TRANSITIONS: Allowed gameStatus moves, current -> set of targets
        ACTIONS: Mapping of action name -> (handler method name, required parameter names)
    """

    GAME_TYPE: str = ""
    TRANSITIONS: Dict[GameStatus, FrozenSet[GameStatus]] = {}
    ACTIONS: Dict[str, Tuple[str, Tuple[str, ...]]] = {}

    def __init__(self, storage, rng: Optional[random.Random] = None):
        """
        Args:
            storage: Repository providing the catalog and the score record
            rng: Random source, injectable for deterministic play
        """
        self.storage = storage
        self.rng = rng or random.Random()
        self.current_category = ""
        self.category_id = 0
        self.game_status = GameStatus.IDLE

    @abstractmethod
    def start(self, category_id: int, **options) -> None:
        """Begin a fresh session for the category."""

    @abstractmethod
    def restart(self) -> bool:
        """Throw the current round away and start again with the same options."""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Client-facing camelCase snapshot of the session."""

    def tick(self) -> bool:
        """Advance the session clock by one second. Untimed games ignore it."""
        return False

    @property
    def is_playing(self) -> bool:
        return self.game_status is GameStatus.PLAYING

    @property
    def is_over(self) -> bool:
        return self.game_status in TERMINAL_STATUSES

    def _transition(self, target: GameStatus) -> None:
        allowed = self.TRANSITIONS.get(self.game_status, frozenset())
        if target not in allowed:
            raise InvalidTransitionError(self.game_status, target)
        self.game_status = target

    def _reset_status(self) -> None:
        """A new round always starts over from idle."""
        self.game_status = GameStatus.IDLE

    def _load_category(self, category_id: int) -> Category:
        category = self.storage.get_category_by_id(category_id)
        if not category:
            raise NotFoundError("Category not found")
        self.current_category = category.name
        self.category_id = category.id
        return category

    def handle_action(self, action: str, params: Dict[str, Any]) -> bool:
        """
        Route an incoming action to the appropriate handler.

        Returns:
            True if the action changed the session, False if it was a no-op
        """
        if action not in self.ACTIONS:
            raise ValidationError(f"Unknown action '{action}' for {self.GAME_TYPE} game")

        handler_name, param_names = self.ACTIONS[action]
        missing = [name for name in param_names if params.get(name) is None]
        if missing:
            raise ValidationError(
                f"Missing parameters for '{action}'",
                errors=[{'field': name, 'message': 'Field required'} for name in missing]
            )

        handler = getattr(self, handler_name)
        return bool(handler(*[params[name] for name in param_names]))

    def base_state(self) -> Dict[str, Any]:
        return {
            'gameType': self.GAME_TYPE,
            'currentCategory': self.current_category,
            'categoryId': self.category_id,
            'gameStatus': self.game_status.value
        }
