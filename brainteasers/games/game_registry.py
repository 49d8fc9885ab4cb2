"""
Game Registry mapping category game types to engine classes.
"""

from typing import Dict, List, Optional, Type

from .base_game import BaseGame


class GameRegistry:
    def __init__(self):
        self._engines: Dict[str, Type[BaseGame]] = {}

    def register(self, engine_class: Type[BaseGame]) -> None:
        """Register an engine class under its GAME_TYPE. The last registration wins."""
        game_type = engine_class.GAME_TYPE
        if not game_type:
            raise ValueError(f"Engine class {engine_class.__name__} has no GAME_TYPE")
        self._engines[game_type] = engine_class

    def get_engine_class(self, game_type: str) -> Optional[Type[BaseGame]]:
        return self._engines.get(game_type)

    def game_types(self) -> List[str]:
        return list(self._engines)
