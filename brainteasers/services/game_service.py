"""
Game Service

Owns the live play sessions. Each session wraps one engine instance; all
mutation, whether from a request thread or the timer worker, happens under
a single re-entrant lock.
"""

import threading
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

from ..config.app_config import Config
from ..games import ALL_GAMES, BaseGame, GameRegistry, MemoryMatchEngine, CrosswordEngine
from ..utils.errors import NotFoundError, ValidationError
from ..utils.game_logger import game_logger


@dataclass
class GameSession:
    """A live session and its bookkeeping."""
    session_id: str
    engine: BaseGame
    user_ip: str = 'unknown'
    created_at: float = field(default_factory=time.time)
    last_activity: float = field(default_factory=time.time)

    def to_dict(self) -> Dict[str, Any]:
        state = self.engine.to_dict()
        state['sessionId'] = self.session_id
        return state


class GameService:
    """
    Session registry for all mini-games.

    This class handles:
    - Creating sessions with unique ids and starting their engines
    - Routing user actions to the right engine
    - One-second timer ticks for timed games
    - Expiring sessions nobody has touched for a while
    """

    def __init__(self, storage, settle_delay: float = Config.MEMORY_SETTLE_DELAY_SECONDS,
                 crossword_time_limit: int = Config.CROSSWORD_TIME_LIMIT_SECONDS,
                 clock: Callable[[], float] = time.monotonic):
        self.storage = storage
        self.settle_delay = settle_delay
        self.crossword_time_limit = crossword_time_limit
        self.clock = clock
        self.sessions: Dict[str, GameSession] = {}
        self.lock = threading.RLock()

        self.registry = GameRegistry()
        for engine_class in ALL_GAMES:
            self.registry.register(engine_class)

    def _build_engine(self, game_type: str) -> BaseGame:
        engine_class = self.registry.get_engine_class(game_type)
        if engine_class is None:
            raise ValidationError(f"Unsupported game type '{game_type}'")

        if engine_class is MemoryMatchEngine:
            return engine_class(self.storage, clock=self.clock, settle_delay=self.settle_delay)
        if engine_class is CrosswordEngine:
            return engine_class(self.storage, time_limit=self.crossword_time_limit)
        return engine_class(self.storage)

    def create_session(self, game_type: str, category_id: int, user_ip: str = 'unknown',
                       **options) -> Dict[str, Any]:
        """
        Creates a session and starts its engine for the category.

        Returns:
            The initial session state including its sessionId
        """
        engine = self._build_engine(game_type)
        engine.start(category_id, **options)

        session = GameSession(session_id=str(uuid.uuid4()), engine=engine, user_ip=user_ip)
        with self.lock:
            self.sessions[session.session_id] = session

        game_logger.log_game_event(session.session_id, f"{game_type}_started", user_ip,
                                   category_id=category_id, options=options)
        return session.to_dict()

    def _get_session(self, session_id: str) -> GameSession:
        session = self.sessions.get(session_id)
        if session is None:
            raise NotFoundError("Session not found")
        return session

    def get_session_state(self, session_id: str) -> Dict[str, Any]:
        with self.lock:
            return self._get_session(session_id).to_dict()

    def apply_action(self, session_id: str, action: str, params: Optional[Dict[str, Any]] = None,
                     user_ip: str = 'unknown') -> Tuple[bool, Dict[str, Any]]:
        """
        Applies one user action to a session.

        Returns:
            Tuple of (accepted, state); accepted is False when the action was a no-op
        """
        with self.lock:
            session = self._get_session(session_id)
            status_before = session.engine.game_status
            accepted = session.engine.handle_action(action, params or {})
            session.last_activity = time.time()
            self._log_status_change(session, status_before, user_ip)
            return accepted, session.to_dict()

    def tick_all(self) -> Dict[str, Dict[str, Any]]:
        """
        Advances every timed session by one second.

        Returns:
            Mapping of session id -> new state for every session the tick changed
        """
        changed = {}
        with self.lock:
            for session in list(self.sessions.values()):
                status_before = session.engine.game_status
                if session.engine.tick():
                    self._log_status_change(session, status_before, session.user_ip)
                    changed[session.session_id] = session.to_dict()
        return changed

    def _log_status_change(self, session: GameSession, status_before, user_ip: str) -> None:
        engine = session.engine
        if engine.game_status is status_before or not engine.is_over:
            return
        game_logger.log_game_event(
            session.session_id, f"{engine.GAME_TYPE}_{engine.game_status.value}", user_ip,
            category_id=engine.category_id, score=getattr(engine, 'score', None)
        )

    def delete_session(self, session_id: str) -> bool:
        with self.lock:
            if session_id in self.sessions:
                del self.sessions[session_id]
                return True
        return False

    def cleanup_idle_sessions(self, max_idle_seconds: float) -> int:
        """Drops sessions with no activity for longer than max_idle_seconds."""
        cutoff = time.time() - max_idle_seconds
        with self.lock:
            expired = [session_id for session_id, session in self.sessions.items()
                       if session.last_activity < cutoff]
            for session_id in expired:
                session = self.sessions.pop(session_id)
                game_logger.log_game_event(session_id, 'session_expired', session.user_ip,
                                           game_type=session.engine.GAME_TYPE)
        return len(expired)

    def active_session_count(self) -> int:
        with self.lock:
            return len(self.sessions)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(storage, **options) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(storage, **options)
    return _game_service
