"""
Number-Sequence Engine

A quiz over the static sequence levels: each level shows the start of a
sequence and asks for the next number. Wrong answers cost a life; showing
the pattern hint halves the points for that level.
"""

from typing import Any, Dict, List, Optional

from ..config.game_settings import LEVEL_POINTS, NUMBER_LIVES, SEQUENCE_LEVELS
from ..models.game import GameStatus
from ..utils.helpers import parse_integer
from .base_game import BaseGame


class NumberSequenceEngine(BaseGame):
    """Level-by-level sequence quiz with lives and an optional pattern hint."""

    GAME_TYPE = "number"
    TRANSITIONS = {
        GameStatus.IDLE: frozenset({GameStatus.PLAYING}),
        GameStatus.PLAYING: frozenset({GameStatus.SUCCESS, GameStatus.FAILURE}),
    }
    ACTIONS = {
        'answer': ('submit_answer', ('value',)),
        'toggle_hint': ('toggle_hint', ()),
        'restart': ('restart', ()),
    }

    def __init__(self, storage, rng=None, levels: Optional[List[Dict]] = None):
        super().__init__(storage, rng)
        self.levels = levels if levels is not None else SEQUENCE_LEVELS
        self._reset_progress()

    def _reset_progress(self) -> None:
        self.current_level = 0
        self.score = 0
        self.lives = NUMBER_LIVES
        self.show_hint = False
        self.hint_used = False
        self.feedback_message: Optional[str] = None
        self.user_answer = ''

    @property
    def level(self) -> Dict:
        return self.levels[self.current_level % len(self.levels)]

    def start(self, category_id: int) -> None:
        self._reset_status()
        self._load_category(category_id)
        self._reset_progress()
        self._transition(GameStatus.PLAYING)

    def restart(self) -> bool:
        self.start(self.category_id)
        return True

    def calculate_points(self) -> int:
        points = self.level['difficulty'] * LEVEL_POINTS
        return points // 2 if self.hint_used else points

    def submit_answer(self, value) -> bool:
        if not self.is_playing:
            return False

        guess = parse_integer(value)
        if guess is None:
            self.user_answer = str(value)
            self.feedback_message = "Please enter a valid number"
            return True

        if guess == self.level['answer']:
            points = self.calculate_points()
            self.user_answer = ''
            last_level = self.current_level == len(self.levels) - 1
            self.score += points
            self.feedback_message = f"Correct! +{points} points"
            self.current_level += 1
            self.show_hint = False
            self.hint_used = False
            if last_level:
                self._finish(GameStatus.SUCCESS)
        else:
            self.user_answer = str(value)
            self.lives -= 1
            self.feedback_message = "Incorrect answer, try again"
            if self.lives <= 0:
                self._finish(GameStatus.FAILURE)
        return True

    def toggle_hint(self) -> bool:
        if not self.is_playing:
            return False
        self.show_hint = not self.show_hint
        if self.show_hint:
            self.hint_used = True
        return True

    def _finish(self, status: GameStatus) -> None:
        self._transition(status)

        user_score = self.storage.get_user_score()
        changes = {'bestScore': max(user_score.best_score, self.score)}
        if status is GameStatus.SUCCESS:
            changes['numberSequencesSolved'] = user_score.number_sequences_solved + 1
        self.storage.update_user_score(changes)
        if status is GameStatus.SUCCESS:
            self.storage.record_category_progress(self.category_id)

    def to_dict(self) -> Dict[str, Any]:
        level = {
            'sequence': list(self.level['sequence']),
            'difficulty': self.level['difficulty']
        }
        if self.show_hint:
            level['pattern'] = self.level['pattern']

        state = self.base_state()
        state.update({
            'currentLevel': self.current_level,
            'totalLevels': len(self.levels),
            'level': level,
            'score': self.score,
            'lives': self.lives,
            'showHint': self.show_hint,
            'userAnswer': self.user_answer,
            'hintUsed': self.hint_used,
            'feedbackMessage': self.feedback_message
        })
        return state
