"""
Word-Guess Engine

Hangman-style guessing over a shuffled set of category words. Correct
letters score points, hints reveal letters at a cost, and six misses lose
the word.
"""

from typing import Any, Dict, List

from ..config.game_settings import HINT_PENALTY, LETTER_POINTS, MAX_INCORRECT_GUESSES, WORD_HINTS
from ..models.catalog import Word
from ..models.game import GameStatus
from ..utils.errors import NotFoundError, ValidationError
from ..utils.helpers import normalize_letter
from .base_game import BaseGame


class WordGuessEngine(BaseGame):
    """Per-letter guess state machine with hint economy and scoring."""

    GAME_TYPE = "word"
    TRANSITIONS = {
        GameStatus.IDLE: frozenset({GameStatus.PLAYING}),
        GameStatus.PLAYING: frozenset({GameStatus.WON, GameStatus.LOST}),
        GameStatus.WON: frozenset({GameStatus.PLAYING}),
    }
    ACTIONS = {
        'guess': ('guess_letter', ('letter',)),
        'hint': ('use_hint', ()),
        'next_word': ('next_word', ()),
        'restart': ('restart', ()),
    }

    def __init__(self, storage, rng=None):
        super().__init__(storage, rng)
        self.words: List[Word] = []
        self.word_count = 10
        self.current_word_index = 0
        self.max_words = 0
        self.total_score = 0
        self.words_solved = 0
        self.session_complete = False
        self._reset_word()

    def _reset_word(self) -> None:
        self.guessed_letters: List[str] = []
        self.incorrect_guesses = 0
        self.remaining_hints = WORD_HINTS
        self.revealed_hints = 0
        self.score = 0
        self.feedback = None

    def start(self, category_id: int, word_count: int = 10) -> None:
        self._reset_status()
        self._load_category(category_id)
        words = self.storage.get_random_words_by_category_id(category_id, word_count, rng=self.rng)
        if not words:
            raise NotFoundError("No words found for this category")

        self.word_count = word_count
        self.words = words
        self.current_word_index = 0
        self.max_words = len(words)
        self.total_score = 0
        self.words_solved = 0
        self.session_complete = False
        self._reset_word()
        self._transition(GameStatus.PLAYING)

    def restart(self) -> bool:
        self.start(self.category_id, self.word_count)
        return True

    @property
    def current_word(self) -> str:
        if not self.words or self.current_word_index >= len(self.words):
            return ""
        return self.words[self.current_word_index].word

    @property
    def current_hints(self) -> List[str]:
        if not self.words or self.current_word_index >= len(self.words):
            return []
        return self.words[self.current_word_index].hints

    @property
    def current_hint(self) -> str:
        hints = self.current_hints
        return hints[self.revealed_hints] if self.revealed_hints < len(hints) else ""

    def is_word_complete(self) -> bool:
        word = self.current_word
        if not word:
            return False
        return all(letter in self.guessed_letters for letter in set(word))

    def guess_letter(self, letter: str) -> bool:
        letter = normalize_letter(letter)
        if letter is None:
            raise ValidationError("Guess must be a single letter")

        if not self.is_playing or not self.current_word:
            return False
        if letter in self.guessed_letters:
            return False

        self.guessed_letters.append(letter)
        if letter in self.current_word:
            # Hint penalty is not floored here; a per-letter value can go negative
            self.score += LETTER_POINTS - self.revealed_hints * HINT_PENALTY
            self.feedback = 'correct'
        else:
            self.incorrect_guesses += 1
            self.feedback = 'incorrect'

        if self.is_word_complete():
            self._word_won()
        elif self.incorrect_guesses >= MAX_INCORRECT_GUESSES:
            self._word_lost()
        return True

    def use_hint(self) -> bool:
        if self.remaining_hints <= 0 or not self.is_playing:
            return False

        word = self.current_word
        unguessed = [letter for letter in word if letter not in self.guessed_letters]
        if not unguessed:
            return False

        self.guessed_letters.append(self.rng.choice(unguessed))
        self.remaining_hints -= 1
        self.revealed_hints = max(0, min(self.revealed_hints + 1, len(self.current_hints) - 1))
        self.score = max(0, self.score - HINT_PENALTY)
        self.feedback = 'hint'

        if self.is_word_complete():
            self._word_won()
        return True

    def next_word(self) -> bool:
        if self.game_status is not GameStatus.WON or self.session_complete:
            return False

        next_index = self.current_word_index + 1
        if next_index >= self.max_words:
            self.session_complete = True
            return True

        self.current_word_index = next_index
        self._reset_word()
        self._transition(GameStatus.PLAYING)
        return True

    def _word_won(self) -> None:
        self.words_solved += 1
        self.total_score += self.score
        self.feedback = 'success'
        self._transition(GameStatus.WON)

        user_score = self.storage.get_user_score()
        changes = {'wordsSolved': user_score.words_solved + 1}
        if self.total_score > user_score.best_score:
            changes['bestScore'] = self.total_score
        self.storage.update_user_score(changes)
        self.storage.record_category_progress(self.category_id)

    def _word_lost(self) -> None:
        self.feedback = 'gameover'
        self._transition(GameStatus.LOST)

    def to_dict(self) -> Dict[str, Any]:
        state = self.base_state()
        state.update({
            'words': [word.to_dict() for word in self.words],
            'currentWordIndex': self.current_word_index,
            'maxWords': self.max_words,
            'currentWord': self.current_word,
            'hints': list(self.current_hints),
            'currentHint': self.current_hint,
            'guessedLetters': list(self.guessed_letters),
            'incorrectGuesses': self.incorrect_guesses,
            'maxIncorrectGuesses': MAX_INCORRECT_GUESSES,
            'remainingHints': self.remaining_hints,
            'revealedHints': self.revealed_hints,
            'score': self.score,
            'totalScore': self.total_score,
            'wordsSolved': self.words_solved,
            'sessionComplete': self.session_complete,
            'feedback': self.feedback
        })
        return state
