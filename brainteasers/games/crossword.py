"""
Crossword Engine

Grid crossword over a pre-authored puzzle. Open cells come from the clue
spans; every letter typed re-checks all clues, and solving the last clue
wins the puzzle with a score that rewards speed and frugal hint use.
"""

import copy
from typing import Any, Dict, List, Optional, Tuple

from ..config.game_settings import (
    CROSSWORD_BASE_SCORE, CROSSWORD_HINT_PENALTY, CROSSWORD_HINTS, CROSSWORD_PUZZLES
)
from ..models.game import Cell, Clue, ClueDirection, GameStatus
from ..utils.errors import NotFoundError, ValidationError
from ..utils.helpers import normalize_letter
from .base_game import BaseGame

DEFAULT_TIME_LIMIT = 600

ARROW_KEYS = {
    'ArrowUp': (-1, 0),
    'ArrowDown': (1, 0),
    'ArrowLeft': (0, -1),
    'ArrowRight': (0, 1),
}


class CrosswordEngine(BaseGame):
    """Cell selection, letter entry, hints and clue checking on a square grid."""

    GAME_TYPE = "crossword"
    TRANSITIONS = {
        GameStatus.IDLE: frozenset({GameStatus.PLAYING}),
        GameStatus.PLAYING: frozenset({GameStatus.WON, GameStatus.TIMEUP}),
    }
    ACTIONS = {
        'select': ('select_cell', ('row', 'col')),
        'input': ('input_letter', ('row', 'col', 'letter')),
        'hint': ('use_hint', ()),
        'toggle_direction': ('toggle_direction', ()),
        'navigate': ('navigate', ('key',)),
        'restart': ('restart', ()),
    }

    def __init__(self, storage, rng=None, time_limit: int = DEFAULT_TIME_LIMIT,
                 puzzles: Optional[List[Dict]] = None):
        super().__init__(storage, rng)
        self.time_limit = time_limit
        self.puzzles = puzzles if puzzles is not None else CROSSWORD_PUZZLES
        self.puzzle: Optional[Dict] = None
        self.difficulty = 1
        self.size = 0
        self.grid: List[List[Cell]] = []
        self.clues: Dict[ClueDirection, List[Clue]] = {ClueDirection.ACROSS: [], ClueDirection.DOWN: []}
        self._reset_round()

    def _reset_round(self) -> None:
        self.current_direction = ClueDirection.ACROSS
        self.current_number = 1
        self.selected_cell: Optional[Tuple[int, int]] = None
        self.score = 0
        self.hints = CROSSWORD_HINTS
        self.time_elapsed = 0

    def _pick_puzzle(self, difficulty: int) -> Dict:
        if not self.puzzles:
            raise NotFoundError("No crossword puzzles available")
        matching = [puzzle for puzzle in self.puzzles if puzzle.get('difficulty', 1) == difficulty]
        return self.rng.choice(matching or self.puzzles)

    def start(self, category_id: int, difficulty: int = 1) -> None:
        self._reset_status()
        self._load_category(category_id)
        self.difficulty = difficulty
        self.puzzle = self._pick_puzzle(difficulty)
        self.setup_grid()
        self._reset_round()
        self._transition(GameStatus.PLAYING)

    def restart(self) -> bool:
        self._reset_status()
        self.setup_grid()
        self._reset_round()
        self._transition(GameStatus.PLAYING)
        return True

    def setup_grid(self) -> None:
        """Builds a fresh grid and clue list from a deep copy of the puzzle."""
        puzzle = copy.deepcopy(self.puzzle)
        self.size = puzzle['size']
        self.grid = [[Cell(row=row, col=col) for col in range(self.size)] for row in range(self.size)]
        self.clues = {}

        for direction in ClueDirection:
            self.clues[direction] = [
                Clue(number=entry['number'], clue=entry['clue'], answer=entry['answer'],
                     row=entry['row'], col=entry['col'], length=len(entry['answer']))
                for entry in puzzle['clues'][direction.value]
            ]
            for clue in self.clues[direction]:
                for row, col in self._clue_cells(clue, direction):
                    self.grid[row][col].is_black = False

        numbered = set()
        for direction in ClueDirection:
            for clue in self.clues[direction]:
                if clue.number not in numbered:
                    self.grid[clue.row][clue.col].number = clue.number
                    numbered.add(clue.number)

    def _clue_cells(self, clue: Clue, direction: ClueDirection) -> List[Tuple[int, int]]:
        d_row, d_col = direction.step
        cells = []
        for offset in range(clue.length):
            row, col = clue.row + d_row * offset, clue.col + d_col * offset
            if row < self.size and col < self.size:
                cells.append((row, col))
        return cells

    def _cell_at(self, row, col) -> Cell:
        try:
            row, col = int(row), int(col)
        except (TypeError, ValueError):
            raise ValidationError("row and col must be integers")
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise ValidationError(f"Cell ({row}, {col}) is outside the grid")
        return self.grid[row][col]

    def _get_clue(self, direction: ClueDirection, number: int) -> Optional[Clue]:
        for clue in self.clues.get(direction, []):
            if clue.number == number:
                return clue
        return None

    @property
    def all_clues(self) -> List[Clue]:
        return self.clues[ClueDirection.ACROSS] + self.clues[ClueDirection.DOWN]

    def _clue_covering(self, direction: ClueDirection, row: int, col: int) -> Optional[Clue]:
        return next((clue for clue in self.clues[direction] if (row, col) in self._clue_cells(clue, direction)), None)

    def find_clue_for_cell(self, row: int, col: int) -> Optional[Tuple[ClueDirection, int]]:
        """
        Finds the clue a cell belongs to.

        When the cell sits on both an across and a down clue, the current
        direction wins; otherwise across is preferred.
        """
        across = self._clue_covering(ClueDirection.ACROSS, row, col)
        down = self._clue_covering(ClueDirection.DOWN, row, col)

        if across and down:
            if self.current_direction is ClueDirection.DOWN:
                return ClueDirection.DOWN, down.number
            return ClueDirection.ACROSS, across.number
        if across:
            return ClueDirection.ACROSS, across.number
        if down:
            return ClueDirection.DOWN, down.number
        return None

    def _select(self, cell: Cell) -> None:
        self.selected_cell = (cell.row, cell.col)
        found = self.find_clue_for_cell(cell.row, cell.col)
        if found:
            self.current_direction, self.current_number = found

    def select_cell(self, row, col) -> bool:
        cell = self._cell_at(row, col)
        if cell.is_black or not self.is_playing:
            return False
        self._select(cell)
        return True

    def input_letter(self, row, col, letter) -> bool:
        if letter != '':
            letter = normalize_letter(letter)
            if letter is None:
                raise ValidationError("Letter must be a single letter A-Z or empty")
        cell = self._cell_at(row, col)
        if cell.is_black or not self.is_playing:
            return False

        self._select(cell)
        cell.letter = letter
        cell.filled = cell.letter != ''
        self.check_clue_completion()

        if self._all_solved():
            self._puzzle_won()
        elif cell.letter:
            self._move_to_next_cell()
        return True

    def check_clue_completion(self) -> None:
        """Marks every clue solved or not from the letters currently in the grid."""
        for direction in ClueDirection:
            for clue in self.clues[direction]:
                word = ''.join(self.grid[row][col].letter for row, col in self._clue_cells(clue, direction))
                clue.solved = word == clue.answer

    def _all_solved(self) -> bool:
        return all(clue.solved for clue in self.all_clues)

    def _move_to_next_cell(self) -> None:
        if not self.selected_cell:
            return
        row, col = self.selected_cell
        d_row, d_col = self.current_direction.step
        next_row, next_col = row + d_row, col + d_col
        if next_row < self.size and next_col < self.size and not self.grid[next_row][next_col].is_black:
            self.selected_cell = (next_row, next_col)

    def use_hint(self) -> bool:
        if self.hints <= 0 or not self.selected_cell or not self.is_playing:
            return False

        clue = self._get_clue(self.current_direction, self.current_number)
        if not clue:
            return False

        row, col = self.selected_cell
        if self.current_direction is ClueDirection.ACROSS:
            on_clue, offset = row == clue.row, col - clue.col
        else:
            on_clue, offset = col == clue.col, row - clue.row
        if not on_clue or not 0 <= offset < len(clue.answer):
            return False

        cell = self.grid[row][col]
        cell.letter = clue.answer[offset]
        cell.filled = True
        cell.is_revealed = True
        self.hints -= 1
        self.check_clue_completion()

        if self._all_solved():
            self._puzzle_won()
        else:
            self._move_to_next_cell()
        return True

    def toggle_direction(self) -> bool:
        """
        Switches across/down. With a cell selected the active clue follows to
        the crossing clue; a cell with no clue the other way keeps its clue.
        """
        if not self.is_playing:
            return False
        direction = self.current_direction.toggled()
        if self.selected_cell:
            clue = self._clue_covering(direction, *self.selected_cell)
            if not clue:
                return False
            self.current_number = clue.number
        self.current_direction = direction
        return True

    def navigate(self, key: str) -> bool:
        if key == 'Tab':
            return self.toggle_direction()
        if key not in ARROW_KEYS:
            raise ValidationError(f"Unsupported navigation key '{key}'")
        if not self.selected_cell or not self.is_playing:
            return False

        row, col = self.selected_cell
        d_row, d_col = ARROW_KEYS[key]
        new_row = min(max(row + d_row, 0), self.size - 1)
        new_col = min(max(col + d_col, 0), self.size - 1)
        target = self.grid[new_row][new_col]
        if target.is_black or (new_row, new_col) == self.selected_cell:
            return False
        self._select(target)
        return True

    def tick(self) -> bool:
        if not self.is_playing:
            return False
        self.time_elapsed += 1
        if self.time_elapsed >= self.time_limit:
            self.time_elapsed = self.time_limit
            self._transition(GameStatus.TIMEUP)
        return True

    def calculate_score(self) -> int:
        time_bonus = max(0, self.time_limit - self.time_elapsed)
        return CROSSWORD_BASE_SCORE + time_bonus - (CROSSWORD_HINTS - self.hints) * CROSSWORD_HINT_PENALTY

    def _puzzle_won(self) -> None:
        self.score = self.calculate_score()
        self._transition(GameStatus.WON)

        user_score = self.storage.get_user_score()
        self.storage.update_user_score({
            'crosswordsCompleted': user_score.crosswords_completed + 1,
            'bestScore': max(user_score.best_score, self.score)
        })
        self.storage.record_category_progress(self.category_id)

    def to_dict(self) -> Dict[str, Any]:
        state = self.base_state()
        state.update({
            'puzzleName': self.puzzle['name'] if self.puzzle else None,
            'size': self.size,
            'grid': [[cell.to_dict() for cell in row] for row in self.grid],
            'clues': {direction.value: [clue.to_dict() for clue in self.clues[direction]]
                      for direction in ClueDirection},
            'currentClue': {'direction': self.current_direction.value, 'number': self.current_number},
            'selectedCell': ({'row': self.selected_cell[0], 'col': self.selected_cell[1]}
                             if self.selected_cell else None),
            'score': self.score,
            'hints': self.hints,
            'hintsUsed': CROSSWORD_HINTS - self.hints,
            'timeElapsed': self.time_elapsed,
            'timeLimit': self.time_limit,
            'difficulty': self.difficulty
        })
        return state
