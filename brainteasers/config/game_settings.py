"""
Game Configuration Constants Module

This module defines all game rule constants and the static puzzle data
(categories, words, memory cards, number sequences and crossword puzzles).
All game parameters are centralized here to enable easy modification.
"""

import json
import os
from typing import Dict, Final, List

# Word-Guess rules
MAX_INCORRECT_GUESSES: Final[int] = 6
WORD_HINTS: Final[int] = 3
LETTER_POINTS: Final[int] = 10
HINT_PENALTY: Final[int] = 5

# Memory-Match rules
MEMORY_TIME_LIMITS: Final[Dict[int, int]] = {1: 120, 2: 90, 3: 60}
"""
Countdown length in seconds per difficulty level.
Type: Final[Dict[int, int]] - Immutable to prevent accidental modification
"""
MATCH_POINTS: Final[int] = 10
TIME_BONUS_DIVISOR: Final[int] = 5

# Number-Sequence rules
NUMBER_LIVES: Final[int] = 3
LEVEL_POINTS: Final[int] = 10

# Crossword rules
CROSSWORD_HINTS: Final[int] = 3
CROSSWORD_BASE_SCORE: Final[int] = 1000
CROSSWORD_HINT_PENALTY: Final[int] = 50

GAME_TYPES: Final[List[str]] = ['word', 'memory', 'number', 'crossword', 'puzzle', 'wordsearch']


def _load_json(filename: str):
    """
    Load a JSON data file shipped next to this module.

    Raises:
        FileNotFoundError: If the data file is not found
        ValueError: If the JSON file is malformed
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, filename)

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Game data file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {filename}: {e}")


# Seed catalog: categories, words and memory card glyphs
SEED_DATA: Final[Dict] = _load_json('seed_data.json')

# Number-sequence levels, played cyclically
SEQUENCE_LEVELS: Final[List[Dict]] = _load_json('sequence_levels.json')

# Pre-authored crossword puzzles
CROSSWORD_PUZZLES: Final[List[Dict]] = _load_json('crossword_puzzles.json')


def validate_seed_data_integrity() -> bool:
    """
    Validates the seed catalog.

    Checks that category keys are unique and known game types are used,
    that every word and card references a seeded category, and that words
    are unique uppercase alphabetic tokens within their category.

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    categories = SEED_DATA.get('categories', [])
    if not categories:
        raise ValueError("Category list cannot be empty")

    keys = [category['key'] for category in categories]
    if len(keys) != len(set(keys)):
        raise ValueError(f"Duplicate category keys found: {keys}")

    for category in categories:
        if category['gameType'] not in GAME_TYPES:
            raise ValueError(f"Category '{category['key']}' has unknown game type '{category['gameType']}'")

    seen_words = set()
    for index, entry in enumerate(SEED_DATA.get('words', [])):
        word = entry['word']
        if entry['category'] not in keys:
            raise ValueError(f"Word at index {index} '{word}' references unknown category '{entry['category']}'")
        if not word.isalpha() or not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' must be uppercase alphabetic")
        if (entry['category'], word) in seen_words:
            raise ValueError(f"Duplicate word '{word}' in category '{entry['category']}'")
        seen_words.add((entry['category'], word))

    for index, card in enumerate(SEED_DATA.get('memory_cards', [])):
        if card['category'] not in keys:
            raise ValueError(f"Memory card at index {index} references unknown category '{card['category']}'")
        if card.get('difficulty', 1) not in MEMORY_TIME_LIMITS:
            raise ValueError(f"Memory card at index {index} has invalid difficulty {card.get('difficulty')}")

    return True


def validate_sequence_levels_integrity() -> bool:
    """Every level needs an integer sequence, an integer answer and a difficulty of 1-4."""
    if not SEQUENCE_LEVELS:
        raise ValueError("Sequence level list cannot be empty")

    for index, level in enumerate(SEQUENCE_LEVELS):
        if not level.get('sequence') or not all(isinstance(n, int) for n in level['sequence']):
            raise ValueError(f"Level {index} must have a non-empty integer sequence")
        if not isinstance(level.get('answer'), int):
            raise ValueError(f"Level {index} answer must be an integer")
        if level.get('difficulty') not in (1, 2, 3, 4):
            raise ValueError(f"Level {index} difficulty must be between 1 and 4")

    return True


def validate_crossword_integrity(puzzle: Dict) -> bool:
    """
    Validates that a crossword puzzle can actually be solved.

    Every clue must fit inside the grid and every cell shared by an across
    and a down clue must receive the same letter from both answers.

    Raises:
        ValueError: If a clue overflows the grid or two answers disagree on a cell
    """
    size = puzzle['size']
    letters: Dict = {}

    for direction, (d_row, d_col) in (('across', (0, 1)), ('down', (1, 0))):
        for clue in puzzle['clues'][direction]:
            answer = clue['answer']
            if not answer.isalpha() or not answer.isupper():
                raise ValueError(f"{direction} {clue['number']} answer '{answer}' must be uppercase alphabetic")
            for offset, letter in enumerate(answer):
                row = clue['row'] + d_row * offset
                col = clue['col'] + d_col * offset
                if not (0 <= row < size and 0 <= col < size):
                    raise ValueError(f"{direction} {clue['number']} '{answer}' runs off the grid")
                existing = letters.setdefault((row, col), letter)
                if existing != letter:
                    raise ValueError(
                        f"{direction} {clue['number']} '{answer}' puts '{letter}' at ({row}, {col}) "
                        f"where another answer needs '{existing}'"
                    )

    return True


def get_catalog_statistics() -> dict:
    """Summarizes the seed catalog for health reporting."""
    words_per_category: Dict[str, int] = {}
    for entry in SEED_DATA.get('words', []):
        words_per_category[entry['category']] = words_per_category.get(entry['category'], 0) + 1

    return {
        "total_categories": len(SEED_DATA.get('categories', [])),
        "words_per_category": words_per_category,
        "memory_cards": len(SEED_DATA.get('memory_cards', [])),
        "sequence_levels": len(SEQUENCE_LEVELS),
        "crossword_puzzles": len(CROSSWORD_PUZZLES)
    }


# Module initialization: Validate configuration when run directly
if __name__ == "__main__":

    try:
        validate_seed_data_integrity()
        validate_sequence_levels_integrity()
        for crossword in CROSSWORD_PUZZLES:
            validate_crossword_integrity(crossword)
        print(" Game data validation passed")
        print(f" Catalog statistics: {get_catalog_statistics()}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
