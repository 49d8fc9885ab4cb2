"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, constants and static puzzle data (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    SEED_DATA, SEQUENCE_LEVELS, CROSSWORD_PUZZLES,
    validate_seed_data_integrity, validate_sequence_levels_integrity,
    validate_crossword_integrity, get_catalog_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules and data
    'SEED_DATA', 'SEQUENCE_LEVELS', 'CROSSWORD_PUZZLES',
    'validate_seed_data_integrity', 'validate_sequence_levels_integrity',
    'validate_crossword_integrity', 'get_catalog_statistics'
]
