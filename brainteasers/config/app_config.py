"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Session Bootstrap Settings
    DEFAULT_WORD_COUNT = int(os.getenv('DEFAULT_WORD_COUNT', 10))
    DEFAULT_CARD_COUNT = int(os.getenv('DEFAULT_CARD_COUNT', 12))
    MEMORY_SETTLE_DELAY_SECONDS = float(os.getenv('MEMORY_SETTLE_DELAY_SECONDS', 0.8))
    CROSSWORD_TIME_LIMIT_SECONDS = int(os.getenv('CROSSWORD_TIME_LIMIT_SECONDS', 600))

    # Timer Worker Settings
    TICK_INTERVAL_SECONDS = float(os.getenv('TICK_INTERVAL_SECONDS', 1))
    SESSION_IDLE_TIMEOUT_SECONDS = int(os.getenv('SESSION_IDLE_TIMEOUT_SECONDS', 1800))
    SESSION_CLEANUP_SECONDS = int(os.getenv('SESSION_CLEANUP_SECONDS', 60))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    MEMORY_SETTLE_DELAY_SECONDS = 0.0


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
