"""
Server Configuration

Flask, server, game and logging settings read from the environment (or a
config.env file next to this module). Game defaults come from game_settings.
"""

import os
from dotenv import load_dotenv

from .game_settings import BOARD_COUNT, DAILY_TIMEZONE

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Settings shared by every environment."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

    # Game Settings
    BOARD_COUNT = int(os.getenv('BOARD_COUNT', BOARD_COUNT))
    DAILY_TIMEZONE = os.getenv('DAILY_TIMEZONE', DAILY_TIMEZONE)
    DEFAULT_ALPHABET = os.getenv('DEFAULT_ALPHABET', 'en')

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


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
