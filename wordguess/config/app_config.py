"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

from .game_settings import DEFAULT_TARGET_WORD, MAX_ATTEMPTS

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""
    
    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False
    
    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))
    
    # Scoring Settings
    # TARGET_WORD is held by the scoring endpoint and never sent to clients
    TARGET_WORD = os.getenv('TARGET_WORD', DEFAULT_TARGET_WORD)
    LOCAL_TARGET_WORD = os.getenv('LOCAL_TARGET_WORD', DEFAULT_TARGET_WORD)
    API_ENDPOINT = os.getenv('API_ENDPOINT', '')
    REMOTE_TIMEOUT_SECONDS = float(os.getenv('REMOTE_TIMEOUT_SECONDS', 5))
    
    # Database Settings (guess history mirror)
    MONGO_URI = os.getenv('MONGO_URI')
    MONGO_DB = os.getenv('MONGO_DB', 'word_guess')
    
    # Game Settings
    MAX_ATTEMPTS = int(os.getenv('MAX_ATTEMPTS', MAX_ATTEMPTS))
    SESSION_IDLE_SECONDS = int(os.getenv('SESSION_IDLE_SECONDS', 3600))
    SESSION_CLEANUP_INTERVAL_SECONDS = int(os.getenv('SESSION_CLEANUP_INTERVAL_SECONDS', 300))
    
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
    TARGET_WORD = DEFAULT_TARGET_WORD
    LOCAL_TARGET_WORD = DEFAULT_TARGET_WORD
    API_ENDPOINT = ''
    MONGO_URI = None
    MAX_ATTEMPTS = MAX_ATTEMPTS


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
