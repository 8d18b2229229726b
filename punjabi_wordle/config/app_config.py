"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Word Store Settings (in-memory store when MONGO_URI is unset)
    MONGO_URI = os.getenv('MONGO_URI')
    MONGO_DB_NAME = os.getenv('MONGO_DB_NAME', 'punjabi_wordle')

    # Admin Settings (an empty password leaves admin endpoints open)
    ADMIN_PASSWORD = os.getenv('ADMIN_PASSWORD', '')
    # No default: without it token login is disabled
    ADMIN_TOKEN_SECRET = os.getenv('ADMIN_TOKEN_SECRET')
    ADMIN_TOKEN_EXPIRATION_HOURS = int(os.getenv('ADMIN_TOKEN_EXPIRATION_HOURS', 12))
    ADMIN_LOOKAHEAD_DAYS = int(os.getenv('ADMIN_LOOKAHEAD_DAYS', 30))

    # Game Settings
    MAX_ROUNDS = int(os.getenv('MAX_ROUNDS', 6))
    RELAXED_MATCHING = os.getenv('RELAXED_MATCHING', 'True').lower() == 'true'

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
    MONGO_URI = None
    ADMIN_PASSWORD = ''
    ADMIN_TOKEN_SECRET = 'testing-admin-token-secret'


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
