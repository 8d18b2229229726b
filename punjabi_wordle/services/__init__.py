"""
Services Package

Contains all business logic and service classes.
"""

from .admin_service import AdminService, get_admin_service
from .game_service import GameService, apply_guess, get_game_service, initialize_game_service
from .word_service import WordService, get_word_service, initialize_word_service
from .word_store import InMemoryWordStore, MongoWordStore, create_word_store

__all__ = [
    'AdminService', 'get_admin_service',
    'GameService', 'apply_guess', 'get_game_service', 'initialize_game_service',
    'WordService', 'get_word_service', 'initialize_word_service',
    'InMemoryWordStore', 'MongoWordStore', 'create_word_store'
]
