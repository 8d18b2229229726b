"""
Utilities Package

Contains the admin decorator and the structured game logger.
"""

from .decorators import require_admin
from .game_logger import game_logger

__all__ = ['require_admin', 'game_logger']
