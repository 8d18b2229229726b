"""
Data Models Package

Contains all data models used throughout the application.
"""

from .game import GameState, Verdict

__all__ = ['GameState', 'Verdict']
