"""
Game Service

Contains the game session logic for Punjabi Wordle: guess validation,
scoring over character units and keyboard tracking.
"""

import uuid
from typing import Dict, Optional, Tuple

from ..config.game_settings import MAX_ROUNDS, WORD_LENGTH, WORD_SET
from ..engine.gurmukhi import clean_text
from ..engine.keyboard import update_keyboard
from ..engine.scoring import evaluate_units
from ..engine.segmenter import count_units, segment_units
from ..engine.selection import is_valid_guess
from ..models.game import GameState

FILL_ALL_LETTERS_HINT = "5 ਅੱਖਰ ਭਰੋ"
NOT_RECOGNIZED_HINT = "ਇਹ ਸ਼ਬਦ ਮਾਨਤਾ ਪ੍ਰਾਪਤ ਨਹੀਂ ਹੈ"


def apply_guess(state: GameState, guess: str, relaxed: bool = True) -> GameState:
    """
    Returns the state that follows an accepted guess.

    The guess must already have passed validation (5 units, known word).

    Args:
        state: Current game state
        guess: Cleaned guess word
        relaxed: Credit base-letter matches as present

    Returns:
        New GameState; `state` is left unchanged
    """
    target_units = segment_units(state.target_word)
    guess_units = segment_units(guess)
    verdicts = evaluate_units(target_units, guess_units, relaxed=relaxed)

    row = tuple(zip(guess_units, verdicts))
    keyboard = update_keyboard(state.keyboard, guess_units, verdicts, state.target_word)

    return GameState(
        game_id=state.game_id,
        target_word=state.target_word,
        max_rounds=state.max_rounds,
        date=state.date,
        guesses=state.guesses + (guess,),
        guess_results=state.guess_results + (row,),
        keyboard=keyboard,
    )


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Guess validation and evaluation
    - Game state management without exposing answers to clients
    """

    def __init__(self, max_rounds: int = MAX_ROUNDS, relaxed: bool = True, word_set=WORD_SET):
        self.games: Dict[str, GameState] = {}  # Store active games by game_id
        self.max_rounds = max_rounds
        self.relaxed = relaxed
        self.word_set = word_set

    def create_new_game(self, target_word: str, date_key: Optional[str] = None) -> str:
        """
        Creates a new game session for a target word.

        Args:
            target_word: The answer (normally the word of the day)
            date_key: Date the word belongs to, if any

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        self.games[game_id] = GameState(
            game_id=game_id,
            target_word=clean_text(target_word),
            max_rounds=self.max_rounds,
            date=date_key,
        )
        return game_id

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session.

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        return self.games.get(game_id)

    def is_valid_guess(self, game_id: str, guess: str) -> Tuple[bool, str, Optional[str]]:
        """
        Validates a guess for a specific game session.

        Args:
            game_id: Unique game identifier
            guess: The word to validate

        Returns:
            Tuple of (is_valid, error_message, hint) where hint is the
            Punjabi message shown to the player
        """
        state = self.games.get(game_id)
        if state is None:
            return False, "Game not found", None

        if state.game_over:
            return False, "Game is already over", None

        if not guess or not isinstance(guess, str):
            return False, "Guess must be a valid string", FILL_ALL_LETTERS_HINT

        unit_count = count_units(guess)
        if unit_count != WORD_LENGTH:
            return False, f"Guess must be exactly {WORD_LENGTH} letters (got {unit_count})", FILL_ALL_LETTERS_HINT

        if not is_valid_guess(guess, self.word_set):
            return False, "Word not in word list", NOT_RECOGNIZED_HINT

        return True, "", None

    def make_guess(self, game_id: str, guess: str) -> Optional[GameState]:
        """
        Processes a guess and updates game state.

        Args:
            game_id: Unique game identifier
            guess: The 5-unit word guess

        Returns:
            Updated GameState or None if invalid
        """
        is_valid, _, _ = self.is_valid_guess(game_id, guess)
        if not is_valid:
            return None

        state = apply_guess(self.games[game_id], clean_text(guess), relaxed=self.relaxed)
        self.games[game_id] = state
        return state

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(max_rounds: int = MAX_ROUNDS, relaxed: bool = True) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(max_rounds=max_rounds, relaxed=relaxed)
    return _game_service
