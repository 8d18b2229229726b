"""
Word Service

Resolves the word of the day, lets the admin pin words to dates and answers
word validation requests.
"""

from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Tuple

from pymongo.errors import PyMongoError

from ..config.game_settings import WORD_LIST, WORD_SET, WORD_LENGTH
from ..engine.gurmukhi import clean_text
from ..engine.segmenter import count_units
from ..engine.selection import date_key as make_date_key, is_valid_guess, word_for_date
from ..utils.game_logger import game_logger

NOT_PERSISTED_WARNING = (
    "Word store not configured - word not persisted. "
    "Set MONGO_URI for persistent storage."
)


class WordService:
    """
    Daily word resolution on top of a word store.

    The store is an external collaborator: a missing entry or an unreachable
    store both fall back to the deterministic word for the date.
    """

    def __init__(self, store, word_list: Optional[List[str]] = None):
        self.store = store
        self.word_list = list(word_list) if word_list is not None else WORD_LIST.copy()
        self.word_set = frozenset(self.word_list) if word_list is not None else WORD_SET

    def fallback_word(self, date_key: str) -> str:
        return word_for_date(date_key, self.word_list, WORD_LENGTH)

    def get_word_of_day(self, date_key: Optional[str] = None) -> Tuple[str, str, str]:
        """
        Returns the word for a date.

        Args:
            date_key: YYYY-MM-DD, today when omitted

        Returns:
            Tuple of (word, date_key, source) where source is "store" or "fallback"
        """
        date_key = date_key or make_date_key()

        try:
            word = self.store.get(date_key)
        except (PyMongoError, OSError) as e:
            game_logger.logger.warning(f"Word store read failed for {date_key}, using fallback: {e}")
            word = None

        if word:
            cleaned = clean_text(word)
            if cleaned in self.word_set:
                return cleaned, date_key, "store"
            game_logger.logger.warning(f"Stored word for {date_key} is not playable, using fallback")

        return self.fallback_word(date_key), date_key, "fallback"

    def validate_word(self, word: str) -> Dict[str, Any]:
        """
        Validation payload for a candidate word.

        Returns:
            Dictionary with the cleaned word, isValid and unitLength
        """
        cleaned = clean_text(word)
        unit_length = count_units(cleaned)
        return {
            "word": cleaned,
            "isValid": unit_length == WORD_LENGTH and is_valid_guess(cleaned, self.word_set),
            "unitLength": unit_length,
        }

    def set_word(self, date_key: str, word: str) -> Dict[str, Any]:
        """
        Pin a word to a date.

        Args:
            date_key: Normalised YYYY-MM-DD key
            word: Candidate word

        Returns:
            Dictionary with success status; failures carry error and error_type
            ("validation" or "storage")
        """
        validation = self.validate_word(word)
        cleaned = validation["word"]

        if validation["unitLength"] != WORD_LENGTH:
            return {
                "success": False,
                "error_type": "validation",
                "error": f"Word must be exactly {WORD_LENGTH} letters (got {validation['unitLength']})",
                "unitLength": validation["unitLength"],
            }

        if not validation["isValid"]:
            return {
                "success": False,
                "error_type": "validation",
                "error": "Word not in word list",
                "unitLength": validation["unitLength"],
            }

        try:
            self.store.set(date_key, cleaned)
        except (PyMongoError, OSError) as e:
            game_logger.logger.error(f"Failed to save word for {date_key}: {e}")
            return {
                "success": False,
                "error_type": "storage",
                "error": "Failed to save word",
                "details": str(e),
            }

        game_logger.logger.info(f"Word saved for date {date_key}")
        result = {"success": True, "word": cleaned, "date": date_key}
        if not self.store.persistent:
            result["warning"] = NOT_PERSISTED_WARNING
        return result

    def get_upcoming_words(self, days: int = 30, start: Optional[date] = None) -> Dict[str, str]:
        """
        Words pinned in the store for the next `days` days, starting at `start`.

        Store errors are logged and yield an empty mapping.
        """
        start = start or date.today()
        keys = [make_date_key(start + timedelta(days=offset)) for offset in range(days)]
        try:
            return self.store.get_many(keys)
        except (PyMongoError, OSError) as e:
            game_logger.logger.warning(f"Word store read failed while listing words: {e}")
            return {}


# Global service instance
_word_service = None


def get_word_service() -> Optional[WordService]:
    """Get the global word service instance."""
    return _word_service


def initialize_word_service(store, word_list: Optional[List[str]] = None) -> WordService:
    """Initialize the global word service instance."""
    global _word_service
    _word_service = WordService(store, word_list)
    return _word_service
