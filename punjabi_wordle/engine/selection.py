"""
Word list construction and word-of-the-day selection.

The daily word is a pure function of the date key:

    index = int(digits of "YYYY-MM-DD") % len(word_list)

Reordering or extending the word list therefore changes the word assigned
to every past and future date.
"""

import re
from datetime import date, datetime
from typing import AbstractSet, Iterable, List, Optional

from .gurmukhi import clean_text
from .segmenter import count_units

WORD_LENGTH = 5

DATE_KEY_FORMAT = "%Y-%m-%d"


def build_word_list(raw_words: Iterable[str], word_length: int = WORD_LENGTH) -> List[str]:
    """
    Clean raw entries and keep those that are exactly word_length units.

    Duplicates are removed keeping the first occurrence, so the order of the
    source file is preserved.
    """
    words: List[str] = []
    seen = set()
    for raw in raw_words:
        if not isinstance(raw, str):
            continue
        word = clean_text(raw)
        if count_units(word) != word_length or word in seen:
            continue
        seen.add(word)
        words.append(word)
    return words


def word_for_date(date_key: str, words: List[str], word_length: int = WORD_LENGTH) -> str:
    """
    Deterministically pick the word for a date.

    Args:
        date_key: "YYYY-MM-DD"; only its digits are used
        words: Word list built by build_word_list

    Returns:
        The selected word
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    digits = re.sub(r"\D", "", date_key or "")
    index = int(digits) % len(words) if digits else 0
    word = words[index]

    if count_units(word) != word_length:
        for candidate in words:
            if count_units(candidate) == word_length:
                return candidate
    return word


def is_valid_guess(word: str, word_set: AbstractSet[str]) -> bool:
    """Exact membership test of the cleaned word."""
    if not word or not isinstance(word, str):
        return False
    return clean_text(word) in word_set


def date_key(day: Optional[date] = None) -> str:
    """YYYY-MM-DD key of a calendar day, today (local time) by default."""
    day = day or date.today()
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def parse_date_key(text: str) -> Optional[str]:
    """
    Normalise a user supplied date to a key.

    Accepts a calendar date ("2026-10-19") or an ISO 8601 datetime
    ("2026-10-19T12:00:00Z"); anything else, trailing text included, is
    rejected.

    Returns:
        The YYYY-MM-DD key, or None if text is not a valid date
    """
    if not text or not isinstance(text, str):
        return None
    text = text.strip()
    try:
        parsed = datetime.strptime(text, DATE_KEY_FORMAT).date()
    except ValueError:
        if "T" not in text:
            return None
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            return None
    return date_key(parsed)
