"""
Game Configuration Constants Module

Game rules and the curated Punjabi word list. The list is filtered once at
import: only words that segment into exactly WORD_LENGTH character units are
kept, in file order.
"""

import json
import os
from collections import Counter
from typing import Dict, FrozenSet, List, Final

from ..engine.gurmukhi import VIRAMA, is_matra
from ..engine.segmenter import count_units, segment_units
from ..engine.selection import build_word_list

WORD_LENGTH: Final[int] = 5
"""Number of character units in every playable word."""

MAX_ROUNDS: Final[int] = 6
"""Maximum number of guess attempts allowed per game."""


def _load_word_list() -> List[str]:
    """
    Load and filter the word list from punjabi_words.json.

    Returns:
        List[str]: Cleaned, de-duplicated 5-unit words

    Raises:
        FileNotFoundError: If punjabi_words.json file is not found
        ValueError: If the JSON is malformed or no playable word remains
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'punjabi_words.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            raw_words = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in punjabi_words.json: {e}")

    if not isinstance(raw_words, list):
        raise ValueError("JSON file must contain an array of words")

    words = build_word_list(raw_words, WORD_LENGTH)
    if not words:
        raise ValueError("Word list cannot be empty")

    return words


# Order matters: the daily word is indexed by date into this list
WORD_LIST: Final[List[str]] = _load_word_list()

WORD_SET: Final[FrozenSet[str]] = frozenset(WORD_LIST)


def validate_word_list_integrity(words: List[str] = WORD_LIST) -> bool:
    """
    Validates the integrity and consistency of the word database.

    Checks that every word is exactly WORD_LENGTH units and that there are no
    duplicates.

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        units = count_units(word)
        if units != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' has {units} units, expected {WORD_LENGTH}")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: List[str] = WORD_LIST) -> Dict:
    """
    Analyzes the word list.

    Returns:
        dict: total_words, unit_frequency, matra_frequency, conjunct_words
            and the five most common units
    """
    if not words:
        return {"error": "Word list is empty"}

    unit_frequency: Counter = Counter()
    matra_frequency: Counter = Counter()
    conjunct_words = 0

    for word in words:
        unit_frequency.update(segment_units(word))
        matra_frequency.update(char for char in word if is_matra(char))
        if VIRAMA in word:
            conjunct_words += 1

    return {
        "total_words": len(words),
        "unit_frequency": dict(unit_frequency),
        "matra_frequency": dict(matra_frequency),
        "conjunct_words": conjunct_words,
        "most_common_units": unit_frequency.most_common(5),
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Words: {stats['total_words']}, with conjuncts: {stats['conjunct_words']}")
        print(f" Most common units: {stats['most_common_units']}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
