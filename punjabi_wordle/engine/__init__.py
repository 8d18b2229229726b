"""
Gurmukhi Wordle Engine

Pure functions for classifying code points, segmenting words into character
units, scoring guesses and folding results into keyboard state.
"""

from .gurmukhi import CharClass, classify, clean_text
from .segmenter import segment_units, count_units, unit_at, base_letters
from .scoring import evaluate, evaluate_units, pattern_string
from .keyboard import update_keyboard, type_symbol, backspace
from .selection import build_word_list, word_for_date, is_valid_guess, date_key, parse_date_key

__all__ = [
    'CharClass', 'classify', 'clean_text',
    'segment_units', 'count_units', 'unit_at', 'base_letters',
    'evaluate', 'evaluate_units', 'pattern_string',
    'update_keyboard', 'type_symbol', 'backspace',
    'build_word_list', 'word_for_date', 'is_valid_guess', 'date_key', 'parse_date_key',
]
