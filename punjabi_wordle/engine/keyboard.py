"""
Keyboard highlighting and guess-buffer reducers.

All functions here are pure: they take the current value and return a new
one, leaving their inputs untouched.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Sequence, Tuple

from ..models.game import Verdict
from .gurmukhi import CharClass, classify, is_base_letter, is_matra
from .segmenter import count_units

WORD_LENGTH = 5

MATRA_FIRST_MESSAGE = "ਮਾਤਰਾ ਤੋਂ ਪਹਿਲਾਂ ਵਿਅੰਜਨ ਟਾਈਪ ਕਰੋ"


def upgrade(current: Optional[Verdict], new: Verdict) -> Verdict:
    """Keep the better of two states; keys never move down."""
    if current is None or current < new:
        return new
    return current


def update_keyboard(keyboard: Mapping[str, Verdict],
                    guess_units: Sequence[str],
                    verdicts: Sequence[Verdict],
                    target: str) -> Mapping[str, Verdict]:
    """
    Fold one scored guess into the keyboard state.

    Args:
        keyboard: Current symbol -> Verdict mapping
        guess_units: Units of the submitted guess
        verdicts: Verdict of each unit
        target: Answer word, used to check matras of present units

    Returns:
        New read-only mapping
    """
    target_chars = set(target)
    result: Dict[str, Verdict] = dict(keyboard)

    for unit, verdict in zip(guess_units, verdicts):
        for char in unit:
            if verdict is Verdict.PRESENT and is_matra(char):
                # A matra only counts as present if the target actually uses it
                new = Verdict.PRESENT if char in target_chars else Verdict.ABSENT
            else:
                new = verdict
            result[char] = upgrade(result.get(char), new)

    return MappingProxyType(result)


def type_symbol(buffer: str, symbol: str,
                word_length: int = WORD_LENGTH) -> Tuple[str, Optional[str]]:
    """
    Append a key press to the guess buffer.

    Returns:
        (new_buffer, message); message is set when the key was refused
    """
    if not symbol or classify(symbol) is CharClass.OTHER:
        return buffer, None

    if not is_base_letter(symbol):
        # Matras and virama attach to the previous unit
        if count_units(buffer) == 0:
            return buffer, MATRA_FIRST_MESSAGE
        return buffer + symbol, None

    # A letter after a virama joins the conjunct and adds no unit
    if count_units(buffer + symbol) > word_length:
        return buffer, None
    return buffer + symbol, None


def backspace(buffer: str) -> str:
    """Remove the last code point of the buffer."""
    return buffer[:-1]
