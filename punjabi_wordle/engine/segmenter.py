"""
Character unit segmentation for Gurmukhi words.

A "letter" of the game is a character unit, not a code point:

    UNIT -> BASE_LETTER (VIRAMA BASE_LETTER)? MATRA*

One base letter, optionally fused once with a second base letter through the
virama (a conjunct such as ਮ੍ਰ), followed by every matra that attaches to it.
Combining marks that appear later (a second virama, a virama after a matra)
stay with the unit they follow. Marks with no unit before them are dropped.

Examples:
    segment_units("ਪਰਮਾਤਮਾ")    -> ['ਪ', 'ਰ', 'ਮਾ', 'ਤ', 'ਮਾ']
    segment_units("ਅੰਮ੍ਰਿਤਸਰ")  -> ['ਅੰ', 'ਮ੍ਰਿ', 'ਤ', 'ਸ', 'ਰ']
"""

from typing import List

from .gurmukhi import clean_text, is_base_letter, is_matra, is_virama


def segment_units(text: str) -> List[str]:
    """
    Split text into its ordered character units.

    Args:
        text: Raw input; non-Gurmukhi code points are stripped first

    Returns:
        List of unit strings whose concatenation is the cleaned input
        (minus any leading orphan marks)
    """
    chars = list(clean_text(text))
    units: List[str] = []
    i = 0

    while i < len(chars):
        char = chars[i]

        if not is_base_letter(char):
            # Matra or virama: belongs to the unit before it, if any
            if units:
                units[-1] += char
            i += 1
            continue

        unit = char
        i += 1

        # Conjunct: letter + virama (+ letter)
        if i < len(chars) and is_virama(chars[i]):
            unit += chars[i]
            i += 1
            if i < len(chars) and is_base_letter(chars[i]):
                unit += chars[i]
                i += 1

        while i < len(chars) and is_matra(chars[i]):
            unit += chars[i]
            i += 1

        units.append(unit)

    return units


def count_units(text: str) -> int:
    """Number of character units in text."""
    return len(segment_units(text))


def unit_at(text: str, index: int) -> str:
    """
    Return the unit at a 0-based position.

    Args:
        text: Word to segment
        index: Unit position

    Returns:
        The unit string, or "" when index is out of range
    """
    units = segment_units(text)
    if index < 0 or index >= len(units):
        return ""
    return units[index]


def base_letters(unit: str) -> str:
    """
    Base-letter skeleton of a unit: matras removed, conjunct kept.

    ਮ੍ਰਿ -> ਮ੍ਰ, ਮਾ -> ਮ
    """
    return "".join(char for char in unit if not is_matra(char))
