"""
Wordle-style scoring over Gurmukhi character units.

Conventions (pattern_string):
  - 'G'  : correct  = same unit in the same position
  - 'Y'  : present  = unit found elsewhere in the target
  - '-'  : absent

Algorithm (two-pass, on units rather than code points):
  1) First pass marks exact unit matches and consumes those target slots.
  2) Second pass scans the unconsumed target slots left to right for every
     remaining guess unit; the first match is claimed and consumed.

The relaxed variant compares base letters in the second pass, so a guess
unit whose consonant (or conjunct) appears elsewhere in the target is
reported as present even when its vowel sign differs. The first pass always
compares full units.

Preconditions:
  - target and guess both segment into the same number of units (5 in play).
    Callers check this with count_units before scoring.
"""

from typing import List, Optional, Sequence

from ..models.game import Verdict
from .segmenter import base_letters, segment_units

_PATTERN_CHARS = {Verdict.CORRECT: "G", Verdict.PRESENT: "Y", Verdict.ABSENT: "-"}


def evaluate_units(target_units: Sequence[str], guess_units: Sequence[str],
                   relaxed: bool = False) -> List[Verdict]:
    """
    Score already-segmented words.

    Args:
        target_units: Units of the answer
        guess_units: Units of the guess, same length as target_units
        relaxed: Match on base letters in the second pass

    Returns:
        One Verdict per guess unit
    """
    n = len(guess_units)
    verdicts: List[Optional[Verdict]] = [None] * n
    consumed = [False] * len(target_units)

    for i in range(n):
        if guess_units[i] == target_units[i]:
            verdicts[i] = Verdict.CORRECT
            consumed[i] = True

    for i in range(n):
        if verdicts[i] is not None:
            continue

        guess_key = base_letters(guess_units[i]) if relaxed else guess_units[i]
        for j, target_unit in enumerate(target_units):
            if consumed[j]:
                continue
            target_key = base_letters(target_unit) if relaxed else target_unit
            if guess_key == target_key:
                verdicts[i] = Verdict.PRESENT
                consumed[j] = True
                break
        else:
            verdicts[i] = Verdict.ABSENT

    return [verdict for verdict in verdicts if verdict is not None]


def evaluate(target: str, guess: str, relaxed: bool = False) -> List[Verdict]:
    """
    Score a guess against the target word.

    Examples:
      evaluate("ਪਰਮਾਤਮਾ", "ਹਰਿਮੰਦਰ")               -> [-, -, -, -, Y]
      evaluate("ਪਰਮਾਤਮਾ", "ਹਰਿਮੰਦਰ", relaxed=True)  -> [-, Y, Y, -, -]
    """
    return evaluate_units(segment_units(target), segment_units(guess), relaxed=relaxed)


def pattern_string(verdicts: Sequence[Verdict]) -> str:
    """Render verdicts as a compact G/Y/- string."""
    return "".join(_PATTERN_CHARS[verdict] for verdict in verdicts)
