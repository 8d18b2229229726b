"""
Game Data Models

Contains the verdict enum and the immutable game state value.
"""

from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple


@total_ordering
class Verdict(Enum):
    """Per-unit result of a guess, ordered ABSENT < PRESENT < CORRECT."""
    ABSENT = "absent"
    PRESENT = "present"
    CORRECT = "correct"

    @property
    def rank(self) -> int:
        return _VERDICT_RANK[self]

    def __lt__(self, other):
        if not isinstance(other, Verdict):
            return NotImplemented
        return self.rank < other.rank


_VERDICT_RANK = {Verdict.ABSENT: 0, Verdict.PRESENT: 1, Verdict.CORRECT: 2}


# One guess row: ((unit, verdict), ...)
GuessResult = Tuple[Tuple[str, Verdict], ...]


@dataclass(frozen=True)
class GameState:
    """
    Server-side state of one round.

    Never mutated: every accepted guess produces a new GameState through
    apply_guess in the game service.
    """
    game_id: str
    target_word: str
    max_rounds: int
    date: Optional[str] = None
    guesses: Tuple[str, ...] = ()
    guess_results: Tuple[GuessResult, ...] = ()
    keyboard: Mapping[str, Verdict] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def current_round(self) -> int:
        return len(self.guesses)

    @property
    def won(self) -> bool:
        return bool(self.guesses) and self.guesses[-1] == self.target_word

    @property
    def game_over(self) -> bool:
        return self.won or self.current_round >= self.max_rounds

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready view; the answer is only revealed once the game is over."""
        return {
            "game_id": self.game_id,
            "date": self.date,
            "current_round": self.current_round,
            "max_rounds": self.max_rounds,
            "game_over": self.game_over,
            "won": self.won,
            "guesses": list(self.guesses),
            "guess_results": [
                [[unit, verdict.value] for unit, verdict in row]
                for row in self.guess_results
            ],
            "keyboard": {symbol: verdict.value for symbol, verdict in self.keyboard.items()},
            "answer": self.target_word if self.game_over else None,
        }
