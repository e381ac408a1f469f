"""A number guessing game."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

TOO_HIGH = "higher phase please"
TOO_LOW = "lower phase please"


def _pick_number() -> int:
    return random.randint(1, 100)


@dataclass
class GuessGame:
    """Guess a number between 1 and 100; the game ends once it is found."""

    number: int = field(default_factory=_pick_number)
    attempts: int = field(default=0, init=False)
    solved: bool = field(default=False, init=False)

    def guess(self, value: int) -> str:
        """Take one guess and return the message for it."""
        if self.solved:
            raise RuntimeError("the number has already been guessed")
        self.attempts += 1
        if value > self.number:
            return TOO_HIGH
        if value < self.number:
            return TOO_LOW
        self.solved = True
        if self.attempts > 2:
            return f"The random is {self.number}"
        return f"you guessed in {self.attempts} attempt"