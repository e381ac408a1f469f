"""A deterministic finite automaton over the symbols 0 and 1."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping


@dataclass
class Dfa:
    """A DFA whose table maps each state to its next states on 0 and on 1.

    Any symbol other than ``"0"`` is read as 1.
    """

    table: Mapping[str, tuple[str, str]]
    initial: str
    finals: Iterable[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        self.table = {state: tuple(targets) for state, targets in self.table.items()}
        for state, targets in self.table.items():
            if len(targets) != 2:
                raise ValueError(f"state {state!r} needs exactly two next states")
        if self.initial not in self.table:
            raise ValueError(f"initial state {self.initial!r} has no transitions")
        self.finals = frozenset(self.finals)

    def run(self, word: str) -> list[tuple[str, str, str]]:
        """Return the transitions taken on ``word`` as (state, symbol, next state)."""
        transitions = []
        current = self.initial
        for symbol in word:
            try:
                targets = self.table[current]
            except KeyError:
                raise ValueError(f"state {current!r} has no transitions") from None
            following = targets[0 if symbol == "0" else 1]
            transitions.append((current, symbol, following))
            current = following
        return transitions

    def accepts(self, word: str) -> bool:
        """Tell whether the automaton ends in a final state after reading ``word``."""
        transitions = self.run(word)
        last = transitions[-1][2] if transitions else self.initial
        return last in self.finals