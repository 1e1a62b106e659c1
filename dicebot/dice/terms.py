"""Term variants that make up a dice expression."""

from __future__ import annotations

import random
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Union

PERCENTILE_FACES = 100


@dataclass(frozen=True)
class Constant:
    value: int

    def evaluate(self, rng: Optional[random.Random] = None) -> int:
        return self.value

    def average(self) -> Fraction:
        return Fraction(self.value)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class DiceRoll:
    """``count`` dice, each uniform over ``1..faces``."""

    count: int
    faces: int

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError("A dice roll needs at least one die.")
        if self.faces < 1:
            raise ValueError("A die needs at least one face.")

    def evaluate(self, rng: Optional[random.Random] = None) -> int:
        rng = rng or random.Random()
        return sum(rng.randint(1, self.faces) for _ in range(self.count))

    def average(self) -> Fraction:
        return self.count * Fraction(self.faces + 1, 2)

    def __str__(self) -> str:
        if self.count == 1:
            return f"d{self.faces}"
        return f"{self.count}d{self.faces}"


Term = Union[Constant, DiceRoll]


@dataclass(frozen=True)
class SignedTerm:
    sign: int
    term: Term

    def __post_init__(self) -> None:
        if self.sign not in (1, -1):
            raise ValueError(f"Sign must be +1 or -1, got {self.sign!r}.")

    @property
    def is_dice(self) -> bool:
        return isinstance(self.term, DiceRoll)

    def evaluate(self, rng: Optional[random.Random] = None) -> int:
        return self.sign * self.term.evaluate(rng)

    def average(self) -> Fraction:
        return self.sign * self.term.average()


__all__ = ["Constant", "DiceRoll", "SignedTerm", "Term", "PERCENTILE_FACES"]
