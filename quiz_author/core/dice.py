"""Rules for the two-dice roller."""

from __future__ import annotations

import random
from enum import Enum

INITIAL_LEFT_DIE: int = 1
INITIAL_RIGHT_DIE: int = 2
DIE_FACES: int = 6

_rng = random.Random()


class RollOutcome(Enum):
    WIN = "Win"
    LOSE = "Lose"


def d6(rng: random.Random | None = None) -> int:
    """Roll a six-sided die, returning an integer from 1 to 6 inclusive."""
    return (rng or _rng).randint(1, DIE_FACES)


def roll_outcome(left: int, right: int) -> RollOutcome | None:
    """Snake eyes lose, any other pair wins, everything else is undecided."""
    if left == 1 and right == 1:
        return RollOutcome.LOSE
    if left == right:
        return RollOutcome.WIN
    return None
