"""Holiday cycle used by the holiday picker."""

from __future__ import annotations

from enum import Enum


class Holiday(Enum):
    CHRISTMAS = "🎄"
    EASTER = "🐰"
    HALLOWEEN = "🎃"
    ST_PATRICKS = "🍀"
    VALENTINES = "💝"


INITIAL_HOLIDAY: Holiday = Holiday.CHRISTMAS

# Ordered by holiday name.
ALPHABETICAL_TRANSITIONS: dict[Holiday, Holiday] = {
    Holiday.CHRISTMAS: Holiday.EASTER,
    Holiday.EASTER: Holiday.HALLOWEEN,
    Holiday.HALLOWEEN: Holiday.ST_PATRICKS,
    Holiday.ST_PATRICKS: Holiday.VALENTINES,
    Holiday.VALENTINES: Holiday.CHRISTMAS,
}

# Ordered by date within the year.
CHRONOLOGICAL_TRANSITIONS: dict[Holiday, Holiday] = {
    Holiday.VALENTINES: Holiday.ST_PATRICKS,
    Holiday.ST_PATRICKS: Holiday.EASTER,
    Holiday.EASTER: Holiday.HALLOWEEN,
    Holiday.HALLOWEEN: Holiday.CHRISTMAS,
    Holiday.CHRISTMAS: Holiday.VALENTINES,
}


def next_by_alphabet(holiday: Holiday) -> Holiday:
    return ALPHABETICAL_TRANSITIONS[holiday]


def next_by_year(holiday: Holiday) -> Holiday:
    return CHRONOLOGICAL_TRANSITIONS[holiday]
