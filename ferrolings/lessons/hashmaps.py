"""Dictionaries: fruit baskets and a football scores table."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_U8_MAX = 255
_UNSIGNED = re.compile(r"\+?[0-9]+", re.ASCII)


def fruit_basket() -> dict[str, int]:
    """Return a basket with at least three kinds and five pieces of fruit."""
    return {"banana": 2, "mango": 2, "apple": 2}


class Fruit(Enum):
    """Kinds of fruit for the cake."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every fruit kind missing from ``basket``, leaving the others alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


def _parse_u8(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    number = int(text)
    if number > _U8_MAX:
        raise ValueError("number too large to fit in target type")
    return number


@dataclass
class Team:
    """A team's name and its goal tally."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0

    def add(self, goals_scored: int, goals_conceded: int) -> None:
        """Add a match's goals; raise OverflowError past 255 of either."""
        scored = self.goals_scored + goals_scored
        conceded = self.goals_conceded + goals_conceded
        if scored > _U8_MAX or conceded > _U8_MAX:
            raise OverflowError("attempt to add with overflow")
        self.goals_scored = scored
        self.goals_conceded = conceded


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build the table from lines of ``team_1,team_2,goals_1,goals_2``.

    Raises ValueError for a line without four fields or with goals that are
    not numbers from 0 to 255.
    """
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        goals_1, goals_2 = _parse_u8(fields[2]), _parse_u8(fields[3])
        scores.setdefault(team_1, Team(team_1)).add(goals_1, goals_2)
        scores.setdefault(team_2, Team(team_2)).add(goals_2, goals_1)
    return scores