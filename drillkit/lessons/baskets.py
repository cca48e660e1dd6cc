"""Fruit baskets, a football scores table and an ice-cream counter."""

from __future__ import annotations

import enum
from collections.abc import MutableMapping
from dataclasses import dataclass

_U8_MAX = 255


class Fruit(enum.Enum):
    """Kinds of fruit that can go into a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def default_basket() -> dict[str, int]:
    """A basket holding at least three kinds and at least five fruits."""
    return {"banana": 2, "apple": 10, "mango": 20}


def fill_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add ten of every kind of fruit that is not in the basket yet."""
    for fruit in Fruit:
        basket.setdefault(fruit, 10)


@dataclass
class Team:
    """Goals a team scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not all(c in "0123456789" for c in digits):
        raise ValueError(f"invalid goal count: {text!r}")
    goals = int(digits)
    if goals > _U8_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return goals


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals per team from "team1,team2,goals1,goals2" lines."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        goals_1 = _parse_goals(fields[2])
        goals_2 = _parse_goals(fields[3])

        first = scores.setdefault(team_1, Team())
        first.goals_scored += goals_1
        first.goals_conceded += goals_2

        second = scores.setdefault(team_2, Team())
        second.goals_scored += goals_2
        second.goals_conceded += goals_1
    return scores


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice creams left at an hour: 5 before 22, 0 until 24, None afterwards."""
    if time_of_day < 0:
        raise ValueError(f"time of day cannot be negative: {time_of_day}")
    if time_of_day <= 21:
        return 5
    if time_of_day <= 24:
        return 0
    return None