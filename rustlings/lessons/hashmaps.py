"""Dictionaries: fruit baskets and a football scores table."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from enum import Enum, auto

_GOALS_MAX = 255


class Fruit(Enum):
    """Kinds of fruit for the cake."""

    APPLE = auto()
    BANANA = auto()
    MANGO = auto()
    LYCHEE = auto()
    PINEAPPLE = auto()


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and at least five pieces."""
    return {"banana": 2, "apple": 3, "orange": 4, "grape": 5, "mango": 6}


def fill_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add one of every fruit kind not yet in the basket, leaving the others alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """Goals a team scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not text.isascii() or not text.lstrip("+").isdigit() or text.count("+") > 1:
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _GOALS_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return value


def _add_goals(current: int, extra: int) -> int:
    total = current + extra
    if total > _GOALS_MAX:
        raise OverflowError("goal total does not fit in 8 unsigned bits")
    return total


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table from lines of "team_1,team_2,goals_1,goals_2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])

        team_1 = scores.setdefault(team_1_name, Team())
        team_1.goals_scored = _add_goals(team_1.goals_scored, team_1_score)
        team_1.goals_conceded = _add_goals(team_1.goals_conceded, team_2_score)

        team_2 = scores.setdefault(team_2_name, Team())
        team_2.goals_scored = _add_goals(team_2.goals_scored, team_2_score)
        team_2.goals_conceded = _add_goals(team_2.goals_conceded, team_1_score)
    return scores