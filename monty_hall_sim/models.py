"""Data models for Monty Hall Simulator.

Contains Door, GameState, RoundResult and GameRecord with basic validation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import numpy as np
import pandas as pd

Door = Literal[1, 2, 3]
Label = Literal["car", "goat"]
StrategyName = Literal["stay", "switch"]
Outcome = Literal["WIN", "LOSE"]

DOORS: tuple[int, ...] = (1, 2, 3)
LABELS: tuple[str, ...] = ("car", "goat", "goat")
STRATEGIES: tuple[str, ...] = ("stay", "switch")
OUTCOMES: tuple[str, ...] = ("WIN", "LOSE")
DEFAULT_GAMES = 100


def validate_door(door: Door, name: str = "door") -> Door:
    """Check that a door number is one of 1, 2 or 3."""
    if isinstance(door, bool) or not isinstance(door, (int, np.integer)):
        raise ValueError(f"{name} must be an integer door number, got {door!r}")
    if door not in DOORS:
        raise ValueError(f"{name} must be one of {DOORS}, got {door!r}")
    return int(door)


@dataclass(frozen=True)
class GameState:
    """What sits behind each door, ordered by door number."""

    labels: tuple[Label, Label, Label]

    def __post_init__(self) -> None:
        """Validate door count, labels and prize count."""
        labels = tuple(self.labels)
        if len(labels) != len(DOORS):
            raise ValueError(
                f"Game must have exactly {len(DOORS)} doors, got {len(labels)}"
            )
        unknown = [label for label in labels if label not in LABELS]
        if unknown:
            raise ValueError(f"Unknown door labels: {unknown}")
        if labels.count("car") != 1:
            raise ValueError(
                f"Game must have exactly one car, got {labels.count('car')}"
            )
        object.__setattr__(self, "labels", labels)

    def __getitem__(self, door: Door) -> Label:
        """Label behind a door (doors are numbered from 1)."""
        return self.labels[validate_door(door) - 1]

    @property
    def prize_door(self) -> Door:
        return self.labels.index("car") + 1

    @property
    def goat_doors(self) -> list[Door]:
        return [door for door in DOORS if self[door] == "goat"]


@dataclass(frozen=True)
class RoundResult:
    """Outcome of one strategy in one game."""

    strategy: StrategyName
    outcome: Outcome

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy: {self.strategy}")
        if self.outcome not in OUTCOMES:
            raise ValueError(f"Unknown outcome: {self.outcome}")


@dataclass(frozen=True)
class GameRecord:
    """A fully played game, with both strategies judged on the same setup."""

    game: GameState
    first_pick: Door
    opened_door: Door
    stay_pick: Door
    switch_pick: Door
    stay: RoundResult
    switch: RoundResult

    @property
    def results(self) -> list[RoundResult]:
        """The two result rows, stay first."""
        return [self.stay, self.switch]

    def to_frame(self) -> pd.DataFrame:
        """Two-row table with columns strategy and outcome."""
        return results_frame(self.results)


def results_frame(results: list[RoundResult]) -> pd.DataFrame:
    """Build a strategy/outcome table from result rows."""
    return pd.DataFrame(
        {
            "strategy": [r.strategy for r in results],
            "outcome": [r.outcome for r in results],
        },
        columns=["strategy", "outcome"],
    )
