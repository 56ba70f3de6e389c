"""Simulation engine for Monty Hall Simulator.

Plays single games and batches of games, collecting results per strategy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
import pandas as pd

from monty_hall_sim.game import (
    change_door,
    create_game,
    determine_winner,
    open_goat_door,
    select_door,
)
from monty_hall_sim.metrics import outcome_table, summary, win_proportions
from monty_hall_sim.models import (
    DEFAULT_GAMES,
    STRATEGIES,
    GameRecord,
    RoundResult,
    results_frame,
)
from monty_hall_sim.sampling import make_rng


@dataclass
class BatchResult:
    """Results of a batch of games, two rows per game in play order."""

    n_games: int
    results: list[RoundResult] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.results)

    def to_frame(self) -> pd.DataFrame:
        """All result rows as a strategy/outcome table."""
        return results_frame(self.results)

    def proportions(self, decimals: int = 2) -> pd.DataFrame:
        """WIN/LOSE proportions per strategy."""
        return outcome_table(self.results, decimals)

    def win_proportion(self, strategy: str) -> float:
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy: {strategy}")
        return win_proportions(self.results)[strategy]

    def summary(self) -> dict[str, Any]:
        return summary(self.results)


def play_game(rng: np.random.Generator) -> GameRecord:
    """Play one game and judge both strategies on it.

    Both strategies share the same setup, first pick and opened door, so each
    game is a paired comparison.
    """
    game = create_game(rng)
    first_pick = select_door(rng)
    opened_door = open_goat_door(game, first_pick, rng)

    stay_pick = change_door(True, opened_door, first_pick)
    switch_pick = change_door(False, opened_door, first_pick)

    return GameRecord(
        game=game,
        first_pick=first_pick,
        opened_door=opened_door,
        stay_pick=stay_pick,
        switch_pick=switch_pick,
        stay=RoundResult("stay", determine_winner(stay_pick, game)),
        switch=RoundResult("switch", determine_winner(switch_pick, game)),
    )


def play_n_games(
    n: int = DEFAULT_GAMES,
    rng: np.random.Generator | None = None,
    *,
    seed: int | None = None,
    show: bool = True,
    verbose: bool = False,
) -> BatchResult:
    """Play n games and collect every result row.

    Args:
        n: Number of games, must be positive
        rng: Random number generator. If None, one is made from seed.
        seed: Seed used only when rng is None
        show: Print the rounded proportion table when done
        verbose: Print progress every ~5% of games

    Returns:
        BatchResult holding 2n rows
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValueError(f"Number of games must be an integer, got {n!r}")
    if n <= 0:
        raise ValueError(f"Number of games must be positive, got {n}")

    if rng is None:
        rng = make_rng(seed)

    batch = BatchResult(n_games=int(n))
    step = max(1, n // 20)

    for i in range(n):
        record = play_game(rng)
        batch.results.extend(record.results)

        if verbose and ((i + 1) % step == 0 or i + 1 == n):
            print(f"Progress: {i + 1}/{n}")

    if show:
        print(batch.proportions())

    return batch
