"""Metrics and analysis utilities for Monty Hall Simulator.

Functions for analyzing simulation results and computing win rates.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from monty_hall_sim.models import OUTCOMES, STRATEGIES, RoundResult, results_frame

THEORETICAL_WIN_RATE = {"stay": 1.0 / 3.0, "switch": 2.0 / 3.0}


def win_proportions(results: list[RoundResult]) -> dict[str, float]:
    """Calculate the fraction of wins for each strategy.

    Args:
        results: Result rows from one or more games

    Returns:
        Dictionary mapping strategy name to win fraction
    """
    proportions = {}
    for strategy in STRATEGIES:
        wins = np.array(
            [r.outcome == "WIN" for r in results if r.strategy == strategy]
        )
        proportions[strategy] = float(wins.mean()) if len(wins) else 0.0
    return proportions


def outcome_table(results: list[RoundResult], decimals: int = 2) -> pd.DataFrame:
    """Row-normalised strategy x outcome table.

    Args:
        results: Result rows from one or more games
        decimals: Rounding applied to the proportions

    Returns:
        DataFrame indexed by strategy with WIN and LOSE columns
    """
    if len(results) == 0:
        table = pd.DataFrame(0.0, index=list(STRATEGIES), columns=list(OUTCOMES))
    else:
        df = results_frame(results)
        table = pd.crosstab(df["strategy"], df["outcome"], normalize="index")
        table = table.reindex(
            index=list(STRATEGIES), columns=list(OUTCOMES), fill_value=0.0
        )

    table.index.name = "strategy"
    table.columns.name = "outcome"
    return table.round(decimals)


def standard_error(p: float, n: int) -> float:
    """Binomial standard error of a proportion p estimated from n trials."""
    if n <= 0:
        return 0.0

    return float(np.sqrt(p * (1.0 - p) / n))


def summary(results: list[RoundResult]) -> dict[str, float | int]:
    """Generate summary statistics for simulation results.

    Args:
        results: Result rows, two per game

    Returns:
        Dictionary with summary statistics
    """
    games = sum(1 for r in results if r.strategy == "stay")
    rates = win_proportions(results)

    return {
        "games": games,
        "stay_win_rate": rates["stay"],
        "stay_win_rate_se": standard_error(rates["stay"], games),
        "switch_win_rate": rates["switch"],
        "switch_win_rate_se": standard_error(rates["switch"], games),
        "stay_theoretical": THEORETICAL_WIN_RATE["stay"],
        "switch_theoretical": THEORETICAL_WIN_RATE["switch"],
    }
