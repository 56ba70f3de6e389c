"""Single-game building blocks for Monty Hall Simulator.

Setup, contestant pick, host reveal, strategy resolution and judging.
"""

from __future__ import annotations

import numpy as np

from monty_hall_sim.models import (
    DOORS,
    LABELS,
    Door,
    GameState,
    Outcome,
    validate_door,
)
from monty_hall_sim.sampling import choose_one, shuffled


def create_game(rng: np.random.Generator) -> GameState:
    """Hide one car and two goats behind the three doors.

    Args:
        rng: Random number generator

    Returns:
        GameState with the labels uniformly permuted
    """
    return GameState(labels=shuffled(rng, LABELS))


def select_door(rng: np.random.Generator) -> Door:
    """Contestant's first pick, uniform over the three doors."""
    return choose_one(rng, DOORS)


def open_goat_door(game: GameState, pick: Door, rng: np.random.Generator) -> Door:
    """Door the host opens to show a goat.

    The host never opens the contestant's door or the car door. When the
    contestant holds the car, either goat door is opened with equal chance.

    Args:
        game: Current game
        pick: Contestant's first pick
        rng: Random number generator

    Returns:
        A goat door different from pick
    """
    validate_door(pick, "pick")

    candidates = [door for door in game.goat_doors if door != pick]
    if len(candidates) == 1:
        return candidates[0]

    return choose_one(rng, candidates)


def change_door(stay: bool, opened_door: Door, pick: Door) -> Door:
    """Final door for a strategy.

    Args:
        stay: Keep the first pick if True, otherwise switch
        opened_door: Door opened by the host
        pick: Contestant's first pick

    Returns:
        pick when staying, else the one door that is neither opened nor picked
    """
    validate_door(opened_door, "opened_door")
    validate_door(pick, "pick")
    if opened_door == pick:
        raise ValueError("opened_door and pick must differ")

    if stay:
        return pick

    (remaining,) = [door for door in DOORS if door not in (opened_door, pick)]
    return remaining


def determine_winner(final_pick: Door, game: GameState) -> Outcome:
    """WIN if the car is behind final_pick, LOSE if a goat is."""
    label = game[final_pick]
    if label == "car":
        return "WIN"
    if label == "goat":
        return "LOSE"
    raise ValueError(f"Unknown door label: {label!r}")
