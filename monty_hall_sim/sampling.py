"""Sampling utilities for Monty Hall Simulator.

Centralized, reproducible randomness. Every random draw in the package goes
through a Generator passed in by the caller.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

import numpy as np

T = TypeVar("T")


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create a seeded random number generator.

    Args:
        seed: Random seed. If None, uses system entropy.

    Returns:
        NumPy Generator instance
    """
    return np.random.default_rng(seed)


def choose_one(rng: np.random.Generator, candidates: Sequence[T]) -> T:
    """Pick one item uniformly at random.

    Args:
        rng: Random number generator
        candidates: Non-empty sequence to choose from

    Returns:
        The chosen item, as a plain Python value
    """
    if len(candidates) == 0:
        raise ValueError("Cannot choose from an empty sequence")

    return candidates[int(rng.integers(len(candidates)))]


def shuffled(rng: np.random.Generator, items: Sequence[T]) -> tuple[T, ...]:
    """Return the items in a uniformly random order.

    Args:
        rng: Random number generator
        items: Items to permute (duplicates allowed)

    Returns:
        Tuple with the same items, permuted
    """
    order = rng.permutation(len(items))
    return tuple(items[int(i)] for i in order)
