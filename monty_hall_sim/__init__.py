"""Monty Hall Simulator

A tiny, readable simulator of the three-door Monty Hall game.
Uses NumPy for reproducible Monte Carlo runs comparing "stay" and "switch".
"""

__version__ = "0.1.0"
