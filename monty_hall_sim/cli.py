"""Command-line interface for Monty Hall Simulator.

Provides entry point for running batches of games from the shell.
"""

from __future__ import annotations

import argparse
import json

from monty_hall_sim.models import DEFAULT_GAMES
from monty_hall_sim.sampling import make_rng
from monty_hall_sim.simulator import play_n_games


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Monty Hall Simulator")

    parser.add_argument(
        "--games", type=int, default=DEFAULT_GAMES, help="Number of games to play"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--verbose", action="store_true", help="Print progress while playing"
    )
    parser.add_argument(
        "--json", action="store_true", help="Also print the summary as JSON"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    rng = make_rng(args.seed)

    try:
        batch = play_n_games(args.games, rng, show=False, verbose=args.verbose)
    except ValueError as exc:
        parser.error(str(exc))

    summary = batch.summary()

    # Print results
    print("Monty Hall Simulator Results")
    print("=" * 40)
    print(f"Games: {summary['games']}")
    print(f"Seed: {args.seed}")
    print()

    print("Outcome proportions:")
    print(batch.proportions())
    print()

    print("Win rates:")
    print(
        f"Stay: {summary['stay_win_rate']:.3f} "
        f"(SE {summary['stay_win_rate_se']:.3f}, "
        f"theory {summary['stay_theoretical']:.3f})"
    )
    print(
        f"Switch: {summary['switch_win_rate']:.3f} "
        f"(SE {summary['switch_win_rate_se']:.3f}, "
        f"theory {summary['switch_theoretical']:.3f})"
    )

    if args.json:
        print("\n" + "=" * 40)
        print("JSON Output:")
        print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
