#!/usr/bin/env python3
"""
Solver runner for the descriptor pairs puzzle.

Prints every solution for the given number of pairs, grouped by the number
of unique digits.

Usage:
    python main.py 6
"""

import argparse

from pydantic import ValidationError

from config_models import SolverConfiguration
from solvers.descriptor_solver import solve


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Descriptor Pairs Solver")
    parser.add_argument("pairs", type=int, help="Total number of pairs (non-negative integer)")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main runner function."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = SolverConfiguration(pairs=args.pairs)
    except ValidationError as e:
        parser.error(f"invalid pairs value {args.pairs}: {e.errors()[0]['msg']}")

    solve(config.pairs)


if __name__ == "__main__":
    main()
