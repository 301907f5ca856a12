#!/usr/bin/env python3
"""
Compare the brute force and random restart searches on random maps.

For each map size, both searches run on the same maps and the table shows
the cost gap and the runtime of each.
"""

import argparse

from tspsearch.log import setup_logging
from tspsearch.reporter import Reporter
from tspsearch.search import DEFAULT_ITERATIONS
from tspsearch.solver import compare_solvers

city_counts = [4, 5, 6, 7, 8, 9]


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--trials", type=int, default=10)
    ap.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS)
    ap.add_argument("--low", type=int, default=0)
    ap.add_argument("--high", type=int, default=300)
    ap.add_argument("--seed", type=int, default=42)
    args = ap.parse_args()

    setup_logging()
    reporter = Reporter()

    for n in city_counts:
        rows = compare_solvers(n, (args.low, args.high), trials=args.trials,
                               iterations=args.iterations, seed=args.seed)
        reporter.comparison(n, rows)


if __name__ == "__main__":
    main()
