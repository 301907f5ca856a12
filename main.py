import argparse
import logging

import numpy as np

from tspsearch.generator import generate_map
from tspsearch.log import setup_logging
from tspsearch.reporter import Reporter
from tspsearch.search import DEFAULT_ITERATIONS
from tspsearch.solver import TSPSolver

logger = logging.getLogger("tspsearch.main")


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Solve a random TSP map by brute force and by random restarts.")
    ap.add_argument("--cities", type=int, default=10)
    ap.add_argument("--low", type=int, default=1, help="lowest edge weight (inclusive)")
    ap.add_argument("--high", type=int, default=1, help="highest edge weight (exclusive)")
    ap.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--max-exact-cities", type=int, default=None)
    ap.add_argument("--log-level", default="ERROR")
    return ap.parse_args(argv)


def main(argv=None, reporter: Reporter = None):
    args = parse_args(argv)
    setup_logging(args.log_level.upper())
    reporter = reporter if reporter is not None else Reporter()

    rng = np.random.default_rng(args.seed)
    distance_matrix = generate_map(args.cities, (args.low, args.high), rng)
    if distance_matrix is None:
        distance_matrix = np.zeros((0, 0), dtype=np.uint16)

    solver = TSPSolver(
        distance_matrix,
        iterations=args.iterations,
        max_exact_cities=args.max_exact_cities,
        seed=args.seed,
    )

    solution = solver.solve_exact()
    if solution is None:
        logger.error("Brute Force TSP finding failed")
    else:
        reporter.report("Brute Force", distance_matrix, solution)

    solution = solver.solve_heuristic()
    if solution is None:
        logger.error("Random Restart TSP finding failed")
    else:
        reporter.report("Random Restart", distance_matrix, solution)


if __name__ == "__main__":
    main()
