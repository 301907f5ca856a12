import time
from typing import NamedTuple, Optional

import numpy as np

from tspsearch.generator import generate_map
from tspsearch.search import DEFAULT_ITERATIONS, Solution, solve_exact, solve_heuristic


class Config(NamedTuple):
    distance_matrix: np.ndarray
    iterations: int = DEFAULT_ITERATIONS
    max_exact_cities: Optional[int] = None
    seed: Optional[int] = None


class TSPSolver:
    def __init__(
        self,
        distance_matrix,
        iterations: int = DEFAULT_ITERATIONS,
        max_exact_cities: Optional[int] = None,
        seed: Optional[int] = None,
    ):
        self.config = Config(
            distance_matrix=distance_matrix,
            iterations=iterations,
            max_exact_cities=max_exact_cities,
            seed=seed,
        )
        self.rng = np.random.default_rng(seed)

    def solve_exact(self) -> Optional[Solution]:
        """Brute force the optimal path."""
        return solve_exact(self.config.distance_matrix, max_cities=self.config.max_exact_cities)

    def solve_heuristic(self) -> Optional[Solution]:
        """Best of `iterations` random paths, drawing from this solver's generator."""
        return solve_heuristic(self.config.distance_matrix, self.config.iterations, rng=self.rng)

    @property
    def num_cities(self) -> int:
        return len(self.config.distance_matrix)


class Comparison(NamedTuple):
    trial: int
    exact_cost: int
    heuristic_cost: int
    gap: int
    exact_time: float
    heuristic_time: float


def compare_solvers(
    num_cities: int,
    weight_range: tuple,
    trials: int = 30,
    iterations: int = DEFAULT_ITERATIONS,
    seed: Optional[int] = None,
):
    """
    Run both searches on `trials` random maps and record how far the
    heuristic lands from the optimum (gap = heuristic cost - exact cost).

    Returns a list of Comparison rows, one per map. Trials whose map or
    solution could not be produced are skipped.
    """
    rng = np.random.default_rng(seed)
    rows = []

    for trial in range(trials):
        distance_matrix = generate_map(num_cities, weight_range, rng)
        if distance_matrix is None:
            continue

        start_time = time.perf_counter()
        exact = solve_exact(distance_matrix)
        exact_time = time.perf_counter() - start_time

        start_time = time.perf_counter()
        heuristic = solve_heuristic(distance_matrix, iterations, rng=rng)
        heuristic_time = time.perf_counter() - start_time

        if exact is None or heuristic is None:
            continue

        rows.append(Comparison(
            trial=trial,
            exact_cost=exact.cost,
            heuristic_cost=heuristic.cost,
            gap=heuristic.cost - exact.cost,
            exact_time=exact_time,
            heuristic_time=heuristic_time,
        ))

    return rows
