import logging
from typing import NamedTuple

import numpy as np
from numba import njit

from tspsearch.representation import as_distance_matrix, path_cost, _path_cost, next_permutation

"""
SEARCH:

This module implements the two path searches over a distance matrix:
1. Exhaustive search over every permutation of the cities (exact, O(N! * N))
2. Bounded random restarts, keeping the best of K uniformly random paths

Both return a Solution, or None when the matrix is rejected.
"""

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 32


class Solution(NamedTuple):
    path: np.ndarray
    cost: int


@njit(cache=True)
def brute_force(distance_matrix):
    """
    Scan all permutations in lexicographic order and return the cheapest.

    Only a strictly cheaper path replaces the incumbent, so ties resolve
    to the first minimum reached.
    """
    n = distance_matrix.shape[0]
    path = np.arange(n)
    best_path = path.copy()
    best_cost = _path_cost(distance_matrix, path)

    while next_permutation(path):
        cost = _path_cost(distance_matrix, path)
        if cost < best_cost:
            best_cost = cost
            best_path[:] = path

    return best_path, best_cost


def solve_exact(distance_matrix, max_cities=None):
    """
    Find the optimal path by brute force.

    Args:
        distance_matrix: Square matrix of edge weights.
        max_cities: Optional cap on the number of cities. There is no cap by
                    default, the search then runs however long N! takes.
    """
    matrix = as_distance_matrix(distance_matrix)
    if matrix is None:
        return None

    n = matrix.shape[0]
    if max_cities is not None and n > max_cities:
        logger.error("Refusing brute force over %d cities (limit is %d)", n, max_cities)
        return None

    optimal_path, _ = brute_force(matrix)
    optimal_cost = path_cost(matrix, optimal_path)
    if optimal_cost is None:
        logger.error("The optimal cost failed to be found")
        return None

    return Solution(optimal_path, optimal_cost)


def solve_heuristic(distance_matrix, iterations=DEFAULT_ITERATIONS, rng=None):
    """
    Random restart search with a fixed budget.

    Starts from the identity path and draws `iterations` independent random
    permutations, keeping a draw only if it is strictly cheaper than the best so far.
    No early stopping, no acceptance of worse paths.

    Args:
        distance_matrix: Square matrix of edge weights.
        iterations: Number of random paths to draw.
        rng: Anything accepted by np.random.default_rng (seed, Generator or None).
    """
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")

    matrix = as_distance_matrix(distance_matrix)
    if matrix is None:
        return None

    rng = np.random.default_rng(rng)
    n = matrix.shape[0]

    optimal_path = np.arange(n, dtype=np.int64)
    optimal_cost = path_cost(matrix, optimal_path)
    if optimal_cost is None:
        logger.error("The optimal cost failed to be found")
        return None

    for _ in range(iterations):
        new_path = rng.permutation(n)
        new_cost = path_cost(matrix, new_path)
        if new_cost is None:
            logger.error("The optimal cost failed to be found")
            return None
        if new_cost < optimal_cost:
            optimal_path, optimal_cost = new_path, new_cost

    return Solution(optimal_path, optimal_cost)
