import logging

import numpy as np
from numba import njit

"""
REPRESENTATION:

Distance matrices are square numpy arrays of shape (N, N) with dtype uint16,
where entry [i, j] is the cost of travelling from city i to city j.
Paths are 1D int64 arrays of city indices in visiting order.
The cost of a path is the sum over consecutive pairs; it is not closed.
"""

logger = logging.getLogger(__name__)

WEIGHT_DTYPE = np.uint16


def is_valid_matrix(distance_matrix):
    """
    Check that a distance matrix is non-empty and square.

    Symmetry and a zero diagonal are NOT checked.
    """
    if isinstance(distance_matrix, np.ndarray):
        return (
            distance_matrix.ndim == 2
            and distance_matrix.shape[0] > 0
            and distance_matrix.shape[0] == distance_matrix.shape[1]
        )

    n = len(distance_matrix)
    return n != 0 and all(np.ndim(row) == 1 and len(row) == n for row in distance_matrix)


def as_distance_matrix(distance_matrix):
    """
    Validate and convert an array-like into a uint16 distance matrix.

    Returns None (and logs) if the matrix is empty or not square, or if its
    weights are not integers that fit in uint16.
    """
    if not is_valid_matrix(distance_matrix):
        logger.error("The provided map must be square")
        return None

    matrix = np.asarray(distance_matrix)
    if matrix.dtype == np.bool_ or not np.issubdtype(matrix.dtype, np.integer):
        logger.error("The provided map must hold integer weights, got %s", matrix.dtype)
        return None

    limits = np.iinfo(WEIGHT_DTYPE)
    if matrix.min() < limits.min or matrix.max() > limits.max:
        logger.error("The provided map has weights outside of [%d, %d]", limits.min, limits.max)
        return None

    return matrix.astype(WEIGHT_DTYPE, copy=False)


@njit(cache=True)
def _path_cost(distance_matrix, path):
    total = np.uint64(0)
    for k in range(path.shape[0] - 1):
        total += np.uint64(distance_matrix[path[k], path[k + 1]])
    return total


def path_cost(distance_matrix, path):
    """
    Calculate the cost of walking a path through the distance matrix.

    The path does not have to be a permutation; a path of length 0 or 1
    costs 0. Returns None if the matrix is invalid.
    Raises IndexError if the path refers to a city outside the matrix.
    """
    matrix = as_distance_matrix(distance_matrix)
    if matrix is None:
        return None

    path = np.asarray(path, dtype=np.int64).reshape(-1)
    n = matrix.shape[0]
    if path.size and (path.min() < 0 or path.max() >= n):
        raise IndexError(f"path refers to cities outside of a {n}-city map")

    return int(_path_cost(matrix, path))


def random_path(distance_matrix, rng=None):
    """
    Draw a uniformly random visiting order over all cities of the matrix.
    """
    if not is_valid_matrix(distance_matrix):
        logger.error("The provided map must be square")
        return None

    rng = np.random.default_rng(rng)
    return rng.permutation(len(distance_matrix))


def is_permutation(path, n):
    """Check that a path visits each of the n cities exactly once."""
    path = np.asarray(path)
    return path.shape == (n,) and np.array_equal(np.sort(path), np.arange(n))


@njit(cache=True)
def next_permutation(path):
    """
    Rearrange path in-place into its lexicographic successor.

    Returns False (leaving the path untouched) if it was already the last permutation.
    """
    n = path.shape[0]
    i = n - 2
    while i >= 0 and path[i] >= path[i + 1]:
        i -= 1
    if i < 0:
        return False

    j = n - 1
    while path[j] <= path[i]:
        j -= 1
    path[i], path[j] = path[j], path[i]

    # Reverse the suffix
    lo, hi = i + 1, n - 1
    while lo < hi:
        path[lo], path[hi] = path[hi], path[lo]
        lo += 1
        hi -= 1
    return True


def permutations(n):
    """
    Lazily yield all permutations of range(n) in lexicographic order.

    Each permutation is a fresh copy, so callers may keep them.
    """
    path = np.arange(n, dtype=np.int64)
    yield path.copy()
    while next_permutation(path):
        yield path.copy()
