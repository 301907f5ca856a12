import logging

import numpy as np

from tspsearch.representation import WEIGHT_DTYPE

"""
MAP GENERATOR:

Builds a random symmetric distance matrix for a complete graph of cities.
Weights are drawn uniformly from the half-open range [low, high); the
distance from a city to itself is always 0.
"""

logger = logging.getLogger(__name__)

WEIGHT_LIMITS = np.iinfo(WEIGHT_DTYPE)


def valid_weight_range(weight_range):
    """Check that (low, high) is a non-empty range of uint16 weights."""
    low, high = weight_range
    if high <= low:
        logger.error("Weight range cannot be reversed or empty")
        return False
    if low < WEIGHT_LIMITS.min or high - 1 > WEIGHT_LIMITS.max:
        logger.error("Weight range (%d, %d) does not fit in %s", low, high, WEIGHT_LIMITS.dtype)
        return False
    return True


def generate_map(num_cities, weight_range, rng=None):
    """
    Generate a random symmetric distance matrix.

    Args:
        num_cities: Number of cities N, the matrix is (N, N).
        weight_range: (low, high) with high > low, weights are drawn from [low, high).
        rng: Anything accepted by np.random.default_rng (seed, Generator or None).
    Returns:
        The (N, N) uint16 matrix, or None if the arguments were rejected.
    """
    if num_cities < 0:
        logger.error("Number of cities must be non-negative, got %d", num_cities)
        return None
    if not valid_weight_range(weight_range):
        return None

    rng = np.random.default_rng(rng)
    low, high = weight_range

    distance_matrix = np.zeros((num_cities, num_cities), dtype=WEIGHT_DTYPE)
    upper = np.triu_indices(num_cities, k=1)
    distance_matrix[upper] = rng.integers(low, high, size=len(upper[0]), dtype=WEIGHT_DTYPE)
    distance_matrix[upper[::-1]] = distance_matrix[upper]

    return distance_matrix
