from tspsearch.representation import (
    is_valid_matrix,
    as_distance_matrix,
    path_cost,
    random_path,
    is_permutation,
    next_permutation,
    permutations,
)
from tspsearch.generator import generate_map
from tspsearch.search import Solution, solve_exact, solve_heuristic, DEFAULT_ITERATIONS
from tspsearch.solver import Config, TSPSolver, compare_solvers
