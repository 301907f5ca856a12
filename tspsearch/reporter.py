from typing import TYPE_CHECKING

import numpy as np
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from tspsearch.search import Solution
    from tspsearch.solver import Comparison


class Reporter:
    """Reporter class for printing search results to a rich console."""

    def __init__(self, console: Console = None):
        self.console = console if console is not None else Console()

    def _matrix_table(self, distance_matrix: np.ndarray) -> Table:
        table = Table(title="Distance matrix", show_lines=False)
        table.add_column("", style="bold cyan", justify="right")
        for j in range(distance_matrix.shape[1]):
            table.add_column(str(j), justify="right")
        for i, row in enumerate(distance_matrix):
            table.add_row(str(i), *(str(int(w)) for w in row))
        return table

    def report(self, name: str, distance_matrix, solution: "Solution"):
        """Print the map, the path found and its cost."""
        distance_matrix = np.asarray(distance_matrix)
        self.console.print(f"[bold green](Using {name})[/bold green] The optimal path for the map")
        if distance_matrix.ndim == 2 and distance_matrix.size:
            self.console.print(self._matrix_table(distance_matrix))
        else:
            self.console.print("[dim]<empty map>[/dim]")
        path = " -> ".join(str(int(city)) for city in solution.path)
        self.console.print(f"was [cyan]{path}[/cyan], and cost [yellow]{solution.cost}[/yellow]")

    def comparison(self, num_cities: int, rows: "list[Comparison]"):
        """Print one row per compared map plus a summary line."""
        table = Table(title=f"Exact vs. random restart ({num_cities} cities)")
        for column in ("trial", "exact", "heuristic", "gap", "exact time", "heuristic time"):
            table.add_column(column, justify="right")
        for row in rows:
            table.add_row(
                str(row.trial),
                str(row.exact_cost),
                str(row.heuristic_cost),
                str(row.gap),
                f"{row.exact_time * 1000:.2f}ms",
                f"{row.heuristic_time * 1000:.2f}ms",
            )
        self.console.print(table)

        if rows:
            hits = sum(row.gap == 0 for row in rows)
            self.console.print(
                f"[green]Optimal: {hits}/{len(rows)}[/green] | "
                f"[blue]Mean gap: {np.mean([row.gap for row in rows]):.2f}[/blue]"
            )
