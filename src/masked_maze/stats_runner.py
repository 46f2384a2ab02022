import random
import sys
from typing import Any, Dict, List

import click

from masked_maze.errors import MazeError
from masked_maze.generator import generate
from masked_maze.grid import Mask
from masked_maze.mask import load_mask
from masked_maze.path_finder import find_route


class StatsRunner:
    """Generate batches of mazes of one size and collect carving statistics."""

    def __init__(self, width: int, height: int, mask: Mask = frozenset()):
        """
        Initialize the runner.

        Args:
            width: Maze width in cells
            height: Maze height in cells
            mask: Protected cells applied to every maze
        """
        self.width = width
        self.height = height
        self.mask = mask
        self.start = (0, 0)
        self.finish = (height - 1, width - 1)

    def run(self, runs: int = 10, seed: int = 42) -> List[Dict[str, Any]]:
        """
        Generate and solve `runs` mazes.

        Per-maze seeds are drawn from a generator seeded with `seed`, so the
        whole batch is reproducible and any single maze can be replayed with
        the `generate` command.

        Returns:
            One dictionary of statistics per maze
        """
        seed_source = random.Random(seed)
        maze_seeds = [seed_source.randint(1, 10000) for _ in range(runs)]

        results = []
        for index, maze_seed in enumerate(maze_seeds, start=1):
            generation = generate(
                self.width, self.height, self.start, self.finish, self.mask, seed=maze_seed
            )
            route = find_route(
                generation.grid, self.width, self.height, self.start, self.finish
            )
            route_length = len(route) if route else 0
            results.append(
                {
                    "maze_seed": maze_seed,
                    "productive_iterations": generation.productive_iterations,
                    "total_iterations": generation.total_iterations,
                    "productive_ratio": generation.productive_ratio,
                    "open_boundaries": generation.grid.open_boundary_count(),
                    "route_length": route_length,
                }
            )
            click.echo(
                f"Maze {click.style(f'{index}/{runs}', fg='bright_blue')} "
                f"(seed: {click.style(str(maze_seed), fg='cyan')}): "
                f"{100 * generation.productive_ratio:.2f}% productive, "
                f"route of {route_length} cells"
            )

        return results

    @staticmethod
    def summarize(results: List[Dict[str, Any]]) -> Dict[str, float]:
        """Average the per-maze numbers of a batch."""
        if not results:
            return {"mean_productive_ratio": 0.0, "mean_route_length": 0.0}
        count = len(results)
        return {
            "mean_productive_ratio": sum(r["productive_ratio"] for r in results) / count,
            "mean_route_length": sum(r["route_length"] for r in results) / count,
        }


@click.command(name="stats")
@click.argument("width", type=int)
@click.argument("height", type=int)
@click.option("--runs", type=int, default=10, help="Number of mazes to generate")
@click.option(
    "--seed", type=int, default=42, help="Seed for drawing the per-maze seeds"
)
@click.option(
    "--mask",
    "mask_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="1-bit image of WIDTHxHEIGHT pixels applied to every maze",
)
def stats_command(width: int, height: int, runs: int, seed: int, mask_path: str | None):
    """Report how productive wall removal is for mazes of one size."""
    click.echo(f"Maze size: {click.style(f'{width}x{height}', fg='cyan')}")
    click.echo(f"Runs: {click.style(str(runs), fg='cyan')}")

    try:
        mask = load_mask(mask_path, width, height) if mask_path else frozenset()
        results = StatsRunner(width, height, mask).run(runs, seed)
    except MazeError as e:
        click.echo(click.style(f"Error: {e}", fg="red", bold=True), err=True)
        sys.exit(1)

    summary = StatsRunner.summarize(results)
    percentage = 100 * summary["mean_productive_ratio"]
    color = "green" if percentage >= 50 else "yellow" if percentage >= 25 else "red"

    click.echo("\n" + click.style("Summary:", bold=True))
    click.echo(
        f"Mean productive ratio: {click.style(f'{percentage:.2f}%', fg=color, bold=True)}"
    )
    route_length = summary["mean_route_length"]
    click.echo(f"Mean route length: {click.style(f'{route_length:.2f}', fg='cyan')}")


if __name__ == "__main__":
    stats_command()
