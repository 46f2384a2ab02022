import logging
import sys

import click

from masked_maze.config import load_settings, resolve_seed
from masked_maze.errors import MazeError
from masked_maze.generator import generate
from masked_maze.grid import Grid, Mask, Position, Route
from masked_maze.logging_config import setup_logging
from masked_maze.mask import load_mask
from masked_maze.path_finder import find_route

WALL = "█"
FLOOR = " "
START = "S"
FINISH = "E"
BREADCRUMB = "."


def render_maze(
    grid: Grid,
    start: Position,
    finish: Position,
    route: Route | None = None,
    mask: Mask = frozenset(),
) -> list[str]:
    """
    Render a grid as text, two characters per cell plus an outer wall.

    Args:
        grid (Grid): The generated maze.
        start (Position): Marked with 'S'.
        finish (Position): Marked with 'E'.
        route (list, optional): Cells marked with breadcrumbs '.'.
        mask (Mask): Masked cells are drawn solid.

    Returns
    -------
        list: One string per text row, 2*height + 1 rows of 2*width + 1 glyphs.
    """
    on_route = set(route or ())
    lines = [WALL * (2 * grid.width + 1)]

    for row in range(grid.height):
        cell_row = [WALL]
        wall_row = [WALL]
        for col in range(grid.width):
            position = (row, col)
            cell = grid.cells[row][col]

            if position == start:
                cell_row.append(START)
            elif position == finish:
                cell_row.append(FINISH)
            elif position in on_route:
                cell_row.append(BREADCRUMB)
            elif position in mask:
                cell_row.append(WALL)
            else:
                cell_row.append(FLOOR)

            # The last column's east side is the outer wall
            cell_row.append(FLOOR if cell.to_east and col + 1 < grid.width else WALL)
            wall_row.append(FLOOR + WALL if cell.to_south and row + 1 < grid.height else WALL * 2)

        lines.append("".join(cell_row))
        lines.append("".join(wall_row))

    return lines


def print_maze(maze_lines: list[str]):
    """Prints the rendered maze to the console."""
    for line in maze_lines:
        click.echo(line)


def parse_position(text: str) -> Position:
    """Parse 'ROW,COL' into a position."""
    try:
        row, col = (int(part) for part in text.split(","))
    except ValueError:
        raise click.BadParameter(f"expected ROW,COL, got {text!r}") from None
    return row, col


def reproduce_command(
    width: int,
    height: int,
    breadcrumbs: bool,
    seed: int,
    mask_path: str | None,
    start: Position,
    finish: Position,
) -> str:
    """Build the command line that regenerates the same maze."""
    parts = [
        "masked-maze generate",
        str(width),
        str(height),
        "--breadcrumbs" if breadcrumbs else "--no-breadcrumbs",
        f"--seed {seed}",
    ]
    if mask_path:
        parts.append(f"--mask {mask_path}")
    if start != (0, 0):
        parts.append(f"--start {start[0]},{start[1]}")
    if finish != (height - 1, width - 1):
        parts.append(f"--finish {finish[0]},{finish[1]}")
    return " ".join(parts)


def _position_option(ctx, param, value):
    return None if value is None else parse_position(value)


@click.command(name="generate")
@click.argument("width", type=int, required=False)
@click.argument("height", type=int, required=False)
@click.option(
    "--breadcrumbs/--no-breadcrumbs",
    default=None,
    help="Solve the maze and mark the route with '.'",
)
@click.option(
    "--seed", type=int, default=None, help="Random seed; omit or pass -1 to use the clock"
)
@click.option(
    "--mask",
    "mask_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="1-bit image (e.g. PBM) of WIDTHxHEIGHT pixels; black cells keep their walls",
)
@click.option(
    "--start", callback=_position_option, help="Start cell as ROW,COL (default 0,0)"
)
@click.option(
    "--finish",
    callback=_position_option,
    help="Finish cell as ROW,COL (default: bottom-right corner)",
)
@click.option("--verbose", is_flag=True, help="Log debugging information")
def generate_maze_command(
    width, height, breadcrumbs, seed, mask_path, start, finish, verbose
):
    """Generate a maze, optionally with its route marked."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        settings = load_settings()
        width = settings.width if width is None else width
        height = settings.height if height is None else height
        if breadcrumbs is None:
            breadcrumbs = settings.breadcrumbs
        mask_path = mask_path or settings.mask_path
        start = (0, 0) if start is None else start
        finish = (height - 1, width - 1) if finish is None else finish
        seed = resolve_seed(seed)

        mask = load_mask(mask_path, width, height) if mask_path else frozenset()
        result = generate(width, height, start, finish, mask, seed=seed)
    except MazeError as e:
        click.echo(click.style(f"Error: {e}", fg="red", bold=True), err=True)
        sys.exit(1)

    if not verbose:  # the generator logs the same line at DEBUG
        click.echo(
            f"{100 * result.productive_ratio:.2f}% productive "
            f"({result.productive_iterations}/{result.total_iterations})"
        )

    route = None
    if breadcrumbs:
        route = find_route(result.grid, width, height, start, finish)
        if route is None:
            click.echo(click.style("Could not solve maze.", fg="red"))

    print_maze(render_maze(result.grid, start, finish, route, mask))

    click.echo(
        f"\tReproduce: {reproduce_command(width, height, breadcrumbs, seed, mask_path, start, finish)} ; "
        f"or, {'without' if breadcrumbs else 'with'} breadcrumbs: "
        f"{reproduce_command(width, height, not breadcrumbs, seed, mask_path, start, finish)}"
    )


if __name__ == "__main__":
    generate_maze_command()
