import logging
import random
from dataclasses import dataclass

from masked_maze.disjoint_set import DisjointSetForest
from masked_maze.errors import IterationLimitError, MazeConfigurationError
from masked_maze.grid import Grid, Mask, Position

logger = logging.getLogger(__name__)

EAST = "east"
SOUTH = "south"

# Loop bound, as a multiple of the number of candidate boundaries
ITERATION_LIMIT_FACTOR = 1000


@dataclass
class GenerationResult:
    """A generated maze plus the statistics of how it was carved."""

    grid: Grid
    productive_iterations: int
    total_iterations: int

    @property
    def productive_ratio(self) -> float:
        if self.total_iterations == 0:
            return 0.0
        return self.productive_iterations / self.total_iterations


def validate_configuration(
    width: int, height: int, start: Position, finish: Position, mask: Mask
) -> None:
    """
    Reject configurations that can never produce a start-to-finish connection.

    Checks dimensions, that start, finish and every mask cell lie on the grid,
    and that start and finish are joined once every boundary whose owning
    cell is unmasked is opened.

    Raises
    ------
        MazeConfigurationError: describing the first problem found.
    """
    if width < 1 or height < 1:
        raise MazeConfigurationError(
            f"Maze width and height must be at least 1 (got {width}x{height})."
        )

    def on_grid(position: Position) -> bool:
        row, col = position
        return 0 <= row < height and 0 <= col < width

    for name, position in (("start", start), ("finish", finish)):
        if not on_grid(position):
            raise MazeConfigurationError(
                f"The {name} cell {position} lies outside the {width}x{height} maze."
            )

    outside = sorted(p for p in mask if not on_grid(p))
    if outside:
        raise MazeConfigurationError(
            f"Mask does not fit a {width}x{height} maze; "
            f"{len(outside)} cell(s) lie outside it, e.g. {outside[0]}."
        )

    forest = DisjointSetForest(width, height)
    for row in range(height):
        for col in range(width):
            if (row, col) in mask:
                continue
            if col + 1 < width:
                forest.union((row, col), (row, col + 1))
            if row + 1 < height:
                forest.union((row, col), (row + 1, col))

    if not forest.connected(start, finish):
        raise MazeConfigurationError(
            f"The mask separates start {start} from finish {finish}; "
            "no maze can connect them."
        )


def generate(
    width: int,
    height: int,
    start: Position,
    finish: Position,
    mask: Mask = frozenset(),
    *,
    rng: random.Random | None = None,
    seed: int | None = None,
    max_iterations: int | None = None,
) -> GenerationResult:
    """
    Carve a random maze in which start and finish are connected.

    Walls are picked at random and knocked down only when doing so merges two
    separate components, so the open boundaries always form a forest and the
    route between start and finish is unique. Proposals whose owning cell
    (the western or northern one) is in the mask are discarded; a masked cell
    can still be entered from its west or north neighbour.

    Args:
        width (int): Number of cells per row.
        height (int): Number of rows.
        start (Position): (row, col) of the start cell.
        finish (Position): (row, col) of the finish cell.
        mask (Mask): Cells whose own east/south walls are never removed.
        rng (random.Random, optional): Random source to draw from.
        seed (int, optional): Seed for a fresh random source, used when rng is None.
        max_iterations (int, optional): Bound on proposals before giving up.

    Returns
    -------
        GenerationResult: The grid and the productive/total iteration counts.

    Raises
    ------
        MazeConfigurationError: If the inputs can never yield a connected maze.
        IterationLimitError: If max_iterations proposals pass without success.
    """
    mask = frozenset(mask)
    validate_configuration(width, height, start, finish, mask)

    if rng is None:
        rng = random.Random(seed)

    grid = Grid.closed(width, height)
    forest = DisjointSetForest(width, height)

    orientations = []
    if width > 1:
        orientations.append(EAST)
    if height > 1:
        orientations.append(SOUTH)

    candidates = (width - 1) * height + width * (height - 1)
    if max_iterations is None:
        max_iterations = ITERATION_LIMIT_FACTOR * max(candidates, 1)

    total_iterations = 0
    productive_iterations = 0

    if not forest.connected(start, finish):
        while True:
            if total_iterations >= max_iterations:
                raise IterationLimitError(
                    f"Start {start} and finish {finish} still apart after "
                    f"{total_iterations} iterations."
                )
            total_iterations += 1

            if len(orientations) == 2:
                orientation = orientations[rng.randrange(2)]
            else:
                orientation = orientations[0]

            if orientation == EAST:
                col = rng.randrange(width - 1)
                row = rng.randrange(height)
                neighbor = (row, col + 1)
            else:
                col = rng.randrange(width)
                row = rng.randrange(height - 1)
                neighbor = (row + 1, col)

            owner = (row, col)
            if owner in mask:
                continue

            cell = grid.cell(owner)
            if (cell.to_east if orientation == EAST else cell.to_south):
                continue  # No change

            if forest.connected(owner, neighbor):
                continue  # Would close a cycle

            if orientation == EAST:
                cell.to_east = True
            else:
                cell.to_south = True
            forest.union(owner, neighbor)

            productive_iterations += 1
            if forest.connected(start, finish):
                break

    result = GenerationResult(grid, productive_iterations, total_iterations)
    logger.debug(
        "%.2f%% productive (%d/%d)",
        100 * result.productive_ratio,
        productive_iterations,
        total_iterations,
    )
    return result
