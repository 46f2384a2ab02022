import logging

from masked_maze.errors import MazeConfigurationError
from masked_maze.grid import Grid, Position, Route

logger = logging.getLogger(__name__)


def _check_inputs(
    grid: Grid, width: int, height: int, start: Position, finish: Position
) -> None:
    if (grid.width, grid.height) != (width, height):
        raise MazeConfigurationError(
            f"Grid is {grid.width}x{grid.height}, not {width}x{height}."
        )
    for name, position in (("start", start), ("finish", finish)):
        if not grid.contains(position):
            raise MazeConfigurationError(
                f"The {name} cell {position} lies outside the {width}x{height} maze."
            )


def find_route(
    grid: Grid, width: int, height: int, start: Position, finish: Position
) -> Route | None:
    """
    Find a route from start to finish through the open boundaries of a grid.

    Depth-first search over a stack of whole partial paths. A neighbour is
    only appended to a path if it is not already on that path.

    Returns
    -------
        list: The cells from start to finish inclusive, or None if the two
              are not connected.
    """
    _check_inputs(grid, width, height, start, finish)

    fringe: list[Route] = [[start]]
    while fringe:
        path = fringe.pop()
        current = path[-1]

        if current == finish:
            logger.debug("Route of %d cells found", len(path))
            return path

        for neighbor in grid.open_neighbors(current):
            # Scan backwards: a repeat is most likely a recent cell
            if neighbor not in reversed(path):
                fringe.append(path + [neighbor])

    logger.debug("No route from %s to %s", start, finish)
    return None


def find_route_indexed(
    grid: Grid, width: int, height: int, start: Position, finish: Position
) -> Route | None:
    """Same search as find_route, but paths share their prefixes.

    Each fringe entry is an index into an arena of (cell, parent index)
    nodes, so extending a path costs one node instead of a copy.
    """
    _check_inputs(grid, width, height, start, finish)

    nodes: list[tuple[Position, int]] = [(start, -1)]
    fringe = [0]

    def on_path(node_index: int, position: Position) -> bool:
        while node_index != -1:
            cell, node_index = nodes[node_index]
            if cell == position:
                return True
        return False

    while fringe:
        node_index = fringe.pop()
        current = nodes[node_index][0]

        if current == finish:
            route = []
            while node_index != -1:
                cell, node_index = nodes[node_index]
                route.append(cell)
            route.reverse()
            logger.debug("Route of %d cells found", len(route))
            return route

        for neighbor in grid.open_neighbors(current):
            if not on_path(node_index, neighbor):
                nodes.append((neighbor, node_index))
                fringe.append(len(nodes) - 1)

    logger.debug("No route from %s to %s", start, finish)
    return None


def is_valid_route(grid: Grid, route: Route, start: Position, finish: Position) -> bool:
    """Check that a route runs from start to finish over open boundaries without repeats."""
    if not route or route[0] != start or route[-1] != finish:
        return False
    if len(set(route)) != len(route):
        return False
    return all(grid.is_open(a, b) for a, b in zip(route, route[1:]))
