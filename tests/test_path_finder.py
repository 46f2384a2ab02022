import pytest

from masked_maze.errors import MazeConfigurationError
from masked_maze.generator import generate
from masked_maze.grid import Grid
from masked_maze.path_finder import find_route, find_route_indexed, is_valid_route


def _open_square():
    """A 2x2 grid with every inner wall down (one cycle)."""
    grid = Grid.closed(2, 2)
    grid.cells[0][0].to_east = True
    grid.cells[0][0].to_south = True
    grid.cells[0][1].to_south = True
    grid.cells[1][0].to_east = True
    return grid


@pytest.mark.parametrize(
    ("width", "height", "seed"),
    [(3, 3, 99), (5, 5, 42), (5, 5, 123), (12, 7, 8), (25, 25, 1)],
)
def test_route_is_valid(width, height, seed):
    """Test that a found route steps through open walls from start to finish."""
    start, finish = (0, 0), (height - 1, width - 1)
    grid = generate(width, height, start, finish, seed=seed).grid

    route = find_route(grid, width, height, start, finish)

    assert route is not None
    assert route[0] == start
    assert route[-1] == finish
    assert len(set(route)) == len(route)
    assert is_valid_route(grid, route, start, finish)


@pytest.mark.parametrize(
    ("width", "height", "seed"), [(5, 5, 42), (9, 6, 17), (20, 20, 5)]
)
def test_indexed_search_matches_copying_search(width, height, seed):
    """Test that the shared-prefix search returns the same route."""
    start, finish = (0, 0), (height - 1, width - 1)
    grid = generate(width, height, start, finish, seed=seed).grid

    assert find_route_indexed(grid, width, height, start, finish) == find_route(
        grid, width, height, start, finish
    )


def test_no_route_through_closed_grid():
    """Test that a fully walled grid has no route between distinct cells."""
    grid = Grid.closed(3, 3)

    assert find_route(grid, 3, 3, (0, 0), (2, 2)) is None
    assert find_route_indexed(grid, 3, 3, (0, 0), (2, 2)) is None


def test_route_to_self():
    """Test that start == finish gives a one-cell route even with all walls up."""
    grid = Grid.closed(3, 3)
    assert find_route(grid, 3, 3, (1, 1), (1, 1)) == [(1, 1)]


def test_search_order_on_grid_with_cycle():
    """Test that the last pushed neighbour (south before east) is explored first."""
    grid = _open_square()

    expected = [(0, 0), (1, 0), (1, 1)]
    assert find_route(grid, 2, 2, (0, 0), (1, 1)) == expected
    assert find_route_indexed(grid, 2, 2, (0, 0), (1, 1)) == expected


def test_route_does_not_revisit_cells():
    """Test that the search terminates and never repeats a cell around a cycle."""
    grid = _open_square()
    grid.cells[1][0].to_east = False  # (1, 1) now only reachable from (0, 1)

    route = find_route(grid, 2, 2, (1, 0), (1, 1))

    assert route == [(1, 0), (0, 0), (0, 1), (1, 1)]


def test_dimension_mismatch():
    """Test that width and height must describe the grid being searched."""
    grid = Grid.closed(3, 3)
    with pytest.raises(MazeConfigurationError):
        find_route(grid, 4, 3, (0, 0), (2, 2))


def test_endpoint_outside_grid():
    """Test that start and finish must lie on the grid."""
    grid = Grid.closed(3, 3)
    with pytest.raises(MazeConfigurationError):
        find_route_indexed(grid, 3, 3, (0, 0), (3, 0))


@pytest.mark.parametrize(
    "route",
    [
        [],  # Empty
        [(0, 1), (1, 1)],  # Wrong start
        [(0, 0), (0, 1)],  # Wrong finish
        [(0, 0), (1, 1)],  # Diagonal step
        [(0, 0), (0, 1), (0, 0), (1, 0), (1, 1)],  # Repeats a cell
    ],
)
def test_invalid_routes_rejected(route):
    """Test that malformed routes fail validation."""
    assert not is_valid_route(_open_square(), route, (0, 0), (1, 1))
