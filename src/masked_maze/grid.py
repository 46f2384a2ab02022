from dataclasses import dataclass, field
from typing import Iterator

# (row, col), 0-indexed
Position = tuple[int, int]
Route = list[Position]
Mask = frozenset[Position]

# Neighbour visiting order: North, East, South, West
DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


@dataclass
class Cell:
    """Wall state owned by one cell.

    Only the east and south boundaries are stored here; a cell's north and
    west boundaries belong to the neighbours above and to the left of it.
    """

    to_east: bool = False
    to_south: bool = False


@dataclass
class Grid:
    """A width x height maze, stored as rows of cells."""

    width: int
    height: int
    cells: list[list[Cell]] = field(repr=False)

    @classmethod
    def closed(cls, width: int, height: int) -> "Grid":
        """Build a grid with every wall up."""
        return cls(width, height, [[Cell() for _ in range(width)] for _ in range(height)])

    def contains(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self.height and 0 <= col < self.width

    def cell(self, position: Position) -> Cell:
        row, col = position
        return self.cells[row][col]

    def is_open(self, a: Position, b: Position) -> bool:
        """Whether the boundary between two adjacent cells is open.

        The answer is read from whichever of the two cells owns the boundary
        (the western or northern one).
        """
        if not (self.contains(a) and self.contains(b)):
            return False
        (r1, c1), (r2, c2) = sorted((a, b))
        if r1 == r2 and c2 == c1 + 1:
            return self.cells[r1][c1].to_east
        if c1 == c2 and r2 == r1 + 1:
            return self.cells[r1][c1].to_south
        return False

    def open_neighbors(self, position: Position) -> Iterator[Position]:
        """Yield neighbours reachable through an open boundary, in N, E, S, W order."""
        row, col = position
        for dr, dc in DIRECTIONS:
            neighbor = (row + dr, col + dc)
            if self.is_open(position, neighbor):
                yield neighbor

    def open_boundary_count(self) -> int:
        return sum(cell.to_east + cell.to_south for row in self.cells for cell in row)
