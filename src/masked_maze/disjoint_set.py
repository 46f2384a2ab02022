from masked_maze.grid import Position


class DisjointSetForest:
    """Union-find over the cells of a width x height grid.

    Cells are stored in a flat arena; cell (row, col) lives at index
    ``row * width + col`` and holds the index of its parent.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._parent = list(range(width * height))

    def __len__(self) -> int:
        return len(self._parent)

    def index(self, position: Position) -> int:
        row, col = position
        return row * self.width + col

    def find(self, position: Position) -> int:
        """Return the representative index of a cell, compressing the path to it."""
        node = self.index(position)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]

        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]

        return root

    def union(self, a: Position, b: Position) -> bool:
        """Attach b's representative under a's. Returns False if already joined."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_b] = root_a
        return True

    def connected(self, a: Position, b: Position) -> bool:
        return self.find(a) == self.find(b)
