from enum import Enum
from typing import Iterator, List, Optional, Tuple


class EdgeState(Enum):
    CLOSED = 0  # Wall present
    OPEN = 1


class VertexLabel(Enum):
    NONE = 0
    START = 1
    END = 2


class Edge:
    """One directed adjacency record: this cell -> target."""
    __slots__ = ('target', 'state')

    def __init__(self, target: int, state: EdgeState = EdgeState.CLOSED):
        self.target = target
        self.state = state

    @property
    def is_open(self) -> bool:
        return self.state is EdgeState.OPEN

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.target == other.target and self.state is other.state

    def __repr__(self):
        return f"Edge({self.target}, {self.state.name})"


def cell_id(x: int, y: int, side: int) -> int:
    if 0 <= x < side and 0 <= y < side:
        return x + y * side
    raise IndexError(f"Coordinate ({x}, {y}) out of bounds")


def cell_coords(cid: int, side: int) -> Tuple[int, int]:
    if 0 <= cid < side * side:
        return cid % side, cid // side
    raise IndexError(f"Cell {cid} out of bounds")


class GridGraph:
    # Dense ids -> plain lists indexed by cell id
    __slots__ = ('size', 'side', 'vertices', 'adjacency')

    def __init__(self, size: int, side: Optional[int] = None):
        if size < 1:
            raise ValueError(f"Graph needs at least one cell, got {size}")
        self.size = size
        self.side = side
        self.vertices: List[VertexLabel] = [VertexLabel.NONE] * size
        # None = cell was never an edge source
        self.adjacency: List[Optional[List[Edge]]] = [None] * size

    def check_cell(self, cid: int) -> int:
        if 0 <= cid < self.size:
            return cid
        raise IndexError(f"Cell {cid} out of range [0, {self.size})")

    def push_vertex(self, cid: int, label: VertexLabel = VertexLabel.NONE):
        self.vertices[self.check_cell(cid)] = label

    def push_edge(self, source: int, target: int, state: EdgeState = EdgeState.CLOSED):
        """
        Appends a one-way record source -> target.
        No deduplication: calling it twice for the same pair stores two records.
        """
        self.check_cell(source)
        self.check_cell(target)
        edges = self.adjacency[source]
        if edges is None:
            edges = self.adjacency[source] = []
        edges.append(Edge(target, state))

    def get_edges(self, cid: int) -> Optional[Tuple[Edge, ...]]:
        edges = self.adjacency[self.check_cell(cid)]
        return None if edges is None else tuple(edges)

    def get_mut_edges(self, cid: int) -> Optional[List[Edge]]:
        return self.adjacency[self.check_cell(cid)]

    def get_edge(self, source: int, target: int) -> Optional[Edge]:
        for edge in self.adjacency[self.check_cell(source)] or ():
            if edge.target == target:
                return edge
        return None

    def set_state(self, source: int, target: int, state: EdgeState) -> bool:
        edge = self.get_edge(source, target)
        if edge is None:
            return False
        edge.state = state
        return True

    def open_passage(self, u: int, v: int):
        """
        Opens u -> v and the reciprocal v -> u together.
        The reciprocal is only touched if v actually records an edge back to u.
        """
        if not self.set_state(u, v, EdgeState.OPEN):
            raise KeyError(f"No edge {u} -> {v}")
        self.set_state(v, u, EdgeState.OPEN)

    def is_open(self, u: int, v: int) -> bool:
        edge = self.get_edge(u, v)
        return edge is not None and edge.is_open

    def open_neighbors(self, cid: int) -> Iterator[int]:
        for edge in self.adjacency[self.check_cell(cid)] or ():
            if edge.state is EdgeState.OPEN:
                yield edge.target

    def open_edges(self) -> Iterator[Tuple[int, int]]:
        """Yields every open record as (source, target), both directions included."""
        for source, edges in enumerate(self.adjacency):
            for edge in edges or ():
                if edge.state is EdgeState.OPEN:
                    yield source, edge.target

    def copy(self) -> 'GridGraph':
        clone = GridGraph(self.size, self.side)
        clone.vertices = list(self.vertices)
        clone.adjacency = [
            None if edges is None else [Edge(e.target, e.state) for e in edges]
            for edges in self.adjacency
        ]
        return clone


def new_maze(side: int) -> GridGraph:
    """
    Builds a full side x side grid with every 4-neighbour edge CLOSED.
    Each cell links to its own neighbours only, so every adjacent pair ends up
    with two independent records, one from each endpoint.
    """
    if side < 1:
        raise ValueError(f"Maze side must be positive, got {side}")

    graph = GridGraph(side * side, side)

    for y in range(side):
        for x in range(side):
            cid = x + y * side
            graph.push_vertex(cid, VertexLabel.NONE)

            # West, East, North, South
            if x > 0:
                graph.push_edge(cid, cid - 1)
            if x < side - 1:
                graph.push_edge(cid, cid + 1)
            if y > 0:
                graph.push_edge(cid, cid - side)
            if y < side - 1:
                graph.push_edge(cid, cid + side)

    return graph
