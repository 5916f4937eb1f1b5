import logging
from typing import Iterator, List, Tuple

from maze_tracer.core.events import TraceEvent, explored, on_path, unreachable
from maze_tracer.core.graph import GridGraph
from maze_tracer.algo.base import Solver

logger = logging.getLogger(__name__)


class DepthFirstTracer(Solver):
    """
    Iterative depth-first search that reports every cell it expands and,
    once the end is reached, the cells of the path that led there.

    Two stacks are kept. The cell stack holds cells still to explore, each
    tagged with the depth of the path it branched from. The path stack is
    the route from start to the cell being expanded. Popping a cell cuts the
    path stack back to that cell's branch point, which drops the tail of any
    dead end explored in between without touching the alternatives still
    waiting on the cell stack.

    Only OPEN edges are followed. The graph is never modified.
    """
    def __init__(self, graph: GridGraph):
        super().__init__(graph)
        self.dead_ends = 0

    def run(self, start: int, end: int) -> Iterator[TraceEvent]:
        self.graph.check_cell(start)
        self.graph.check_cell(end)

        self.visited = set()
        self.found = False
        self.path = []
        self.dead_ends = 0

        # (cell, depth of the path it extends)
        stack: List[Tuple[int, int]] = [(start, 0)]
        path: List[int] = []

        while stack:
            cell, depth = stack.pop()
            if cell in self.visited:
                continue # Reached twice through a loop

            self.visited.add(cell)
            yield explored(cell)

            del path[depth:]
            path.append(cell)

            if cell == end:
                self.found = True
                break

            branches = 0
            for neighbor in self.graph.open_neighbors(cell):
                if neighbor not in self.visited:
                    stack.append((neighbor, len(path)))
                    branches += 1

            if branches == 0:
                self.dead_ends += 1

        if not self.found:
            logger.debug("End %d unreachable from %d after %d cells", end, start, len(self.visited))
            yield unreachable(end)
            return

        self.path = path
        for cell in path:
            yield on_path(cell)


def find_path(start: int, end: int, graph: GridGraph) -> Iterator[TraceEvent]:
    return DepthFirstTracer(graph).run(start, end)
