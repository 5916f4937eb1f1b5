import random
from typing import Iterator, List, Optional
from maze_tracer.core.graph import EdgeState, GridGraph
from maze_tracer.algo.base import Generator

class RecursiveBacktracker(Generator):
    def __init__(self, graph: GridGraph, seed_cell: int = 0, seed: int = None,
                 rng: Optional[random.Random] = None):
        super().__init__(graph, seed=seed, rng=rng)
        self.seed_cell = graph.check_cell(seed_cell)

    def run(self) -> Iterator[str]:
        # The graph is carved in place, so a second pass would add loops
        if self.visited:
            raise RuntimeError("RecursiveBacktracker already ran; build a fresh graph and generator")

        self.visited.add(self.seed_cell)
        stack: List[int] = [self.seed_cell]

        while stack:
            current = stack.pop()

            edges = self.graph.get_mut_edges(current)
            if not edges:
                continue # Isolated cell, nothing to carve

            # Shuffle in place: this is what shapes the maze
            self.rng.shuffle(edges)

            for edge in edges:
                if edge.target in self.visited:
                    continue

                # Re-push so the remaining neighbours get their turn later
                stack.append(current)
                edge.state = EdgeState.OPEN
                self.graph.set_state(edge.target, current, EdgeState.OPEN)
                self.visited.add(edge.target)
                stack.append(edge.target)
                self.step_count += 1

                # Yield every N steps to keep UI responsive without spamming
                if self.step_count % 100 == 0:
                    yield f"Carving... Stack: {len(stack)}"
                break

        yield "Done"


def generate(graph: GridGraph, seed_cell: int = 0, seed: int = None,
             rng: Optional[random.Random] = None) -> RecursiveBacktracker:
    """Carves graph in place and returns the finished generator for inspection."""
    gen = RecursiveBacktracker(graph, seed_cell=seed_cell, seed=seed, rng=rng)
    gen.run_all()
    return gen
