import random
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Set

from maze_tracer.core.events import TraceEvent
from maze_tracer.core.graph import GridGraph


class Generator(ABC):
    def __init__(self, graph: GridGraph, seed: int = None, rng: Optional[random.Random] = None):
        self.graph = graph
        self.seed = seed
        # An injected rng wins over the seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.visited: Set[int] = set()
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual graph modifications happen in-place on self.graph.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass


class Solver(ABC):
    def __init__(self, graph: GridGraph):
        self.graph = graph
        self.path: List[int] = []
        self.visited: Set[int] = set()
        self.found = False

    @abstractmethod
    def run(self, start: int, end: int) -> Iterator[TraceEvent]:
        pass

    def run_all(self, start: int, end: int) -> List[TraceEvent]:
        return list(self.run(start, end))
