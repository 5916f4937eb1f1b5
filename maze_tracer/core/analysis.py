from collections import deque
from typing import Dict, Set

from maze_tracer.core.graph import GridGraph


class MazeAnalyzer:
    @staticmethod
    def reachable(graph: GridGraph, origin: int) -> Set[int]:
        """Cells reachable from origin through OPEN edges (breadth-first)."""
        seen = {graph.check_cell(origin)}
        queue = deque([origin])
        while queue:
            cell = queue.popleft()
            for neighbor in graph.open_neighbors(cell):
                if neighbor not in seen:
                    seen.add(neighbor)
                    queue.append(neighbor)
        return seen

    @staticmethod
    def open_edge_count(graph: GridGraph) -> int:
        """
        Number of open passages. A passage recorded from both ends counts once,
        a passage recorded from one end only still counts.
        """
        passages = set()
        for source, target in graph.open_edges():
            passages.add((min(source, target), max(source, target)))
        return len(passages)

    @staticmethod
    def is_symmetric(graph: GridGraph) -> bool:
        """
        True if every pair recorded from both ends agrees on OPEN/CLOSED.
        """
        for source, edges in enumerate(graph.adjacency):
            for edge in edges or ():
                back = graph.get_edge(edge.target, source)
                if back is not None and back.state is not edge.state:
                    return False
        return True

    @staticmethod
    def has_cycle(graph: GridGraph) -> bool:
        """
        Walks the open-passage subgraph as undirected; any cell reached a second
        time through a different passage closes a loop.
        """
        seen: Set[int] = set()
        for root in range(graph.size):
            if root in seen:
                continue
            seen.add(root)
            stack = [(root, -1)]
            while stack:
                cell, parent = stack.pop()
                for neighbor in set(graph.open_neighbors(cell)):
                    if neighbor == parent:
                        continue
                    if neighbor in seen:
                        return True
                    seen.add(neighbor)
                    stack.append((neighbor, cell))
        return False

    @staticmethod
    def is_perfect(graph: GridGraph, origin: int = 0) -> bool:
        reached = MazeAnalyzer.reachable(graph, origin)
        return (len(reached) == graph.size
                and MazeAnalyzer.open_edge_count(graph) == graph.size - 1
                and not MazeAnalyzer.has_cycle(graph))

    @staticmethod
    def calculate_stats(graph: GridGraph) -> Dict[str, float]:
        dead_ends = 0
        corridors = 0 # 2 exits
        junctions = 0 # 3+ exits
        isolated = 0

        for cell in range(graph.size):
            exits = len(set(graph.open_neighbors(cell)))
            if exits == 0: isolated += 1
            elif exits == 1: dead_ends += 1
            elif exits == 2: corridors += 1
            else: junctions += 1

        total = graph.size
        return {
            "cells": total,
            "passages": MazeAnalyzer.open_edge_count(graph),
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "isolated": isolated,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
