from typing import Iterable, List, Optional

from maze_tracer.core.graph import GridGraph


def render_text(graph: GridGraph, side: Optional[int] = None, explored: Iterable[int] = (),
                path: Iterable[int] = ()) -> str:
    """
    Draws the maze as ASCII, one 3-character cell per column:

        +--+--+
        |S  . |
        +  +--+
        |o  E |
        +--+--+

    Walls are drawn wherever the passage is not OPEN in either direction.
    Path cells win over explored ones; the first and last path cells are
    marked S and E.
    """
    side = side or graph.side
    if not side:
        raise ValueError("render_text needs the grid side")

    explored = set(explored)
    path = list(path)
    on_path = set(path)
    endpoints = {}
    if path:
        endpoints[path[0]] = "S"
        endpoints[path[-1]] = "E"

    def passage(a: int, b: int) -> bool:
        return graph.is_open(a, b) or graph.is_open(b, a)

    def mark(cid: int) -> str:
        if cid in endpoints:
            return endpoints[cid]
        if cid in on_path:
            return "o"
        if cid in explored:
            return "."
        return " "

    lines: List[str] = ["+" + "--+" * side]
    for y in range(side):
        row = "|"
        floor = "+"
        for x in range(side):
            cid = x + y * side
            row += mark(cid) + " "
            row += " " if x < side - 1 and passage(cid, cid + 1) else "|"
            floor += "  +" if y < side - 1 and passage(cid, cid + side) else "--+"
        lines.append(row)
        lines.append(floor)
    return "\n".join(lines)
