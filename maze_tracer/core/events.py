from typing import NamedTuple, Tuple

# Event Types
EVT_EXPLORE = 0x01
EVT_PATH = 0x02
EVT_UNREACHABLE = 0x03

EVENT_NAMES = {
    EVT_EXPLORE: "explore",
    EVT_PATH: "path",
    EVT_UNREACHABLE: "unreachable",
}


class TraceEvent(NamedTuple):
    kind: int
    cell: int

    @property
    def is_final_path(self) -> bool:
        return self.kind == EVT_PATH

    @property
    def is_terminal(self) -> bool:
        return self.kind == EVT_UNREACHABLE

    def as_pair(self) -> Tuple[int, bool]:
        return self.cell, self.is_final_path

    def __str__(self):
        return f"{EVENT_NAMES.get(self.kind, self.kind)} {self.cell}"


def explored(cell: int) -> TraceEvent:
    return TraceEvent(EVT_EXPLORE, cell)


def on_path(cell: int) -> TraceEvent:
    return TraceEvent(EVT_PATH, cell)


def unreachable(cell: int) -> TraceEvent:
    return TraceEvent(EVT_UNREACHABLE, cell)
