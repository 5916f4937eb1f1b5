# config.py

from maze_tracer.algo.worker import STEP_DELAY, SETTLE_DELAY, PATH_DELAY

# -------------------------------------------------------------------------
# DEFAULTS
# -------------------------------------------------------------------------
SIDE = 32
START = 0
END = None  # None -> last cell

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 800
FPS = 60


class TraceConfig:
    """Validated settings for one generate + solve cycle."""
    __slots__ = ('side', 'start', 'end', 'seed', 'step_delay', 'settle_delay', 'path_delay')

    def __init__(self, side: int = SIDE, start: int = START, end: int = END, seed: int = None,
                 step_delay: float = STEP_DELAY, settle_delay: float = SETTLE_DELAY,
                 path_delay: float = PATH_DELAY):
        if side < 1:
            raise ValueError(f"side must be positive, got {side}")
        cells = side * side
        if end is None:
            end = cells - 1
        for name, cell in (("start", start), ("end", end)):
            if not 0 <= cell < cells:
                raise ValueError(f"{name} cell {cell} outside [0, {cells})")
        for name, value in (("step_delay", step_delay), ("settle_delay", settle_delay),
                            ("path_delay", path_delay)):
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

        self.side = side
        self.start = start
        self.end = end
        self.seed = seed
        self.step_delay = step_delay
        self.settle_delay = settle_delay
        self.path_delay = path_delay

    @classmethod
    def from_args(cls, args) -> 'TraceConfig':
        return cls(
            side=args.side,
            start=args.start,
            end=args.end,
            seed=args.seed,
            step_delay=getattr(args, "step_delay", STEP_DELAY),
            settle_delay=getattr(args, "settle_delay", SETTLE_DELAY),
            path_delay=getattr(args, "path_delay", PATH_DELAY),
        )

    def __repr__(self):
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.__slots__)
        return f"TraceConfig({fields})"
