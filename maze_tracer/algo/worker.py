import logging
import threading

from maze_tracer.core.channel import TraceChannel
from maze_tracer.core.events import EVT_EXPLORE, EVT_PATH
from maze_tracer.core.graph import GridGraph
from maze_tracer.algo.solvers import DepthFirstTracer

logger = logging.getLogger(__name__)

# Seconds
STEP_DELAY = 0.01
SETTLE_DELAY = 0.5
PATH_DELAY = 0.02


class PathWorker(threading.Thread):
    """
    Runs one DepthFirstTracer search in the background and streams its
    events into a TraceChannel, paced so a renderer can animate them.

    The graph is only read. stop() cuts the pacing short and ends the run
    before the next event is sent.
    """
    def __init__(self, graph: GridGraph, start: int, end: int, channel: TraceChannel,
                 step_delay: float = STEP_DELAY, settle_delay: float = SETTLE_DELAY,
                 path_delay: float = PATH_DELAY):
        super().__init__(name="path-worker", daemon=True)
        for name, value in (("step_delay", step_delay), ("settle_delay", settle_delay),
                            ("path_delay", path_delay)):
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

        graph.check_cell(start)
        graph.check_cell(end)

        self.graph = graph
        self.start_cell = start
        self.end_cell = end
        self.channel = channel
        self.step_delay = step_delay
        self.settle_delay = settle_delay
        self.path_delay = path_delay

        self.tracer = DepthFirstTracer(graph)
        self.events_sent = 0
        self.cancelled = False
        self._stop_event = threading.Event()

    def stop(self):
        self._stop_event.set()

    @property
    def stopping(self) -> bool:
        return self._stop_event.is_set()

    def _pause(self, seconds: float) -> bool:
        """Sleeps unless stopped. Returns False once a stop was requested."""
        if seconds > 0:
            return not self._stop_event.wait(seconds)
        return not self._stop_event.is_set()

    def run(self):
        logger.debug("Tracing %d -> %d", self.start_cell, self.end_cell)
        settled = False

        for event in self.tracer.run(self.start_cell, self.end_cell):
            if event.kind == EVT_PATH and not settled:
                settled = True
                if not self._pause(self.settle_delay):
                    break

            if self.stopping:
                break

            if self.channel.send(event):
                self.events_sent += 1

            delay = 0.0
            if event.kind == EVT_EXPLORE:
                delay = self.step_delay
            elif event.kind == EVT_PATH:
                delay = self.path_delay
            if not self._pause(delay):
                break

        if self.stopping:
            self.cancelled = True
            logger.info("Path search cancelled after %d events", self.events_sent)
        elif self.tracer.found:
            logger.info("Path found: %d cells, %d explored", len(self.tracer.path), len(self.tracer.visited))
        else:
            logger.info("No path from %d to %d (%d cells explored)",
                        self.start_cell, self.end_cell, len(self.tracer.visited))
