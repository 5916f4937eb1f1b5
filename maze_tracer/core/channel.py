import queue
import threading
from typing import List, Optional

from maze_tracer.core.events import TraceEvent


class TraceChannel:
    """
    Single-producer / single-consumer event pipe between the path worker and
    the shell. Unbounded; sends never block. Once closed, sends are dropped
    silently so a worker can outlive its consumer.
    """
    def __init__(self):
        self._queue = queue.SimpleQueue()
        self._closed = threading.Event()
        self.sent_count = 0
        self.dropped_count = 0

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def send(self, event: TraceEvent) -> bool:
        if self._closed.is_set():
            self.dropped_count += 1
            return False
        self._queue.put(event)
        self.sent_count += 1
        return True

    def drain(self) -> List[TraceEvent]:
        """Returns everything queued right now without waiting."""
        events = []
        while True:
            try:
                events.append(self._queue.get_nowait())
            except queue.Empty:
                return events

    def recv(self, timeout: Optional[float] = None) -> Optional[TraceEvent]:
        try:
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None

    def close(self):
        self._closed.set()
