import logging
import pygame
from typing import List, Optional, Set

from maze_tracer.core.channel import TraceChannel
from maze_tracer.core.events import EVT_EXPLORE, EVT_PATH, EVT_UNREACHABLE, TraceEvent
from maze_tracer.core.graph import GridGraph
from maze_tracer.algo.worker import PathWorker, STEP_DELAY, SETTLE_DELAY, PATH_DELAY

logger = logging.getLogger(__name__)


class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_CELL = (30, 30, 30)
    COLOR_EXPLORED = (60, 100, 160) # Blue tint
    COLOR_SOLUTION = (255, 215, 0) # Gold
    COLOR_START = (40, 180, 90)
    COLOR_END = (200, 60, 60)

    def __init__(self, graph: GridGraph, start: int, end: int, width=800, height=800,
                 step_delay=STEP_DELAY, settle_delay=SETTLE_DELAY, path_delay=PATH_DELAY,
                 record=False, fps=60):
        if not graph.side:
            raise ValueError("Renderer needs a square grid graph")
        self.graph = graph
        self.side = graph.side
        self.start = graph.check_cell(start)
        self.end = graph.check_cell(end)
        self.screen_width = width
        self.screen_height = height
        self.fps = fps

        self.step_delay = step_delay
        self.settle_delay = settle_delay
        self.path_delay = path_delay

        # Camera
        self.cell_size = 20.0
        self.offset_x = 0.0
        self.offset_y = 0.0

        # Trace state, fed only from the channel
        self.channel = TraceChannel()
        self.worker: Optional[PathWorker] = None
        self.explored: Set[int] = set()
        self.path: List[int] = []
        self.unreachable = False

        from maze_tracer.viz.recorder import VideoRecorder
        self.recorder = VideoRecorder(active=record)

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None

    @property
    def status(self) -> str:
        if self.worker is None:
            return "Press SPACE to search"
        if self.unreachable:
            return "Unreachable"
        if self.worker.is_alive():
            return "Searching"
        return "Done"

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire grid on screen with padding."""
        padding = 20
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        self.cell_size = max(1.0, min(available_w, available_h) / self.side)

        total = self.side * self.cell_size
        self.offset_x = (self.screen_width - total) / 2
        self.offset_y = (self.screen_height - total) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze Tracer - {self.side}x{self.side}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)
        self.fit_to_screen()

    def cell_origin(self, cid: int):
        x, y = cid % self.side, cid // self.side
        return (int(x * self.cell_size + self.offset_x),
                int(y * self.cell_size + self.offset_y))

    def start_search(self) -> bool:
        """Spawns the path worker. Only the first call per renderer does anything."""
        if self.worker is not None:
            return False
        self.worker = PathWorker(self.graph, self.start, self.end, self.channel,
                                 step_delay=self.step_delay, settle_delay=self.settle_delay,
                                 path_delay=self.path_delay)
        self.worker.start()
        logger.info("Search started: %d -> %d", self.start, self.end)
        return True

    def apply_event(self, event: TraceEvent):
        if event.kind == EVT_EXPLORE:
            self.explored.add(event.cell)
        elif event.kind == EVT_PATH:
            self.path.append(event.cell)
        elif event.kind == EVT_UNREACHABLE:
            self.unreachable = True

    def pump_events(self) -> int:
        events = self.channel.drain()
        for event in events:
            self.apply_event(event)
        return len(events)

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.start_search()

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h
                self.fit_to_screen()

    def draw_maze(self, surface: pygame.Surface):
        surface.fill(self.COLOR_BG)

        size = int(self.cell_size) + 1
        on_path = set(self.path)

        # 1. Cell backgrounds
        for cid in range(self.graph.size):
            px, py = self.cell_origin(cid)
            if cid in on_path:
                color = self.COLOR_SOLUTION
            elif cid == self.start:
                color = self.COLOR_START
            elif cid == self.end:
                color = self.COLOR_END
            elif cid in self.explored:
                color = self.COLOR_EXPLORED
            else:
                color = self.COLOR_CELL
            pygame.draw.rect(surface, color, (px, py, size, size))

        # 2. Walls: each cell owns its east and south side, border cells add north/west
        for cid in range(self.graph.size):
            x, y = cid % self.side, cid // self.side
            px, py = self.cell_origin(cid)
            end_x, end_y = px + size - 1, py + size - 1

            if x == self.side - 1 or not self.graph.is_open(cid, cid + 1):
                pygame.draw.line(surface, self.COLOR_WALL, (end_x, py), (end_x, end_y), 1)
            if y == self.side - 1 or not self.graph.is_open(cid, cid + self.side):
                pygame.draw.line(surface, self.COLOR_WALL, (px, end_y), (end_x, end_y), 1)
            if y == 0:
                pygame.draw.line(surface, self.COLOR_WALL, (px, py), (end_x, py), 1)
            if x == 0:
                pygame.draw.line(surface, self.COLOR_WALL, (px, py), (px, end_y), 1)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        info = [
            f"FPS: {fps}",
            f"Size: {self.side}x{self.side}",
            f"Explored: {len(self.explored)}",
            f"Path: {len(self.path)}",
            f"Status: {self.status}",
            "REC" if self.recorder.active else "",
        ]

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def shutdown(self):
        if self.worker is not None:
            self.worker.stop()
        self.channel.close()
        self.recorder.stop()

    def run_loop(self):
        try:
            while self.running:
                self.handle_input()
                self.pump_events()

                self.draw_maze(self.surface)
                self.draw_hud()
                pygame.display.flip()

                if self.recorder.active:
                    self.recorder.capture_frame(self.surface)

                self.clock.tick(self.fps)
        finally:
            self.shutdown()
            pygame.quit()
