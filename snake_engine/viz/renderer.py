import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Tuple

import pygame

from snake_engine.core.errors import GridExhausted
from snake_engine.core.grid import PathStep
from snake_engine.core.session import GridSession
from snake_engine.viz.geometry import block_shape, grid_lines
from snake_engine.viz.palette import Palette
from snake_engine.viz.sketch import SketchStyle, draw_rough_line, draw_rough_polygon

logger = logging.getLogger(__name__)


@dataclass
class Block:
    x: float
    y: float
    size: float
    color: Tuple[int, int, int]
    stroke_color: Tuple[int, int, int, int]
    hachure_angle: int
    edge_mask: int


class Renderer:
    COLOR_BG = (250, 248, 240)
    COLOR_GRID = (203, 255, 241, 178)
    COLOR_BORDER = (0, 0, 0, 128)

    TICK_MS = 20          # one pending block is drawn per tick
    MIN_CELL = 20
    MAX_CELL = 60         # exclusive

    def __init__(self, width=1280, height=720, seed=None, cell_size=None, record=False, style=None):
        self.screen_width = width
        self.screen_height = height
        self.fixed_cell_size = cell_size
        self.cell_size = cell_size or self.MIN_CELL

        self.rng = random.Random(seed)
        # Separate streams so drawing jitter never shifts the walk
        self.session = GridSession(1, 1, rng=random.Random(self.rng.getrandbits(32)))
        self.palette = Palette(random.Random(self.rng.getrandbits(32)))
        self.sketch_rng = random.Random(self.rng.getrandbits(32))
        self.style = style or SketchStyle()

        self.pending: Deque[Block] = deque()
        self.color = self.palette.next_color()
        self.canvas = pygame.Surface((width, height))

        # Tools
        from snake_engine.viz.recorder import VideoRecorder
        self.recorder = VideoRecorder(active=record)

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.tick_budget = 0

        self.reset()

    # Board state

    def reset(self):
        if self.fixed_cell_size:
            self.cell_size = self.fixed_cell_size
        else:
            self.cell_size = self.rng.randrange(self.MIN_CELL, self.MAX_CELL)

        cols = max(1, self.screen_width // self.cell_size)
        rows = max(1, self.screen_height // self.cell_size)
        self.session.reset(cols, rows)
        self.palette.set_spectrum()
        self.pending.clear()

        self.canvas.fill(self.COLOR_BG)
        self.draw_grid()
        logger.info(f"Board {cols}x{rows} at {self.cell_size}px per cell")

    def next_color(self):
        self.color = self.palette.next_color()

    def queue_path(self, path: List[PathStep]):
        self.next_color()
        for step in path:
            self.pending.append(Block(
                x=step.x * self.cell_size,
                y=step.y * self.cell_size,
                size=self.cell_size,
                color=self.color,
                stroke_color=Palette.stroke_color(self.color),
                hachure_angle=step.hachure_angle,
                edge_mask=step.edge_mask,
            ))
            self.next_color()

    def draw_one(self) -> bool:
        try:
            path = self.session.fill_one()
        except GridExhausted:
            logger.debug("Nothing more to draw")
            return False
        self.queue_path(path)
        return True

    def draw_till_end(self):
        for path in self.session.fill_all():
            self.queue_path(path)

    def drain(self, count: int = 1) -> int:
        drawn = 0
        while self.pending and drawn < count:
            self.draw_block(self.pending.popleft())
            drawn += 1
        return drawn

    # Drawing

    def draw_grid(self):
        cols, rows = self.session.width, self.session.height
        inner, border = grid_lines(cols, rows, self.cell_size)

        layer = pygame.Surface(self.canvas.get_size(), pygame.SRCALPHA)
        for p, q in inner:
            draw_rough_line(layer, self.COLOR_GRID, p, q, max(1, self.cell_size // 40),
                            self.sketch_rng, self.style)
        for p, q in border:
            draw_rough_line(layer, self.COLOR_BORDER, p, q, max(1, self.cell_size // 10),
                            self.sketch_rng, self.style)
        self.canvas.blit(layer, (0, 0))

    def draw_block(self, block: Block):
        # Draw on a local layer so the translucent strokes blend onto the canvas
        pad = int(block.size * 0.25) + 4
        extent = int(block.size) + pad * 2
        layer = pygame.Surface((extent, extent), pygame.SRCALPHA)

        shape = block_shape(pad, pad, block.size, block.edge_mask)
        draw_rough_polygon(layer, shape.points, block.color, block.hachure_angle,
                           self.sketch_rng, self.style)
        for p, q in shape.lines:
            draw_rough_line(layer, block.stroke_color, p, q, block.size * 0.06,
                            self.sketch_rng, self.style)

        self.canvas.blit(layer, (block.x - pad, block.y - pad))

    def render_all(self) -> pygame.Surface:
        """Fills the remaining board and draws every block immediately."""
        self.draw_till_end()
        self.drain(len(self.pending))
        return self.canvas

    # Window

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Snake Fill - {self.session.width}x{self.session.height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

    def resize(self, width: int, height: int):
        self.screen_width, self.screen_height = width, height
        self.canvas = pygame.Surface((width, height))
        self.reset()

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.surface = pygame.display.get_surface()
                self.resize(event.w, event.h)
                self.draw_till_end()

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_r:
                    self.draw_one()
                elif event.key == pygame.K_e:
                    self.reset()
                elif event.key == pygame.K_w:
                    self.draw_till_end()
                elif event.key == pygame.K_ESCAPE:
                    self.running = False
                else:
                    logger.debug(f"Unbound key: {pygame.key.name(event.key)}")

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        rec_status = "REC" if self.recorder.active else ""
        status = "Done" if self.session.is_exhausted and not self.pending else "Drawing"
        info = [
            f"FPS: {fps}",
            f"Board: {self.session.width}x{self.session.height} @ {self.cell_size}px",
            f"Paths: {self.session.paths_generated} ({self.session.steps_taken} steps)",
            f"Pending: {len(self.pending)}",
            f"Status: {status}",
            rec_status
        ]

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (40, 40, 40))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def run_loop(self):
        print('Use "r" to draw a single snake')
        print('Use "e" to cause a resize and a reset')
        print('Use "w" to draw snakes till everything is filled')

        self.draw_till_end()

        while self.running:
            self.handle_input()

            # Fixed-rate drain, independent of how fast paths are computed
            self.tick_budget += self.clock.tick(60)
            ticks, self.tick_budget = divmod(self.tick_budget, self.TICK_MS)
            self.drain(ticks)

            self.surface.blit(self.canvas, (0, 0))
            self.draw_hud()
            pygame.display.flip()

            if self.recorder.active:
                self.recorder.capture_frame(self.canvas)

        self.recorder.stop()
        pygame.quit()
