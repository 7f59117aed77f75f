import unittest
import random
import sys
import os

# Off-screen pygame, no window needed
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
import pygame

from snake_engine.core.grid import Direction, Edge, PathStep
from snake_engine.algo.edges import edge_mask
from snake_engine.viz.geometry import block_shape, grid_lines
from snake_engine.viz.palette import (Palette, change_color_luminance, hex_to_rgb,
                                      sample_spectrum, SPECTRUM_STEPS)
from snake_engine.viz.sketch import SketchStyle, hachure_lines, rough_line
from snake_engine.viz.recorder import VideoRecorder
from snake_engine.viz.renderer import Renderer

class TestGeometry(unittest.TestCase):
    def test_isolated_block(self):
        shape = block_shape(0, 0, 10, Edge.ALL)
        self.assertEqual(shape.points, [(1, 1), (9, 1), (9, 9), (1, 9)])
        self.assertEqual(len(shape.lines), 4)

    def test_offset(self):
        shape = block_shape(20, 30, 10, Edge.TOP | Edge.BOTTOM)
        self.assertEqual(shape.points, [(20, 31), (30, 31), (30, 39), (20, 39)])
        self.assertEqual(shape.lines, [((20, 31), (30, 31)), ((30, 39), (20, 39))])

    def test_corridor_lines_are_vertical(self):
        shape = block_shape(0, 0, 50, Edge.LEFT | Edge.RIGHT)
        for (x1, _), (x2, _) in shape.lines:
            self.assertEqual(x1, x2)

    def test_every_walk_mask_has_a_shape(self):
        options = list(Direction.ALL) + [None]
        for prev in options:
            for nxt in options:
                shape = block_shape(0, 0, 30, edge_mask(prev, nxt))
                self.assertGreaterEqual(len(shape.points), 4)
                self.assertGreaterEqual(len(shape.lines), 2)

    def test_unknown_mask(self):
        with self.assertRaises(ValueError):
            block_shape(0, 0, 10, 0)
        with self.assertRaises(ValueError):
            block_shape(0, 0, 10, Edge.TOP)

    def test_grid_lines(self):
        inner, border = grid_lines(3, 2, 10)
        self.assertEqual(len(inner), 5)
        self.assertEqual(border[0], ((0, 0), (30, 0)))
        self.assertEqual(border[2], ((30, 20), (0, 20)))

class TestPalette(unittest.TestCase):
    def test_hex(self):
        self.assertEqual(hex_to_rgb("#327fb1"), (50, 127, 177))
        self.assertEqual(hex_to_rgb("fff"), (255, 255, 255))

    def test_luminance(self):
        self.assertEqual(change_color_luminance((100, 200, 50), -0.7), (30, 60, 15))
        self.assertEqual(change_color_luminance((200, 200, 200), 0.5), (255, 255, 255))

    def test_sample_spectrum(self):
        samples = sample_spectrum([(0, 0, 0), (40, 80, 120)])
        self.assertEqual(samples.shape, (SPECTRUM_STEPS + 1, 3))
        self.assertEqual(tuple(samples[10]), (10, 20, 30))
        self.assertEqual(tuple(samples[-1]), (40, 80, 120))

    def test_ping_pong_cycle(self):
        palette = Palette(random.Random(0))
        palette.set_spectrum([(0, 0, 0), (40, 80, 120)])
        self.assertEqual(len(palette.colors), 2 * SPECTRUM_STEPS)
        self.assertEqual(palette.colors[SPECTRUM_STEPS], (40, 80, 120))
        self.assertEqual(palette.colors[-1], (1, 2, 3))

        first = palette.next_color()
        for _ in range(len(palette.colors) - 1):
            palette.next_color()
        self.assertEqual(palette.next_color(), first)

    def test_random_spectra(self):
        for seed in range(12):
            palette = Palette(random.Random(seed))
            for color in palette.colors:
                self.assertEqual(len(color), 3)
                self.assertTrue(all(0 <= c <= 255 for c in color))

    def test_stroke_color(self):
        self.assertEqual(Palette.stroke_color((100, 200, 50)), (30, 60, 15, 0x80))

class TestSketch(unittest.TestCase):
    def test_horizontal_hatching(self):
        square = [(0, 0), (10, 0), (10, 10), (0, 10)]
        segments = hachure_lines(square, 90, 2)
        self.assertEqual(len(segments), 5)
        for (x1, y1), (x2, y2) in segments:
            self.assertAlmostEqual(y1, y2, places=6)
            self.assertAlmostEqual(abs(x2 - x1), 10, places=6)

    def test_vertical_hatching(self):
        square = [(0, 0), (10, 0), (10, 10), (0, 10)]
        for (x1, y1), (x2, y2) in hachure_lines(square, 0, 2.5):
            self.assertAlmostEqual(x1, x2, places=6)

    def test_concave_polygon(self):
        ell = [(0, 0), (10, 0), (10, 4), (4, 4), (4, 10), (0, 10)]
        segments = hachure_lines(ell, 90, 2)
        self.assertEqual(len(segments), 5)
        for (x1, y1), (x2, y2) in segments:
            width = abs(x2 - x1)
            if y1 < 4:
                self.assertAlmostEqual(width, 10, places=6)
            else:
                self.assertAlmostEqual(width, 4, places=6)

    def test_diagonal_segments_stay_inside(self):
        square = [(0, 0), (10, 0), (10, 10), (0, 10)]
        segments = hachure_lines(square, 45, 3)
        self.assertGreater(len(segments), 0)
        for p, q in segments:
            for x, y in (p, q):
                self.assertTrue(-1e-6 <= x <= 10 + 1e-6 and -1e-6 <= y <= 10 + 1e-6)

    def test_bad_gap(self):
        with self.assertRaises(ValueError):
            hachure_lines([(0, 0), (1, 0), (1, 1)], 0, 0)

    def test_rough_line_endpoints(self):
        style = SketchStyle(roughness=1.0, bowing=0.0)
        pts = rough_line((0, 0), (100, 0), random.Random(3), style)
        self.assertEqual(pts.shape[1], 2)
        self.assertGreaterEqual(len(pts), 2)
        self.assertTrue(np.all(np.abs(pts[0] - (0, 0)) <= 0.5))
        self.assertTrue(np.all(np.abs(pts[-1] - (100, 0)) <= 0.5))

    def test_rough_line_zero_length(self):
        pts = rough_line((5, 5), (5, 5), random.Random(0))
        self.assertEqual(len(pts), 2)

class TestRendering(unittest.TestCase):
    def test_surface_to_frame(self):
        surface = pygame.Surface((4, 3))
        surface.fill((255, 0, 0))
        frame = VideoRecorder.surface_to_frame(surface)
        self.assertEqual(frame.shape, (3, 4, 3))
        self.assertEqual(list(frame[0, 0]), [0, 0, 255])

    def test_board_from_cell_size(self):
        renderer = Renderer(200, 120, seed=1, cell_size=20)
        self.assertEqual((renderer.session.width, renderer.session.height), (10, 6))

    def test_random_cell_size(self):
        renderer = Renderer(300, 300, seed=2)
        self.assertTrue(Renderer.MIN_CELL <= renderer.cell_size < Renderer.MAX_CELL)

    def test_queue_path_scales_to_pixels(self):
        renderer = Renderer(100, 100, seed=3, cell_size=25)
        renderer.queue_path([PathStep(1, 2, Edge.ALL, 0), PathStep(2, 2, Edge.ALL, 90)])
        self.assertEqual(len(renderer.pending), 2)
        block = renderer.pending[0]
        self.assertEqual((block.x, block.y, block.size), (25, 50, 25))
        self.assertEqual(block.stroke_color[3], 0x80)

    def test_render_all(self):
        renderer = Renderer(160, 100, seed=4, cell_size=20)
        canvas = renderer.render_all()
        self.assertEqual(canvas.get_size(), (160, 100))
        self.assertTrue(renderer.session.is_exhausted)
        self.assertEqual(len(renderer.pending), 0)
        self.assertFalse(renderer.draw_one(), "An exhausted board has nothing more to draw")

    def test_tiny_window(self):
        renderer = Renderer(10, 10, seed=5, cell_size=40)
        self.assertEqual((renderer.session.width, renderer.session.height), (1, 1))

    def test_reset_drops_pending(self):
        renderer = Renderer(120, 120, seed=6, cell_size=20)
        renderer.draw_till_end()
        self.assertEqual(len(renderer.pending), 36)
        renderer.drain(5)
        self.assertEqual(len(renderer.pending), 31)
        renderer.reset()
        self.assertEqual(len(renderer.pending), 0)
        self.assertEqual(renderer.session.visited_count, 0)

if __name__ == '__main__':
    unittest.main()
