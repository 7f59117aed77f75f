import unittest
import random
import sys
import os
from collections import Counter
from itertools import islice
from unittest import mock

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from snake_engine.core.errors import GridExhausted, InvalidDimensions, SnakeEngineError
from snake_engine.core.grid import Edge
from snake_engine.core.session import GridSession

def covered_cells(paths):
    return Counter(step.point for path in paths for step in path)

class TestGridSession(unittest.TestCase):
    def assert_full_coverage(self, paths, w, h):
        counts = covered_cells(paths)
        expected = {(x, y) for x in range(w) for y in range(h)}
        self.assertEqual(set(counts), expected, "Every cell must be covered")
        self.assertEqual(max(counts.values()), 1, "No cell may be covered twice")

    def test_full_coverage(self):
        for seed in range(5):
            session = GridSession(12, 9, seed=seed)
            paths = list(session.fill_all())
            self.assert_full_coverage(paths, 12, 9)
            self.assertTrue(session.is_exhausted)
            self.assertEqual(session.remaining, 0)
            self.assertEqual(session.paths_generated, len(paths))

    def test_thin_grids(self):
        for w, h in [(1, 7), (7, 1), (2, 2)]:
            session = GridSession(w, h, seed=1)
            self.assert_full_coverage(list(session.fill_all()), w, h)

    def test_single_cell_exhaustion(self):
        session = GridSession(1, 1, seed=0)
        path = session.fill_one()
        self.assertEqual(len(path), 1)
        self.assertEqual(path[0].edge_mask, Edge.ALL)
        self.assertEqual(path[0].hachure_angle, 0)

        with self.assertRaises(GridExhausted):
            session.fill_one()
        self.assertEqual(list(session.fill_all()), [])

    def test_reset_restores_capacity(self):
        session = GridSession(5, 4, seed=2)
        list(session.fill_all())
        with self.assertRaises(GridExhausted):
            session.fill_one()

        session.reset(5, 4)
        self.assertEqual(session.visited_count, 0)
        self.assert_full_coverage(list(session.fill_all()), 5, 4)

        session.reset(3, 6)
        self.assertEqual((session.width, session.height), (3, 6))
        self.assert_full_coverage(list(session.fill_all()), 3, 6)

    def test_invalid_dimensions(self):
        session = GridSession(4, 4)
        with self.assertRaises(InvalidDimensions):
            session.reset(0, 5)
        with self.assertRaises(InvalidDimensions):
            session.reset(3, -1)
        # Old board is untouched
        self.assertEqual((session.width, session.height), (4, 4))

        with self.assertRaises(InvalidDimensions):
            GridSession(0, 0)

    def test_partial_fill(self):
        session = GridSession(10, 10, seed=5)
        paths = list(islice(session.fill_all(), 2))
        self.assertEqual(len(paths), 2)
        filled = sum(len(p) for p in paths)
        self.assertEqual(session.visited_count, filled)
        self.assertEqual(session.remaining, 100 - filled)

        # Picking up again finishes the board without repeats
        rest = list(session.fill_all())
        self.assert_full_coverage(paths + rest, 10, 10)

    def test_reset_cancels_running_fill(self):
        session = GridSession(10, 10, seed=6)
        fill = session.fill_all()
        next(fill)
        session.reset(4, 4)
        self.assertEqual(list(fill), [])
        self.assertEqual(session.visited_count, 0)

    def test_reset_cancels_step_stream_mid_path(self):
        session = GridSession(10, 10, seed=6)
        steps = session.iter_steps()
        next(steps)
        session.reset(2, 2)
        self.assertEqual(list(steps), [], "No step from the old board may leak out after a reset")

        # A fresh stream covers the new board only
        fresh = list(session.iter_steps())
        self.assertEqual({s.point for s in fresh}, {(0, 0), (1, 0), (0, 1), (1, 1)})

    def test_steps_taken(self):
        session = GridSession(7, 3, seed=8)
        list(session.fill_all())
        self.assertEqual(session.steps_taken, 21)
        session.reset(2, 2)
        self.assertEqual(session.steps_taken, 0)

    def test_other_errors_propagate(self):
        session = GridSession(3, 3)
        with mock.patch.object(session.walker, "generate_path", side_effect=RuntimeError("boom")):
            with self.assertRaises(RuntimeError):
                list(session.fill_all())

    def test_iter_steps(self):
        session = GridSession(6, 5, seed=3)
        steps = list(session.iter_steps())
        self.assertEqual(len(steps), 30)
        self.assertEqual(len({s.point for s in steps}), 30)

    def test_determinism(self):
        a = list(GridSession(9, 9, seed=77).fill_all())
        b = list(GridSession(9, 9, seed=77).fill_all())
        self.assertEqual(a, b)

    def test_injected_rng(self):
        a = list(GridSession(6, 6, rng=random.Random(4)).fill_all())
        b = list(GridSession(6, 6, rng=random.Random(4)).fill_all())
        self.assertEqual(a, b)

    def test_error_hierarchy(self):
        self.assertTrue(issubclass(GridExhausted, SnakeEngineError))
        self.assertTrue(issubclass(InvalidDimensions, ValueError))

if __name__ == '__main__':
    unittest.main()
