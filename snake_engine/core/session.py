import logging
import random
from typing import Iterator, List

from snake_engine.core.errors import GridExhausted
from snake_engine.core.grid import PathStep
from snake_engine.core.tracker import PositionTracker
from snake_engine.algo.selector import DirectionSelector
from snake_engine.algo.snake import SnakeWalker

logger = logging.getLogger(__name__)


class GridSession:
    """
    One board being filled with snakes.

    Owns the tracker exclusively. A reset bumps `epoch`, which cancels any
    `fill_all()` or `iter_steps()` iterator that was started before it.
    """

    def __init__(self, width: int, height: int, seed: int = None, rng: random.Random = None):
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.tracker = PositionTracker(width, height, rng=self.rng)
        self.selector = DirectionSelector(self.rng)
        self.walker = SnakeWalker(self.tracker, self.selector)
        self.epoch = 0

    @property
    def width(self) -> int:
        return self.tracker.width

    @property
    def height(self) -> int:
        return self.tracker.height

    @property
    def visited_count(self) -> int:
        return self.tracker.visited_count

    @property
    def remaining(self) -> int:
        return self.tracker.total - self.tracker.visited_count

    @property
    def is_exhausted(self) -> bool:
        return self.remaining == 0

    @property
    def paths_generated(self) -> int:
        return self.walker.path_count

    @property
    def steps_taken(self) -> int:
        return self.walker.step_count

    def reset(self, width: int, height: int):
        # Validates before touching anything, so a bad resize keeps the old board
        self.tracker.initialize(width, height)
        self.walker = SnakeWalker(self.tracker, self.selector)
        self.epoch += 1
        logger.info(f"Session reset to {width}x{height} ({width * height} cells)")

    def fill_one(self) -> List[PathStep]:
        path = self.walker.generate_path()
        logger.debug(f"Path {self.walker.path_count}: {len(path)} steps, {self.remaining} cells left")
        return path

    def fill_all(self) -> Iterator[List[PathStep]]:
        epoch = self.epoch
        while True:
            if epoch != self.epoch:
                logger.debug("Session was reset, abandoning fill")
                return
            try:
                path = self.fill_one()
            except GridExhausted:
                logger.debug(f"Grid exhausted after {self.walker.path_count} paths")
                return
            yield path

    def iter_steps(self) -> Iterator[PathStep]:
        epoch = self.epoch
        for path in self.fill_all():
            for step in path:
                # A reset mid-path drops the rest of the old board
                if epoch != self.epoch:
                    return
                yield step
