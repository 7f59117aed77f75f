import random
from typing import Optional, Tuple

from snake_engine.core.grid import Direction
from snake_engine.core.shuffle import shuffled
from snake_engine.core.tracker import PositionTracker


class DirectionSelector:
    def __init__(self, rng: random.Random = None):
        self.rng = rng if rng is not None else random.Random()

    def choose_next(self, x: int, y: int, tracker: PositionTracker) -> Optional[Tuple[int, Tuple[int, int]]]:
        """
        Returns (direction, (nx, ny)) for the first free neighbour in a random
        direction order, or None when the cell is a dead end.
        """
        for direction in shuffled(Direction.ALL, self.rng):
            nx, ny = Direction.step(x, y, direction)
            if not tracker.is_visited(nx, ny):
                return direction, (nx, ny)
        return None
