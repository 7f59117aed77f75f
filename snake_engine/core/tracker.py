import random
from array import array
from typing import List, Tuple

from snake_engine.core.errors import GridExhausted, InvalidDimensions
from snake_engine.core.shuffle import fisher_yates_shuffle


class PositionTracker:
    """
    Visited flags plus a shuffled pool of start candidates.
    Out-of-bounds coordinates always read as visited so the walk never
    steps off the grid.
    """

    __slots__ = ('width', 'height', 'rng', 'visited', 'visited_count', 'pool')

    def __init__(self, width: int, height: int, rng: random.Random = None):
        self.rng = rng if rng is not None else random.Random()
        self.width = 0
        self.height = 0
        self.visited = array('B')
        self.visited_count = 0
        self.pool: List[Tuple[int, int]] = []
        self.initialize(width, height)

    @property
    def total(self) -> int:
        return self.width * self.height

    def initialize(self, width: int, height: int):
        if not _is_dimension(width) or not _is_dimension(height):
            raise InvalidDimensions(width, height)

        self.width = width
        self.height = height
        # 1 byte per cell, 0 = unvisited
        self.visited = array('B', [0] * (width * height))
        self.visited_count = 0
        self.pool = self._fresh_pool()

    def _fresh_pool(self) -> List[Tuple[int, int]]:
        pool = [(x, y) for x in range(self.width) for y in range(self.height)]
        return fisher_yates_shuffle(pool, self.rng)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_visited(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return True
        return self.visited[y * self.width + x] != 0

    def mark_visited(self, x: int, y: int):
        if not self.in_bounds(x, y):
            raise IndexError(f"Coordinate ({x}, {y}) out of bounds")
        idx = y * self.width + x
        if not self.visited[idx]:
            self.visited[idx] = 1
            self.visited_count += 1

    def take_unvisited_cell(self) -> Tuple[int, int]:
        if self.visited_count >= self.total:
            raise GridExhausted(f"All {self.total} cells of the {self.width}x{self.height} grid are visited")

        while True:
            if not self.pool:
                # Unvisited cells remain but every candidate was offered already
                self.pool = self._fresh_pool()
            x, y = self.pool.pop()
            if not self.is_visited(x, y):
                return x, y


def _is_dimension(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
