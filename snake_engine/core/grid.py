from dataclasses import dataclass
from typing import Tuple


class Edge:
    # Bitmask Constants
    TOP    = 0b0001
    RIGHT  = 0b0010
    BOTTOM = 0b0100
    LEFT   = 0b1000

    # Every border drawn (isolated cell) = 15
    ALL = TOP | RIGHT | BOTTOM | LEFT


class Direction:
    # Each direction shares its bit with the edge the walk exits through,
    # so UP leaves through Edge.TOP and so on.
    UP    = Edge.TOP
    RIGHT = Edge.RIGHT
    DOWN  = Edge.BOTTOM
    LEFT  = Edge.LEFT

    ALL = (UP, RIGHT, DOWN, LEFT)

    # Direction Helpers (screen space, y grows downwards)
    DX = {UP: 0, DOWN: 0, RIGHT: 1, LEFT: -1}
    DY = {UP: -1, DOWN: 1, RIGHT: 0, LEFT: 0}
    OPPOSITE = {UP: DOWN, DOWN: UP, RIGHT: LEFT, LEFT: RIGHT}

    @classmethod
    def step(cls, x: int, y: int, direction: int) -> Tuple[int, int]:
        return x + cls.DX[direction], y + cls.DY[direction]


@dataclass(frozen=True)
class PathStep:
    x: int
    y: int
    edge_mask: int
    hachure_angle: int

    @property
    def point(self) -> Tuple[int, int]:
        return (self.x, self.y)
