from typing import Optional

from snake_engine.core.grid import Direction, Edge

# Hatch angles (degrees from vertical)
ANGLE_VERTICAL = 0
ANGLE_HORIZONTAL = 90

_AXIS_ANGLE = {
    Direction.UP: ANGLE_VERTICAL,
    Direction.DOWN: ANGLE_VERTICAL,
    Direction.RIGHT: ANGLE_HORIZONTAL,
    Direction.LEFT: ANGLE_HORIZONTAL,
}

# (previous, next) for every turn between the two axes
_TURN_ANGLE = {
    (Direction.RIGHT, Direction.DOWN): -45,
    (Direction.DOWN, Direction.RIGHT): -45,
    (Direction.UP, Direction.LEFT): -45,
    (Direction.LEFT, Direction.UP): -45,
    (Direction.LEFT, Direction.DOWN): 45,
    (Direction.DOWN, Direction.LEFT): 45,
    (Direction.UP, Direction.RIGHT): 45,
    (Direction.RIGHT, Direction.UP): 45,
}


def edge_mask(previous_direction: Optional[int], direction: Optional[int]) -> int:
    """
    Borders of a cell that the walk does not cross.

    The exit edge shares its bit with `direction`; the entry edge is the
    opposite of `previous_direction` (moving UP enters through the bottom).
    """
    mask = Edge.ALL
    if direction is not None:
        mask &= ~direction
    if previous_direction is not None:
        mask &= ~Direction.OPPOSITE[previous_direction]
    return mask


def hachure_angle(previous_direction: Optional[int], direction: Optional[int]) -> int:
    if previous_direction is None and direction is None:
        return ANGLE_VERTICAL
    if previous_direction is None:
        return _AXIS_ANGLE[direction]
    if direction is None:
        return _AXIS_ANGLE[previous_direction]

    turn = _TURN_ANGLE.get((previous_direction, direction))
    if turn is not None:
        return turn
    # Same axis: straight through (or a reversal, which a walk never makes)
    return _AXIS_ANGLE[direction]


def count_edges(mask: int) -> int:
    return bin(mask & Edge.ALL).count("1")
