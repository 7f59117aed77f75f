from typing import Iterator

from snake_engine.core.grid import PathStep
from snake_engine.algo.base import PathGenerator
from snake_engine.algo.edges import edge_mask, hachure_angle


class SnakeWalker(PathGenerator):
    def walk(self) -> Iterator[PathStep]:
        # Raises GridExhausted when nothing is left to start from
        cx, cy = self.tracker.take_unvisited_cell()
        previous_direction = None

        while True:
            self.tracker.mark_visited(cx, cy)

            choice = self.selector.choose_next(cx, cy, self.tracker)
            direction = choice[0] if choice else None

            self.step_count += 1
            yield PathStep(
                cx, cy,
                edge_mask(previous_direction, direction),
                hachure_angle(previous_direction, direction),
            )

            if choice is None:
                # Dead end
                return

            previous_direction = direction
            cx, cy = choice[1]
