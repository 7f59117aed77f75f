from abc import ABC, abstractmethod
from typing import Iterator, List

from snake_engine.core.grid import PathStep
from snake_engine.core.tracker import PositionTracker
from snake_engine.algo.selector import DirectionSelector


class PathGenerator(ABC):
    def __init__(self, tracker: PositionTracker, selector: DirectionSelector):
        self.tracker = tracker
        self.selector = selector
        self.path_count = 0
        self.step_count = 0

    @abstractmethod
    def walk(self) -> Iterator[PathStep]:
        """
        Yields the steps of one path as they are decided.
        Raises GridExhausted before the first step if no cell is free.
        """
        pass

    def generate_path(self) -> List[PathStep]:
        """Helper to run one walk to completion."""
        path = list(self.walk())
        self.path_count += 1
        return path
