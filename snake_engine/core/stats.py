from typing import Dict, Iterable, List

from snake_engine.core.grid import Edge, PathStep
from snake_engine.algo.edges import count_edges


class PathStats:
    @staticmethod
    def classify(mask: int) -> str:
        edges = count_edges(mask)
        if edges == 4:
            return "isolated"
        if edges == 3:
            return "dead_end"
        if edges == 2:
            # Two opposite borders drawn -> walk went straight through
            if mask in (Edge.TOP | Edge.BOTTOM, Edge.LEFT | Edge.RIGHT):
                return "corridor"
            return "corner"
        return "other"

    @staticmethod
    def calculate(paths: Iterable[List[PathStep]], width: int, height: int) -> Dict[str, float]:
        counts = {"isolated": 0, "dead_end": 0, "corridor": 0, "corner": 0, "other": 0}
        lengths = []

        for path in paths:
            lengths.append(len(path))
            for step in path:
                counts[PathStats.classify(step.edge_mask)] += 1

        cells = sum(lengths)
        total = width * height
        return {
            "paths": len(lengths),
            "cells": cells,
            "coverage_percent": (cells / total) * 100 if total > 0 else 0,
            "longest": max(lengths) if lengths else 0,
            "shortest": min(lengths) if lengths else 0,
            "mean_length": (cells / len(lengths)) if lengths else 0,
            "isolated": counts["isolated"],
            "dead_ends": counts["dead_end"],
            "corridors": counts["corridor"],
            "corners": counts["corner"],
        }
