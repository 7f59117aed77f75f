import math
import random
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np
import pygame

Point = Tuple[float, float]
Segment = Tuple[Point, Point]


@dataclass
class SketchStyle:
    roughness: float = 1.8       # max jitter per vertex, in pixels
    bowing: float = 0.6          # sideways bend as a fraction of 5% of the length
    hachure_gap: float = 4.0
    hachure_width: int = 1
    outline_color: Tuple[int, int, int, int] = (0, 0, 0, 26)
    segment_length: float = 8.0
    double_stroke: bool = True


def rough_line(p1: Point, p2: Point, rng: random.Random, style: SketchStyle = None) -> np.ndarray:
    """
    Jittered polyline from p1 to p2 that bows slightly to one side.
    Returns an (N, 2) float array, N >= 2.
    """
    style = style or SketchStyle()
    gen = np.random.default_rng(rng.getrandbits(32))

    a = np.asarray(p1, dtype=float)
    b = np.asarray(p2, dtype=float)
    delta = b - a
    length = float(np.hypot(*delta))

    count = max(2, int(length / style.segment_length) + 1)
    t = np.linspace(0.0, 1.0, count)
    points = a + np.outer(t, delta)
    if length == 0:
        return points

    normal = np.array([-delta[1], delta[0]]) / length
    bow = style.bowing * length * 0.05 * gen.uniform(-1.0, 1.0)
    points += np.outer(np.sin(np.pi * t) * bow, normal)
    points += gen.uniform(-style.roughness, style.roughness, size=points.shape) * 0.5
    return points


def hachure_lines(points: Sequence[Point], angle: float, gap: float) -> List[Segment]:
    """
    Parallel hatch segments clipped to a polygon (even-odd rule).
    `angle` is measured from the vertical: 0 gives vertical hatching,
    90 horizontal.
    """
    if gap <= 0:
        raise ValueError("Hachure gap must be positive")
    poly = np.asarray(points, dtype=float)
    if len(poly) < 3:
        return []

    theta = math.radians(angle)
    along = np.array([math.sin(theta), math.cos(theta)])
    across = np.array([math.cos(theta), -math.sin(theta)])

    offsets = poly @ across
    edges = list(zip(poly, np.roll(poly, -1, axis=0)))
    segments: List[Segment] = []

    k = offsets.min() + gap / 2
    while k < offsets.max():
        hits = []
        for start, end in edges:
            sa, sb = start @ across, end @ across
            # Half-open test so a vertex on the line is counted once
            if (sa <= k < sb) or (sb <= k < sa):
                t = (k - sa) / (sb - sa)
                hits.append(start + t * (end - start))
        hits.sort(key=lambda p: p @ along)
        for i in range(0, len(hits) - 1, 2):
            p, q = hits[i], hits[i + 1]
            segments.append(((float(p[0]), float(p[1])), (float(q[0]), float(q[1]))))
        k += gap
    return segments


def draw_rough_line(surface: pygame.Surface, color, p1: Point, p2: Point, width: int,
                    rng: random.Random, style: SketchStyle = None):
    style = style or SketchStyle()
    passes = 2 if style.double_stroke else 1
    for _ in range(passes):
        pts = rough_line(p1, p2, rng, style)
        pygame.draw.lines(surface, color, False, [tuple(p) for p in pts], max(1, int(width)))


def draw_rough_polygon(surface: pygame.Surface, points: Sequence[Point], fill, angle: float,
                       rng: random.Random, style: SketchStyle = None):
    """Hatch-filled polygon with a faint sketchy outline."""
    style = style or SketchStyle()
    for p, q in hachure_lines(points, angle, style.hachure_gap):
        pts = rough_line(p, q, rng, style)
        pygame.draw.lines(surface, fill, False, [tuple(v) for v in pts], style.hachure_width)

    for i, p in enumerate(points):
        q = points[(i + 1) % len(points)]
        pts = rough_line(p, q, rng, style)
        pygame.draw.lines(surface, style.outline_color, False, [tuple(v) for v in pts], 1)
