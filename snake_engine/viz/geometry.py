from typing import Dict, List, NamedTuple, Tuple

from snake_engine.core.grid import Edge

Point = Tuple[float, float]
Segment = Tuple[Point, Point]

MARGIN_RATIO = 0.1


class BlockShape(NamedTuple):
    points: List[Point]
    lines: List[Segment]


# Labels of the inset points around a block (margin = size * MARGIN_RATIO):
#
#   ##b##c##
#   ##-##-##
#   e-f##g-h
#   ########
#   i-j##k-l
#   ##-##-##
#   ##n##o##
#
# mask -> (polygon, border lines)
_SHAPES: Dict[int, Tuple[str, Tuple[str, ...]]] = {
    Edge.ALL:                 ("fgkj",   ("fg", "gk", "kj", "jf")),
    Edge.TOP | Edge.BOTTOM:   ("ehli",   ("eh", "li")),
    Edge.LEFT | Edge.RIGHT:   ("bcon",   ("bn", "co")),
    Edge.ALL & ~Edge.TOP:     ("bckj",   ("ck", "kj", "jb")),
    Edge.ALL & ~Edge.RIGHT:   ("fhlj",   ("fh", "lj", "jf")),
    Edge.ALL & ~Edge.BOTTOM:  ("fgon",   ("fg", "go", "nf")),
    Edge.ALL & ~Edge.LEFT:    ("egki",   ("eg", "gk", "ki")),
    Edge.LEFT | Edge.BOTTOM:  ("jbcghl", ("cg", "gh", "lj", "jb")),
    Edge.LEFT | Edge.TOP:     ("fhlkon", ("fh", "lk", "ko", "nf")),
    Edge.RIGHT | Edge.BOTTOM: ("efbcki", ("ef", "fb", "ck", "ki")),
    Edge.RIGHT | Edge.TOP:    ("egonji", ("eg", "go", "nj", "ji")),
}


def _anchor_points(x: float, y: float, size: float) -> Dict[str, Point]:
    margin = size * MARGIN_RATIO
    left, top = x, y
    right, bottom = x + size, y + size
    return {
        "b": (left + margin, top),
        "c": (right - margin, top),
        "e": (left, top + margin),
        "f": (left + margin, top + margin),
        "g": (right - margin, top + margin),
        "h": (right, top + margin),
        "i": (left, bottom - margin),
        "j": (left + margin, bottom - margin),
        "k": (right - margin, bottom - margin),
        "l": (right, bottom - margin),
        "n": (left + margin, bottom),
        "o": (right - margin, bottom),
    }


def block_shape(x: float, y: float, size: float, edge_mask: int) -> BlockShape:
    """
    Fill polygon and border segments of one block in pixel space.
    (x, y) is the top-left corner of the cell.
    """
    try:
        polygon, lines = _SHAPES[edge_mask]
    except KeyError:
        raise ValueError(f"No block shape for edge mask {edge_mask:#06b}") from None

    anchors = _anchor_points(x, y, size)
    return BlockShape(
        points=[anchors[label] for label in polygon],
        lines=[(anchors[a], anchors[b]) for a, b in lines],
    )


def grid_lines(width: int, height: int, size: float) -> Tuple[List[Segment], List[Segment]]:
    """Returns (interior lines, board border) for a width x height board."""
    left, top = 0.0, 0.0
    right, bottom = width * size, height * size

    inner: List[Segment] = []
    for col in range(width):
        px = col * size
        inner.append(((px, bottom), (px, top)))
    for row in range(height):
        py = row * size
        inner.append(((left, py), (right, py)))

    border = [
        ((left, top), (right, top)),
        ((right, top), (right, bottom)),
        ((right, bottom), (left, bottom)),
        ((left, bottom), (left, top)),
    ]
    return inner, border
