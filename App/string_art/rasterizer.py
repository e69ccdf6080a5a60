"""Integer line rasterization between pegs.

AIDEV-NOTE: Classic Bresenham stepping. Segments are normalized so the
primary axis always increases, which makes A->B and B->A produce the same
pixels. The scorer works on numpy index arrays; iter_line is the lazy
pixel-by-pixel form they are built from.
"""

from typing import Iterator

import numpy as np

from models import Peg


def iter_line(start: Peg, end: Peg) -> Iterator["tuple[int, int]"]:
    """Yield the 8-connected pixels from start to end, endpoints inclusive.

    Args:
        start: First endpoint
        end: Second endpoint

    Yields:
        (x, y) pixel coordinates along the primary axis in increasing order
    """
    x0, y0, x1, y1 = start.x, start.y, end.x, end.y

    if abs(y1 - y0) < abs(x1 - x0):
        if x0 > x1:
            x0, y0, x1, y1 = x1, y1, x0, y0
        yield from _iter_line_low(x0, y0, x1, y1)
    else:
        if y0 > y1:
            x0, y0, x1, y1 = x1, y1, x0, y0
        yield from _iter_line_high(x0, y0, x1, y1)


def _iter_line_low(x0: int, y0: int, x1: int, y1: int):
    """Step along x for slopes shallower than 45 degrees."""
    dx = x1 - x0
    dy = y1 - y0
    step = 1
    if dy < 0:
        step = -1
        dy = -dy

    decision = 2 * dy - dx
    y = y0
    for x in range(x0, x1 + 1):
        yield x, y
        if decision > 0:
            y += step
            decision += 2 * (dy - dx)
        else:
            decision += 2 * dy


def _iter_line_high(x0: int, y0: int, x1: int, y1: int):
    """Step along y for slopes of 45 degrees or steeper."""
    dx = x1 - x0
    dy = y1 - y0
    step = 1
    if dx < 0:
        step = -1
        dx = -dx

    decision = 2 * dx - dy
    x = x0
    for y in range(y0, y1 + 1):
        yield x, y
        if decision > 0:
            x += step
            decision += 2 * (dx - dy)
        else:
            decision += 2 * dx


def line_pixels(start: Peg, end: Peg) -> "tuple[np.ndarray, np.ndarray]":
    """Rasterize a segment into (xs, ys) index arrays for numpy fancy indexing."""
    # Small index dtype keeps a full LineCache affordable
    largest = max(start.x, start.y, end.x, end.y)
    dtype = np.uint16 if largest <= np.iinfo(np.uint16).max else np.intp

    points = np.fromiter(
        (coord for point in iter_line(start, end) for coord in point),
        dtype=dtype,
    ).reshape(-1, 2)
    return points[:, 0], points[:, 1]


class LineCache:
    """Memoizes peg-to-peg rasterizations.

    AIDEV-NOTE: The search scores the same peg pairs over and over, so the
    index arrays are kept per unordered pair. Keying on the unordered pair is
    only valid because rasterization is symmetric.
    """

    def __init__(self):
        self._lines: "dict[tuple[Peg, Peg], tuple[np.ndarray, np.ndarray]]" = {}

    def get(self, start: Peg, end: Peg) -> "tuple[np.ndarray, np.ndarray]":
        """Get the pixel index arrays for a chord, rasterizing on first use."""
        key = (start, end) if (start.x, start.y) <= (end.x, end.y) else (end, start)
        line = self._lines.get(key)
        if line is None:
            line = line_pixels(*key)
            self._lines[key] = line
        return line

    def __len__(self) -> int:
        return len(self._lines)
