"""Bounded-depth lookahead search for the next chord chain.

AIDEV-NOTE: This is a brute-force tree search: from the current peg every
candidate peg is scored, then searched again from that peg until the depth
limit. Cost is O(pegs ** depth) chord evaluations per pass, so depth should
stay in the 1-3 range. All scoring here is dry-run; only the pass driver
commits chords.
"""

import numpy as np

from models import Peg, SearchResult

from .rasterizer import LineCache
from .scoring import score_chord


def search_best_path(
    target: np.ndarray,
    canvas: np.ndarray,
    pegs: "tuple[Peg, ...]",
    current: Peg,
    delta: int,
    max_depth: int,
    lines: "LineCache | None" = None,
    depth: int = 0,
) -> SearchResult:
    """Find the best-scoring chord chain of up to max_depth chords.

    Args:
        target: Target grid, shape (height, width)
        canvas: Accumulator canvas (read only here)
        pegs: Full peg layout
        current: Peg the chain starts from
        delta: Pass intensity
        max_depth: Number of chords to look ahead
        lines: Rasterization cache, a private one is used if None
        depth: Current recursion depth

    Returns:
        SearchResult with the best combined score and its peg chain. The
        score is 0 with an empty chain when no candidate strictly improves.

    AIDEV-NOTE: Candidates sharing a boundary edge with the current peg are
    skipped. Ties keep the first candidate found (strict > comparison), so
    the result depends on peg order but is deterministic.
    """
    if lines is None:
        lines = LineCache()

    height, width = target.shape
    best_score = 0
    best_path: "tuple[Peg, ...]" = ()

    for peg in pegs:
        if current.on_same_edge(peg, width, height):
            continue

        xs, ys = lines.get(current, peg)
        score = score_chord(target, canvas, xs, ys, delta)
        path: "tuple[Peg, ...]" = (peg,)

        if depth + 1 < max_depth:
            deeper = search_best_path(
                target, canvas, pegs, peg, delta, max_depth, lines, depth + 1
            )
            score += deeper.score
            path += deeper.path

        if score > best_score:
            best_score = score
            best_path = path

    return SearchResult(score=best_score, path=best_path)


def find_next_path(
    target: np.ndarray,
    canvas: np.ndarray,
    pegs: "tuple[Peg, ...]",
    current: Peg,
    delta: int,
    max_depth: int,
    retry_deepening: bool = False,
    lines: "LineCache | None" = None,
) -> SearchResult:
    """Search from the current peg, optionally retrying one level deeper.

    AIDEV-NOTE: The retry reruns the entire search at max_depth + 1 rather
    than extending the branches already explored. It only happens once.
    """
    if lines is None:
        lines = LineCache()

    result = search_best_path(target, canvas, pegs, current, delta, max_depth, lines)
    if result.score == 0 and retry_deepening:
        result = search_best_path(
            target, canvas, pegs, current, delta, max_depth + 1, lines
        )
    return result
