"""Pixel-difference scoring for candidate chords.

AIDEV-NOTE: A chord's score is how much closer its pixels get to the target
once the pass intensity is added (saturating at 255). Positive means the
chord helps. Dry-run scoring never touches the canvas; apply mode writes the
new values back.
"""

import numpy as np

from models import MAX_INTENSITY


def saturating_add(values: np.ndarray, delta: int) -> np.ndarray:
    """Add delta to 8-bit values, clamping at 255.

    Returns:
        int32 array of the clamped sums
    """
    return np.minimum(values.astype(np.int32) + delta, MAX_INTENSITY)


def pixel_score(target: int, current: int, delta: int) -> int:
    """Improvement at a single pixel from adding delta to current."""
    new_value = min(current + delta, MAX_INTENSITY)
    return abs(current - target) - abs(new_value - target)


def score_chord(
    target: np.ndarray,
    canvas: np.ndarray,
    xs: np.ndarray,
    ys: np.ndarray,
    delta: int,
    apply: bool = False,
) -> int:
    """Score (and optionally draw) a chord over the given pixels.

    Args:
        target: Target grid, shape (height, width), uint8
        canvas: Accumulator canvas, same shape as target, uint8
        xs: Column indices of the chord's pixels
        ys: Row indices of the chord's pixels
        delta: Pass intensity added to each pixel
        apply: Commit the new values into canvas if True

    Returns:
        Sum of per-pixel improvements (signed)
    """
    current = canvas[ys, xs].astype(np.int32)
    wanted = target[ys, xs].astype(np.int32)
    new_values = saturating_add(current, delta)

    score = int(np.abs(current - wanted).sum() - np.abs(new_values - wanted).sum())

    if apply:
        # AIDEV-NOTE: Bresenham never repeats a pixel, so a single fancy-index
        # assignment matches drawing pixel by pixel
        canvas[ys, xs] = new_values.astype(np.uint8)

    return score
