"""Pass driver: repeatedly search for and commit chord chains.

AIDEV-NOTE: This is the entry point of the core algorithm. Each pass runs
one dry-run search from the current peg and, if anything improves the match,
draws the whole returned chain. A pass that finds nothing ends the run early.
Jitter only moves where ink lands; the logical path always follows the
unperturbed pegs.
"""

from typing import Callable

import numpy as np

from models import Chord, Peg, StringArtConfig, StringArtResult

from .pegs import generate_pegs
from .rasterizer import LineCache, line_pixels
from .scoring import score_chord
from .search import find_next_path

# Called as progress(pass_index, passes, score)
ProgressCallback = Callable[[int, int, int], None]


def default_progress_interval(passes: int) -> int:
    return max(1, passes // 100)


def jitter_point(
    peg: Peg,
    jitter: int,
    width: int,
    height: int,
    rng: np.random.Generator,
) -> Peg:
    """Displace a point by up to jitter / 2 on each axis, clamped to the image."""
    half = jitter // 2
    dx, dy = rng.integers(-half, half, size=2, endpoint=True)
    x = min(max(peg.x + int(dx), 0), width - 1)
    y = min(max(peg.y + int(dy), 0), height - 1)
    return Peg(x, y)


def draw_chord(
    target: np.ndarray,
    canvas: np.ndarray,
    start: Peg,
    end: Peg,
    delta: int,
    jitter: int = 0,
    rng: "np.random.Generator | None" = None,
    lines: "LineCache | None" = None,
) -> int:
    """Commit one chord to the canvas, optionally jittering its endpoints.

    Returns:
        Score of the chord as actually drawn
    """
    height, width = canvas.shape

    if jitter > 0 and rng is not None:
        start = jitter_point(start, jitter, width, height, rng)
        end = jitter_point(end, jitter, width, height, rng)
        xs, ys = line_pixels(start, end)
    elif lines is not None:
        xs, ys = lines.get(start, end)
    else:
        xs, ys = line_pixels(start, end)

    return score_chord(target, canvas, xs, ys, delta, apply=True)


def run_passes(
    target: np.ndarray,
    canvas: np.ndarray,
    pegs: "tuple[Peg, ...]",
    passes: int,
    delta: int,
    depth: int,
    jitter: int = 0,
    retry_deepening: bool = False,
    rng: "np.random.Generator | None" = None,
    progress: "ProgressCallback | None" = None,
    progress_interval: "int | None" = None,
    lines: "LineCache | None" = None,
) -> StringArtResult:
    """Draw up to `passes` chord chains onto canvas.

    Args:
        target: Target grid, shape (height, width), uint8
        canvas: Accumulator canvas of the same shape, mutated in place
        pegs: Peg layout; the first peg is the starting position
        passes: Maximum number of passes
        delta: Intensity added by each chord
        depth: Search lookahead in chords
        jitter: Maximum endpoint displacement, 0 disables
        retry_deepening: Retry one level deeper when a search scores 0
        rng: Random generator for jitter, seeded from entropy if None
        progress: Optional callback for progress reporting
        progress_interval: Passes between progress reports,
            defaults to max(1, passes // 100)
        lines: Rasterization cache shared across passes

    Returns:
        StringArtResult with the committed chords and pass counts
    """
    if target.shape != canvas.shape:
        raise ValueError(
            f"Canvas shape {canvas.shape} does not match target shape {target.shape}"
        )
    if not pegs:
        raise ValueError("Peg layout is empty")

    if lines is None:
        lines = LineCache()
    if jitter > 0 and rng is None:
        rng = np.random.default_rng()
    interval = progress_interval or default_progress_interval(passes)

    result = StringArtResult(canvas=canvas, pegs=tuple(pegs), passes_requested=passes)
    current = pegs[0]

    for pass_index in range(passes):
        found = find_next_path(
            target, canvas, pegs, current, delta, depth, retry_deepening, lines
        )

        # The pass that ends the run is always reported
        finished = found.score <= 0 or pass_index == passes - 1
        if progress is not None and (pass_index % interval == 0 or finished):
            progress(pass_index, passes, found.score)

        if found.score <= 0:
            break

        for peg in found.path:
            draw_chord(target, canvas, current, peg, delta, jitter, rng, lines)
            result.chords.append(Chord(current, peg, delta))
            current = peg

        result.passes_completed = pass_index + 1

    return result


def generate_string_art(
    target: np.ndarray,
    config: StringArtConfig,
    rng: "np.random.Generator | None" = None,
    progress: "ProgressCallback | None" = None,
) -> StringArtResult:
    """Lay out pegs and run the pass driver on a fresh canvas.

    Args:
        target: Target grid, shape (height, width), uint8
        config: Run settings, validated before anything is drawn
        rng: Random generator, built from config.seed if None
        progress: Optional progress callback

    Returns:
        StringArtResult whose canvas is a new array

    Raises:
        ConfigurationError: If the settings or image size are unusable
    """
    config.validate()

    target = np.asarray(target, dtype=np.uint8)
    if target.ndim != 2:
        raise ValueError(f"Target grid must be 2D grayscale, got shape {target.shape}")
    height, width = target.shape
    pegs = generate_pegs(width, height, config.pegs_x, config.vertical_pegs)

    if rng is None:
        rng = np.random.default_rng(config.seed)

    canvas = np.zeros_like(target)
    return run_passes(
        target,
        canvas,
        pegs,
        passes=config.passes,
        delta=config.pass_intensity,
        depth=config.search_depth,
        jitter=config.jitter,
        retry_deepening=config.retry_deepening,
        rng=rng,
        progress=progress,
        progress_interval=config.progress_interval,
    )


def layout_and_run(target: np.ndarray, config: StringArtConfig) -> np.ndarray:
    """Produce the accumulated string art grid for a grayscale target grid."""
    return generate_string_art(target, config).canvas
