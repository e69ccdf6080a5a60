"""Utility functions for image conversion and chord statistics.

AIDEV-NOTE: The core algorithm only sees numpy grids. These helpers move
between Pillow images and grids, and apply the tonal inversion on the way in
and back out again.
"""

from typing import TYPE_CHECKING

import numpy as np
from PIL import Image

from models import MAX_INTENSITY

if TYPE_CHECKING:
    from models import Chord


def load_image(file_path) -> Image.Image:
    """Load an image file as 8-bit grayscale.

    Raises:
        ValueError: If file cannot be loaded or is invalid
    """
    try:
        image = Image.open(file_path)
        # AIDEV-NOTE: Always convert to "L" so every pixel is a single byte
        if image.mode != "L":
            image = image.convert("L")
        return image
    except Exception as e:
        raise ValueError(f"Failed to load image: {e}") from e


def scale_image_to_fit(image: Image.Image, max_size: int) -> "tuple[Image.Image, float]":
    """Downscale so the longest side is at most max_size pixels.

    Args:
        image: Input PIL image
        max_size: Longest allowed side in pixels

    Returns:
        Tuple of (scaled_image, scale_factor)

    AIDEV-NOTE: Search cost grows with chord length, so large photos are
    shrunk first. Images are never upscaled.
    """
    orig_width, orig_height = image.size
    scale = min(max_size / orig_width, max_size / orig_height)

    if scale >= 1.0:
        return image, 1.0

    new_width = max(2, int(orig_width * scale))
    new_height = max(2, int(orig_height * scale))

    scaled_image = image.resize((new_width, new_height), Image.Resampling.LANCZOS)
    return scaled_image, scale


def image_to_grid(image: Image.Image, invert: bool = False) -> np.ndarray:
    """Convert a grayscale image to a (height, width) uint8 grid."""
    grid = np.array(image.convert("L"), dtype=np.uint8)
    if invert:
        grid = invert_grid(grid)
    return grid


def grid_to_image(grid: np.ndarray, invert: bool = False) -> Image.Image:
    """Convert a uint8 grid back to a grayscale PIL image."""
    if invert:
        grid = invert_grid(grid)
    return Image.fromarray(np.ascontiguousarray(grid, dtype=np.uint8))


def invert_grid(grid: np.ndarray) -> np.ndarray:
    return (MAX_INTENSITY - grid.astype(np.int32)).astype(np.uint8)


def calculate_total_length(chords: "list[Chord]") -> float:
    """Calculate total thread length in pixels."""
    return sum(chord.length for chord in chords)


def match_error(target: np.ndarray, canvas: np.ndarray) -> float:
    """Mean absolute difference between target and canvas (0-255)."""
    if target.size == 0:
        return 0.0
    diff = np.abs(target.astype(np.int32) - canvas.astype(np.int32))
    return float(diff.mean())
