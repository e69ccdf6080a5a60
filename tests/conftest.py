"""Shared pytest fixtures for the pic2string test suite.

Fixtures:
    corner_pegs: The four corner pegs of a 4x4 grid
    white_target: 4x4 target grid with every pixel at 255
    gradient_target: 32x24 target grid with a horizontal gradient
    sample_image_path: Small grayscale PNG written to a temp directory
    retry_case: 3x10 grid where only a two-chord chain improves the match
"""

import sys
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

# Add App directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "App"))

from models import Peg  # noqa: E402
from string_art.rasterizer import iter_line  # noqa: E402


@pytest.fixture
def corner_pegs():
    return (Peg(0, 0), Peg(3, 0), Peg(0, 3), Peg(3, 3))


@pytest.fixture
def white_target():
    return np.full((4, 4), 255, dtype=np.uint8)


@pytest.fixture
def gradient_target():
    row = np.linspace(0, 255, 32).astype(np.uint8)
    return np.tile(row, (24, 1))


@pytest.fixture
def sample_image_path(tmp_path):
    # Dark square on a light background
    pixels = np.full((40, 60), 230, dtype=np.uint8)
    pixels[10:30, 20:40] = 20
    path = tmp_path / "sample.png"
    Image.fromarray(pixels).save(path)
    return path


def build_retry_case():
    """3x10 grid where no single chord helps but a two-chord chain does.

    From A=(0,0) the only allowed chord goes to B=(2,1) over dark target
    pixels. From B, the long chord to C=(0,9) runs over bright pixels.
    """
    a, b, c = Peg(0, 0), Peg(2, 1), Peg(0, 9)
    target = np.zeros((10, 3), dtype=np.uint8)
    first = set(iter_line(a, b))
    for x, y in iter_line(b, c):
        if (x, y) not in first:
            target[y, x] = 255
    canvas = np.zeros_like(target)
    return target, canvas, (a, b, c)


@pytest.fixture
def retry_case():
    return build_retry_case()
