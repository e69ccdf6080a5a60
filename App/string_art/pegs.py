"""Peg layout around the rectangular image boundary.

AIDEV-NOTE: Pegs are laid out edge by edge (top, bottom, left, right) with
integer-division spacing. The left edge's first peg is the origin, which the
top edge already placed, so it is dropped. The first peg returned is where the
pass driver starts.
"""

from models import ConfigurationError, Peg


def generate_pegs(
    width: int,
    height: int,
    pegs_x: int,
    pegs_y: "int | None" = None,
) -> "tuple[Peg, ...]":
    """Lay out pegs evenly along the four image edges.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        pegs_x: Pegs on each horizontal edge (top and bottom)
        pegs_y: Pegs on each vertical edge (left and right),
            defaults to pegs_x

    Returns:
        Tuple of 2 * pegs_x + 2 * pegs_y - 1 distinct boundary pegs

    Raises:
        ConfigurationError: If the image is too small for the requested counts
    """
    if pegs_y is None:
        pegs_y = pegs_x

    validate_layout(width, height, pegs_x, pegs_y)

    xs = [i * width // pegs_x for i in range(pegs_x)]
    ys = [i * height // pegs_y for i in range(pegs_y)]

    pegs = []
    pegs.extend(Peg(x, 0) for x in xs)  # top
    pegs.extend(Peg(x, height - 1) for x in xs)  # bottom
    pegs.extend(Peg(0, y) for y in ys if y != 0)  # left, minus the origin
    pegs.extend(Peg(width - 1, y) for y in ys)  # right

    return tuple(pegs)


def validate_layout(width: int, height: int, pegs_x: int, pegs_y: int) -> None:
    """Check that a layout produces distinct, non-degenerate pegs.

    AIDEV-NOTE: With i * width // n spacing, the last top peg lands on the
    right edge's corner exactly when n >= width (likewise for height), so
    those counts would produce duplicate pegs.
    """
    if width < 2 or height < 2:
        raise ConfigurationError(
            f"Image must be at least 2x2 pixels to place pegs, got {width}x{height}"
        )
    if pegs_x < 1 or pegs_y < 1:
        raise ConfigurationError("Peg counts must be at least 1")
    if pegs_x >= width:
        raise ConfigurationError(
            f"Too many horizontal pegs ({pegs_x}) for an image {width} px wide"
        )
    if pegs_y >= height:
        raise ConfigurationError(
            f"Too many vertical pegs ({pegs_y}) for an image {height} px tall"
        )
