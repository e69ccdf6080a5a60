"""String art generation from grayscale images.

AIDEV-NOTE: Organized into modular components:
- pegs: Peg layout along the image boundary
- rasterizer: Bresenham chord rasterization
- scoring: Per-chord pixel-difference scoring
- search: Bounded-depth lookahead search
- driver: Pass loop and the layout_and_run entry point
- processor: StringArtProcessor image pipeline
- svg_export: SVG rendering of the chord path
- utils: Image/grid conversion and statistics
"""

from .driver import generate_string_art, layout_and_run, run_passes
from .pegs import generate_pegs
from .processor import StringArtProcessor
from .svg_export import chords_to_svg

__all__ = [
    "StringArtProcessor",
    "chords_to_svg",
    "generate_pegs",
    "generate_string_art",
    "layout_and_run",
    "run_passes",
]
