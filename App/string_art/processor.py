"""Main processor orchestrating the image-to-string-art pipeline.

AIDEV-NOTE: This module is the glue around the core algorithm: load and
scale the image, convert it to a target grid, run the pass driver, and turn
the accumulated canvas back into an image.
"""

from pathlib import Path

import numpy as np
from PIL import Image

from models import ProcessedStringArt, StringArtConfig, StringArtResult

from .driver import generate_string_art
from .svg_export import chords_to_svg
from .utils import (
    calculate_total_length,
    grid_to_image,
    image_to_grid,
    load_image,
    match_error,
    scale_image_to_fit,
)


class StringArtProcessor:
    """Processes images into string art renderings."""

    def __init__(self, config: StringArtConfig | None = None, verbose: bool = True):
        self.config = config or StringArtConfig()
        self.verbose = verbose

    def _log(self, message: str):
        if self.verbose:
            print(message)

    def _report_progress(self, pass_index: int, passes: int, score: int):
        self._log(f"Pass {pass_index + 1}/{passes} (score {score})")

    def load_image(self, file_path: str | Path) -> Image.Image:
        """Load an image file as grayscale.

        Raises:
            ValueError: If file cannot be loaded or is invalid
        """
        return load_image(file_path)

    def render(
        self,
        image: Image.Image,
        rng: "np.random.Generator | None" = None,
    ) -> "tuple[Image.Image, StringArtResult]":
        """Run the string art generator on an already loaded image.

        Args:
            image: Grayscale PIL image at working size
            rng: Random generator for jitter, built from config.seed if None

        Returns:
            Tuple of (output image, run result)
        """
        target = image_to_grid(image, invert=self.config.invert)
        result = generate_string_art(
            target, self.config, rng=rng, progress=self._report_progress
        )
        output = grid_to_image(result.canvas, invert=self.config.invert)
        return output, result

    def process(self, file_path: str | Path) -> ProcessedStringArt:
        """Execute complete string art pipeline.

        Args:
            file_path: Path to input image

        Returns:
            ProcessedStringArt with the rendered image and chord path

        Raises:
            ValueError: If the image cannot be loaded
            ConfigurationError: If the settings cannot make progress
        """
        self.config.validate()

        self._log("Loading image...")
        image = self.load_image(file_path)
        orig_width, orig_height = image.size
        self._log(f"Loaded image with size: {orig_width}x{orig_height} pixels.")

        image, scale = scale_image_to_fit(image, self.config.max_size)
        if scale < 1.0:
            self._log(
                f"Scaled image to {image.size[0]}x{image.size[1]} pixels "
                f"for processing."
            )

        self._log(
            f"Running {self.config.passes} passes at depth {self.config.search_depth}..."
        )
        output, result = self.render(image)

        if result.stopped_early:
            self._log(
                f"Stopped after {result.passes_completed} of "
                f"{result.passes_requested} passes (no improving chord left)."
            )

        total_length = calculate_total_length(result.chords)
        self._log("String art complete.")
        self._log(f"Pegs: {len(result.pegs)}")
        self._log(f"Chords drawn: {len(result.chords)}")
        self._log(f"Total thread length: {total_length:.1f} px")
        target = image_to_grid(image, invert=self.config.invert)
        self._log(f"Mean error: {match_error(target, result.canvas):.2f}")

        return ProcessedStringArt(
            image=output,
            result=result,
            original_width=orig_width,
            original_height=orig_height,
            total_thread_length=total_length,
        )

    def to_svg(self, processed: ProcessedStringArt, peg_radius: float = 0.0) -> str:
        """Render the chord path of a processed image as SVG."""
        height, width = processed.result.canvas.shape
        return chords_to_svg(
            processed.result.chords,
            width,
            height,
            pegs=processed.result.pegs,
            invert=self.config.invert,
            peg_radius=peg_radius,
        )
