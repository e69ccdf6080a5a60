"""Data models and constants for the pic2string generator."""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from PIL import Image

# AIDEV-NOTE: Pixel values are 8-bit; the accumulator saturates here
MAX_INTENSITY = 255

# Tunable defaults (see DESIGN.md for how these were picked)
DEFAULT_PEGS = 64  # pegs per edge
DEFAULT_PASSES = 512
DEFAULT_PASS_INTENSITY = 24  # brightness added per chord
DEFAULT_SEARCH_DEPTH = 1  # chords of lookahead
DEFAULT_MAX_SIZE = 400  # px, longest side after downscaling

# Configuration file path
CONFIG_FILE = Path.home() / ".pic2string_config.json"


class ConfigurationError(ValueError):
    """Raised when a run cannot make progress with the given settings."""


@dataclass(frozen=True)
class Peg:
    """A fixed anchor point on the image boundary."""

    x: int
    y: int

    def on_same_edge(self, other: "Peg", width: int, height: int) -> bool:
        """Check whether both pegs lie on one of the four boundary edges.

        AIDEV-NOTE: A peg always shares an edge with itself, so this also
        rules out zero-length chords.
        """
        return (
            (self.x == 0 and other.x == 0)
            or (self.x == width - 1 and other.x == width - 1)
            or (self.y == 0 and other.y == 0)
            or (self.y == height - 1 and other.y == height - 1)
        )


@dataclass(frozen=True)
class Chord:
    """A straight string between two pegs."""

    start: Peg
    end: Peg
    # Brightness the chord added to the canvas
    intensity: int

    @property
    def length(self) -> float:
        return float(np.hypot(self.end.x - self.start.x, self.end.y - self.start.y))


@dataclass(frozen=True)
class SearchResult:
    """Best chord chain found from one decision point."""

    score: int = 0
    path: "tuple[Peg, ...]" = ()


@dataclass
class StringArtConfig:
    """Settings for a string art run."""

    # Peg layout; pegs_y falls back to pegs_x when unset
    pegs_x: int = DEFAULT_PEGS
    pegs_y: "int | None" = None

    # Pass driver
    passes: int = DEFAULT_PASSES
    pass_intensity: int = DEFAULT_PASS_INTENSITY
    search_depth: int = DEFAULT_SEARCH_DEPTH
    retry_deepening: bool = False

    # Random endpoint displacement per drawn chord (0 disables)
    jitter: int = 0
    seed: "int | None" = None

    # Report every N passes; None means max(1, passes // 100)
    progress_interval: "int | None" = None

    # Image I/O
    # Should the target be inverted so strings read dark-on-light?
    invert: bool = True
    max_size: int = DEFAULT_MAX_SIZE

    @property
    def vertical_pegs(self) -> int:
        return self.pegs_x if self.pegs_y is None else self.pegs_y

    @classmethod
    def accepts(cls, name: str, value) -> bool:
        """Check a value against the type of a setting's default.

        Settings that default to None also accept None.
        """
        default = {f.name: f.default for f in fields(cls)}[name]
        if value is None:
            return default is None
        # bool is a subclass of int
        if isinstance(default, bool):
            return isinstance(value, bool)
        return isinstance(value, int) and not isinstance(value, bool)

    def validate(self) -> None:
        """Reject settings where forward progress is impossible.

        Raises:
            ConfigurationError: On the first invalid setting found
        """
        for setting in fields(self):
            value = getattr(self, setting.name)
            if not self.accepts(setting.name, value):
                raise ConfigurationError(
                    f"Setting '{setting.name}' has the wrong type: {value!r}"
                )

        if self.pegs_x < 1 or self.vertical_pegs < 1:
            raise ConfigurationError("Peg counts must be at least 1")
        if self.passes < 1:
            raise ConfigurationError("Pass count must be at least 1")
        if not 1 <= self.pass_intensity <= MAX_INTENSITY:
            raise ConfigurationError(
                f"Pass intensity must be between 1 and {MAX_INTENSITY}, "
                f"got {self.pass_intensity}"
            )
        if self.search_depth < 1:
            raise ConfigurationError("Search depth must be at least 1")
        if self.jitter < 0:
            raise ConfigurationError("Jitter magnitude cannot be negative")
        if self.progress_interval is not None and self.progress_interval < 1:
            raise ConfigurationError("Progress interval must be at least 1")
        if self.max_size < 2:
            raise ConfigurationError("Maximum image size must be at least 2 px")


@dataclass
class StringArtResult:
    """Result of a pass driver run."""

    # Accumulated canvas, shape (height, width), uint8
    canvas: np.ndarray

    # Peg layout used for the run
    pegs: "tuple[Peg, ...]"

    # Committed chords between logical (unjittered) pegs, in drawing order
    chords: "list[Chord]" = field(default_factory=list)

    passes_requested: int = 0
    passes_completed: int = 0

    @property
    def stopped_early(self) -> bool:
        return self.passes_completed < self.passes_requested


@dataclass
class ProcessedStringArt:
    """Result of the image-to-string-art pipeline."""

    # Final image, already converted back to the output tonal convention
    image: "Image.Image"

    result: StringArtResult

    # Original image dimensions (pixels)
    original_width: int = 0
    original_height: int = 0

    # Statistics
    total_thread_length: float = 0.0  # in pixels of the working image
