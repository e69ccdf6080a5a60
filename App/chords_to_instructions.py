"""Convert committed chords to peg-by-peg stringing instructions.

AIDEV-NOTE: Instructions are one line per chord in the format
"<step>: <from peg> -> <to peg>", with pegs numbered by their position in the
layout. This is what someone threading a physical board follows.
"""

from models import Chord, Peg
from string_art.utils import calculate_total_length


class ChordsToInstructionsConverter:
    """Converts Chord objects to stringing instructions."""

    def __init__(self, pegs: "tuple[Peg, ...]"):
        self.pegs = tuple(pegs)
        self._index = {peg: i for i, peg in enumerate(self.pegs)}

    def peg_index(self, peg: Peg) -> int:
        """Position of a peg in the layout.

        Raises:
            KeyError: If the peg is not part of the layout
        """
        return self._index[peg]

    def chords_to_instructions(self, chords: "list[Chord]") -> "list[str]":
        """Convert chords to numbered instruction lines.

        Returns:
            List of lines (e.g., "1: 0 -> 17")
        """
        instructions = []
        for step, chord in enumerate(chords, start=1):
            start = self.peg_index(chord.start)
            end = self.peg_index(chord.end)
            instructions.append(f"{step}: {start} -> {end}")
        return instructions

    def estimate_thread_length(
        self,
        chords: "list[Chord]",
        mm_per_pixel: float = 1.0,
    ) -> float:
        """Estimate total thread length.

        Args:
            chords: Chords in drawing order
            mm_per_pixel: Physical size of one image pixel on the board

        Returns:
            Thread length in mm (or pixels when mm_per_pixel is 1)

        AIDEV-NOTE: Straight-line distance between peg centers only; the
        thread wrapped around each peg is not counted.
        """
        return calculate_total_length(chords) * mm_per_pixel

    def validate_chords(self, chords: "list[Chord]") -> "tuple[bool, list[str]]":
        """Validate that the chords form one continuous path over known pegs.

        Returns:
            Tuple of (all_valid, error_messages)
        """
        errors = []
        previous_end = None

        for i, chord in enumerate(chords):
            if chord.start not in self._index:
                errors.append(f"Chord {i}: start ({chord.start.x}, {chord.start.y}) is not a peg")
            if chord.end not in self._index:
                errors.append(f"Chord {i}: end ({chord.end.x}, {chord.end.y}) is not a peg")
            if chord.start == chord.end:
                errors.append(f"Chord {i}: zero-length chord")
            if previous_end is not None and chord.start != previous_end:
                errors.append(f"Chord {i}: does not continue from the previous chord")
            previous_end = chord.end

        return len(errors) == 0, errors
