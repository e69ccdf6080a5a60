"""Unit tests for data models in models.py."""

import math
import unittest

import numpy as np

from models import (
    Chord,
    ConfigurationError,
    Peg,
    StringArtConfig,
    StringArtResult,
)


class TestPegEdges(unittest.TestCase):
    """Tests for Peg.on_same_edge."""

    def test_adjacent_corners_share_edge(self):
        self.assertTrue(Peg(0, 0).on_same_edge(Peg(3, 0), 4, 4))
        self.assertTrue(Peg(0, 0).on_same_edge(Peg(0, 3), 4, 4))
        self.assertTrue(Peg(3, 0).on_same_edge(Peg(3, 3), 4, 4))
        self.assertTrue(Peg(0, 3).on_same_edge(Peg(3, 3), 4, 4))

    def test_opposite_corners_do_not(self):
        self.assertFalse(Peg(0, 0).on_same_edge(Peg(3, 3), 4, 4))
        self.assertFalse(Peg(3, 0).on_same_edge(Peg(0, 3), 4, 4))

    def test_opposite_edges_do_not(self):
        self.assertFalse(Peg(0, 5).on_same_edge(Peg(9, 2), 10, 8))
        self.assertFalse(Peg(4, 0).on_same_edge(Peg(6, 7), 10, 8))

    def test_peg_shares_edge_with_itself(self):
        self.assertTrue(Peg(0, 4).on_same_edge(Peg(0, 4), 10, 8))

    def test_pegs_are_hashable_values(self):
        self.assertEqual(Peg(1, 2), Peg(1, 2))
        self.assertEqual(len({Peg(1, 2), Peg(1, 2), Peg(2, 1)}), 2)


class TestChord(unittest.TestCase):

    def test_intensity_is_required(self):
        with self.assertRaises(TypeError):
            Chord(Peg(0, 0), Peg(3, 4))

    def test_length(self):
        self.assertEqual(Chord(Peg(0, 0), Peg(3, 4), 24).length, 5.0)
        self.assertAlmostEqual(Chord(Peg(0, 0), Peg(1, 1), 24).length, math.sqrt(2))


class TestStringArtConfig(unittest.TestCase):
    """Tests for StringArtConfig defaults and validation."""

    def test_defaults_are_valid(self):
        StringArtConfig().validate()

    def test_vertical_pegs_falls_back_to_horizontal(self):
        self.assertEqual(StringArtConfig(pegs_x=12).vertical_pegs, 12)
        self.assertEqual(StringArtConfig(pegs_x=12, pegs_y=5).vertical_pegs, 5)

    def test_rejects_zero_intensity(self):
        with self.assertRaises(ConfigurationError):
            StringArtConfig(pass_intensity=0).validate()

    def test_rejects_zero_vertical_pegs(self):
        with self.assertRaises(ConfigurationError):
            StringArtConfig(pegs_y=0).validate()

    def test_rejects_tiny_max_size(self):
        with self.assertRaises(ConfigurationError):
            StringArtConfig(max_size=1).validate()

    def test_accepts_full_intensity(self):
        StringArtConfig(pass_intensity=255).validate()

    def test_rejects_string_count(self):
        with self.assertRaises(ConfigurationError):
            StringArtConfig(passes="10").validate()

    def test_rejects_bool_for_count(self):
        with self.assertRaises(ConfigurationError):
            StringArtConfig(pegs_x=True).validate()

    def test_rejects_int_for_flag(self):
        with self.assertRaises(ConfigurationError):
            StringArtConfig(invert=1).validate()

    def test_accepts_optional_counts(self):
        StringArtConfig(pegs_y=None, seed=None, progress_interval=None).validate()
        StringArtConfig(pegs_y=8, seed=3, progress_interval=2).validate()


class TestStringArtResult(unittest.TestCase):

    def test_stopped_early(self):
        canvas = np.zeros((2, 2), dtype=np.uint8)
        result = StringArtResult(canvas=canvas, pegs=(), passes_requested=10, passes_completed=3)
        self.assertTrue(result.stopped_early)

    def test_ran_to_completion(self):
        canvas = np.zeros((2, 2), dtype=np.uint8)
        result = StringArtResult(canvas=canvas, pegs=(), passes_requested=4, passes_completed=4)
        self.assertFalse(result.stopped_early)


if __name__ == "__main__":
    unittest.main()
