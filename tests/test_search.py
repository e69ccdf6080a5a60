"""Unit tests for the bounded-depth path search.

Tests search_best_path and find_next_path in string_art.search:
    - Edge exclusion rule
    - Strict tie-breaking (first maximum wins)
    - Multi-chord lookahead scores without touching the canvas
    - Zero-score termination and retry-deepening
"""

import unittest

import numpy as np

from models import Peg
from string_art.pegs import generate_pegs
from string_art.rasterizer import LineCache
from string_art.search import find_next_path, search_best_path


class TestSearchBestPath(unittest.TestCase):
    """Tests for search_best_path."""

    def test_corner_scenario_picks_diagonal(self):
        """Adjacent corners share an edge, so only the diagonal is allowed."""
        target = np.full((4, 4), 255, dtype=np.uint8)
        canvas = np.zeros_like(target)
        pegs = (Peg(0, 0), Peg(3, 0), Peg(0, 3), Peg(3, 3))

        result = search_best_path(target, canvas, pegs, pegs[0], 255, 1)

        self.assertEqual(result.path, (Peg(3, 3),))
        self.assertEqual(result.score, 4 * 255)

    def test_never_returns_edge_sharing_chord(self):
        rng = np.random.default_rng(11)
        target = rng.integers(0, 256, size=(18, 24), dtype=np.uint8)
        canvas = np.zeros_like(target)
        pegs = generate_pegs(24, 18, 5, 4)
        lines = LineCache()

        for current in pegs:
            result = search_best_path(target, canvas, pegs, current, 60, 2, lines)
            previous = current
            for peg in result.path:
                self.assertFalse(previous.on_same_edge(peg, 24, 18))
                previous = peg

    def test_ties_keep_first_candidate(self):
        target = np.full((4, 4), 255, dtype=np.uint8)
        canvas = np.zeros_like(target)
        start = Peg(0, 0)
        # Both chords cover four pixels of full improvement
        first, second = Peg(3, 2), Peg(3, 3)

        result = search_best_path(target, canvas, (start, first, second), start, 255, 1)
        self.assertEqual(result.path, (first,))

        result = search_best_path(target, canvas, (start, second, first), start, 255, 1)
        self.assertEqual(result.path, (second,))

    def test_depth_two_scores_chain_without_drawing(self):
        """Deeper chords are scored against the undrawn canvas."""
        target = np.full((4, 4), 255, dtype=np.uint8)
        canvas = np.zeros_like(target)
        pegs = (Peg(0, 0), Peg(3, 0), Peg(0, 3), Peg(3, 3))

        result = search_best_path(target, canvas, pegs, pegs[0], 255, 2)

        self.assertEqual(result.path, (Peg(3, 3), Peg(0, 0)))
        self.assertEqual(result.score, 2 * 4 * 255)
        self.assertFalse(canvas.any())

    def test_zero_delta_never_improves(self):
        rng = np.random.default_rng(5)
        target = rng.integers(0, 256, size=(16, 16), dtype=np.uint8)
        canvas = np.zeros_like(target)
        pegs = generate_pegs(16, 16, 4)

        result = search_best_path(target, canvas, pegs, pegs[0], 0, 1)

        self.assertLessEqual(result.score, 0)
        self.assertEqual(result.path, ())

    def test_matched_target_scores_zero(self):
        target = np.zeros((16, 16), dtype=np.uint8)
        canvas = np.zeros_like(target)
        pegs = generate_pegs(16, 16, 4)

        result = search_best_path(target, canvas, pegs, pegs[0], 30, 1)

        self.assertEqual(result.score, 0)
        self.assertEqual(result.path, ())

    def test_path_length_bounded_by_depth(self):
        rng = np.random.default_rng(8)
        target = rng.integers(100, 256, size=(12, 12), dtype=np.uint8)
        canvas = np.zeros_like(target)
        pegs = generate_pegs(12, 12, 3)

        for depth in (1, 2, 3):
            result = search_best_path(target, canvas, pegs, pegs[0], 40, depth)
            self.assertGreater(result.score, 0)
            self.assertLessEqual(len(result.path), depth)


class TestFindNextPath:
    """Tests for find_next_path retry-deepening."""

    def test_without_retry_gives_up(self, retry_case):
        target, canvas, pegs = retry_case
        result = find_next_path(target, canvas, pegs, pegs[0], 100, 1)
        assert result.score == 0
        assert result.path == ()

    def test_retry_searches_one_level_deeper(self, retry_case):
        target, canvas, pegs = retry_case
        a, b, c = pegs

        result = find_next_path(target, canvas, pegs, a, 100, 1, retry_deepening=True)

        # A->B loses 3 * 100, B->C gains 8 * 100 and loses 100 on the shared pixel
        assert result.score == 400
        assert result.path == (b, c)

    def test_retry_not_used_when_first_search_succeeds(self):
        target = np.full((4, 4), 255, dtype=np.uint8)
        canvas = np.zeros_like(target)
        pegs = (Peg(0, 0), Peg(3, 0), Peg(0, 3), Peg(3, 3))

        result = find_next_path(target, canvas, pegs, pegs[0], 255, 1, retry_deepening=True)

        assert result.path == (Peg(3, 3),)


if __name__ == "__main__":
    unittest.main()
