import unittest

import numpy as np

from luo_simplicity.errors import InvalidInputError
from luo_simplicity.scoring import significant_bin_count, simplicity_score


class SimplicityScoreTest(unittest.TestCase):
    def test_all_zero_histogram_scores_one(self) -> None:
        histogram = np.zeros(4096)

        self.assertEqual(simplicity_score(histogram, 0.01), 1.0)

    def test_two_peaks_out_of_eight(self) -> None:
        histogram = np.array([0.5, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.5])

        self.assertEqual(significant_bin_count(histogram, 0.01), 2)
        self.assertEqual(simplicity_score(histogram, 0.01), 0.25)

    def test_threshold_is_inclusive(self) -> None:
        histogram = np.array([1.0, 0.5, 0.49])

        self.assertEqual(significant_bin_count(histogram, 0.5), 2)

    def test_count_non_increasing_in_gamma(self) -> None:
        rng = np.random.default_rng(7)
        histogram = rng.random(64) ** 3
        counts = [significant_bin_count(histogram, gamma) for gamma in np.linspace(0.0, 1.0, 21)]

        self.assertTrue(all(a >= b for a, b in zip(counts, counts[1:])))
        self.assertEqual(counts[0], 64)
        self.assertGreaterEqual(counts[-1], 1)

    def test_score_in_unit_interval(self) -> None:
        rng = np.random.default_rng(3)
        for _ in range(10):
            histogram = rng.random(27) * rng.integers(0, 2, size=27)
            score = simplicity_score(histogram, 0.2)
            self.assertGreaterEqual(score, 0.0)
            self.assertLessEqual(score, 1.0)

    def test_empty_histogram_rejected(self) -> None:
        with self.assertRaises(InvalidInputError):
            simplicity_score(np.array([]), 0.01)


if __name__ == "__main__":
    unittest.main()
