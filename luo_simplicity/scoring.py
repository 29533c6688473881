"""Reduce a masked color histogram to the simplicity score."""

from __future__ import annotations

import numpy as np

from luo_simplicity.errors import InvalidInputError


def significant_bin_count(histogram: np.ndarray, gamma: float) -> int:
    """Number of bins whose value is at least ``gamma`` times the peak bin."""

    values = np.asarray(histogram, dtype=np.float64).ravel()
    if values.size == 0:
        raise InvalidInputError("Histogram has no bins.")
    threshold = gamma * values.max()
    return int(np.count_nonzero(values >= threshold))


def simplicity_score(histogram: np.ndarray, gamma: float = 0.01) -> float:
    """Fraction of significant bins.

    A low value means the background colors fall into few bins, i.e. the
    background is simple. An all-zero histogram scores exactly 1.0 since every
    bin meets a zero threshold.
    """

    count = significant_bin_count(histogram, gamma)
    return count / float(np.asarray(histogram).size)
