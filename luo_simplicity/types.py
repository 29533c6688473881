"""Shared type definitions for the simplicity pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol, Tuple

import numpy as np

BoundingBox = Tuple[int, int, int, int]


@dataclass(frozen=True)
class SaliencyRegion:
    """A connected segment of the image.

    ``bbox`` is ``(top, left, bottom, right)`` with exclusive bottom/right.
    """

    label: int
    bbox: BoundingBox
    area: int = 0


@dataclass
class SaliencyOutputs:
    """Saliency provider output.

    Box mode reads ``components``; dense mode reads ``saliency_map``.
    """

    components: Optional[Dict[SaliencyRegion, float]] = None
    saliency_map: Optional[np.ndarray] = None


@dataclass
class SimplicityOutputs:
    """Result of scoring one image."""

    score: float
    background_mask: np.ndarray
    histogram: np.ndarray
    salient_boxes: List[BoundingBox] = field(default_factory=list)

    def feature_vector(self) -> np.ndarray:
        return np.array([self.score], dtype=np.float64)


class SaliencyProvider(Protocol):
    def compute(self, image: np.ndarray) -> SaliencyOutputs:
        ...


class HistogramEstimator(Protocol):
    def estimate(self, image: np.ndarray, mask: np.ndarray, bins_per_channel: int) -> np.ndarray:
        ...
