"""Background mask construction from saliency output.

Two strategies turn saliency into a foreground mask:

* box mode fills the bounding box of every region whose saliency reaches
  ``alpha`` times the strongest region,
* dense mode keeps every pixel of the saliency map that reaches ``alpha``
  times the map maximum.

The foreground is then inverted so that downstream histogram estimation only
sees the background.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

import numpy as np

from luo_simplicity.errors import DimensionMismatchError, InvalidInputError
from luo_simplicity.types import BoundingBox, SaliencyOutputs, SaliencyRegion

logger = logging.getLogger(__name__)


def max_saliency(components: Dict[SaliencyRegion, float]) -> float:
    """Largest region saliency, 0.0 for an empty map."""

    if not components:
        return 0.0
    return float(max(components.values()))


def select_salient_regions(components: Dict[SaliencyRegion, float], alpha: float) -> List[SaliencyRegion]:
    threshold = max_saliency(components) * alpha
    # Regions at or above the threshold are foreground. Luo & Tang phrase
    # this the other way round.
    return [region for region, saliency in components.items() if saliency >= threshold]


def box_mask(shape: Tuple[int, int], regions: List[SaliencyRegion]) -> np.ndarray:
    """Fill the bounding box of each region with 1 on an all-zero mask."""

    mask = np.zeros(shape, dtype="float32")
    for region in regions:
        top, left, bottom, right = region.bbox
        mask[max(top, 0):bottom, max(left, 0):right] = 1.0
    return mask


def threshold_mask(saliency_map: np.ndarray, alpha: float) -> np.ndarray:
    """Binary mask of pixels with saliency >= ``max * alpha``."""

    if saliency_map.size == 0:
        raise InvalidInputError("Saliency map is empty.")
    if saliency_map.ndim == 3 and saliency_map.shape[-1] == 1:
        saliency_map = saliency_map[..., 0]
    maskthresh = float(saliency_map.max()) * alpha
    logger.debug("Dense saliency threshold %.6f", maskthresh)
    return (saliency_map >= maskthresh).astype("float32")


def invert_mask(mask: np.ndarray) -> np.ndarray:
    """Swap 0 and 1 in a binary mask."""

    return (1.0 - mask).astype("float32")


class MaskBuilder:
    """Build background masks with either the box or the dense strategy."""

    def __init__(self, alpha: float = 0.67, box_mode: bool = True) -> None:
        self.alpha = alpha
        self.box_mode = box_mode

    def salient_boxes(self, components: Dict[SaliencyRegion, float]) -> List[BoundingBox]:
        return [region.bbox for region in select_salient_regions(components, self.alpha)]

    def build_foreground(self, shape: Tuple[int, int], saliency: SaliencyOutputs) -> np.ndarray:
        """Foreground (salient) mask before inversion."""

        if self.box_mode:
            if saliency.components is None:
                raise InvalidInputError("Box mode needs saliency components.")
            regions = select_salient_regions(saliency.components, self.alpha)
            logger.debug(
                "Selected %d of %d regions (max saliency %.6f, alpha %.3f)",
                len(regions),
                len(saliency.components),
                max_saliency(saliency.components),
                self.alpha,
            )
            return box_mask(shape, regions)

        if saliency.saliency_map is None:
            raise InvalidInputError("Dense mode needs a saliency map.")
        if saliency.saliency_map.shape[:2] != tuple(shape):
            raise DimensionMismatchError(
                f"Saliency map shape {saliency.saliency_map.shape[:2]} does not match image {tuple(shape)}."
            )
        return threshold_mask(saliency.saliency_map, self.alpha)

    def build(self, shape: Tuple[int, int], saliency: SaliencyOutputs) -> np.ndarray:
        """Background mask: the inverted foreground."""

        return invert_mask(self.build_foreground(shape, saliency))
