"""Segment-averaged saliency after Yeh et al. (ACM MM 2010).

Per-pixel frequency-tuned saliency (Achanta et al., CVPR 2009) is averaged
over the segments of a Felzenszwalb-Huttenlocher graph segmentation, so that
every segment carries one saliency value.
"""

from __future__ import annotations

import logging
from typing import Dict

import numpy as np

from luo_simplicity.config import YehSaliencyConfig
from luo_simplicity.types import SaliencyOutputs, SaliencyRegion

logger = logging.getLogger(__name__)


class YehSaliencyAdapter:
    """Saliency provider combining OpenCV Lab saliency with scikit-image segments."""

    def __init__(self, config: YehSaliencyConfig) -> None:
        self.config = config
        self._loaded = False
        self._cv2 = None
        self._felzenszwalb = None
        self._regionprops = None

    def load(self) -> None:
        if self._loaded:
            return
        try:
            import cv2
            from skimage.measure import regionprops
            from skimage.segmentation import felzenszwalb
        except Exception as exc:  # pragma: no cover - depends on external libs
            raise RuntimeError("Failed to import saliency dependencies (opencv, scikit-image).") from exc
        self._cv2 = cv2
        self._felzenszwalb = felzenszwalb
        self._regionprops = regionprops
        self._loaded = True

    def frequency_tuned_saliency(self, image: np.ndarray) -> np.ndarray:
        """Squared Lab distance of each blurred pixel to the image's mean color.

        Args:
            image: HxWx3 float32 RGB in [0, 1].

        Returns:
            HxW float32 saliency map.
        """

        self.load()
        cv2 = self._cv2
        lab = cv2.cvtColor(np.ascontiguousarray(image, dtype=np.float32), cv2.COLOR_RGB2Lab)
        mean = lab.reshape(-1, 3).mean(axis=0)
        sigma = float(self.config.saliency_sigma)
        if sigma > 0:
            lab = cv2.GaussianBlur(lab, (0, 0), sigmaX=sigma, sigmaY=sigma)
        return ((lab - mean) ** 2).sum(axis=-1).astype(np.float32)

    def segment(self, image: np.ndarray) -> np.ndarray:
        """Felzenszwalb-Huttenlocher label image (labels start at 0)."""

        self.load()
        return self._felzenszwalb(
            image.astype(np.float64),
            scale=float(self.config.k),
            sigma=float(self.config.segmenter_sigma),
            min_size=int(self.config.min_size),
        )

    def compute(self, image: np.ndarray) -> SaliencyOutputs:
        self.load()
        pixel_saliency = self.frequency_tuned_saliency(image)
        segments = self.segment(image)

        flat = segments.ravel()
        num_labels = int(flat.max()) + 1
        areas = np.bincount(flat, minlength=num_labels)
        sums = np.bincount(flat, weights=pixel_saliency.ravel().astype(np.float64), minlength=num_labels)
        means = sums / np.maximum(areas, 1)

        components: Dict[SaliencyRegion, float] = {}
        # regionprops ignores label 0.
        for props in self._regionprops(segments + 1):
            label = props.label - 1
            region = SaliencyRegion(label=label, bbox=tuple(int(v) for v in props.bbox), area=int(props.area))
            components[region] = float(means[label])

        saliency_map = means[segments].astype(np.float32)
        logger.debug("Segmented image into %d regions", len(components))
        return SaliencyOutputs(components=components, saliency_map=saliency_map)
