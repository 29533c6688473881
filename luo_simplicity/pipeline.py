"""End-to-end simplicity pipeline."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import numpy as np

from luo_simplicity.adapters.yeh_saliency_adapter import YehSaliencyAdapter
from luo_simplicity.config import SimplicityConfig
from luo_simplicity.errors import StageError
from luo_simplicity.histogram import MaskingHistogramModel
from luo_simplicity.masking import MaskBuilder
from luo_simplicity.scoring import simplicity_score
from luo_simplicity.types import HistogramEstimator, SaliencyProvider, SimplicityOutputs
from luo_simplicity.utils.vision import prepare_image

logger = logging.getLogger(__name__)


class ModifiedLuoSimplicity:
    """Estimate image simplicity from the color distribution of the background.

    Flow (after Luo & Tang, ECCV 2008, with the foreground detection of
    Yeh et al., ACM MM 2010):
        1) Saliency: score the segments of the image (or every pixel).
        2) Masking: mark the salient foreground, either as the bounding boxes
           of the strongest regions or by thresholding the dense map, and
           invert it to select the background.
        3) Histogram: joint color histogram of the background pixels with
           ``bins_per_band`` bins per channel.
        4) Scoring: fraction of bins holding at least ``gamma`` of the peak.

    The score is the bin-occupancy fraction; lower values mean a simpler
    background.
    """

    def __init__(
        self,
        config: Optional[SimplicityConfig] = None,
        saliency: Optional[SaliencyProvider] = None,
        histogram: Optional[HistogramEstimator] = None,
    ) -> None:
        self.config = config or SimplicityConfig()
        self.saliency = saliency or YehSaliencyAdapter(self.config.saliency)
        self.histogram = histogram or MaskingHistogramModel()
        self.mask_builder = MaskBuilder(alpha=self.config.alpha, box_mode=self.config.box_mode)
        self.simplicity: Optional[float] = None

    def _run_stage(self, stage: str, func: Callable[..., Any], *args: Any) -> Any:
        try:
            return func(*args)
        except Exception as exc:
            logger.error("%s stage failed: %s", stage, exc)
            raise StageError(stage, exc) from exc

    def __call__(self, image: np.ndarray) -> SimplicityOutputs:
        image = prepare_image(image)
        shape = image.shape[:2]

        saliency = self._run_stage("saliency", self.saliency.compute, image)
        background = self._run_stage("masking", self.mask_builder.build, shape, saliency)
        boxes = []
        if self.config.box_mode and saliency.components:
            boxes = self.mask_builder.salient_boxes(saliency.components)
        histogram = self._run_stage(
            "histogram", self.histogram.estimate, image, background, self.config.bins_per_band
        )
        score = self._run_stage("scoring", simplicity_score, histogram, self.config.gamma)

        logger.debug(
            "Simplicity %.6f (%d background pixels, %d bins)",
            score,
            int(background.sum()),
            histogram.size,
        )
        return SimplicityOutputs(
            score=score,
            background_mask=background,
            histogram=histogram,
            salient_boxes=boxes,
        )

    def extract(self, image: np.ndarray) -> float:
        """Simplicity score of ``image``."""

        return self(image).score

    def as_feature_vector(self, image: np.ndarray) -> np.ndarray:
        """Simplicity score of ``image`` as a 1-element float64 vector."""

        return self(image).feature_vector()

    def process_image(self, image: np.ndarray) -> None:
        """Score ``image`` and keep the result for :meth:`feature_vector`.

        This stores per-image state on the instance; threads sharing an
        instance should call :meth:`extract` instead.
        """

        self.simplicity = self.extract(image)

    def feature_vector(self) -> np.ndarray:
        if self.simplicity is None:
            raise RuntimeError("No image has been processed yet.")
        return np.array([self.simplicity], dtype=np.float64)
