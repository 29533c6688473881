"""Image simplicity estimation from the background color distribution.

The score follows Luo & Tang, "Photo and Video Quality Evaluation: Focusing
on the Subject" (ECCV 2008), with the foreground found by the segment-based
saliency of Yeh et al., "Personalized photograph ranking and selection
system" (ACM MM 2010). Saliency and histogram estimation sit behind small
interfaces so that other engines can be slotted in.
"""

from luo_simplicity.pipeline import ModifiedLuoSimplicity
from luo_simplicity.config import SimplicityConfig, YehSaliencyConfig
from luo_simplicity.errors import (
    DimensionMismatchError,
    InvalidInputError,
    SimplicityError,
    StageError,
)
from luo_simplicity.histogram import MaskingHistogramModel
from luo_simplicity.masking import MaskBuilder, invert_mask
from luo_simplicity.scoring import significant_bin_count, simplicity_score
from luo_simplicity.types import (
    SaliencyOutputs,
    SaliencyRegion,
    SimplicityOutputs,
)

__all__ = [
    "ModifiedLuoSimplicity",
    "SimplicityConfig",
    "YehSaliencyConfig",
    "DimensionMismatchError",
    "InvalidInputError",
    "SimplicityError",
    "StageError",
    "MaskingHistogramModel",
    "MaskBuilder",
    "invert_mask",
    "significant_bin_count",
    "simplicity_score",
    "SaliencyOutputs",
    "SaliencyRegion",
    "SimplicityOutputs",
]
