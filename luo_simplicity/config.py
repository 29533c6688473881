"""Configuration dataclasses for the simplicity pipeline."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class YehSaliencyConfig:
    """Settings for segment-averaged saliency.

    Attributes:
        saliency_sigma: Gaussian sigma applied to the Lab bands before the
            frequency-tuned saliency is computed. Values <= 0 disable the blur.
        segmenter_sigma: Pre-smoothing sigma of the graph segmenter.
        k: Felzenszwalb scale parameter; larger values give larger segments.
        min_size: Minimum segment size in pixels.
    """

    saliency_sigma: float = 1.0
    segmenter_sigma: float = 0.5
    k: float = 500.0
    min_size: int = 50


@dataclass(frozen=True)
class SimplicityConfig:
    """Top-level configuration for the simplicity pipeline.

    Attributes:
        bins_per_band: Number of histogram bins for each color channel.
        gamma: Fraction of the peak bin a bin must reach to count as
            significant.
        box_mode: Fill the bounding boxes of salient regions when True,
            threshold the dense saliency map when False.
        alpha: Fraction of the maximum saliency used as the foreground
            threshold.
        saliency: Settings forwarded to the saliency provider.
    """

    bins_per_band: int = 16
    gamma: float = 0.01
    box_mode: bool = True
    alpha: float = 0.67
    saliency: YehSaliencyConfig = field(default_factory=YehSaliencyConfig)

    def __post_init__(self) -> None:
        if self.bins_per_band < 1:
            raise ValueError("bins_per_band must be at least 1.")
        if self.gamma < 0:
            raise ValueError("gamma must be non-negative.")
        if self.alpha < 0:
            raise ValueError("alpha must be non-negative.")
