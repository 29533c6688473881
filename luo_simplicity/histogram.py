"""Color histogram estimation restricted to a mask."""

from __future__ import annotations

import numpy as np

from luo_simplicity.errors import DimensionMismatchError, InvalidInputError


class MaskingHistogramModel:
    """Joint color histogram over the pixels selected by a binary mask.

    Each channel is split into ``bins_per_channel`` equal-width bins over
    [0, 1]; the joint bin index is the C-order ravel of the channel indices,
    giving ``bins_per_channel ** channels`` bins.
    """

    def __init__(self, normalise: bool = True) -> None:
        self.normalise = normalise

    def bin_indices(self, pixels: np.ndarray, bins_per_channel: int) -> np.ndarray:
        """Flat bin index for each row of an ``N x C`` pixel array."""

        per_channel = np.floor(pixels * bins_per_channel).astype(np.int64)
        per_channel = np.clip(per_channel, 0, bins_per_channel - 1)
        dims = (bins_per_channel,) * pixels.shape[1]
        return np.ravel_multi_index(tuple(per_channel.T), dims)

    def estimate(self, image: np.ndarray, mask: np.ndarray, bins_per_channel: int) -> np.ndarray:
        """Histogram of the pixels where ``mask`` is non-zero.

        Raises:
            DimensionMismatchError: If the mask and image sizes differ.
            InvalidInputError: If ``bins_per_channel`` is below 1.
        """

        if bins_per_channel < 1:
            raise InvalidInputError("bins_per_channel must be at least 1.")
        if image.ndim == 2:
            image = image[..., None]
        if mask.ndim == 3 and mask.shape[-1] == 1:
            mask = mask[..., 0]
        if mask.shape != image.shape[:2]:
            raise DimensionMismatchError(
                f"Mask shape {mask.shape} does not match image shape {image.shape[:2]}."
            )

        channels = image.shape[-1]
        pixels = image[mask != 0].reshape(-1, channels).astype(np.float64)
        histogram = np.bincount(
            self.bin_indices(pixels, bins_per_channel),
            minlength=bins_per_channel ** channels,
        ).astype(np.float64)
        total = histogram.sum()
        if self.normalise and total > 0:
            histogram /= total
        return histogram
