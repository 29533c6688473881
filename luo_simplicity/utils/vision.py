"""Utility helpers for image normalization."""

import numpy as np

from luo_simplicity.errors import InvalidInputError


def normalize_uint8(image: np.ndarray) -> np.ndarray:
    """Convert uint8 images to float32 in [0, 1].

    Args:
        image: HxWxC array, typically uint8.

    Returns:
        Float32 array with values scaled to [0, 1].
    """

    if image.dtype == np.uint8:
        return image.astype("float32") / 255.0
    return image.astype("float32")


def to_uint8(image: np.ndarray) -> np.ndarray:
    """Convert float images in [0, 1] to uint8."""

    image = np.clip(image, 0.0, 1.0)
    return (image * 255).round().astype("uint8")


def ensure_rgb(image: np.ndarray) -> np.ndarray:
    if image.ndim == 2:
        return np.repeat(image[..., None], 3, axis=-1)
    if image.shape[-1] == 1:
        return np.repeat(image, 3, axis=-1)
    return image


def prepare_image(image: np.ndarray) -> np.ndarray:
    """Validate an input image and return it as HxWx3 float32 in [0, 1].

    Raises:
        InvalidInputError: If the image has no pixels or an unsupported shape.
    """

    image = np.asarray(image)
    if image.ndim not in (2, 3):
        raise InvalidInputError(f"Expected an HxW or HxWxC image, got shape {image.shape}.")
    if image.shape[0] == 0 or image.shape[1] == 0:
        raise InvalidInputError(f"Image has zero width or height: {image.shape}.")
    image = ensure_rgb(image)
    if image.shape[-1] != 3:
        raise InvalidInputError(f"Expected 3 color channels, got {image.shape[-1]}.")
    return normalize_uint8(image)
