"""Debug views of the background mask and the salient boxes."""

from __future__ import annotations

from typing import Iterable, Tuple

import cv2
import numpy as np

from luo_simplicity.errors import DimensionMismatchError
from luo_simplicity.types import BoundingBox
from luo_simplicity.utils.vision import prepare_image, to_uint8


def render_box_mask(shape: Tuple[int, int], boxes: Iterable[BoundingBox]) -> np.ndarray:
    """Mask of ``shape`` with each ``(top, left, bottom, right)`` box filled with 1."""

    mask = np.zeros(shape, dtype="uint8")
    for top, left, bottom, right in boxes:
        if bottom <= top or right <= left:
            continue
        cv2.rectangle(mask, (left, top), (right - 1, bottom - 1), 1, thickness=-1)
    return mask.astype("float32")


def render_debug_view(
    image: np.ndarray,
    background_mask: np.ndarray,
    boxes: Iterable[BoundingBox] = (),
    dim: float = 0.35,
    color: Tuple[int, int, int] = (255, 0, 0),
) -> np.ndarray:
    """Dim foreground pixels and outline salient boxes.

    Args:
        image: Input image, any layout accepted by the pipeline.
        background_mask: HxW binary mask, 1 on background pixels.
        boxes: Salient bounding boxes to outline.
        dim: Brightness factor applied to foreground pixels.
        color: RGB outline color.

    Returns:
        HxWx3 uint8 RGB image.
    """

    rgb = prepare_image(image)
    if background_mask.shape[:2] != rgb.shape[:2]:
        raise DimensionMismatchError(
            f"Mask shape {background_mask.shape[:2]} does not match image shape {rgb.shape[:2]}."
        )
    weight = np.where(background_mask[..., None] != 0, 1.0, dim).astype("float32")
    view = np.ascontiguousarray(to_uint8(rgb * weight))
    for top, left, bottom, right in boxes:
        cv2.rectangle(view, (left, top), (right - 1, bottom - 1), color, thickness=1)
    return view
