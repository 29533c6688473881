"""Exceptions raised by the simplicity pipeline."""

from __future__ import annotations


class SimplicityError(Exception):
    """Base class for simplicity pipeline failures."""


class InvalidInputError(SimplicityError, ValueError):
    """Raised for empty images, malformed saliency output or bad histograms."""


class DimensionMismatchError(SimplicityError, ValueError):
    """Raised when a mask or saliency map does not match the image size."""


class StageError(SimplicityError):
    """A pipeline stage failed.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, stage: str, cause: BaseException) -> None:
        super().__init__(f"{stage} stage failed: {cause}")
        self.stage = stage
        self.cause = cause
