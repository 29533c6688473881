"""Adapters for external saliency engines."""

from luo_simplicity.adapters.yeh_saliency_adapter import YehSaliencyAdapter

__all__ = [
    "YehSaliencyAdapter",
]
