import argparse
import json
import logging
import os
import sys
from typing import List, Optional

import cv2
import numpy as np

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from luo_simplicity.config import SimplicityConfig, YehSaliencyConfig
from luo_simplicity.pipeline import ModifiedLuoSimplicity
from luo_simplicity.rendering import render_debug_view

logger = logging.getLogger("score_image")


def _load_rgb(path: str) -> np.ndarray:
    image = cv2.imread(path, cv2.IMREAD_COLOR)
    if image is None:
        raise FileNotFoundError(f"Cannot read image: {path}")
    return cv2.cvtColor(image, cv2.COLOR_BGR2RGB)


def _save_image(path: str, image: np.ndarray) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    if image.ndim == 3 and image.shape[-1] == 3:
        cv2.imwrite(path, cv2.cvtColor(image.astype("uint8"), cv2.COLOR_RGB2BGR))
        return
    cv2.imwrite(path, image.astype("uint8"))


def _write_metadata(path: str, payload: dict) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, ensure_ascii=True)


def _build_config(args: argparse.Namespace) -> SimplicityConfig:
    saliency_cfg = YehSaliencyConfig(
        saliency_sigma=args.saliency_sigma,
        segmenter_sigma=args.segmenter_sigma,
        k=args.k,
        min_size=args.min_size,
    )
    return SimplicityConfig(
        bins_per_band=args.bins_per_band,
        gamma=args.gamma,
        box_mode=not args.dense,
        alpha=args.alpha,
        saliency=saliency_cfg,
    )


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Score the background simplicity of images.")
    parser.add_argument("images", nargs="+", help="Input image paths")
    parser.add_argument("--bins-per-band", type=int, default=16, help="Histogram bins per color channel")
    parser.add_argument("--gamma", type=float, default=0.01, help="Significant-bin fraction of the peak")
    parser.add_argument("--dense", action="store_true", help="Threshold the dense saliency map instead of boxes")
    parser.add_argument("--alpha", type=float, default=0.67, help="Foreground fraction of the maximum saliency")
    parser.add_argument("--saliency-sigma", type=float, default=1.0)
    parser.add_argument("--segmenter-sigma", type=float, default=0.5)
    parser.add_argument("--k", type=float, default=500.0, help="Segmenter scale")
    parser.add_argument("--min-size", type=int, default=50, help="Minimum segment size in pixels")
    parser.add_argument("--debug-dir", default=None, help="Directory for background masks and overlays")
    parser.add_argument("--json", default=None, help="Write scores to this JSON file")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pipeline = ModifiedLuoSimplicity(_build_config(args))
    results = []
    for path in args.images:
        image = _load_rgb(path)
        outputs = pipeline(image)
        logger.info("%s: simplicity %.6f", path, outputs.score)
        print(f"{path}\t{outputs.score:.6f}")

        entry = {"path": path, "simplicity": outputs.score, "salient_boxes": outputs.salient_boxes}
        if args.debug_dir:
            stem = os.path.splitext(os.path.basename(path))[0]
            mask_path = os.path.join(args.debug_dir, f"{stem}_background.png")
            overlay_path = os.path.join(args.debug_dir, f"{stem}_overlay.png")
            _save_image(mask_path, outputs.background_mask * 255)
            _save_image(overlay_path, render_debug_view(image, outputs.background_mask, outputs.salient_boxes))
            entry["outputs"] = {"background": mask_path, "overlay": overlay_path}
        results.append(entry)

    if args.json:
        _write_metadata(args.json, {"args": vars(args), "results": results})


if __name__ == "__main__":
    main()
