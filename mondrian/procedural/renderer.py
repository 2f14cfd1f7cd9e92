"""
Frame renderer: rectangles → pixels. Filled quads with a black outline on a white background.
Canvas coordinates are centered with y up; pixel rows run top-down.
"""
from pathlib import Path
from typing import Sequence

import numpy as np
from PIL import Image, ImageDraw

from .data.palettes import PaletteColor
from .schema import Rectangle

OUTLINE_RGB = (0, 0, 0)
STROKE_WEIGHT = 15


def _to_pixels(r: Rectangle, half: float, scale: float) -> list[float]:
    x0 = (r.left + half) * scale
    x1 = (r.right + half) * scale
    y0 = (half - r.top) * scale
    y1 = (half - r.bottom) * scale
    return [x0, y0, x1, y1]


def render_frame(
    rectangles: Sequence[Rectangle],
    canvas_size: float,
    *,
    stroke_weight: int = STROKE_WEIGHT,
    scale: float = 1.0,
) -> np.ndarray:
    """
    Rasterize one RGB frame (H, W, 3) uint8. Image side is canvas_size * scale pixels.
    The outline straddles each edge so neighbours share one line of stroke_weight.
    """
    side = max(1, int(round(canvas_size * scale)))
    img = Image.new("RGB", (side, side), PaletteColor.WHITE.rgb)
    draw = ImageDraw.Draw(img)
    half = canvas_size / 2.0
    pad = stroke_weight * scale / 2.0

    for r in rectangles:
        x0, y0, x1, y1 = _to_pixels(r, half, scale)
        if pad > 0:
            draw.rectangle([x0 - pad, y0 - pad, x1 + pad, y1 + pad], fill=OUTLINE_RGB)
        if x1 - x0 > 2 * pad and y1 - y0 > 2 * pad:
            draw.rectangle([x0 + pad, y0 + pad, x1 - pad, y1 - pad], fill=r.color.rgb)

    return np.array(img, dtype=np.uint8)


def save_frame(frame: np.ndarray, path: Path) -> Path:
    """Write an RGB frame to an image file (format from the suffix)."""
    if frame.ndim != 3 or frame.shape[-1] != 3:
        raise ValueError("Expected RGB frame (H, W, 3)")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(frame.astype(np.uint8)).save(path)
    return path
