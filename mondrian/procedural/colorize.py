"""
Colorizer: repaint a random subset of rectangles from the palette. Geometry is never touched.
"""
import dataclasses
from typing import Sequence

from ..random_utils import seeded_stream
from .data.palettes import random_color
from .schema import Rectangle

COLOR_THRESHOLD = 0.7


def colorize(
    rectangles: Sequence[Rectangle],
    seed: int,
    *,
    threshold: float = COLOR_THRESHOLD,
) -> list[Rectangle]:
    """
    One stream for the whole call: one sample per rectangle decides whether to recolor,
    and a second sample (only when recoloring) picks the color.
    """
    rng = seeded_stream(seed)
    out: list[Rectangle] = []
    for r in rectangles:
        if rng.random() > threshold:
            r = dataclasses.replace(r, color=random_color(rng.random()))
        out.append(r)
    return out
