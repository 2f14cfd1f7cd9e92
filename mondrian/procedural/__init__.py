# Procedural engine: partition, colorize, render. Our algorithms and data only.

from .data.palettes import PaletteColor, random_color
from .schema import Rectangle
from .partition import (
    SplitPolicy,
    candidate_positions,
    generate_partition,
    partition_from_positions,
    split_rectangles,
)
from .colorize import colorize
from .renderer import render_frame, save_frame

__all__ = [
    "PaletteColor",
    "random_color",
    "Rectangle",
    "SplitPolicy",
    "candidate_positions",
    "generate_partition",
    "partition_from_positions",
    "split_rectangles",
    "colorize",
    "render_frame",
    "save_frame",
]
