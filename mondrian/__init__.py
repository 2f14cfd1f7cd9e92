# Mondrian grid generator: seeded guillotine partition + palette recolor

from .procedural import (
    PaletteColor,
    Rectangle,
    SplitPolicy,
    colorize,
    generate_partition,
    random_color,
)
from .session import MondrianSession

__all__ = [
    "PaletteColor",
    "Rectangle",
    "SplitPolicy",
    "colorize",
    "generate_partition",
    "random_color",
    "MondrianSession",
]
