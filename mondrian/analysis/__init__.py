# Analysis: partition diagnostics (area, overlaps, colors)

from .metrics import (
    total_area,
    coverage,
    find_overlaps,
    is_partition,
    color_counts,
    partition_summary,
)

__all__ = [
    "total_area",
    "coverage",
    "find_overlaps",
    "is_partition",
    "color_counts",
    "partition_summary",
]
