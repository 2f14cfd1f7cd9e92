"""
Pure checks on a generated partition: area, coverage, overlaps, color distribution.
Used by tests and the sweep script.
"""
from collections import Counter
from typing import Any, Sequence

import numpy as np

from ..procedural.data.palettes import PaletteColor
from ..procedural.schema import Rectangle


def total_area(rectangles: Sequence[Rectangle]) -> float:
    """Sum of w * h over all rectangles."""
    if not rectangles:
        return 0.0
    dims = np.array([(r.w, r.h) for r in rectangles], dtype=np.float64)
    return float((dims[:, 0] * dims[:, 1]).sum())


def coverage(rectangles: Sequence[Rectangle], canvas_size: float) -> float:
    """Total area over canvas area. 1.0 for a true partition."""
    canvas_area = canvas_size * canvas_size
    if canvas_area <= 0:
        return 0.0
    return total_area(rectangles) / canvas_area


def find_overlaps(
    rectangles: Sequence[Rectangle], tol: float = 1e-6
) -> list[tuple[int, int]]:
    """
    Index pairs (i, j), i < j, whose open interiors intersect by more than tol.
    Vectorized over j for each i.
    """
    n = len(rectangles)
    if n < 2:
        return []
    b = np.array([r.bounds for r in rectangles], dtype=np.float64)
    left, bottom, right, top = b[:, 0], b[:, 1], b[:, 2], b[:, 3]
    pairs: list[tuple[int, int]] = []
    for i in range(n - 1):
        dx = np.minimum(right[i], right[i + 1:]) - np.maximum(left[i], left[i + 1:])
        dy = np.minimum(top[i], top[i + 1:]) - np.maximum(bottom[i], bottom[i + 1:])
        hits = np.nonzero((dx > tol) & (dy > tol))[0]
        pairs.extend((i, i + 1 + int(k)) for k in hits)
    return pairs


def is_partition(
    rectangles: Sequence[Rectangle],
    canvas_size: float,
    *,
    rel_tol: float = 1e-9,
) -> bool:
    """Covers the canvas exactly, stays inside it, and no two interiors overlap."""
    canvas = Rectangle(0.0, 0.0, canvas_size, canvas_size)
    if any(r.w <= 0 or r.h <= 0 or not canvas.contains(r) for r in rectangles):
        return False
    if abs(coverage(rectangles, canvas_size) - 1.0) > rel_tol:
        return False
    return not find_overlaps(rectangles)


def color_counts(rectangles: Sequence[Rectangle]) -> dict[str, int]:
    """Rectangles per palette color (every color present, possibly 0)."""
    counts = Counter(r.color for r in rectangles)
    return {c.name: counts.get(c, 0) for c in PaletteColor}


def partition_summary(
    rectangles: Sequence[Rectangle], canvas_size: float
) -> dict[str, Any]:
    """Summary dict for logs and CLI output."""
    areas = [r.area for r in rectangles]
    largest = max(rectangles, key=lambda r: r.area).to_dict() if rectangles else None
    return {
        "count": len(rectangles),
        "coverage": round(coverage(rectangles, canvas_size), 6),
        "overlaps": len(find_overlaps(rectangles)),
        "min_area": min(areas) if areas else 0.0,
        "max_area": max(areas) if areas else 0.0,
        "largest": largest,
        "colors": color_counts(rectangles),
    }
