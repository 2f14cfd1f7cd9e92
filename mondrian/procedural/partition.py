"""
Partition generator: recursive guillotine subdivision of the canvas. Our algorithm only.

Each candidate position is tried once against every current rectangle, on both axes.
Decisions come from a stream re-seeded from the same seed on every iteration, so the
whole layout is a pure function of (canvas size, positions, seed).
"""
import logging
import math
from enum import Enum
from typing import Iterable, Sequence

from ..random_utils import seeded_stream
from .data.palettes import PaletteColor
from .schema import Rectangle

logger = logging.getLogger(__name__)

X_SPLIT_THRESHOLD = 0.5
Y_SPLIT_THRESHOLD = 0.5

Locus = tuple[float | None, float | None]


class SplitPolicy(str, Enum):
    """What to do with a rectangle whose X and Y checks both pass in one iteration."""
    SEQUENTIAL = "sequential"  # split on X, then test Y against each child
    X_FIRST = "x_first"        # X wins; Y only when X did not split
    REFERENCE = "reference"    # both checks append independently (rectangle counted twice)


def coerce_policy(policy: "SplitPolicy | str") -> SplitPolicy:
    if isinstance(policy, SplitPolicy):
        return policy
    try:
        return SplitPolicy(str(policy).strip().lower())
    except ValueError:
        valid = ", ".join(p.value for p in SplitPolicy)
        raise ValueError(f"Unknown split policy {policy!r} (expected one of: {valid})") from None


def candidate_positions(
    canvas_size: float,
    step: int,
    *,
    clamp_negative: bool = False,
) -> list[float]:
    """
    Evenly spaced positions from -canvas_size/2 (inclusive) to +canvas_size/2 (exclusive).
    clamp_negative starts at 0 instead, as an unsigned cast of the negative start would.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if canvas_size <= 0:
        return []
    half = canvas_size / 2.0
    start = 0.0 if clamp_negative else -half
    count = math.ceil((half - start) / step)
    return [start + i * step for i in range(count)]


def split_on_x(r: Rectangle, locus: float) -> tuple[Rectangle, Rectangle]:
    """Vertical cut at x=locus → (left, right). Widths sum to r.w."""
    lhs = r.left
    lhw = locus - lhs
    rhw = r.w - lhw
    return (
        Rectangle(lhs + lhw / 2.0, r.y, lhw, r.h, PaletteColor.WHITE),
        Rectangle(locus + rhw / 2.0, r.y, rhw, r.h, PaletteColor.WHITE),
    )


def split_on_y(r: Rectangle, locus: float) -> tuple[Rectangle, Rectangle]:
    """Horizontal cut at y=locus → (top, bottom). Heights sum to r.h."""
    top = r.top
    th = top - locus
    bh = r.h - th
    return (
        Rectangle(r.x, top - th / 2.0, r.w, th, PaletteColor.WHITE),
        Rectangle(r.x, locus - bh / 2.0, r.w, bh, PaletteColor.WHITE),
    )


def _as_locus(position: "float | Locus | None") -> Locus:
    if position is None:
        return None, None
    if isinstance(position, (tuple, list)):
        x, y = position
        return x, y
    return position, position


def split_rectangles(
    rectangles: Sequence[Rectangle],
    position: "float | Locus | None",
    seed: int,
    *,
    policy: "SplitPolicy | str" = SplitPolicy.SEQUENTIAL,
    x_threshold: float = X_SPLIT_THRESHOLD,
    y_threshold: float = Y_SPLIT_THRESHOLD,
) -> list[Rectangle]:
    """
    One refinement pass. Rectangles are visited last-to-first; each axis with a position
    draws one sample per rectangle whether or not the position falls inside it.
    Returns a new list; the input is not touched.
    """
    policy = coerce_policy(policy)
    x, y = _as_locus(position)
    rng = seeded_stream(seed)
    out: list[Rectangle] = []

    for r in reversed(rectangles):
        if x is None and y is None:
            out.append(r)
            continue

        if policy is SplitPolicy.REFERENCE:
            if x is not None:
                sample = rng.random()
                if r.spans_x(x) and sample > x_threshold:
                    out.extend(split_on_x(r, x))
                else:
                    out.append(r)
            if y is not None:
                sample = rng.random()
                if r.spans_y(y) and sample > y_threshold:
                    out.extend(split_on_y(r, y))
                else:
                    out.append(r)

        elif policy is SplitPolicy.X_FIRST:
            split_x = x is not None and rng.random() > x_threshold and r.spans_x(x)
            split_y = y is not None and rng.random() > y_threshold and r.spans_y(y)
            if split_x:
                out.extend(split_on_x(r, x))
            elif split_y:
                out.extend(split_on_y(r, y))
            else:
                out.append(r)

        else:
            children: Iterable[Rectangle] = (r,)
            if x is not None:
                sample = rng.random()
                if r.spans_x(x) and sample > x_threshold:
                    children = split_on_x(r, x)
            if y is None:
                out.extend(children)
                continue
            for c in children:
                sample = rng.random()
                if c.spans_y(y) and sample > y_threshold:
                    out.extend(split_on_y(c, y))
                else:
                    out.append(c)
    return out


def partition_from_positions(
    canvas_size: float,
    positions: Iterable["float | Locus | None"],
    seed: int,
    *,
    policy: "SplitPolicy | str" = SplitPolicy.SEQUENTIAL,
    x_threshold: float = X_SPLIT_THRESHOLD,
    y_threshold: float = Y_SPLIT_THRESHOLD,
) -> list[Rectangle]:
    """Start from one WHITE rectangle covering the canvas and refine once per position."""
    rects = [Rectangle(0.0, 0.0, canvas_size, canvas_size, PaletteColor.WHITE)]
    for p in positions:
        rects = split_rectangles(
            rects, p, seed,
            policy=policy, x_threshold=x_threshold, y_threshold=y_threshold,
        )
        logger.debug("split at %s: %d rectangles", p, len(rects))
    return rects


def generate_partition(
    canvas_size: float,
    step: int,
    seed: int,
    *,
    policy: "SplitPolicy | str" = SplitPolicy.SEQUENTIAL,
    x_threshold: float = X_SPLIT_THRESHOLD,
    y_threshold: float = Y_SPLIT_THRESHOLD,
    clamp_negative: bool = False,
) -> list[Rectangle]:
    """
    Full layout for one frame: candidate positions every `step` across the canvas,
    each applied to both axes.
    """
    positions = candidate_positions(canvas_size, step, clamp_negative=clamp_negative)
    return partition_from_positions(
        canvas_size, positions, seed,
        policy=policy, x_threshold=x_threshold, y_threshold=y_threshold,
    )
