"""
Session: owns the current seed and turns host events into layouts and snapshots.

The seed is the only state kept between frames. Every frame is regenerated from it.
Click and the "n" key pick a new seed; the "s" key saves the current frame to
<output dir>/<prefix>_seed_<seed>.png.
"""
import logging
from pathlib import Path
from typing import Any

import numpy as np

from .config import get_output_dir, load_config, resolve_generation_config
from .procedural import colorize, generate_partition, render_frame, save_frame
from .procedural.partition import SplitPolicy, candidate_positions, coerce_policy
from .procedural.schema import Rectangle
from .random_utils import fresh_seed

logger = logging.getLogger(__name__)

NEW_SEED_KEY = "n"
SNAPSHOT_KEY = "s"

# Reference splitting grows the list roughly 2x per position; past this it will not finish.
MAX_REFERENCE_POSITIONS = 12


class MondrianSession:
    """
    Host-side state for the generator: config plus the current seed.
    Generation and colorizing stay pure; the session only passes the seed in.
    """

    def __init__(self, config: dict[str, Any] | None = None, seed: int | None = None):
        self.config = config if config is not None else load_config()
        self._gen = resolve_generation_config(self.config)
        self._gen["policy"] = coerce_policy(self._gen["policy"])
        if self._gen["policy"] is SplitPolicy.REFERENCE:
            n = len(candidate_positions(
                self._gen["canvas_size"], self._gen["step"],
                clamp_negative=self._gen["clamp_negative"],
            ))
            if n > MAX_REFERENCE_POSITIONS:
                raise ValueError(
                    f"Split policy 'reference' doubles the rectangles on every pass; "
                    f"{n} candidate positions exceeds the limit of {MAX_REFERENCE_POSITIONS} "
                    "(raise canvas.step or set canvas.clamp_negative)"
                )
            logger.warning(
                "Split policy 'reference' duplicates rectangles on every pass; "
                "output is not a partition"
            )
        if seed is None:
            seed = int(self.config.get("seed", {}).get("default", 42))
        seed = int(seed)
        if seed < 0:
            raise ValueError(f"seed must be a non-negative integer, got {seed}")
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def canvas_size(self) -> float:
        return self._gen["canvas_size"]

    def new_seed(self) -> int:
        """Replace the seed with a fresh, non-reproducible value."""
        old = self._seed
        self._seed = fresh_seed()
        logger.info("Seed %s -> %s", old, self._seed)
        return self._seed

    def layout(self) -> list[Rectangle]:
        """Partition + colors for the current seed, computed from scratch."""
        g = self._gen
        rects = generate_partition(
            g["canvas_size"],
            g["step"],
            self._seed,
            policy=g["policy"],
            x_threshold=g["x_threshold"],
            y_threshold=g["y_threshold"],
            clamp_negative=g["clamp_negative"],
        )
        return colorize(rects, self._seed, threshold=g["color_threshold"])

    def render(self) -> np.ndarray:
        """RGB frame for the current seed."""
        render_cfg = self.config.get("render", {})
        return render_frame(
            self.layout(),
            self.canvas_size,
            stroke_weight=int(render_cfg.get("stroke_weight", 15)),
            scale=float(render_cfg.get("scale", 1.0)),
        )

    def snapshot_path(self, output_dir: Path | None = None) -> Path:
        """Where a snapshot of the current seed goes. Does not touch the seed."""
        if output_dir is None:
            output_dir = get_output_dir(self.config)
        prefix = self.config.get("output", {}).get("filename_prefix", "mondrian") or "mondrian"
        return Path(output_dir) / f"{prefix}_seed_{self._seed}.png"

    def snapshot(self, output_dir: Path | None = None) -> Path:
        """Render the current frame and write it as PNG. Returns the path."""
        path = save_frame(self.render(), self.snapshot_path(output_dir))
        logger.info("Snapshot written: %s", path)
        return path

    def on_click(self) -> int:
        return self.new_seed()

    def on_key(self, key: str) -> Path | int | None:
        """Dispatch a key press: 'n' → new seed, 's' → snapshot, anything else ignored."""
        k = (key or "").lower()
        if k == NEW_SEED_KEY:
            return self.new_seed()
        if k == SNAPSHOT_KEY:
            return self.snapshot()
        return None
