#!/usr/bin/env python3
"""
Report partition metrics for a range of seeds without writing images.
Useful for checking coverage/overlaps and color mix across seeds.

Usage:
  python scripts/seed_sweep.py --start 0 --count 20
  python scripts/seed_sweep.py --step 100 --policy x_first
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import logging

from mondrian.analysis import partition_summary
from mondrian.config import load_config, resolve_generation_config
from mondrian.procedural import SplitPolicy, colorize, generate_partition
from mondrian.procedural.partition import coerce_policy


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate layouts for consecutive seeds and print per-seed metrics."
    )
    parser.add_argument("--start", type=int, default=0, help="First seed (default 0).")
    parser.add_argument("--count", type=int, default=10, help="Number of seeds (default 10).")
    parser.add_argument(
        "--step",
        type=int,
        default=None,
        help="Candidate position spacing (default: canvas.step from config).",
    )
    parser.add_argument(
        "--policy",
        choices=["sequential", "x_first"],
        default=None,
        help="Override generation.policy.",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML.")
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    gen = resolve_generation_config(load_config(args.config))
    step = args.step if args.step is not None else gen["step"]
    if args.start < 0:
        print("Error: --start must be non-negative", file=sys.stderr)
        return 2
    try:
        policy = coerce_policy(args.policy or gen["policy"])
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    if policy is SplitPolicy.REFERENCE:
        print("Error: reference policy grows exponentially; not supported in sweeps", file=sys.stderr)
        return 2

    counts: list[int] = []
    for seed in range(args.start, args.start + max(0, args.count)):
        rects = generate_partition(
            gen["canvas_size"],
            step,
            seed,
            policy=policy,
            x_threshold=gen["x_threshold"],
            y_threshold=gen["y_threshold"],
            clamp_negative=gen["clamp_negative"],
        )
        rects = colorize(rects, seed, threshold=gen["color_threshold"])
        s = partition_summary(rects, gen["canvas_size"])
        counts.append(s["count"])
        colors = " ".join(f"{k[0]}={v}" for k, v in s["colors"].items())
        print(
            f"seed={seed:<6} rects={s['count']:<5} coverage={s['coverage']:.6f} "
            f"overlaps={s['overlaps']} {colors}"
        )

    if counts:
        print(f"Sweep: {len(counts)} seeds, mean rectangles {sum(counts) / len(counts):.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
