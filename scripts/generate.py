#!/usr/bin/env python3
"""
CLI: Render one Mondrian frame and save it as a snapshot PNG named after its seed.
Usage:
  python scripts/generate.py
  python scripts/generate.py --seed 7
  python scripts/generate.py --new-seed --output-dir snapshots
  python scripts/generate.py --seed 42 --policy x_first --summary
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import json
import logging

from mondrian.analysis import partition_summary
from mondrian.config import load_config
from mondrian.session import MondrianSession


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate one Mondrian-style grid and write it to <prefix>_seed_<seed>.png."
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed to render (default: seed.default from config).",
    )
    group.add_argument(
        "--new-seed",
        action="store_true",
        help="Pick a fresh random seed before rendering.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (default: config/default.yaml).",
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        default=None,
        help="Directory for the PNG (default: output.dir from config).",
    )
    parser.add_argument(
        "--policy",
        choices=["sequential", "x_first", "reference"],
        default=None,
        help="Override generation.policy for rectangles split on both axes in one pass.",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print partition metrics (count, coverage, overlaps, colors) as JSON.",
    )
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    config = load_config(args.config)
    if args.policy:
        config["generation"] = {**config.get("generation", {}), "policy": args.policy}

    try:
        session = MondrianSession(config, seed=args.seed)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    if args.new_seed:
        session.new_seed()

    print(f"Seed: {session.seed}")
    try:
        path = session.snapshot(args.output_dir)
    except OSError as e:
        print(f"Error: could not write snapshot: {e}", file=sys.stderr)
        return 1
    print(f"Done. Image: {path}")

    if args.summary:
        summary = partition_summary(session.layout(), session.canvas_size)
        print(json.dumps(summary, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
