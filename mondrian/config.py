"""
Load and expose app config (YAML). Used by the session and scripts to get canvas size,
split thresholds, render params and output dir.
"""
from pathlib import Path
from typing import Any

import yaml


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    merged = _defaults()
    for section, values in data.items():
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section] = {**merged[section], **values}
        else:
            merged[section] = values
    return merged


def _defaults() -> dict[str, Any]:
    return {
        "canvas": {
            "size": 1000.0,
            "step": 50,
            "clamp_negative": False,
        },
        "generation": {
            "x_split_threshold": 0.5,
            "y_split_threshold": 0.5,
            "color_threshold": 0.7,
            "policy": "sequential",
        },
        "render": {"stroke_weight": 15, "scale": 1.0},
        "output": {"dir": "output", "filename_prefix": "mondrian"},
        "seed": {"default": 42},
    }


def resolve_generation_config(config: dict[str, Any]) -> dict[str, Any]:
    """Flatten canvas + generation sections into keyword args for the generator."""
    canvas = config.get("canvas", {})
    gen = config.get("generation", {})
    return {
        "canvas_size": float(canvas.get("size", 1000.0)),
        "step": int(canvas.get("step", 50)),
        "clamp_negative": bool(canvas.get("clamp_negative", False)),
        "x_threshold": float(gen.get("x_split_threshold", 0.5)),
        "y_threshold": float(gen.get("y_split_threshold", 0.5)),
        "color_threshold": float(gen.get("color_threshold", 0.7)),
        "policy": gen.get("policy", "sequential") or "sequential",
    }


def get_output_dir(config: dict[str, Any]) -> Path:
    """Resolve output directory (relative to project root if needed)."""
    out = config.get("output", {})
    d = out.get("dir", "output")
    p = Path(d)
    if not p.is_absolute():
        p = _project_root() / p
    return p
