# binbreak/settings.py
from __future__ import annotations
from typing import Any, Dict

from .constants import (
    BASE_POINTS,
    BUDGET_INITIAL,
    BUDGET_MIN,
    BUDGET_PER_BIT,
    BUDGET_STEP,
    FEEDBACK_SEC,
    FPS,
    MAX_LIVES,
    MAX_MULTIPLIER,
    STREAK_STEP,
)

# ------------- snapshot (runtime) -------------

def make_runtime_settings(CFG: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten the loaded config into the settings dict the game reads."""
    s = {
        "budget_initial":  float(CFG["timer"]["budget_initial"]),
        "budget_step":     float(CFG["timer"]["budget_step"]),
        "budget_min":      float(CFG["timer"]["budget_min"]),
        "budget_per_bit":  float(CFG["timer"]["per_bit"]),
        "base_points":     int(CFG["scoring"]["base_points"]),
        "streak_step":     float(CFG["scoring"]["streak_step"]),
        "max_multiplier":  float(CFG["scoring"]["max_multiplier"]),
        "lives":           int(CFG["lives"]),
        "feedback_sec":    float(CFG.get("feedback_sec", FEEDBACK_SEC)),
        "fps":             int(CFG["display"]["fps"]),
        "frontend":        str(CFG["display"].get("frontend", "terminal")),
        "windowed_size":   tuple(CFG["display"]["windowed_size"]),
        "highscores_path": str(CFG["highscores"]["path"]),
        "last_selected":   int(CFG.get("menu", {}).get("last_selected", 4)),
    }
    clamp_settings(s)
    return s

# ------------- clamp -------------

def clamp_settings(s: Dict[str, Any]) -> None:
    """Clamp ranges in place; mirrors _sanitize_cfg() in binbreak/config.py."""
    s["budget_min"]      = max(1.0, min(60.0, float(s.get("budget_min", BUDGET_MIN))))
    s["budget_initial"]  = max(float(s["budget_min"]), min(120.0, float(s.get("budget_initial", BUDGET_INITIAL))))
    s["budget_step"]     = max(-10.0, min(0.0, float(s.get("budget_step", BUDGET_STEP))))
    s["budget_per_bit"]  = max(0.0, min(10.0, float(s.get("budget_per_bit", BUDGET_PER_BIT))))
    s["base_points"]     = max(1, min(10000, int(s.get("base_points", BASE_POINTS))))
    s["streak_step"]     = max(0.0, min(10.0, float(s.get("streak_step", STREAK_STEP))))
    s["max_multiplier"]  = max(1.0, min(100.0, float(s.get("max_multiplier", MAX_MULTIPLIER))))
    s["lives"]           = max(1, min(9, int(s.get("lives", MAX_LIVES))))
    s["feedback_sec"]    = max(0.0, min(5.0, float(s.get("feedback_sec", FEEDBACK_SEC))))
    s["fps"]             = max(5, min(240, int(s.get("fps", FPS))))
    # str/tuple values are left as they are


__all__ = ["make_runtime_settings", "clamp_settings"]
