# binbreak/config.py
from __future__ import annotations
import json, logging, math, os
from typing import Dict, Any, Optional

from pathlib import Path
PKG_DIR = Path(__file__).resolve().parent

log = logging.getLogger(__name__)

def _abs(path: str) -> str:
    # absolute paths are kept as given, relative ones resolve against the package
    p = Path(path)
    return str(p) if p.is_absolute() else str((PKG_DIR / p).resolve())

PACKAGE_DIR = os.path.dirname(__file__)
CONFIG_PATH = os.environ.get("BINBREAK_CONFIG", os.path.join(PACKAGE_DIR, "config.json"))

DEFAULT_CFG: Dict[str, Any] = {
    "display": {"fps": 30, "frontend": "terminal", "windowed_size": [960, 540]},
    "timer": {"budget_initial": 8.0, "budget_step": -0.25, "budget_min": 2.5, "per_bit": 0.75},
    "scoring": {"base_points": 10, "streak_step": 0.25, "max_multiplier": 4.0},
    "lives": 3,
    "feedback_sec": 0.8,
    "highscores": {"path": "highscores.json"},
    "menu": {"last_selected": 4},
}

def _deepcopy(obj):
    return json.loads(json.dumps(obj))

def _merge(dst: dict, src: dict) -> dict:
    for k, v in src.items():
        if isinstance(v, dict) and isinstance(dst.get(k), dict):
            _merge(dst[k], v)
        else:
            dst[k] = v
    return dst

def _num(value: Any, default: float) -> float:
    try:
        out = float(value)
    except (TypeError, ValueError, OverflowError):
        return float(default)
    # Infinity and NaN are valid JSON to Python but useless as settings
    return out if math.isfinite(out) else float(default)

def _sanitize_cfg(cfg: dict) -> dict:
    for section in ("display", "timer", "scoring", "highscores", "menu"):
        if not isinstance(cfg.get(section), dict):
            cfg[section] = _deepcopy(DEFAULT_CFG[section])
    t = cfg["timer"]
    d = DEFAULT_CFG["timer"]
    t["budget_min"]     = max(1.0, min(60.0, _num(t.get("budget_min"), d["budget_min"])))
    t["budget_initial"] = max(t["budget_min"], min(120.0, _num(t.get("budget_initial"), d["budget_initial"])))
    # a positive step would make the budget grow with the streak
    t["budget_step"]    = max(-10.0, min(0.0, _num(t.get("budget_step"), d["budget_step"])))
    t["per_bit"]        = max(0.0, min(10.0, _num(t.get("per_bit"), d["per_bit"])))

    s = cfg["scoring"]
    d = DEFAULT_CFG["scoring"]
    s["base_points"]    = int(max(1, min(10000, _num(s.get("base_points"), d["base_points"]))))
    s["streak_step"]    = max(0.0, min(10.0, _num(s.get("streak_step"), d["streak_step"])))
    s["max_multiplier"] = max(1.0, min(100.0, _num(s.get("max_multiplier"), d["max_multiplier"])))

    cfg["lives"] = int(max(1, min(9, _num(cfg.get("lives"), DEFAULT_CFG["lives"]))))
    cfg["feedback_sec"] = max(0.0, min(5.0, _num(cfg.get("feedback_sec"), DEFAULT_CFG["feedback_sec"])))

    disp = cfg["display"]
    disp["fps"] = int(max(5, min(240, _num(disp.get("fps"), DEFAULT_CFG["display"]["fps"]))))
    if disp.get("frontend") not in ("terminal", "window"):
        disp["frontend"] = "terminal"
    ws = disp.get("windowed_size", [960, 540])
    dw, dh = DEFAULT_CFG["display"]["windowed_size"]
    if isinstance(ws, (list, tuple)) and len(ws) == 2:
        w, h = int(max(320, min(10000, _num(ws[0], dw)))), int(max(240, min(10000, _num(ws[1], dh))))
        disp["windowed_size"] = [w, h]
    else:
        disp["windowed_size"] = list(DEFAULT_CFG["display"]["windowed_size"])

    menu = cfg["menu"]
    menu["last_selected"] = int(max(0, _num(menu.get("last_selected"), DEFAULT_CFG["menu"]["last_selected"])))

    hs = cfg["highscores"]
    if not isinstance(hs.get("path"), str) or not hs["path"]:
        hs["path"] = DEFAULT_CFG["highscores"]["path"]
    hs["path"] = _abs(hs["path"])
    return cfg

def save_config(partial_cfg: dict, path: Optional[str] = None) -> bool:
    path = path or CONFIG_PATH
    try:
        with open(path, "r", encoding="utf-8") as f:
            base = json.load(f)
        if not isinstance(base, dict): base = {}
    except (OSError, ValueError):
        base = {}
    merged = _merge(base, partial_cfg)
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(merged, f, ensure_ascii=False, indent=2)
    except OSError as exc:
        log.warning("could not write config %s: %s", path, exc)
        return False
    return True

def load_config(path: Optional[str] = None) -> dict:
    path = path or CONFIG_PATH
    cfg = _deepcopy(DEFAULT_CFG)
    try:
        with open(path, "r", encoding="utf-8") as f:
            user = json.load(f)
        if isinstance(user, dict):
            _merge(cfg, user)
        else:
            log.warning("ignoring config %s: top level is not an object", path)
    except FileNotFoundError:
        save_config(_deepcopy(DEFAULT_CFG), path)
    except (OSError, ValueError) as exc:
        log.warning("ignoring unreadable config %s: %s", path, exc)
    cfg = _sanitize_cfg(cfg)
    cfg["config_path"] = str(Path(path).resolve())
    return cfg

def persist_last_selected(index: int, path: Optional[str] = None) -> None:
    save_config({"menu": {"last_selected": int(index)}}, path)


__all__ = [
    "CONFIG_PATH",
    "DEFAULT_CFG",
    "load_config",
    "save_config",
    "persist_last_selected",
]
