from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

@dataclass
class WindowCfg:
    width: int = 960
    height: int = 540
    title: str = "KICKFLIP"
    bg_rgb: tuple[int, int, int] = (14, 15, 18)

@dataclass
class TweenCfg:
    default_ease: str = "out_cubic"     # name from kickflip.easing.EASINGS
    default_duration: float = 0.6       # seconds, used by the playground
    max_frame_dt: float = 0.1           # cap on one frame's dt (window drags, breakpoints)

@dataclass
class AppCfg:
    fps: int = 60
    log_level: str = "INFO"
    window: WindowCfg = field(default_factory=WindowCfg)
    tween: TweenCfg = field(default_factory=TweenCfg)


def _get(d: dict, path: str, default: Any):
    cur = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur

def load_settings(path: str = "playground/config/defaults.yaml") -> AppCfg:
    """ Missing file or missing keys fall back to the dataclass defaults. """
    data = {}
    p = Path(path)
    if p.exists():
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    win, tw = WindowCfg(), TweenCfg()
    return AppCfg(
        fps=int(_get(data, "fps", 60)),
        log_level=str(_get(data, "log_level", "INFO")).upper(),
        window=WindowCfg(
            width=int(_get(data, "window.width", win.width)),
            height=int(_get(data, "window.height", win.height)),
            title=str(_get(data, "window.title", win.title)),
            bg_rgb=tuple(_get(data, "window.bg_rgb", win.bg_rgb)),
        ),
        tween=TweenCfg(
            default_ease=str(_get(data, "tween.default_ease", tw.default_ease)),
            default_duration=float(_get(data, "tween.default_duration", tw.default_duration)),
            max_frame_dt=float(_get(data, "tween.max_frame_dt", tw.max_frame_dt)),
        ),
    )
