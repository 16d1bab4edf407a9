from __future__ import annotations
import math
from typing import Any

# ===== Canvas =====
CANVAS_W = 320
CANVAS_H = 240
GRID_STEP = 10

# ===== Zoom =====
ZOOM_MIN = 0.5
ZOOM_MAX = 3.0
ZOOM_STEP = 0.2
ZOOM_DEFAULT = 1.0

# ===== Display settings =====
DEFAULT_BACKGROUND = "#1e293b"

# ===== Drag & drop =====
WIDGET_MIME = "application/x-lvgl-widget"

# ===== QSettings =====
SETTINGS_ORG = "LVGLDesigner"
SETTINGS_APP = "Designer"

_TRUE_WORDS = ("1", "true", "yes", "on")
_FALSE_WORDS = ("0", "false", "no", "off", "")


def coerce_int(value: Any, default: int) -> int:
    """Lenient int parsing for property edits; anything unparseable gives ``default``."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    if isinstance(value, str):
        s = value.strip()
        try:
            return int(s)
        except ValueError:
            pass
        try:
            f = float(s)
        except ValueError:
            return default
        return int(f) if math.isfinite(f) else default
    return default


def coerce_bool(value: Any, default: bool = False) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        s = value.strip().lower()
        if s in _TRUE_WORDS:
            return True
        if s in _FALSE_WORDS:
            return False
    return default


def coerce_text(value: Any, default: str = "") -> str:
    if value is None:
        return default
    return value if isinstance(value, str) else str(value)
