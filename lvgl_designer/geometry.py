"""Canvas geometry: pointer/screen space <-> canvas-local space, and placement bounds.

Canvas-local units are the fixed 320x240 logical pixels of the display.
Zoom only scales presentation; widgets are always stored in local units.
"""
from __future__ import annotations
from typing import Tuple

from .utils import CANVAS_W, CANVAS_H, ZOOM_MIN, ZOOM_MAX, ZOOM_STEP

Point = Tuple[float, float]


def clamp(value: float, low: float, high: float) -> float:
    # lower bound wins when the range is empty (widget larger than canvas)
    return max(low, min(high, value))


def to_canvas_local(pointer: Point, origin: Point, zoom: float) -> Point:
    """Map a pointer position to canvas-local units.

    ``origin`` is where canvas (0, 0) currently sits in the same space as
    ``pointer``; ``zoom`` is the presentation scale.
    """
    return ((pointer[0] - origin[0]) / zoom, (pointer[1] - origin[1]) / zoom)


def clamp_to_canvas(x: float, y: float, width: int, height: int,
                    canvas_width: int = CANVAS_W, canvas_height: int = CANVAS_H) -> Tuple[int, int]:
    cx = clamp(x, 0, canvas_width - width)
    cy = clamp(y, 0, canvas_height - height)
    return int(round(cx)), int(round(cy))


def drop_position(point: Point, width: int, height: int) -> Tuple[int, int]:
    """Top-left corner for a widget dropped centred on ``point``."""
    x = max(0, int(round(point[0] - width / 2)))
    y = max(0, int(round(point[1] - height / 2)))
    return x, y


def drag_offset(pointer_local: Point, widget_pos: Point) -> Point:
    return (pointer_local[0] - widget_pos[0], pointer_local[1] - widget_pos[1])


def step_zoom(current: float, delta: float) -> float:
    return clamp(current + delta, ZOOM_MIN, ZOOM_MAX)


def wheel_zoom_delta(angle: int) -> float:
    """One zoom step per vertical wheel notch; horizontal-only scrolls (angle 0) do nothing."""
    if angle > 0:
        return ZOOM_STEP
    if angle < 0:
        return -ZOOM_STEP
    return 0.0
