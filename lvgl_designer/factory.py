from __future__ import annotations
import itertools
import logging
from typing import Tuple

from .geometry import drop_position
from .models import WIDGET_CLASSES, WIDGET_SPECS, Widget

logger = logging.getLogger(__name__)


def create_widget(widget_type: str, drop_point: Tuple[float, float], widget_id: str) -> Widget:
    """Build a widget of ``widget_type`` centred on ``drop_point`` (canvas-local units)."""
    spec = WIDGET_SPECS.get(widget_type)
    if spec is None:
        raise ValueError(f"Unknown widget type: {widget_type!r}")
    x, y = drop_position(drop_point, spec.width, spec.height)
    cls = WIDGET_CLASSES[widget_type]
    return cls(id=widget_id, x=x, y=y, width=spec.width, height=spec.height, **dict(spec.defaults))


class WidgetFactory:
    """Issues widgets with session-unique ids of the form ``<type>_<n>``."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def next_id(self, widget_type: str) -> str:
        return f"{widget_type}_{next(self._counter)}"

    def create(self, widget_type: str, drop_point: Tuple[float, float]) -> Widget:
        widget = create_widget(widget_type, drop_point, self.next_id(widget_type))
        logger.debug("created %s at (%d, %d)", widget.id, widget.x, widget.y)
        return widget
