from __future__ import annotations
import dataclasses
import logging
from typing import Any, Iterator, List, Optional, Tuple

from .geometry import clamp_to_canvas
from .models import GEOMETRY_FIELDS, Widget
from .utils import CANVAS_W, CANVAS_H, coerce_bool, coerce_int, coerce_text

logger = logging.getLogger(__name__)


class Document:
    """Ordered widget list plus the current selection.

    List order is both the z-order on the canvas and the order widgets are
    written to the exported config. The selection is kept as an id, so it
    always refers to the live widget in the list.

    Operations that reference an unknown id are ignored: they log a warning
    and return ``False``/``None``.
    """

    def __init__(self, canvas_width: int = CANVAS_W, canvas_height: int = CANVAS_H):
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
        self._widgets: List[Widget] = []
        self._selected_id: Optional[str] = None

    # ---------- lookups ----------
    def __len__(self) -> int:
        return len(self._widgets)

    def __iter__(self) -> Iterator[Widget]:
        return iter(list(self._widgets))

    def __contains__(self, widget_id: object) -> bool:
        return self.get(widget_id) is not None

    @property
    def widgets(self) -> Tuple[Widget, ...]:
        return tuple(self._widgets)

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    @property
    def selected(self) -> Optional[Widget]:
        if self._selected_id is None:
            return None
        return self.get(self._selected_id)

    def get(self, widget_id) -> Optional[Widget]:
        for w in self._widgets:
            if w.id == widget_id:
                return w
        return None

    def index_of(self, widget_id) -> int:
        for i, w in enumerate(self._widgets):
            if w.id == widget_id:
                return i
        return -1

    def snapshot(self) -> Tuple[Widget, ...]:
        """Detached copies in document order; safe to hand to export or rendering."""
        return tuple(dataclasses.replace(w) for w in self._widgets)

    # ---------- mutations ----------
    def add_widget(self, widget: Widget) -> Widget:
        self._clamp(widget)
        self._widgets.append(widget)
        self._selected_id = widget.id
        logger.debug("added %s (%d widgets)", widget.id, len(self._widgets))
        return widget

    def select_widget(self, widget_id: Optional[str]) -> bool:
        if widget_id is None:
            self._selected_id = None
            return True
        if widget_id not in self:
            logger.warning("select_widget: unknown widget id %r ignored", widget_id)
            return False
        self._selected_id = widget_id
        return True

    def update_property(self, widget_id: str, key: str, value: Any) -> bool:
        """Set attribute ``key`` on the widget ``widget_id``.

        The value is coerced to the field's type; parse failures fall back to
        a safe default. Any geometry change re-clamps the position.
        """
        widget = self.get(widget_id)
        if widget is None:
            logger.warning("update_property: unknown widget id %r ignored", widget_id)
            return False
        if key == "id" or (key not in GEOMETRY_FIELDS and key not in widget.attribute_names()):
            logger.warning("update_property: %r is not an editable property of %s", key, widget.type)
            return False

        setattr(widget, key, self._coerce(widget, key, value))
        if key in GEOMETRY_FIELDS:
            self._clamp(widget)
        logger.debug("%s.%s = %r", widget.id, key, getattr(widget, key))
        return True

    def move_widget(self, widget_id: str, x: float, y: float) -> Optional[Tuple[int, int]]:
        widget = self.get(widget_id)
        if widget is None:
            logger.warning("move_widget: unknown widget id %r ignored", widget_id)
            return None
        widget.x, widget.y = clamp_to_canvas(x, y, widget.width, widget.height,
                                             self.canvas_width, self.canvas_height)
        return widget.x, widget.y

    def delete_widget(self, widget_id: str) -> bool:
        idx = self.index_of(widget_id)
        if idx < 0:
            logger.warning("delete_widget: unknown widget id %r ignored", widget_id)
            return False
        del self._widgets[idx]
        if self._selected_id == widget_id:
            self._selected_id = None
        logger.debug("deleted %s", widget_id)
        return True

    def reorder_widget(self, widget_id: str, index: int) -> bool:
        idx = self.index_of(widget_id)
        if idx < 0:
            logger.warning("reorder_widget: unknown widget id %r ignored", widget_id)
            return False
        widget = self._widgets.pop(idx)
        index = max(0, min(index, len(self._widgets)))
        self._widgets.insert(index, widget)
        return True

    def bring_forward(self, widget_id: str) -> bool:
        return self.reorder_widget(widget_id, self.index_of(widget_id) + 1)

    def send_backward(self, widget_id: str) -> bool:
        return self.reorder_widget(widget_id, self.index_of(widget_id) - 1)

    # ---------- helpers ----------
    def _clamp(self, widget: Widget):
        widget.x, widget.y = clamp_to_canvas(widget.x, widget.y, widget.width, widget.height,
                                             self.canvas_width, self.canvas_height)

    def _coerce(self, widget: Widget, key: str, value: Any) -> Any:
        if key in ("x", "y"):
            return coerce_int(value, 0)
        if key == "width":
            return max(1, coerce_int(value, widget.spec.width))
        if key == "height":
            return max(1, coerce_int(value, widget.spec.height))

        kind = widget.field_kind(key)
        fallback = widget.spec.fallbacks.get(key)
        if kind == "bool":
            return coerce_bool(value, bool(fallback))
        if kind == "int":
            return coerce_int(value, fallback if fallback is not None else 0)
        return coerce_text(value, fallback if fallback is not None else "")
