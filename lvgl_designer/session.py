from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .document import Document
from .factory import WidgetFactory
from .geometry import Point, drag_offset, step_zoom, to_canvas_local
from .models import WIDGET_SPECS, Widget
from .serializer import serialize
from .utils import DEFAULT_BACKGROUND, ZOOM_DEFAULT, ZOOM_STEP

logger = logging.getLogger(__name__)


@dataclass
class CanvasSettings:
    background_color: str = DEFAULT_BACKGROUND
    zoom: float = ZOOM_DEFAULT

    def set_zoom(self, delta: float) -> float:
        self.zoom = step_zoom(self.zoom, delta)
        return self.zoom

    def zoom_in(self) -> float:
        return self.set_zoom(ZOOM_STEP)

    def zoom_out(self) -> float:
        return self.set_zoom(-ZOOM_STEP)

    def reset_zoom(self) -> float:
        self.zoom = ZOOM_DEFAULT
        return self.zoom


@dataclass
class _DragState:
    widget_id: str
    offset: Point


class EditorSession:
    """Editing context: document, selection, canvas settings and the active drag.

    Every editing operation goes through here so the host UI only has to
    translate its events and repaint when ``on_change`` fires.
    """

    def __init__(self, settings: Optional[CanvasSettings] = None,
                 on_change: Optional[Callable[[], None]] = None,
                 on_background_change: Optional[Callable[[str], None]] = None):
        self.document = Document()
        self.settings = settings or CanvasSettings()
        self.factory = WidgetFactory()
        self.on_change = on_change
        self.on_background_change = on_background_change
        self._drag: Optional[_DragState] = None

    # ---------- placement ----------
    def to_local(self, pointer: Point, origin: Point) -> Point:
        return to_canvas_local(pointer, origin, self.settings.zoom)

    def drop_widget(self, widget_type: str, pointer: Point, origin: Point = (0.0, 0.0)) -> Optional[Widget]:
        if widget_type not in WIDGET_SPECS:
            logger.warning("drop_widget: unknown widget type %r ignored", widget_type)
            return None
        widget = self.factory.create(widget_type, self.to_local(pointer, origin))
        self.document.add_widget(widget)
        self._changed()
        return widget

    # ---------- drag ----------
    def begin_drag(self, widget_id: str, pointer: Point, origin: Point = (0.0, 0.0)) -> bool:
        widget = self.document.get(widget_id)
        if widget is None:
            logger.warning("begin_drag: unknown widget id %r ignored", widget_id)
            return False
        local = self.to_local(pointer, origin)
        self._drag = _DragState(widget_id, drag_offset(local, (widget.x, widget.y)))
        self.document.select_widget(widget_id)
        self._changed()
        return True

    def drag_to(self, pointer: Point, origin: Point = (0.0, 0.0)) -> Optional[Tuple[int, int]]:
        if self._drag is None:
            return None
        lx, ly = self.to_local(pointer, origin)
        ox, oy = self._drag.offset
        pos = self.document.move_widget(self._drag.widget_id, lx - ox, ly - oy)
        if pos is None:
            self._drag = None
            return None
        self._changed()
        return pos

    def end_drag(self):
        # no rollback: the widget stays at the last applied position
        self._drag = None

    @property
    def dragging(self) -> bool:
        return self._drag is not None

    # ---------- document ----------
    def select_widget(self, widget_id: Optional[str]) -> bool:
        ok = self.document.select_widget(widget_id)
        if ok:
            self._changed()
        return ok

    def update_property(self, widget_id: str, key: str, value) -> bool:
        ok = self.document.update_property(widget_id, key, value)
        if ok:
            self._changed()
        return ok

    def delete_widget(self, widget_id: str) -> bool:
        if self._drag and self._drag.widget_id == widget_id:
            self._drag = None
        ok = self.document.delete_widget(widget_id)
        if ok:
            self._changed()
        return ok

    def delete_selected(self) -> bool:
        sel = self.document.selected_id
        return sel is not None and self.delete_widget(sel)

    def bring_forward(self, widget_id: str) -> bool:
        ok = self.document.bring_forward(widget_id)
        if ok:
            self._changed()
        return ok

    def send_backward(self, widget_id: str) -> bool:
        ok = self.document.send_backward(widget_id)
        if ok:
            self._changed()
        return ok

    # ---------- canvas settings ----------
    def set_zoom(self, delta: float) -> float:
        zoom = self.settings.set_zoom(delta)
        self._changed()
        return zoom

    def zoom_in(self) -> float:
        return self.set_zoom(ZOOM_STEP)

    def zoom_out(self) -> float:
        return self.set_zoom(-ZOOM_STEP)

    def reset_zoom(self) -> float:
        zoom = self.settings.reset_zoom()
        self._changed()
        return zoom

    def set_background_color(self, color: str) -> bool:
        if color == self.settings.background_color:
            return False
        self.settings.background_color = color
        if self.on_background_change:
            self.on_background_change(color)
        self._changed()
        return True

    # ---------- export ----------
    def export(self) -> str:
        return serialize(self.document.snapshot(), self.settings)

    def _changed(self):
        if self.on_change:
            self.on_change()
