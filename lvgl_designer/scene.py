from __future__ import annotations
from typing import Dict, Optional, Tuple

from PySide6.QtCore import Qt, QRectF, QPointF, Signal
from PySide6.QtGui import QPainter, QPen, QColor, QWheelEvent
from PySide6.QtWidgets import QGraphicsScene, QGraphicsView, QApplication

from .geometry import wheel_zoom_delta
from .hud import ZoomHUD
from .items import WidgetItem
from .serializer import normalize_hex
from .session import EditorSession
from .utils import CANVAS_W, CANVAS_H, GRID_STEP, DEFAULT_BACKGROUND, WIDGET_MIME

# ===== Canvas visuals =====
OUTSIDE_DARK = QColor("#111827")
OUTSIDE_LIGHT = QColor("#f3f4f6")
GRID_COLOR = QColor(255, 255, 255, 18)
CANVAS_BORDER = QColor("#64748b")


class DesignerScene(QGraphicsScene):
    """Mirrors the session's document as WidgetItems on a 320x240 canvas."""

    def __init__(self, session: EditorSession, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.session = session
        self.dark = True
        self.show_grid = True
        self.setItemIndexMethod(QGraphicsScene.NoIndex)
        self.setSceneRect(0, 0, CANVAS_W, CANVAS_H)
        self._items: Dict[str, WidgetItem] = {}

    def sync(self):
        doc = self.session.document
        live = {w.id for w in doc}
        for wid in [k for k in self._items if k not in live]:
            self.removeItem(self._items.pop(wid))
        for z, widget in enumerate(doc):
            item = self._items.get(widget.id)
            if item is None:
                item = WidgetItem(widget)
                self.addItem(item)
                self._items[widget.id] = item
            item.sync(widget, widget.id == doc.selected_id)
            item.setZValue(z)
        self.update()

    def item_for(self, widget_id: str) -> Optional[WidgetItem]:
        return self._items.get(widget_id)

    def widget_at(self, local: Tuple[float, float]) -> Optional[str]:
        for it in self.items(QPointF(*local), Qt.IntersectsItemShape, Qt.DescendingOrder):
            if isinstance(it, WidgetItem):
                return it.widget_id
        return None

    def drawBackground(self, painter: QPainter, rect: QRectF):
        painter.fillRect(rect, OUTSIDE_DARK if self.dark else OUTSIDE_LIGHT)
        bg = QColor("#" + normalize_hex(self.session.settings.background_color))
        if not bg.isValid():
            bg = QColor(DEFAULT_BACKGROUND)
        canvas = self.sceneRect()
        painter.fillRect(canvas, bg)
        if self.show_grid:
            painter.setPen(QPen(GRID_COLOR, 0))
            x = GRID_STEP
            while x < CANVAS_W:
                painter.drawLine(QPointF(x, 0), QPointF(x, CANVAS_H))
                x += GRID_STEP
            y = GRID_STEP
            while y < CANVAS_H:
                painter.drawLine(QPointF(0, y), QPointF(CANVAS_W, y))
                y += GRID_STEP
        painter.setPen(QPen(CANVAS_BORDER, 0))
        painter.setBrush(Qt.NoBrush)
        painter.drawRect(canvas)


class DesignerView(QGraphicsView):
    """Input layer: turns viewport pointer events into session calls."""

    zoomChanged = Signal(float)

    def __init__(self, scene: DesignerScene):
        super().__init__(scene)
        self.session = scene.session
        self.setRenderHint(QPainter.Antialiasing, True)
        self.setViewportUpdateMode(QGraphicsView.FullViewportUpdate)
        self.setDragMode(QGraphicsView.NoDrag)
        self.setAlignment(Qt.AlignCenter)
        self.setAcceptDrops(True)
        self.setFocusPolicy(Qt.StrongFocus)
        self._zoom = None

        self.hud = ZoomHUD(self)
        self.hud.reposition()
        self.hud.show()
        self.hud.raise_()
        self.apply_zoom()

    # ---------- coordinates ----------
    def _origin(self) -> Tuple[float, float]:
        o = self.viewportTransform().map(QPointF(0, 0))
        return float(o.x()), float(o.y())

    def _pointer(self, event) -> Tuple[float, float]:
        p = event.position()
        return float(p.x()), float(p.y())

    def apply_zoom(self):
        zoom = self.session.settings.zoom
        if zoom == self._zoom:
            return
        self._zoom = zoom
        self.resetTransform()
        self.scale(zoom, zoom)
        self.hud.set_zoom(zoom)
        self.zoomChanged.emit(zoom)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        if hasattr(self, "hud") and self.hud:
            self.hud.reposition()

    # ---------- palette drops ----------
    def dragEnterEvent(self, event):
        if event.mimeData().hasFormat(WIDGET_MIME):
            event.acceptProposedAction()
        else:
            event.ignore()

    def dragMoveEvent(self, event):
        if event.mimeData().hasFormat(WIDGET_MIME):
            event.acceptProposedAction()
        else:
            event.ignore()

    def dropEvent(self, event):
        if not event.mimeData().hasFormat(WIDGET_MIME):
            event.ignore()
            return
        widget_type = bytes(event.mimeData().data(WIDGET_MIME).data()).decode("utf-8")
        created = self.session.drop_widget(widget_type, self._pointer(event), self._origin())
        if created is None:
            event.ignore()
            return
        event.acceptProposedAction()
        self.setFocus()

    # ---------- moving widgets ----------
    def mousePressEvent(self, event):
        if event.button() != Qt.LeftButton:
            super().mousePressEvent(event)
            return
        local = self.session.to_local(self._pointer(event), self._origin())
        wid = self.scene().widget_at(local)
        if wid is None:
            self.session.select_widget(None)
        else:
            self.session.begin_drag(wid, self._pointer(event), self._origin())
        event.accept()

    def mouseMoveEvent(self, event):
        if self.session.dragging and event.buttons() & Qt.LeftButton:
            self.session.drag_to(self._pointer(event), self._origin())
            event.accept()
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton and self.session.dragging:
            self.session.end_drag()
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def wheelEvent(self, event: QWheelEvent):
        if QApplication.keyboardModifiers() & Qt.ControlModifier:
            delta = wheel_zoom_delta(event.angleDelta().y())
            if delta:
                self.session.set_zoom(delta)
            event.accept()
            return
        super().wheelEvent(event)

    def keyPressEvent(self, event):
        if event.key() in (Qt.Key_Delete, Qt.Key_Backspace):
            if self.session.delete_selected():
                event.accept()
                return
        super().keyPressEvent(event)
