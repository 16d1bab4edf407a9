from __future__ import annotations
from typing import Optional
from PySide6.QtCore import Qt, QRectF, QPoint, QSize, QMimeData, QRect, QByteArray
from PySide6.QtGui import QIcon, QPixmap, QPainter, QPen, QFont, QDrag, QColor
from PySide6.QtWidgets import QWidget, QVBoxLayout, QGridLayout, QScrollArea, QApplication, QLabel

from .models import WIDGET_SPECS, WIDGET_TYPES, WidgetSpec, WidgetType
from .utils import WIDGET_MIME

TILE_COLORS = {
    WidgetType.LABEL: QColor("#3b82f6"),
    WidgetType.BUTTON: QColor("#22c55e"),
    WidgetType.SLIDER: QColor("#eab308"),
    WidgetType.CHECKBOX: QColor("#a855f7"),
    WidgetType.IMAGE: QColor("#ef4444"),
    WidgetType.ARC: QColor("#6366f1"),
    WidgetType.BAR: QColor("#ec4899"),
    WidgetType.ROLLER: QColor("#14b8a6"),
}


def make_icon(w: int, h: int, color: QColor, label: str = "") -> QIcon:
    pm = QPixmap(w, h); pm.fill(Qt.transparent)
    p = QPainter(pm); p.setRenderHint(QPainter.Antialiasing, True)
    p.setBrush(color); p.setPen(QPen(QColor(70, 70, 70), 1))
    r = QRectF(2, 2, w-4, h-4)
    p.drawRoundedRect(r, 4, 4)
    if label:
        p.setPen(Qt.white); p.setFont(QFont("", 8, QFont.Bold))
        p.drawText(r, Qt.AlignCenter, label)
    p.end()
    return QIcon(pm)


class PreviewTile(QWidget):
    """Palette entry; dragging it onto the canvas drops a widget of its type."""

    def __init__(self, spec: WidgetSpec, parent: QWidget | None = None):
        super().__init__(parent)
        self.spec = spec
        self.setMouseTracking(True)
        self._press_pos: Optional[QPoint] = None
        self._icon_rect: QRect = QRect()
        self.setObjectName("PreviewTile")
        self.setToolTip(f"{spec.title} ({spec.width}×{spec.height})")

    def sizeHint(self) -> QSize:
        return QSize(110, 64)

    def _layout_icon_rect(self) -> QRect:
        r = QRect(0, 0, 18, 18)
        r.moveCenter(QPoint(self.width() // 2, 20))
        self._icon_rect = r
        return r

    def paintEvent(self, ev):
        p = QPainter(self); p.setRenderHint(QPainter.Antialiasing)
        p.setPen(Qt.NoPen)
        p.setBrush(QColor(127, 127, 127, 40))
        p.drawRoundedRect(QRectF(self.rect()).adjusted(1, 1, -1, -1), 8, 8)
        r = self._layout_icon_rect()
        p.setBrush(TILE_COLORS.get(self.spec.type, QColor("#9ca3af")))
        p.drawRoundedRect(r, 3, 3)
        p.setPen(self.palette().windowText().color())
        p.drawText(QRect(0, r.bottom() + 6, self.width(), 18), Qt.AlignHCenter | Qt.AlignTop, self.spec.title)

    def enterEvent(self, ev):
        self.setCursor(Qt.OpenHandCursor)

    def mousePressEvent(self, ev):
        self._press_pos = ev.position().toPoint() if ev.button() == Qt.LeftButton else None
        super().mousePressEvent(ev)

    def mouseMoveEvent(self, ev):
        if self._press_pos is None or not (ev.buttons() & Qt.LeftButton):
            return
        if (ev.position().toPoint() - self._press_pos).manhattanLength() < QApplication.startDragDistance():
            return
        drag = QDrag(self)
        mime = QMimeData()
        mime.setData(WIDGET_MIME, QByteArray(self.spec.type.encode("utf-8")))
        drag.setMimeData(mime)
        drag.setPixmap(make_icon(self.spec.width, self.spec.height,
                                 TILE_COLORS.get(self.spec.type, QColor("#9ca3af")),
                                 self.spec.title).pixmap(self.spec.width, self.spec.height))
        drag.setHotSpot(QPoint(self.spec.width // 2, self.spec.height // 2))
        drag.exec(Qt.CopyAction)
        self._press_pos = None

    def mouseReleaseEvent(self, ev):
        self._press_pos = None
        super().mouseReleaseEvent(ev)

    def resizeEvent(self, ev):
        self._layout_icon_rect()
        super().resizeEvent(ev)


class PalettePanel(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.tiles = {}
        self._build_ui()

    def _build_ui(self):
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        self.scroll = QScrollArea(self)
        self.scroll.setWidgetResizable(True)
        root.addWidget(self.scroll, 1)

        self.content = QWidget()
        self.content.setObjectName("PaletteContent")
        self.scroll.setWidget(self.content)

        lay = QVBoxLayout(self.content)
        lay.setContentsMargins(8, 8, 8, 8)
        lay.setSpacing(8)
        hint = QLabel("Drag a widget onto the canvas")
        hint.setStyleSheet("color:#667085;")
        lay.addWidget(hint)

        grid_host = QWidget(); grid = QGridLayout(grid_host)
        grid.setContentsMargins(0, 0, 0, 0)
        grid.setHorizontalSpacing(8); grid.setVerticalSpacing(8)
        for i, widget_type in enumerate(WIDGET_TYPES):
            tile = PreviewTile(WIDGET_SPECS[widget_type])
            self.tiles[widget_type] = tile
            grid.addWidget(tile, i // 2, i % 2)
        lay.addWidget(grid_host)
        lay.addStretch(1)
