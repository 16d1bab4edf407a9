from __future__ import annotations
from typing import Any, Dict
from PySide6.QtCore import Qt, QRectF, QPointF
from PySide6.QtGui import QColor, QPainter, QPen, QFont
from PySide6.QtWidgets import QGraphicsRectItem, QGraphicsItem

from .models import Widget, WidgetType

# ===== Widget colors =====
ACCENT = QColor("#3b82f6")
TRACK = QColor("#d1d5db")
KNOB_BORDER = QColor("#9ca3af")
LABEL_BG = QColor("#ffffff")
LABEL_BORDER = QColor("#d1d5db")
IMAGE_BG = QColor("#e5e7eb")
TEXT_DARK = QColor("#111827")
SELECTED_PEN = QPen(ACCENT, 2, Qt.SolidLine)


def _ratio(value, low, high) -> float:
    try:
        span = float(high) - float(low)
        r = (float(value) - float(low)) / span if span else 0.0
    except (TypeError, ValueError):
        return 0.0
    return max(0.0, min(1.0, r))


class WidgetItem(QGraphicsRectItem):
    """Paints one widget. Reads a detached copy of its attributes, never the widget itself."""

    def __init__(self, widget: Widget, parent=None):
        super().__init__(parent)
        self.widget_id = widget.id
        self.attrs: Dict[str, Any] = {}
        self.selected = False
        self.setAcceptHoverEvents(True)
        self.setFlag(QGraphicsItem.ItemIsSelectable, False)
        self.setFlag(QGraphicsItem.ItemIsMovable, False)
        self.setCursor(Qt.SizeAllCursor)
        self.sync(widget, False)

    def sync(self, widget: Widget, selected: bool):
        self.attrs = widget.display_attributes()
        self.selected = selected
        self.setPos(QPointF(widget.x, widget.y))
        self.setRect(QRectF(0, 0, widget.width, widget.height))
        self.setToolTip(f"{widget.type}: {widget.id}\n{widget.width} × {widget.height} px")
        self.update()

    def paint(self, painter: QPainter, option, widget=None):
        painter.setRenderHint(QPainter.Antialiasing, True)
        r = self.rect()
        kind = self.attrs.get("type")
        painter_fn = _PAINTERS.get(kind)
        if painter_fn:
            painter.save()
            painter_fn(painter, r, self.attrs)
            painter.restore()
        if self.selected:
            painter.setPen(SELECTED_PEN)
            painter.setBrush(Qt.NoBrush)
            painter.drawRect(r.adjusted(-1, -1, 1, 1))


# ---------- per-type painters ----------
def _paint_text_box(painter: QPainter, r: QRectF, text: str, bg: QColor, fg: QColor,
                    border: QColor | None, radius: float):
    painter.setPen(QPen(border, 1) if border else Qt.NoPen)
    painter.setBrush(bg)
    painter.drawRoundedRect(r, radius, radius)
    painter.setPen(fg)
    painter.setFont(QFont("", 7))
    painter.drawText(r.adjusted(2, 0, -2, 0), Qt.AlignCenter, text)


def _paint_label(painter, r, a):
    _paint_text_box(painter, r, a.get("text", ""), LABEL_BG, TEXT_DARK, LABEL_BORDER, 0)


def _paint_button(painter, r, a):
    _paint_text_box(painter, r, a.get("text", ""), ACCENT, QColor(Qt.white), None, 4)


def _paint_slider(painter, r, a):
    k = _ratio(a.get("value"), a.get("min_value"), a.get("max_value"))
    track = QRectF(r.left() + 4, r.center().y() - 3, r.width() - 8, 6)
    painter.setPen(Qt.NoPen)
    painter.setBrush(TRACK)
    painter.drawRoundedRect(track, 3, 3)
    painter.setBrush(ACCENT)
    painter.drawRoundedRect(QRectF(track.left(), track.top(), track.width() * k, track.height()), 3, 3)
    knob_x = track.left() + track.width() * k
    painter.setPen(QPen(KNOB_BORDER, 1.5))
    painter.setBrush(QColor(Qt.white))
    painter.drawEllipse(QPointF(knob_x, track.center().y()), 7, 7)


def _paint_bar(painter, r, a):
    k = _ratio(a.get("value"), a.get("min_value"), a.get("max_value"))
    painter.setPen(Qt.NoPen)
    painter.setBrush(TRACK)
    painter.drawRoundedRect(r, 4, 4)
    painter.setBrush(ACCENT)
    painter.drawRoundedRect(QRectF(r.left(), r.top(), r.width() * k, r.height()), 4, 4)


def _paint_checkbox(painter, r, a):
    painter.setPen(QPen(LABEL_BORDER, 1))
    painter.setBrush(LABEL_BG)
    painter.drawRoundedRect(r, 3, 3)
    if a.get("checked"):
        painter.setPen(Qt.NoPen)
        painter.setBrush(ACCENT)
        inner = QRectF(0, 0, r.width() * 0.75, r.height() * 0.75)
        inner.moveCenter(r.center())
        painter.drawRoundedRect(inner, 2, 2)


def _paint_image(painter, r, a):
    painter.setPen(QPen(KNOB_BORDER, 1.5, Qt.DashLine))
    painter.setBrush(IMAGE_BG)
    painter.drawRoundedRect(r, 6, 6)
    painter.setPen(TEXT_DARK)
    painter.setFont(QFont("", 7))
    painter.drawText(r, Qt.AlignCenter, "IMG")


def _paint_arc(painter, r, a):
    ring = r.adjusted(4, 4, -4, -4)
    start = float(a.get("start_angle") or 0)
    end = float(a.get("end_angle") or 0)
    sweep = end - start
    k = _ratio(a.get("value"), a.get("min_value"), a.get("max_value"))
    # LVGL angles grow clockwise from 3 o'clock; Qt's grow counter-clockwise in 1/16 deg
    painter.setBrush(Qt.NoBrush)
    painter.setPen(QPen(TRACK, 4, Qt.SolidLine, Qt.RoundCap))
    painter.drawArc(ring, int(-start * 16), int(-sweep * 16))
    painter.setPen(QPen(ACCENT, 4, Qt.SolidLine, Qt.RoundCap))
    painter.drawArc(ring, int(-start * 16), int(-sweep * k * 16))


def _paint_roller(painter, r, a):
    painter.setPen(QPen(LABEL_BORDER, 1))
    painter.setBrush(LABEL_BG)
    painter.drawRoundedRect(r, 4, 4)
    options = (a.get("options") or "").split("\n")
    sel = a.get("value") or 0
    text = options[sel] if 0 <= sel < len(options) else ""
    band = QRectF(r.left(), r.center().y() - 7, r.width(), 14)
    painter.setPen(Qt.NoPen)
    painter.setBrush(QColor(59, 130, 246, 60))
    painter.drawRect(band)
    painter.setPen(TEXT_DARK)
    painter.setFont(QFont("", 7))
    painter.drawText(band, Qt.AlignCenter, text)


_PAINTERS = {
    WidgetType.LABEL: _paint_label,
    WidgetType.BUTTON: _paint_button,
    WidgetType.SLIDER: _paint_slider,
    WidgetType.CHECKBOX: _paint_checkbox,
    WidgetType.IMAGE: _paint_image,
    WidgetType.ARC: _paint_arc,
    WidgetType.BAR: _paint_bar,
    WidgetType.ROLLER: _paint_roller,
}
