from __future__ import annotations
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QHBoxLayout, QToolButton


class ZoomHUD(QWidget):
    """Zoom controls floating in the bottom-right corner of the canvas view."""

    def __init__(self, view):
        super().__init__(view.viewport())
        self.view = view
        self.setObjectName("ZoomHUD")
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setStyleSheet("""
            QWidget#ZoomHUD { background: rgba(255,255,255,0.95); border:1px solid #e7e8ee; border-radius:12px; }
            QToolButton { border:none; padding:4px 8px; border-radius:8px; color:#111827; font-weight:600; }
            QToolButton:hover { background:#f2f4f7; }
        """)

        lay = QHBoxLayout(self)
        lay.setContentsMargins(6, 6, 6, 6)
        lay.setSpacing(4)

        self.btn_out = QToolButton(self)
        self.btn_reset = QToolButton(self)
        self.btn_in = QToolButton(self)
        self.btn_out.setText("−")
        self.btn_in.setText("+")
        self.btn_out.setToolTip("Zoom out")
        self.btn_reset.setToolTip("Reset zoom")
        self.btn_in.setToolTip("Zoom in")
        self.btn_reset.setMinimumWidth(52)
        for b in (self.btn_out, self.btn_reset, self.btn_in):
            lay.addWidget(b)

        self.btn_out.clicked.connect(lambda: self.view.session.zoom_out())
        self.btn_reset.clicked.connect(lambda: self.view.session.reset_zoom())
        self.btn_in.clicked.connect(lambda: self.view.session.zoom_in())

        self.set_zoom(1.0)
        self.resize(self.sizeHint())
        self.setMinimumSize(self.sizeHint())

    def set_zoom(self, zoom: float):
        self.btn_reset.setText(f"{round(zoom * 100)}%")

    def reposition(self):
        margin = 12
        vw = self.view.viewport().width()
        vh = self.view.viewport().height()
        self.move(vw - self.width() - margin, vh - self.height() - margin)
