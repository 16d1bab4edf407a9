# start_window.py
from __future__ import annotations
from PySide6.QtCore import Qt, QSettings
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QFrame, QPushButton, QLabel, QCheckBox
)
from lvgl_designer.models import WIDGET_SPECS, WIDGET_TYPES
from lvgl_designer.utils import CANVAS_W, CANVAS_H, SETTINGS_ORG, SETTINGS_APP
from widget_designer import MainWindow

# ========= THEME (dark tech) =========
ACCENT           = "#3b82f6"
ACCENT_HOVER     = "#2563eb"
ACCENT_ACTIVE    = "#1d4ed8"

PANEL_BG         = "rgba(17, 24, 39, 0.92)"
PANEL_STROKE     = "rgba(120, 162, 255, 0.35)"
PANEL_RADIUS     = 14
BTN_RADIUS       = 10

FONT_FAMILY      = "Segoe UI, Inter, Roboto, sans-serif"
TEXT_MAIN        = "#E6E7EA"
TEXT_DIM         = "#9AA4B2"
# =====================================


class StartWindow(QWidget):
    def __init__(self):
        super().__init__()
        self.setObjectName("StartRoot")
        self.setWindowTitle("ESPHome LVGL Widget Designer: Welcome")
        self.resize(720, 460)

        root = QVBoxLayout(self); root.setContentsMargins(28, 28, 28, 28); root.setSpacing(16)

        title = QLabel("ESPHome LVGL Widget Designer")
        title.setObjectName("Brand")
        root.addWidget(title)

        card = QFrame(self); card.setObjectName("WelcomeCard")
        vc = QVBoxLayout(card); vc.setContentsMargins(28, 24, 28, 24); vc.setSpacing(12)
        cap = QLabel("Welcome"); cap.setObjectName("CardTitle"); vc.addWidget(cap)

        names = ", ".join(WIDGET_SPECS[t].title.lower() for t in WIDGET_TYPES)
        intro = QLabel(
            f"Drag widgets from the palette onto the {CANVAS_W}×{CANVAS_H} canvas, "
            f"move them with the mouse and fine-tune them in the properties panel. "
            f"When the layout is ready, press “Generate YAML” and paste the result "
            f"into your ESPHome configuration.\n\nAvailable widgets: {names}."
        )
        intro.setObjectName("Intro")
        intro.setWordWrap(True)
        vc.addWidget(intro)

        self.chk_skip = QCheckBox("Don't show this again")
        vc.addWidget(self.chk_skip)

        bottom = QHBoxLayout(); bottom.addStretch(1)
        self.btn_start = QPushButton("Get Started")
        self.btn_start.setObjectName("ActionButton")
        self.btn_start.setCursor(Qt.PointingHandCursor)
        self.btn_start.setMinimumHeight(36)
        bottom.addWidget(self.btn_start)
        vc.addLayout(bottom)

        root.addWidget(card, 1)

        self.btn_start.clicked.connect(self._start)
        self._apply_qss()

    # ---------- STYLE ----------
    def _apply_qss(self):
        self.setStyleSheet(f"""
        QWidget#StartRoot {{
            background: #0B1220;
            color: {TEXT_MAIN};
            font-family: {FONT_FAMILY};
        }}
        #Brand {{ font-size: 18px; font-weight: 700; color: #E2E8F0; }}
        #WelcomeCard {{
            background: {PANEL_BG};
            border: 1px solid {PANEL_STROKE};
            border-radius: {PANEL_RADIUS}px;
        }}
        #CardTitle {{ color: {TEXT_MAIN}; font-weight: 700; font-size: 15px; }}
        #Intro, QCheckBox {{ color: {TEXT_DIM}; }}
        QPushButton#ActionButton {{
            background: {ACCENT};
            color: #ffffff;
            border: none; border-radius: {BTN_RADIUS}px;
            padding: 8px 18px; font-weight: 700;
        }}
        QPushButton#ActionButton:hover   {{ background: {ACCENT_HOVER}; }}
        QPushButton#ActionButton:pressed {{ background: {ACCENT_ACTIVE}; }}
        """)

    # ---------- ACTIONS ----------
    def _start(self):
        if self.chk_skip.isChecked():
            QSettings(SETTINGS_ORG, SETTINGS_APP).setValue("skip_welcome", True)
        self.hide()
        self.editor = MainWindow()
        self.editor.show()
        self.close()
