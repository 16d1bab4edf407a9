#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations
import logging
import os
import sys
from PySide6.QtCore import Qt, QSettings, QSizeF
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QApplication, QMainWindow, QToolBar, QStatusBar, QDockWidget, QStyle, QLabel, QWidgetAction
)
from lvgl_designer import EditorSession, CanvasSettings, CANVAS_W, CANVAS_H
from lvgl_designer.utils import DEFAULT_BACKGROUND, SETTINGS_ORG, SETTINGS_APP
from lvgl_designer.scene import DesignerScene, DesignerView
from lvgl_designer.palette import PalettePanel
from lvgl_designer.properties import PropertyPanel
from lvgl_designer.export_dialog import ExportDialog

logger = logging.getLogger(__name__)

DARK_QSS = """
QMainWindow, QDockWidget, QWidget { background:#1f2937; color:#e5e7eb; }
QLineEdit, QSpinBox, QPlainTextEdit { background:#374151; border:1px solid #4b5563; border-radius:4px; padding:2px; }
QPushButton { background:#374151; border:1px solid #4b5563; border-radius:6px; padding:4px 10px; }
QPushButton:hover { background:#4b5563; }
QGroupBox { border:1px solid #374151; border-radius:6px; margin-top:12px; padding-top:6px; }
QGroupBox::title { subcontrol-origin: margin; left:8px; }
QToolBar { background:#111827; border:none; }
"""
LIGHT_QSS = ""


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("ESPHome LVGL Widget Designer")
        self.resize(1280, 820)
        self.settings_store = QSettings(SETTINGS_ORG, SETTINGS_APP)

        # 1) Session / scene / view
        bg = str(self.settings_store.value("background_color", DEFAULT_BACKGROUND))
        self.session = EditorSession(CanvasSettings(background_color=bg), on_change=self._on_session_changed,
                                     on_background_change=self._save_background)
        self.scene = DesignerScene(self.session)
        self.view = DesignerView(self.scene)
        self.setCentralWidget(self.view)

        # 2) Property panel
        self.props_panel = PropertyPanel(self.session, self)
        self.props_dock = QDockWidget("Properties", self)
        self.props_dock.setWidget(self.props_panel)
        self.props_dock.setAllowedAreas(Qt.LeftDockWidgetArea | Qt.RightDockWidgetArea)
        self.props_dock.setMinimumWidth(280)
        self.props_dock.setMaximumWidth(460)
        self.addDockWidget(Qt.RightDockWidgetArea, self.props_dock)
        self.props_panel.statusMessage.connect(self._status)

        # 3) Widget palette
        self.palette = PalettePanel()
        self.palette_dock = QDockWidget("Widgets", self)
        self.palette_dock.setWidget(self.palette)
        self.palette_dock.setAllowedAreas(Qt.LeftDockWidgetArea | Qt.RightDockWidgetArea)
        self.palette_dock.setMinimumWidth(240)
        self.palette_dock.setMaximumWidth(400)
        self.addDockWidget(Qt.LeftDockWidgetArea, self.palette_dock)

        # 4) Toolbar / status bar
        self._build_toolbar()
        self.setStatusBar(QStatusBar(self))
        self.view.zoomChanged.connect(lambda _: self._update_status())

        # 5) Theme
        self.set_dark_mode(self.settings_store.value("dark_mode", True, bool))
        self._on_session_changed()

    def _sep_label(self, tb: QToolBar, text: str):
        lbl = QLabel(f"  {text}  ")
        lbl.setStyleSheet("color:#667085; font-weight:600;")
        wa = QWidgetAction(self)
        wa.setDefaultWidget(lbl)
        tb.addAction(wa)

    def _build_toolbar(self):
        tb = QToolBar("Toolbar", self)
        tb.setMovable(False)
        tb.setIconSize(QSizeF(18, 18).toSize())
        tb.setToolButtonStyle(Qt.ToolButtonTextBesideIcon)
        self.addToolBar(Qt.TopToolBarArea, tb)
        style = self.style()

        self.act_export = QAction(style.standardIcon(QStyle.SP_DialogSaveButton), "Generate YAML", self)
        self.act_export.setShortcut(QKeySequence("Ctrl+E"))
        self.act_export.triggered.connect(self._export_yaml)

        self.act_delete = QAction(style.standardIcon(QStyle.SP_TrashIcon), "Delete", self)
        self.act_delete.triggered.connect(self.session.delete_selected)

        self.act_zoom_out = QAction("Zoom out", self)
        self.act_zoom_out.setShortcut(QKeySequence.ZoomOut)
        self.act_zoom_out.triggered.connect(self.session.zoom_out)
        self.act_zoom_reset = QAction("100%", self)
        self.act_zoom_reset.setShortcut(QKeySequence("Ctrl+0"))
        self.act_zoom_reset.triggered.connect(self.session.reset_zoom)
        self.act_zoom_in = QAction("Zoom in", self)
        self.act_zoom_in.setShortcut(QKeySequence.ZoomIn)
        self.act_zoom_in.triggered.connect(self.session.zoom_in)

        self.act_grid = QAction("Grid", self, checkable=True)
        self.act_grid.setChecked(True)
        self.act_grid.toggled.connect(self._toggle_grid)

        self.act_theme = QAction("Dark mode", self, checkable=True)
        self.act_theme.toggled.connect(self.set_dark_mode)

        self.act_toggle_props = QAction("Properties", self, checkable=True)
        self.act_toggle_palette = QAction("Widgets", self, checkable=True)
        def _sync():
            self.act_toggle_props.setChecked(not self.props_dock.isHidden())
            self.act_toggle_palette.setChecked(not self.palette_dock.isHidden())
        _sync()
        self.act_toggle_props.toggled.connect(lambda on: (self.props_dock.show() if on else self.props_dock.hide()))
        self.act_toggle_palette.toggled.connect(lambda on: (self.palette_dock.show() if on else self.palette_dock.hide()))
        self.props_dock.visibilityChanged.connect(lambda _: _sync())
        self.palette_dock.visibilityChanged.connect(lambda _: _sync())

        tb.addAction(self.act_export)
        tb.addAction(self.act_delete)
        tb.addSeparator()
        self._sep_label(tb, "Zoom")
        tb.addAction(self.act_zoom_out)
        tb.addAction(self.act_zoom_reset)
        tb.addAction(self.act_zoom_in)
        tb.addSeparator()
        tb.addAction(self.act_grid)
        tb.addAction(self.act_theme)
        tb.addSeparator()
        tb.addAction(self.act_toggle_palette)
        tb.addAction(self.act_toggle_props)

    # ---------- session ----------
    def _on_session_changed(self):
        self.scene.sync()
        self.view.apply_zoom()
        self.props_panel.refresh()
        self.act_delete.setEnabled(self.session.document.selected_id is not None)
        self._update_status()

    def _save_background(self, color: str):
        self.settings_store.setValue("background_color", color)

    def _export_yaml(self):
        text = self.session.export()
        logger.info("exported %d widgets (%d bytes)", len(self.session.document), len(text))
        dlg = ExportDialog(text, self)
        dlg.exec()

    def _toggle_grid(self, on: bool):
        self.scene.show_grid = on
        self.scene.update()

    def set_dark_mode(self, on: bool):
        on = bool(on)
        self.setStyleSheet(DARK_QSS if on else LIGHT_QSS)
        self.scene.dark = on
        self.scene.update()
        self.settings_store.setValue("dark_mode", on)
        if self.act_theme.isChecked() != on:
            self.act_theme.setChecked(on)

    def _status(self, text: str):
        self.statusBar().showMessage(text, 3000)

    def _update_status(self):
        sel = self.session.document.selected_id or "none"
        self.statusBar().showMessage(
            f"Canvas: {CANVAS_W}×{CANVAS_H} | "
            f"Zoom: {round(self.session.settings.zoom * 100)}% | "
            f"Widgets: {len(self.session.document)} | Selected: {sel}"
        )


def main():
    logging.basicConfig(
        level=os.environ.get("LVGL_DESIGNER_LOG", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    app.setOrganizationName(SETTINGS_ORG)
    app.setApplicationName(SETTINGS_APP)
    from start_window import StartWindow
    st = QSettings(SETTINGS_ORG, SETTINGS_APP)
    if st.value("skip_welcome", False, bool):
        win = MainWindow()
    else:
        win = StartWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
