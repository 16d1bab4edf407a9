from __future__ import annotations
from typing import Dict, Optional
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QFormLayout, QLineEdit, QSpinBox, QCheckBox, QPlainTextEdit,
    QLabel, QHBoxLayout, QPushButton, QGroupBox, QColorDialog
)

from .models import GEOMETRY_FIELDS, Widget
from .serializer import normalize_hex
from .session import EditorSession

FIELD_LABELS = {
    "x": "X:", "y": "Y:", "width": "Width:", "height": "Height:",
    "text": "Text:", "value": "Value:", "min_value": "Min:", "max_value": "Max:",
    "start_angle": "Start angle:", "end_angle": "End angle:",
    "checked": "Checked:", "options": "Options:", "src": "Image source:",
}


class PropertyPanel(QWidget):
    """Display settings plus the editable fields of the selected widget's type."""

    statusMessage = Signal(str)

    def __init__(self, session: EditorSession, parent=None):
        super().__init__(parent)
        self.session = session
        self._current_id: Optional[str] = None

        self.setMinimumWidth(260)
        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)
        root.setSpacing(10)

        # ------- Display -------
        grp_display = QGroupBox("Display Settings")
        fd = QFormLayout(grp_display)
        fd.setLabelAlignment(Qt.AlignRight)
        row = QWidget(); hl = QHBoxLayout(row); hl.setContentsMargins(0, 0, 0, 0)
        self.ed_bg = QLineEdit()
        self.btn_bg = QPushButton("Pick…")
        hl.addWidget(self.ed_bg, 1); hl.addWidget(self.btn_bg)
        fd.addRow("Background:", row)
        self.ed_bg.textEdited.connect(self.session.set_background_color)
        self.btn_bg.clicked.connect(self._pick_background)
        root.addWidget(grp_display)

        # ------- Widget -------
        self.lbl_title = QLabel("No widget selected")
        self.lbl_title.setStyleSheet("font-weight: 600;")
        root.addWidget(self.lbl_title)

        self.frm_widget = QWidget()
        self.form = QFormLayout(self.frm_widget)
        self.form.setLabelAlignment(Qt.AlignRight)
        self.editors: Dict[str, QWidget] = {}

        for key, low, high in (("x", -9999, 9999), ("y", -9999, 9999),
                               ("width", 1, 9999), ("height", 1, 9999),
                               ("value", -99999, 99999), ("min_value", -99999, 99999),
                               ("max_value", -99999, 99999),
                               ("start_angle", -360, 360), ("end_angle", -360, 360)):
            sp = QSpinBox(); sp.setRange(low, high)
            if key in GEOMETRY_FIELDS:
                sp.setSuffix(" px")
            sp.valueChanged.connect(lambda v, k=key: self._apply(k, v))
            self._add_row(key, sp)

        self.ed_text = QLineEdit()
        self.ed_text.textEdited.connect(lambda t: self._apply("text", t))
        self._add_row("text", self.ed_text)

        self.chk_checked = QCheckBox()
        self.chk_checked.toggled.connect(lambda on: self._apply("checked", on))
        self._add_row("checked", self.chk_checked)

        self.ed_options = QPlainTextEdit()
        self.ed_options.setPlaceholderText("One option per line")
        self.ed_options.setFixedHeight(90)
        self.ed_options.textChanged.connect(lambda: self._apply("options", self.ed_options.toPlainText()))
        self._add_row("options", self.ed_options)

        self.ed_src = QLineEdit()
        self.ed_src.setPlaceholderText("Not exported yet")
        self.ed_src.textEdited.connect(lambda t: self._apply("src", t))
        self._add_row("src", self.ed_src)

        order = QWidget(); ho = QHBoxLayout(order); ho.setContentsMargins(0, 0, 0, 0)
        self.btn_backward = QPushButton("Send backward")
        self.btn_forward = QPushButton("Bring forward")
        ho.addWidget(self.btn_backward); ho.addWidget(self.btn_forward)
        self.form.addRow(order)
        self.btn_backward.clicked.connect(lambda: self._reorder(self.session.send_backward))
        self.btn_forward.clicked.connect(lambda: self._reorder(self.session.bring_forward))

        self.btn_delete = QPushButton("Delete Widget")
        self.btn_delete.setStyleSheet("QPushButton { color: #dc2626; }")
        self.btn_delete.clicked.connect(self._delete)
        self.form.addRow(self.btn_delete)

        root.addWidget(self.frm_widget)
        root.addStretch(1)
        self.refresh()

    def _add_row(self, key: str, editor: QWidget):
        self.editors[key] = editor
        self.form.addRow(FIELD_LABELS[key], editor)

    def _set_row_visible(self, key: str, visible: bool):
        editor = self.editors[key]
        editor.setVisible(visible)
        label = self.form.labelForField(editor)
        if label:
            label.setVisible(visible)

    # ---------- API ----------
    def refresh(self):
        bg = self.session.settings.background_color
        if self.ed_bg.text() != bg:
            self.ed_bg.setText(bg)
        self.load_widget(self.session.document.selected)

    def load_widget(self, widget: Optional[Widget]):
        self._current_id = widget.id if widget else None
        if widget is None:
            self.lbl_title.setText("No widget selected")
            self.frm_widget.setVisible(False)
            return

        self.lbl_title.setText(f"Properties: {widget.spec.title} ({widget.id})")
        self.frm_widget.setVisible(True)
        shown = set(GEOMETRY_FIELDS) | set(widget.attribute_names())
        for key in self.editors:
            self._set_row_visible(key, key in shown)
            if key in shown:
                self._show_value(key, getattr(widget, key))

    def _show_value(self, key: str, value):
        editor = self.editors[key]
        editor.blockSignals(True)
        try:
            if isinstance(editor, QSpinBox):
                if editor.value() != value:
                    editor.setValue(int(value))
            elif isinstance(editor, QCheckBox):
                editor.setChecked(bool(value))
            elif isinstance(editor, QPlainTextEdit):
                if editor.toPlainText() != value:
                    editor.setPlainText(value)
            elif isinstance(editor, QLineEdit):
                if editor.text() != value:
                    editor.setText(value)
        finally:
            editor.blockSignals(False)

    # ---------- apply handlers ----------
    def _apply(self, key: str, value):
        if self._current_id is None:
            return
        self.session.update_property(self._current_id, key, value)

    def _reorder(self, op):
        if self._current_id is not None:
            op(self._current_id)

    def _delete(self):
        if self._current_id is None:
            return
        wid = self._current_id
        if self.session.delete_widget(wid):
            self.statusMessage.emit(f"Deleted {wid}")

    def _pick_background(self):
        current = QColor("#" + normalize_hex(self.session.settings.background_color))
        color = QColorDialog.getColor(current if current.isValid() else QColor(Qt.black), self,
                                      "Background color")
        if color.isValid():
            self.session.set_background_color(color.name())
